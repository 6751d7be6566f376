"""
Workspace marker detection.

A workspace marker is a config file that declares sub-package globs:
- ``pnpm-workspace.yaml`` with a ``packages`` list
- ``package.json`` with a ``workspaces`` list (npm/yarn) or a
  ``{"packages": [...]}`` mapping (yarn classic; ``nohoist`` is ignored)

A ``package.json`` without ``workspaces`` is an ordinary package manifest and
is not a marker. Globs are returned as declared; expanding them is out of scope.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

import yaml

from .errors import InvalidMarkerError, NotFoundError, PermissionDeniedError
from .fs import read_text

__all__ = [
    "PNPM_WORKSPACE",
    "PACKAGE_JSON",
    "DEFAULT_WORKSPACE_MARKERS",
    "WorkspaceMarker",
    "read_marker",
    "find_workspace_marker",
]

PNPM_WORKSPACE = "pnpm-workspace.yaml"
PACKAGE_JSON = "package.json"
DEFAULT_WORKSPACE_MARKERS: Tuple[str, ...] = (PNPM_WORKSPACE, PACKAGE_JSON)


@dataclass(frozen=True)
class WorkspaceMarker:
    path: Path
    kind: str
    globs: Tuple[str, ...]

    @property
    def directory(self) -> Path:
        return self.path.parent


def _string_globs(path: Path, value: Any, field: str) -> Tuple[str, ...]:
    if not isinstance(value, list):
        raise InvalidMarkerError(path, f"'{field}' must be a list, got {type(value).__name__}")
    bad = [item for item in value if not isinstance(item, str)]
    if bad:
        raise InvalidMarkerError(path, f"'{field}' entries must be strings, got {bad[0]!r}")
    return tuple(value)


def _parse_pnpm(path: Path, text: str) -> Optional[Tuple[str, ...]]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise InvalidMarkerError(path, f"YAML parse error: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidMarkerError(path, "expected a mapping with a 'packages' list")
    if "packages" not in data:
        raise InvalidMarkerError(path, "missing 'packages'")
    return _string_globs(path, data["packages"], "packages")


def _parse_package_json(path: Path, text: str) -> Optional[Tuple[str, ...]]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidMarkerError(path, f"JSON parse error at line {exc.lineno}: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise InvalidMarkerError(path, "expected a JSON object")
    if "workspaces" not in data:
        return None
    workspaces = data["workspaces"]
    if isinstance(workspaces, dict):
        if "packages" not in workspaces:
            raise InvalidMarkerError(path, "'workspaces' mapping has no 'packages'")
        return _string_globs(path, workspaces["packages"], "workspaces.packages")
    return _string_globs(path, workspaces, "workspaces")


_PARSERS: Dict[str, Callable[[Path, str], Optional[Tuple[str, ...]]]] = {
    PNPM_WORKSPACE: _parse_pnpm,
    PACKAGE_JSON: _parse_package_json,
}


def read_marker(directory: Path, name: str) -> Optional[WorkspaceMarker]:
    """Parse ``directory/name``; None when the file does not declare a workspace."""
    parser = _PARSERS.get(name)
    if parser is None:
        raise ValueError(f"Unknown workspace marker '{name}'")
    path = directory / name
    try:
        if not path.is_file():
            return None
    except PermissionError as exc:
        raise PermissionDeniedError(f"cannot stat {path}", path) from exc
    try:
        text = read_text(path)
    except NotFoundError:
        # removed between listing and reading: nothing to declare
        return None
    globs = parser(path, text)
    if globs is None:
        return None
    return WorkspaceMarker(path=path, kind=name, globs=globs)


def find_workspace_marker(
    directory: Path, entries: Iterable[str], names: Iterable[str] = DEFAULT_WORKSPACE_MARKERS
) -> Optional[WorkspaceMarker]:
    """Return the first marker (in ``names`` order) present among ``entries``."""
    present = set(entries)
    for name in names:
        if name not in present:
            continue
        marker = read_marker(directory, name)
        if marker is not None:
            return marker
    return None
