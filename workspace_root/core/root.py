"""Workspace root discovery.

Walks upward from a start directory. The first directory holding a workspace
marker wins outright; otherwise the nearest (deepest) version-control boundary
wins; otherwise the start directory itself is the root. Outer repositories
never override a nested one the start lies in, and repositories below the
start are never looked at.
"""
from __future__ import annotations

import concurrent.futures
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from . import fs
from .config import ResolverConfig
from .logging_adapter import log_event
from .markers import find_workspace_marker
from .vcs import find_vcs_marker

__all__ = [
    "Classification",
    "ResolutionResult",
    "resolve",
    "resolve_many",
    "discover_root",
]


class Classification(str, Enum):
    WORKSPACE_MARKER = "workspace_marker"
    VERSION_CONTROL_BOUNDARY = "version_control_boundary"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class ResolutionResult:
    root: Path
    classification: Classification
    start: Path
    marker: Path | None = None
    globs: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, object]:
        return {
            "root": str(self.root),
            "classification": self.classification.value,
            "start": str(self.start),
            "marker": str(self.marker) if self.marker else None,
            "globs": list(self.globs),
        }


def _noop(*_args) -> None:
    return None


def _walk_chain(start: Path, ceiling: Path | None, log: Callable) -> Tuple[List[Path], bool]:
    """Return the directories to visit and whether the ceiling cut the chain."""
    chain = [start] + list(start.parents)
    if ceiling is None:
        return chain, False
    if ceiling not in chain:
        log_event(log, "ceiling_ignored", ceiling=ceiling, reason="start is not below ceiling")
        return chain, False
    cut = chain.index(ceiling) + 1
    return chain[:cut], cut < len(chain)


def resolve(
    start: str | os.PathLike,
    *,
    config: Optional[ResolverConfig] = None,
    log: Optional[Callable] = None,
) -> ResolutionResult:
    """Resolve the monorepo root for ``start``.

    Raises NotFoundError if ``start`` is missing or not a directory,
    PermissionDeniedError if a directory on the walk cannot be listed and
    InvalidMarkerError if a workspace marker on the walk is malformed.
    """
    cfg = config or ResolverConfig()
    log = log or _noop
    # abspath, not resolve(): the root must stay a lexical ancestor of start
    start_path = Path(os.path.abspath(start))
    fs.ensure_directory(start_path)
    log_event(log, "start", path=start_path, ceiling=cfg.ceiling)

    nearest_vcs: Path | None = None
    chain, cut_at_ceiling = _walk_chain(start_path, cfg.ceiling, log)
    for directory in chain:
        entries = fs.list_entries(directory)
        log_event(log, "visit", path=directory, entries=len(entries))
        marker = find_workspace_marker(directory, entries, cfg.workspace_markers)
        if marker is not None:
            log_event(log, "workspace_marker", path=marker.path, globs=len(marker.globs))
            result = ResolutionResult(
                root=directory,
                classification=Classification.WORKSPACE_MARKER,
                start=start_path,
                marker=marker.path,
                globs=marker.globs,
            )
            log_event(log, "result", root=result.root, classification=result.classification.value)
            return result
        vcs_marker = find_vcs_marker(directory, entries, cfg.vcs_markers)
        if vcs_marker is None:
            continue
        if nearest_vcs is None:
            nearest_vcs = vcs_marker
            log_event(log, "vcs_boundary", path=directory)
        else:
            log_event(log, "outer_vcs_boundary_ignored", path=directory, nearest=nearest_vcs.parent)
    if cut_at_ceiling:
        log_event(log, "ceiling_reached", ceiling=cfg.ceiling)

    if nearest_vcs is not None:
        result = ResolutionResult(
            root=nearest_vcs.parent,
            classification=Classification.VERSION_CONTROL_BOUNDARY,
            start=start_path,
            marker=nearest_vcs,
        )
    else:
        result = ResolutionResult(root=start_path, classification=Classification.FALLBACK, start=start_path)
    log_event(log, "result", root=result.root, classification=result.classification.value)
    return result


def resolve_many(
    starts: Iterable[str | os.PathLike],
    *,
    config: Optional[ResolverConfig] = None,
    log: Optional[Callable] = None,
    max_workers: int = 4,
) -> List[ResolutionResult]:
    """Resolve several start directories concurrently; results keep input order.

    The first failure (in input order) propagates.
    """
    items = list(starts)
    if not items:
        return []
    cfg = config or ResolverConfig()

    def _run(start):
        return resolve(start, config=cfg, log=log)

    with concurrent.futures.ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(items)))) as pool:
        return list(pool.map(_run, items))


def discover_root(start: str | os.PathLike, *, config: Optional[ResolverConfig] = None) -> Path:
    """Shortcut returning only the resolved root path."""
    return resolve(start, config=config).root
