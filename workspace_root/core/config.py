"""Config loading for workspace_root."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import tomllib

from . import env
from .markers import DEFAULT_WORKSPACE_MARKERS
from .vcs import DEFAULT_VCS_MARKERS


@dataclass(frozen=True)
class ResolverConfig:
    ceiling: Path | None = None
    vcs_markers: Tuple[str, ...] = DEFAULT_VCS_MARKERS
    workspace_markers: Tuple[str, ...] = DEFAULT_WORKSPACE_MARKERS
    source: Path | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        unknown = [m for m in self.workspace_markers if m not in DEFAULT_WORKSPACE_MARKERS]
        if unknown:
            raise ValueError(
                f"Unsupported workspace marker(s) {unknown}; choose from {list(DEFAULT_WORKSPACE_MARKERS)}"
            )
        if not self.vcs_markers:
            raise ValueError("vcs_markers must not be empty")
        # frozen: normalise through object.__setattr__
        if self.ceiling is not None:
            object.__setattr__(self, "ceiling", Path(os.path.abspath(Path(self.ceiling).expanduser())))
        object.__setattr__(self, "vcs_markers", tuple(self.vcs_markers))
        object.__setattr__(self, "workspace_markers", tuple(self.workspace_markers))

    @classmethod
    def load(cls, cwd: Optional[Path] = None, override_path: Optional[Path] = None) -> "ResolverConfig":
        base = Path(cwd) if cwd is not None else Path.cwd()
        cfg_path = override_path or env.env_path(env.CONFIG_ENV)
        if cfg_path is not None and not cfg_path.is_absolute():
            cfg_path = base / cfg_path
        if cfg_path is None:
            for candidate in env.DEFAULT_CONFIG_NAMES:
                if (base / candidate).is_file():
                    cfg_path = base / candidate
                    break
        data: Dict[str, Any] = {}
        if cfg_path is not None:
            try:
                with cfg_path.open("rb") as fh:
                    data = tomllib.load(fh)
            except OSError as exc:
                raise ValueError(f"cannot read config {cfg_path}: {exc}") from exc
            except tomllib.TOMLDecodeError as exc:
                raise ValueError(f"malformed config {cfg_path}: {exc}") from exc

        ceiling = data.get("ceiling")
        if ceiling:
            if not isinstance(ceiling, str):
                raise ValueError("'ceiling' must be a path string")
            ceiling = Path(ceiling).expanduser()
            if not ceiling.is_absolute():
                ceiling = cfg_path.parent / ceiling
        vcs_markers = data.get("vcs_markers", list(DEFAULT_VCS_MARKERS))
        workspace_markers = data.get("workspace_markers", list(DEFAULT_WORKSPACE_MARKERS))

        # env overrides
        env_ceiling = env.env_path(env.CEILING_ENV)
        if env_ceiling:
            ceiling = env_ceiling
        env_vcs = env.env_list(env.VCS_MARKERS_ENV)
        if env_vcs is not None:
            vcs_markers = env_vcs

        for key, value in (("vcs_markers", vcs_markers), ("workspace_markers", workspace_markers)):
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ValueError(f"'{key}' must be a list of strings")

        return cls(
            ceiling=ceiling or None,
            vcs_markers=tuple(vcs_markers),
            workspace_markers=tuple(workspace_markers),
            source=cfg_path,
        )
