"""Shared environment variable names for workspace_root.

Kept separate so the config loader and the CLI read the same names without
importing each other.
"""
from __future__ import annotations

import os
from pathlib import Path

# Config file override (otherwise wsroot.toml/.wsroot.toml in the cwd)
CONFIG_ENV = "WSROOT_CONFIG"
# Directory above which the walk never continues
CEILING_ENV = "WSROOT_CEILING"
# Comma-separated VCS marker names, e.g. ".git,.hg"
VCS_MARKERS_ENV = "WSROOT_VCS_MARKERS"
# "1" enables walk logging without --verbose
VERBOSE_ENV = "WSROOT_VERBOSE"

DEFAULT_CONFIG_NAMES = ("wsroot.toml", ".wsroot.toml")
DEFAULT_WORKERS = 4


def env_path(name: str) -> Path | None:
    raw = os.environ.get(name)
    if not raw:
        return None
    return Path(raw).expanduser()


def env_list(name: str) -> list[str] | None:
    raw = os.environ.get(name)
    if raw is None:
        return None
    return [part.strip() for part in raw.split(",") if part.strip()]
