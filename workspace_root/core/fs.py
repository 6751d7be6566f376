"""Read-only filesystem primitives used by the walk."""
from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import FrozenSet

from .errors import InvalidMarkerError, NotFoundError, PermissionDeniedError


def list_entries(directory: Path) -> FrozenSet[str]:
    """Return the entry names of ``directory``; never skips unreadable dirs."""
    try:
        with os.scandir(directory) as it:
            return frozenset(entry.name for entry in it)
    except PermissionError as exc:
        raise PermissionDeniedError(f"cannot read directory {directory}", directory) from exc
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise NotFoundError(f"no such directory: {directory}", directory) from exc


def read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except PermissionError as exc:
        raise PermissionDeniedError(f"cannot read {path}", path) from exc
    except FileNotFoundError as exc:
        raise NotFoundError(f"marker vanished during walk: {path}", path) from exc
    except UnicodeDecodeError as exc:
        raise InvalidMarkerError(path, f"not valid UTF-8 ({exc.reason})") from exc


def ensure_directory(path: Path) -> None:
    """Check the start point exists and is a directory."""
    try:
        st = os.stat(path)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise NotFoundError(f"start directory does not exist: {path}", path) from exc
    except PermissionError as exc:
        raise PermissionDeniedError(f"cannot access {path}", path) from exc
    if not stat.S_ISDIR(st.st_mode):
        raise NotFoundError(f"start path is not a directory: {path}", path)
