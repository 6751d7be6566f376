"""Version-control boundary detection."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Tuple

DEFAULT_VCS_MARKERS: Tuple[str, ...] = (".git",)


def find_vcs_marker(
    directory: Path, entries: Iterable[str], names: Iterable[str] = DEFAULT_VCS_MARKERS
) -> Optional[Path]:
    """Return the VCS marker inside ``directory`` if any.

    Worktrees and submodules use a ``.git`` file instead of a directory;
    both count as a boundary.
    """
    present = set(entries)
    for name in names:
        if name in present:
            return directory / name
    return None
