"""
Error taxonomy for root resolution.

Every failure surfaces to the caller; nothing here is retried or recovered
locally. Each class also subclasses the closest builtin so callers that only
know ``FileNotFoundError``/``PermissionError``/``ValueError`` still catch them.
"""
from __future__ import annotations

from pathlib import Path

__all__ = [
    "ResolverError",
    "NotFoundError",
    "PermissionDeniedError",
    "InvalidMarkerError",
]


class ResolverError(Exception):
    """Base class for resolution failures; ``path`` is the offending path."""

    def __init__(self, message: str, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class NotFoundError(ResolverError, FileNotFoundError):
    """Raised when the start path is missing or is not a directory."""


class PermissionDeniedError(ResolverError, PermissionError):
    """Raised when a directory (or marker file) on the walk cannot be read."""


class InvalidMarkerError(ResolverError, ValueError):
    """Raised when a workspace marker file exists but is malformed."""

    def __init__(self, path: str | Path, reason: str) -> None:
        super().__init__(f"invalid workspace marker {path}: {reason}", path)
        self.reason = reason
