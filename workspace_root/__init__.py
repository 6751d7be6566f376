"""Monorepo root inference: workspace markers, then the nearest VCS boundary."""
from __future__ import annotations

from workspace_root.core.config import ResolverConfig
from workspace_root.core.errors import InvalidMarkerError, NotFoundError, PermissionDeniedError, ResolverError
from workspace_root.core.root import Classification, ResolutionResult, discover_root, resolve, resolve_many

__version__ = "0.1.0"

__all__ = [
    "Classification",
    "InvalidMarkerError",
    "NotFoundError",
    "PermissionDeniedError",
    "ResolutionResult",
    "ResolverConfig",
    "ResolverError",
    "discover_root",
    "resolve",
    "resolve_many",
]
