"""
Loggers used by the wsroot entrypoints.

Two flavours are handed out:
- an error logger, always plain `[wsroot] ...` lines on stderr
- a walk logger, only when verbose, receiving every resolver event

Environment Variables:
    - WSROOT_VERBOSE: "1" turns the walk logger on without --verbose
    - LOG_JSON: walk logger emits JSON lines instead of key=value text
    - LOG_REDACT / LOG_REDACT_VALUES: comma-separated values masked as ***
"""
from __future__ import annotations

import os
from typing import Callable, Optional, Tuple

from . import env
from .logging_adapter import make_logger, make_structured_logger

__all__ = [
    "get_error_logger",
    "get_walk_logger",
]


def _redaction(redact: bool | None) -> Tuple[bool, list[str]]:
    if redact is None:
        redact = os.getenv("LOG_REDACT", "0") == "1"
    values = [v for v in os.getenv("LOG_REDACT_VALUES", "").split(",") if v]
    return redact, values


def get_error_logger(name: str = "wsroot", redact: bool | None = None) -> Callable[[str], None]:
    redact, values = _redaction(redact)
    return make_logger(prefix=name, redact=redact, secrets=values, json_output=False)


def get_walk_logger(
    name: str = "wsroot",
    verbose: bool | None = None,
    structured: bool | None = None,
    redact: bool | None = None,
) -> Optional[Callable]:
    """
    Return the logger passed to resolve()/resolve_many(), or None when quiet.

    Explicit arguments win over the environment. Structured loggers carry
    {"tool": "resolve"} on every line so mixed stderr streams can be filtered.
    """
    if verbose is None:
        verbose = os.getenv(env.VERBOSE_ENV, "0") == "1"
    if not verbose:
        return None
    if structured is None:
        structured = os.getenv("LOG_JSON", "0") == "1"
    if structured:
        return make_structured_logger(prefix=name, defaults={"tool": "resolve"})
    redact, values = _redaction(redact)
    return make_logger(prefix=name, redact=redact, secrets=values, json_output=False)
