"""
Logging adapter: small emitters for consistent stderr output with optional redaction.

Config:
- Env: LOG_JSON=1 for structured logs; LOG_REDACT=1 to mask secrets; LOG_REDACT_VALUES=secret1,secret2 to redact.

Usage:
- `log = make_logger(prefix="wsroot"); log("message")`
- `slog = make_structured_logger(prefix="wsroot", defaults={"tool": "resolve"}); slog("event", {"status": "ok"})`

Notes:
- Side effects: writes to stderr only.
- Home paths are always shortened to ~ so logs can be pasted into issues.
"""
from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Callable, Optional

__all__ = [
    "make_logger",
    "make_structured_logger",
    "log_event",
    "mark_structured",
]

_DEFAULT_JSON = os.environ.get("LOG_JSON", "0") == "1"


def make_logger(prefix: str = "", redact: bool = False, secrets: Optional[list] = None, json_output: Optional[bool] = None) -> Callable[[str], None]:
    """
    Create a logger function. Optionally redact known secrets (naive string replace).
    """
    home = str(Path.home())
    pref = f"[{prefix}]" if prefix else ""
    secrets = list(secrets or [])
    json_output = _DEFAULT_JSON if json_output is None else json_output

    def _log(msg: str) -> None:
        sanitized = msg.replace(home, "~")
        if redact:
            for s in secrets:
                if s:
                    sanitized = sanitized.replace(s, "***")
        if json_output:
            payload = {"prefix": prefix, "message": sanitized}
            print(json.dumps(payload), file=sys.stderr)
        else:
            print(f"{pref} {sanitized}".strip(), file=sys.stderr)

    return _log


def make_structured_logger(prefix: str = "", defaults: Optional[dict] = None) -> Callable[[str, dict], None]:
    """
    Emit structured JSON logs with a consistent schema: {prefix,event,...fields}.
    Defaults are merged into each log line.
    """
    defaults = defaults or {}

    def _log(event: str, fields: Optional[dict] = None) -> None:
        payload = {"prefix": prefix, "event": event}
        payload.update(defaults)
        if fields:
            payload.update(fields)
        print(json.dumps(payload, default=str), file=sys.stderr)

    return mark_structured(_log)


def mark_structured(logger: Callable) -> Callable:
    """Flag a callable as taking (event, fields) so log_event hands it a dict."""
    logger.structured = True
    return logger


def log_event(logger: Callable, event: str, **fields) -> None:
    """
    Emit an event through either logger flavour.
    Loggers flagged by mark_structured get (event, fields); others get a key=value line.
    """
    if getattr(logger, "structured", False):
        logger(event, fields)
        return
    detail = " ".join(f"{k}={v}" for k, v in fields.items())
    logger(f"{event} {detail}".strip())
