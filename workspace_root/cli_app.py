#!/usr/bin/env python3
"""
wsroot: print the inferred monorepo root for one or more directories.

- Single entrypoint: `wsroot` (console script) or `python -m workspace_root`
- `wsroot` with no args resolves the current directory
- `wsroot a b c --json` resolves several directories concurrently
"""
from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Type

from workspace_root.core import env
from workspace_root.core.config import ResolverConfig
from workspace_root.core.errors import InvalidMarkerError, NotFoundError, PermissionDeniedError, ResolverError
from workspace_root.core.logger_factory import get_error_logger, get_walk_logger
from workspace_root.core.root import resolve_many
from workspace_root.ui.render import render_results

EXIT_OK = 0
EXIT_CONFIG = 1
# 2 stays argparse's usage error
EXIT_CODES: Dict[Type[ResolverError], int] = {
    NotFoundError: 3,
    PermissionDeniedError: 4,
    InvalidMarkerError: 5,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wsroot", description="Infer the monorepo root for a directory.")
    parser.add_argument("starts", nargs="*", metavar="START", help="start directories (default: cwd)")
    parser.add_argument("--ceiling", help=f"never walk above this directory (env {env.CEILING_ENV})")
    parser.add_argument("--config", help=f"config file (default: {' or '.join(env.DEFAULT_CONFIG_NAMES)} in cwd)")
    parser.add_argument("--json", action="store_true", help="emit JSON on stdout")
    parser.add_argument("--workers", type=int, default=env.DEFAULT_WORKERS, help="threads used for several starts")
    parser.add_argument("--verbose", "-v", action="store_true", help="log each walk decision to stderr")
    parser.add_argument("--log-json", action="store_true", help="structured JSON logs (same as LOG_JSON=1)")
    return parser


def _exit_code(exc: ResolverError) -> int:
    for cls, code in EXIT_CODES.items():
        if isinstance(exc, cls):
            return code
    return EXIT_CONFIG


def main(argv=None) -> int:
    args = build_parser().parse_args(list(argv) if argv is not None else sys.argv[1:])
    err = get_error_logger("wsroot")
    try:
        config = ResolverConfig.load(override_path=Path(args.config) if args.config else None)
        if args.ceiling:
            config = replace(config, ceiling=Path(args.ceiling))
    except ValueError as exc:
        err(f"error: {exc}")
        return EXIT_CONFIG

    log = get_walk_logger("wsroot", verbose=True if args.verbose else None, structured=True if args.log_json else None)

    starts: List[str] = args.starts or ["."]
    try:
        results = resolve_many(starts, config=config, log=log, max_workers=args.workers)
    except ResolverError as exc:
        err(f"error: {exc}")
        return _exit_code(exc)

    if args.json:
        payload = [r.to_dict() for r in results]
        print(json.dumps(payload[0] if len(payload) == 1 else payload, indent=2))
    else:
        render_results(results)
    return EXIT_OK
