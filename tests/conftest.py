"""
Shared fixtures: on-disk trees built under tmp_path.

The nested-repository tree mirrors the "no_workspaces" inference fixture: a
template tree with plain package manifests, then a git boundary at the target
dir, at ``parent`` and at ``parent/child``.
"""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from workspace_root import ResolverConfig


def mark_git(directory: Path) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    (directory / ".git").mkdir(exist_ok=True)
    return directory


def write_package_json(directory: Path, **fields) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "package.json"
    path.write_text(json.dumps({"name": directory.name, **fields}))
    return path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("WSROOT_CONFIG", "WSROOT_CEILING", "WSROOT_VCS_MARKERS", "WSROOT_VERBOSE", "LOG_JSON", "LOG_REDACT", "LOG_REDACT_VALUES"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def hermetic(tmp_path: Path) -> ResolverConfig:
    """Config whose walk never leaves tmp_path."""
    return ResolverConfig(ceiling=tmp_path)


@pytest.fixture
def no_workspaces_tree(tmp_path: Path) -> Path:
    target = tmp_path / "t"
    parent = target / "parent"
    child = parent / "child"
    write_package_json(parent)
    write_package_json(child)
    (child / "src").mkdir(parents=True)
    mark_git(target)
    mark_git(parent)
    mark_git(child)
    return target
