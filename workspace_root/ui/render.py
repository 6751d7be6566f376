"""
Rich-based renderers for resolution results.
"""
from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from workspace_root.core.root import Classification, ResolutionResult

_BADGES = {
    Classification.WORKSPACE_MARKER: "[bold green]workspace[/]",
    Classification.VERSION_CONTROL_BOUNDARY: "[bold cyan]vcs[/]",
    Classification.FALLBACK: "[yellow]fallback[/]",
}


def render_results(results: Iterable[ResolutionResult], console: Console | None = None) -> None:
    """Render one row per start directory."""
    table = Table(title="Workspace roots", expand=True)
    table.add_column("start", overflow="fold")
    table.add_column("root", style="bold", overflow="fold")
    table.add_column("via", justify="center", no_wrap=True, min_width=9)
    table.add_column("marker", overflow="fold")
    table.add_column("globs", overflow="fold")
    for result in results:
        table.add_row(
            escape(str(result.start)),
            escape(str(result.root)),
            _BADGES[result.classification],
            escape(str(result.marker)) if result.marker else "",
            escape(", ".join(result.globs)),
        )
    (console or Console()).print(table)
