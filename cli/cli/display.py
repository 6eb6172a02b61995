"""Rich output formatting for the ledger CLI.

All functions write to a :class:`rich.console.Console` instance (typically
bound to *stderr*) so that machine-readable output on *stdout* is never
polluted with human-readable decoration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from ledger_engine.dialects import SqlDialect, VersionRow


# ---------------------------------------------------------------------------
# Dialect list
# ---------------------------------------------------------------------------


def display_dialects(console: Console, dialects: list[SqlDialect], active: str) -> None:
    """Render a table of every supported dialect.

    Parameters
    ----------
    console:
        Rich console to write to.
    dialects:
        One instance per registered backend.
    active:
        Identifier of the configured dialect, highlighted in the output.
    """
    table = Table(
        title=f"Dialects ({len(dialects)})",
        show_lines=False,
        pad_edge=True,
        expand=False,
    )
    table.add_column("Name", style="bold")
    table.add_column("Placeholders")
    table.add_column("Auxiliary Steps")

    for d in dialects:
        name = d.name.value
        if name == active:
            name = f"[green]{name} *[/green]"
        steps = d.aux_statements()
        table.add_row(
            name,
            d.placeholder_style.render(2),
            ", ".join(step for step, _ in steps) if steps else "-",
        )

    console.print(table)


# ---------------------------------------------------------------------------
# Version history
# ---------------------------------------------------------------------------


def display_history(console: Console, table_name: str, rows: list[VersionRow], current: int) -> None:
    """Render the version table, most recent event first."""
    if not rows:
        console.print(f"[dim]No events recorded in {table_name}.[/dim]")
        return

    table = Table(
        title=f"{table_name} (current version: {current})",
        show_lines=False,
        pad_edge=True,
        expand=False,
    )
    table.add_column("#", justify="right", style="dim")
    table.add_column("Version", justify="right", style="bold")
    table.add_column("Event")

    for i, row in enumerate(rows, start=1):
        event = "[green]applied[/green]" if row.is_applied else "[yellow]rolled back[/yellow]"
        table.add_row(str(i), str(row.version_id), event)

    console.print(table)
