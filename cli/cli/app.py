"""Ledger CLI application -- Typer-based inspection interface.

Lists the supported dialects, prints the SQL each one generates, and
bootstraps or inspects the version table of a database.  Human-readable
output goes to *stderr* via Rich; SQL text and ``--json`` payloads go to
*stdout* so that pipelines can compose cleanly.
"""

from __future__ import annotations

import json
import sys
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from cli.display import display_dialects, display_history

# ---------------------------------------------------------------------------
# App & global state
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="ledger",
    help="Schema ledger - migration version tracking across SQL backends",
    no_args_is_help=True,
)
console = Console(stderr=True)

# Mutable global options populated by the Typer callback.
_json_output: bool = False


# ---------------------------------------------------------------------------
# Callback -- global options
# ---------------------------------------------------------------------------


@app.callback()
def _global_options(
    json_mode: bool = typer.Option(
        False,
        "--json/--no-json",
        help="Emit structured JSON to stdout instead of human-readable output.",
    ),
) -> None:
    """Global options applied to every command."""
    global _json_output  # noqa: PLW0603
    _json_output = json_mode


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _settings() -> Any:
    """Load settings, exiting with code 2 when they fail validation."""
    from ledger_engine.config import load_settings

    try:
        return load_settings()
    except ValueError as exc:
        # pydantic's ValidationError is a ValueError.
        console.print(f"[red]Invalid LEDGER_* configuration: {escape(str(exc))}[/red]")
        raise typer.Exit(code=2) from exc


def _resolve(dialect: str | None, table: str | None, database_url: str | None = None) -> Any:
    """Build the dialect for the command.

    Without ``--dialect`` the backend of *database_url* decides, falling
    back to the configured dialect.
    """
    from ledger_engine.dialects import dialect_for_url, get_dialect

    settings = _settings()
    try:
        if dialect is None:
            dialect = settings.dialect if database_url is None else dialect_for_url(database_url)
        return get_dialect(dialect, table_name=settings.table_name if table is None else table)
    except ValueError as exc:
        # UnknownDialectError and table name validation both land here.
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2) from exc


def _database_url(database_url: str | None) -> str:
    return database_url or _settings().database_url


def _ledger(d: Any, database_url: str) -> Any:
    """Open an engine for *database_url* and wrap it in a ledger for *d*."""
    from ledger_engine.dialects import DialectMismatchError
    from ledger_engine.state import VersionLedger, get_engine

    engine = get_engine(database_url)
    try:
        return VersionLedger(engine, d)
    except DialectMismatchError as exc:
        engine.dispose()
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=2) from exc


_DIALECT_OPTION = typer.Option(
    None,
    "--dialect",
    "-d",
    help="Backend identifier (postgres | mysql | sqlite3 | redshift | tidb | oracle).",
    envvar="LEDGER_DIALECT",
)
_TABLE_OPTION = typer.Option(
    None,
    "--table",
    help="Version table name.  Defaults to LEDGER_TABLE_NAME.",
)
_DATABASE_URL_OPTION = typer.Option(
    None,
    "--database-url",
    help="SQLAlchemy database URL.  Defaults to LEDGER_DATABASE_URL.",
)


# ---------------------------------------------------------------------------
# dialects
# ---------------------------------------------------------------------------


@app.command()
def dialects() -> None:
    """List supported dialects."""
    from ledger_engine.dialects import available_dialects, get_dialect

    settings = _settings()
    instances = [get_dialect(name, table_name=settings.table_name) for name in available_dialects()]
    active = settings.dialect.value

    if _json_output:
        rows = [
            {
                "name": d.name.value,
                "placeholder_style": d.placeholder_style.value,
                "aux_steps": [step for step, _ in d.aux_statements()],
                "active": d.name.value == active,
            }
            for d in instances
        ]
        sys.stdout.write(json.dumps(rows, indent=2) + "\n")
    else:
        display_dialects(console, instances, active)


# ---------------------------------------------------------------------------
# sql
# ---------------------------------------------------------------------------


@app.command()
def sql(
    dialect: str | None = _DIALECT_OPTION,
    table: str | None = _TABLE_OPTION,
) -> None:
    """Print the SQL a dialect generates for the version table."""
    d = _resolve(dialect, table)
    payload = {
        "dialect": d.name.value,
        "create": d.create_version_table_sql(),
        "aux": [{"step": step, "sql": text} for step, text in d.aux_statements()],
        "insert": d.insert_version_sql(),
        "query": d.version_query_sql(),
    }

    if _json_output:
        sys.stdout.write(json.dumps(payload, indent=2) + "\n")
        return

    lines = [f"-- create\n{payload['create']}"]
    for aux in payload["aux"]:
        lines.append(f"-- aux: {aux['step']}\n{aux['sql']}")
    lines.append(f"-- insert\n{payload['insert']}")
    lines.append(f"-- query\n{payload['query']}")
    sys.stdout.write("\n\n".join(lines) + "\n")


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


@app.command()
def init(
    dialect: str | None = _DIALECT_OPTION,
    table: str | None = _TABLE_OPTION,
    database_url: str | None = _DATABASE_URL_OPTION,
) -> None:
    """Create the version table if it does not exist."""
    from sqlalchemy.exc import SQLAlchemyError

    from ledger_engine.dialects import AuxiliarySetupError

    d = _resolve(dialect, table, database_url)
    ledger = _ledger(d, _database_url(database_url))

    try:
        existed = ledger.has_version_table()
        current = ledger.ensure_version_table()
    except (AuxiliarySetupError, SQLAlchemyError) as exc:
        console.print(f"[red]Failed to initialise {d.table_name}: {escape(str(exc))}[/red]")
        raise typer.Exit(code=3) from exc
    finally:
        ledger.engine.dispose()

    if _json_output:
        sys.stdout.write(
            json.dumps({"table": d.table_name, "created": not existed, "current_version": current}) + "\n"
        )
    elif existed:
        console.print(f"[dim]{d.table_name} already exists (current version: {current}).[/dim]")
    else:
        console.print(f"[green]Created {d.table_name} ({d.name.value}).[/green]")


# ---------------------------------------------------------------------------
# status
# ---------------------------------------------------------------------------


@app.command()
def status(
    dialect: str | None = _DIALECT_OPTION,
    table: str | None = _TABLE_OPTION,
    database_url: str | None = _DATABASE_URL_OPTION,
) -> None:
    """Show the version history, most recent event first."""
    from sqlalchemy.exc import SQLAlchemyError

    d = _resolve(dialect, table, database_url)
    ledger = _ledger(d, _database_url(database_url))

    try:
        if not ledger.has_version_table():
            console.print(f"[yellow]{d.table_name} does not exist. Run 'ledger init' first.[/yellow]")
            raise typer.Exit(code=1)
        rows = ledger.history()
        current = ledger.current_version()
    except SQLAlchemyError as exc:
        console.print(f"[red]Failed to read {d.table_name}: {escape(str(exc))}[/red]")
        raise typer.Exit(code=3) from exc
    finally:
        ledger.engine.dispose()

    if _json_output:
        payload = {
            "table": d.table_name,
            "current_version": current,
            "events": [{"version_id": r.version_id, "is_applied": r.is_applied} for r in rows],
        }
        sys.stdout.write(json.dumps(payload, indent=2) + "\n")
    else:
        display_history(console, d.table_name, rows, current)
