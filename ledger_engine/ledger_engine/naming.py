"""Resolution of the version table name.

Every statement a dialect generates interpolates the name returned by
:func:`version_table_name`, so the name is validated as a plain SQL
identifier before it is ever used.
"""

from __future__ import annotations

import re

DEFAULT_TABLE_NAME = "schema_version_log"

# Optional ``schema.`` qualifier followed by the table identifier.
_TABLE_NAME_RE = re.compile(r"^(?:[A-Za-z_][A-Za-z0-9_$]*\.)?[A-Za-z_][A-Za-z0-9_$]*$")
_MAX_TABLE_NAME_LENGTH = 128


def validate_table_name(name: str) -> str:
    """Return *name* unchanged if it is safe to interpolate into SQL.

    Raises
    ------
    ValueError
        If the name is empty, too long, or not a plain identifier.
    """
    if len(name) > _MAX_TABLE_NAME_LENGTH or not _TABLE_NAME_RE.match(name):
        raise ValueError(f"Invalid version table name: must match {_TABLE_NAME_RE.pattern!r}, got {name!r}")
    return name


def version_table_name() -> str:
    """Return the configured version table name (``LEDGER_TABLE_NAME``)."""
    from ledger_engine.config import load_settings

    return load_settings().table_name
