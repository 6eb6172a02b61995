"""Dialect layer shared types.

Backend identifiers, placeholder styles, the decoded version row and the
exception hierarchy.  Nothing here touches a database.
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


class DialectName(str, enum.Enum):
    """Recognised backend identifiers."""

    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE3 = "sqlite3"
    REDSHIFT = "redshift"
    TIDB = "tidb"
    ORACLE = "oracle"


class PlaceholderStyle(str, enum.Enum):
    """How a backend marks positional parameters in SQL text."""

    NUMBERED = "numbered"  # $1, $2
    QMARK = "qmark"  # ?, ?

    def render(self, count: int) -> str:
        """Return *count* comma-separated placeholders in this style."""
        if self is PlaceholderStyle.NUMBERED:
            return ", ".join(f"${i}" for i in range(1, count + 1))
        return ", ".join("?" for _ in range(count))


# ---------------------------------------------------------------------------
# Rows
# ---------------------------------------------------------------------------

_TRUTHY_FLAGS = frozenset({"1", "t", "true", "y", "yes"})
_FALSY_FLAGS = frozenset({"0", "f", "false", "n", "no"})


def decode_applied(value: Any) -> bool:
    """Normalise a backend ``is_applied`` value to ``bool``.

    Native boolean backends return ``bool``, SQLite returns ``0``/``1``
    and the ``CHAR(1)`` flag comes back as ``'0'``/``'1'``.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        flag = value.strip().lower()
        if flag in _TRUTHY_FLAGS:
            return True
        if flag in _FALSY_FLAGS:
            return False
    raise ValueError(f"Unrecognised is_applied value: {value!r}")


@dataclass(frozen=True, slots=True)
class VersionRow:
    """One event from the version table: a migration applied or rolled back."""

    version_id: int
    is_applied: bool

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> VersionRow:
        """Build from a ``(version_id, is_applied)`` result row."""
        version_id, is_applied = row[0], row[1]
        return cls(version_id=int(version_id), is_applied=decode_applied(is_applied))


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class DialectError(Exception):
    """Base exception for all dialect layer errors."""


class UnknownDialectError(DialectError, ValueError):
    """Raised when a backend identifier is not recognised."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'"{name}": unknown dialect')


class AuxiliarySetupError(DialectError):
    """Raised when a step of the post-creation bootstrap fails.

    Attributes
    ----------
    dialect:
        Backend the bootstrap was running for.
    step:
        Label of the step that failed (``"primary key"``, ``"sequence"``,
        ``"trigger"``).
    """

    def __init__(self, dialect: DialectName, step: str, cause: BaseException) -> None:
        self.dialect = dialect
        self.step = step
        super().__init__(f"{dialect.value}: auxiliary setup failed at step {step!r}: {cause}")


class DialectMismatchError(DialectError, ValueError):
    """Raised when a dialect is paired with an engine for another backend."""

    def __init__(self, dialect: DialectName, backend: str) -> None:
        self.dialect = dialect
        self.backend = backend
        super().__init__(f"{dialect.value}: dialect does not match database backend {backend!r}")
