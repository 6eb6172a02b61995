"""Oracle dialect.

Oracle versions this layer targets have no auto-increment column type, so
``id`` is filled by a before-insert trigger reading from a dedicated
sequence.  The table is created bare and the primary key, sequence and
trigger are added by :meth:`OracleDialect.db_run_aux` in the same
transaction.

``is_applied`` is a ``CHAR(1)`` flag holding ``'1'`` or ``'0'``.
"""

from __future__ import annotations

from dataclasses import dataclass

from ledger_engine.dialects._types import DialectName, PlaceholderStyle
from ledger_engine.dialects.impl.base import BaseDialect

STEP_PRIMARY_KEY = "primary key"
STEP_SEQUENCE = "sequence"
STEP_TRIGGER = "trigger"

_MAX_IDENTIFIER_LENGTH = 128
# Longest suffix appended to the table name for a derived object.
_SEQUENCE_SUFFIX = "_id_seq"


@dataclass(frozen=True)
class OracleDialect(BaseDialect):
    name = DialectName.ORACLE
    placeholder_style = PlaceholderStyle.QMARK
    statement_terminator = ""

    def __post_init__(self) -> None:
        super().__post_init__()
        table = self.table_name.rpartition(".")[2]
        limit = _MAX_IDENTIFIER_LENGTH - len(_SEQUENCE_SUFFIX)
        if len(table) > limit:
            raise ValueError(
                f"Invalid version table name: Oracle table names are limited to {limit} characters "
                f"to leave room for the sequence suffix, got {len(table)}"
            )

    @property
    def sequence_name(self) -> str:
        return f"{self.table_name}{_SEQUENCE_SUFFIX}"

    @property
    def trigger_name(self) -> str:
        return f"{self.table_name}_bi"

    def create_version_table_sql(self) -> str:
        return (
            f"CREATE TABLE {self.table_name} ("
            "id NUMBER(19), "
            "version_id NUMBER(19) NOT NULL, "
            "is_applied CHAR(1) NOT NULL, "
            "tstamp TIMESTAMP(6) DEFAULT SYS_EXTRACT_UTC(SYSTIMESTAMP))"
        )

    def aux_statements(self) -> list[tuple[str, str]]:
        # PL/SQL blocks keep their terminating "END;".
        trigger = (
            f"CREATE OR REPLACE TRIGGER {self.trigger_name}\n"
            f"BEFORE INSERT ON {self.table_name}\n"
            "FOR EACH ROW\n"
            "BEGIN\n"
            "  IF :NEW.id IS NULL THEN\n"
            f"    SELECT {self.sequence_name}.NEXTVAL INTO :NEW.id FROM dual;\n"
            "  END IF;\n"
            "END;"
        )
        return [
            (STEP_PRIMARY_KEY, f"ALTER TABLE {self.table_name} ADD PRIMARY KEY (id)"),
            (STEP_SEQUENCE, f"CREATE SEQUENCE {self.sequence_name}"),
            (STEP_TRIGGER, trigger),
        ]

    def bind_applied(self, flag: bool) -> object:
        return "1" if flag else "0"
