"""Version table persistence: engines, transactions and the ledger."""

from ledger_engine.state.database import get_engine, transaction
from ledger_engine.state.ledger import BASELINE_VERSION, VersionLedger

__all__ = ["BASELINE_VERSION", "VersionLedger", "get_engine", "transaction"]
