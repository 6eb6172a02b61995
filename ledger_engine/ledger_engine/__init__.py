"""Schema ledger engine: dialect-aware migration version tracking."""

__version__ = "0.1.0"
