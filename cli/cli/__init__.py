"""Command-line interface for the schema ledger."""
