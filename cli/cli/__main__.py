"""Entry point for `python -m cli` and `ledger` console script."""

from __future__ import annotations

from cli.app import app


def main() -> None:
    from ledger_engine.config import load_settings
    from ledger_engine.logging_config import configure_logging

    configure_logging(load_settings())
    app()


if __name__ == "__main__":
    main()
