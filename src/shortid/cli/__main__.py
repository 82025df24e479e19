"""CLI entry point.

Usage:
    python -m shortid.cli generate -n 10
    shortid --worker 3 --seed 42 generate
    SHORTID_LOG_LEVEL=DEBUG shortid decode <id>

Logging is configured by the application callback from ``--log-level`` or
``SHORTID_LOG_LEVEL``.
"""

from shortid.cli.app import app


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
