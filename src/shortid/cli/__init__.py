"""CLI module for shortid.

Provides a command-line interface to generate, decode and audit ids.
"""

from shortid.cli.app import app

__all__ = ["app"]
