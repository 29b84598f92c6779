"""Command-line interface for Connect4.

Usage:
    python -m connect4.cli.main --help
"""

from .main import app


__all__ = ["app"]
