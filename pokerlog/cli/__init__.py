"""CLI commands for pokerlog.

This package provides the command-line interface for pokerlog:
recording sessions, year-to-date statistics, and backups.
"""

from pokerlog.cli.main import cli, main

__all__ = ["cli", "main"]
