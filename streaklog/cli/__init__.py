"""CLI commands for streaklog.

This package provides the command-line interface for writing
journal entries, reviewing the feed and checking streaks.
"""

from streaklog.cli.main import cli, main

__all__ = ["cli", "main"]
