"""CLI commands for mdprune.

This package contains all subcommand implementations.
"""

from mdprune.cli.commands import prune, scan

__all__ = ["prune", "scan"]
