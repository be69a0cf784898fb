"""Command-line interface for mcli.

Provides the root command and the 'config host' subcommands.
"""

from .main import cli, main

__all__ = ["cli", "main"]
