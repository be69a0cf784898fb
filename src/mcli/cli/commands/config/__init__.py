"""Config command group for mcli CLI.

Provides configuration management subcommands.
"""

from __future__ import annotations

__all__ = ["config"]

import click

from .host import host


@click.group()
def config() -> None:
    """Configuration management commands."""
    pass


config.add_command(host, "host")
