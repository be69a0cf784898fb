"""Main CLI entry point for mcli.

Defines the root group, its global options, and registers subcommands.

Commands:
    config  - Configuration management (host add, host remove, host list)

Subcommand help:
    mcli COMMAND -h         Show help for a specific command
"""

from __future__ import annotations

__all__ = ["cli", "main"]

import sys
from pathlib import Path

import click

from mcli import __version__
from mcli.config import JsonConfigStore, get_config_path
from mcli.constants import CONFIG_DIR_ENVVAR
from mcli.utils.logging.logger_setup import setup_debug_logging

from .commands.config import config
from .context import CliContext


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--config-dir",
    "-C",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=CONFIG_DIR_ENVVAR,
    help=f"Config directory (default: OS app dir, or ${CONFIG_DIR_ENVVAR})",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON lines")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress success messages")
@click.option("--debug", is_flag=True, help="Write debug logs to stderr")
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def cli(
    ctx: click.Context,
    config_dir: Path | None,
    as_json: bool,
    no_color: bool,
    quiet: bool,
    debug: bool,
    version: bool,
) -> None:
    """mcli: command-line client for S3-compatible object storage."""
    if version:
        click.echo(f"mcli {__version__}")
        sys.exit(0)

    setup_debug_logging(debug)

    # A context supplied by the caller (e.g. tests with an in-memory store) wins
    if not isinstance(ctx.obj, CliContext):
        store = JsonConfigStore(get_config_path(config_dir.expanduser() if config_dir else None))
        ctx.obj = CliContext(
            store=store,
            as_json=as_json,
            quiet=quiet,
            color=False if no_color else None,
        )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


cli.add_command(config)


def main() -> None:
    """CLI entry point."""
    cli()
