"""Per-invocation CLI state.

The root command builds a CliContext from the global options and stores it
in ``ctx.obj``; subcommands receive it with ``@click.pass_obj``.
"""

from __future__ import annotations

__all__ = ["CliContext"]

import json
from dataclasses import dataclass
from typing import NoReturn

import click

from mcli.config import ConfigStore
from mcli.exceptions import McliError
from mcli.hosts import HostMessage

from .styling import format_host_message, style_dim, style_error


@dataclass
class CliContext:
    """Config store handle plus output settings for one invocation.

    Attributes:
        store: Config store the commands read and write.
        as_json: Print results (and errors) as JSON lines.
        quiet: Suppress text-mode success output.
        color: False strips ANSI styling; None lets click decide per stream.
    """

    store: ConfigStore
    as_json: bool = False
    quiet: bool = False
    color: bool | None = None

    def print_message(self, message: HostMessage) -> None:
        """Print one operation result in the selected output mode."""
        if self.as_json:
            click.echo(message.to_json())
        elif not self.quiet:
            click.echo(format_host_message(message), color=self.color)

    def print_empty(self, text: str) -> None:
        """Print an empty-state note. Text mode only."""
        if not self.as_json and not self.quiet:
            click.echo(style_dim(text), color=self.color)

    def fail(self, error: McliError | str) -> NoReturn:
        """Report a fatal error and exit with status 1.

        Text mode writes a red line to stderr. JSON mode writes an error
        object to stdout so scripted callers read results and errors from
        one stream.
        """
        message = str(error)
        if self.as_json:
            payload = {
                "status": "error",
                "error": {
                    "message": message,
                    "cause": type(error).__name__ if isinstance(error, McliError) else None,
                },
            }
            click.echo(json.dumps(payload))
        else:
            click.echo(style_error(message), err=True, color=self.color)
        raise SystemExit(1)
