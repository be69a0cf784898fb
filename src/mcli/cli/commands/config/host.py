"""'config host' commands: add, remove and list host aliases."""

from __future__ import annotations

__all__ = ["host"]

import click

from mcli.exceptions import InvalidArgumentError, McliError
from mcli.hosts import add_host, list_hosts, remove_host

from ...context import CliContext

# Every token is positional, including values such as "-secret" or "--help"
_POSITIONAL_SETTINGS = {"ignore_unknown_options": True, "help_option_names": []}


class VerbGroup(click.Group):
    """Group that treats a missing or unknown verb as a usage failure.

    Both cases print the group help and exit with status 1. Verbs are
    matched after stripping surrounding whitespace.
    """

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return super().get_command(ctx, cmd_name.strip())

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        try:
            return super().resolve_command(ctx, args)
        except click.UsageError:
            click.echo(ctx.get_help())
            ctx.exit(1)


@click.group(cls=VerbGroup, invoke_without_command=True)
@click.pass_context
def host(ctx: click.Context) -> None:
    """List, modify and remove hosts in configuration file.

    \b
    Operations:
      add ALIAS URL ACCESS-KEY SECRET-KEY [API]
      remove ALIAS
      list

    \b
    Examples:
      1. Add Amazon S3 storage service under "myphotos" alias.
         For security reasons turn off bash history momentarily.
           $ set +o history
           $ mcli config host add myphotos https://s3.amazonaws.com \\
                 BKIKJAA5BMMU2RHO6IBB V8f1CwQqAcwo80UEIJEjc5gVQUSSx5ohQ9GSrr12
           $ set -o history
      2. Add a host that signs requests with S3v2.
           $ mcli config host add legacy https://storage.example.com \\
                 BKIKJAA5BMMU2RHO6IBB V8f1CwQqAcwo80UEIJEjc5gVQUSSx5ohQ9GSrr12 S3v2
      3. List all hosts.
           $ mcli config host list
      4. Remove "goodisk" config.
           $ mcli config host remove goodisk
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(1)


@host.command("add", context_settings=_POSITIONAL_SETTINGS)
@click.argument("args", nargs=-1, metavar="ALIAS URL ACCESS-KEY SECRET-KEY [API]")
@click.pass_obj
def host_add(obj: CliContext, args: tuple[str, ...]) -> None:
    """Add a host, replacing any existing host with the same ALIAS.

    API is the request signature version, S3v4 (default) or S3v2.
    Empty ACCESS-KEY and SECRET-KEY ("") configure anonymous access.
    """
    if not 4 <= len(args) <= 5:
        obj.fail(InvalidArgumentError("Incorrect number of arguments for host add command."))

    alias, url, access_key, secret_key = args[:4]
    api = args[4] if len(args) == 5 else ""

    try:
        message = add_host(obj.store, alias, url, access_key, secret_key, api)
    except McliError as e:
        obj.fail(e)

    obj.print_message(message)


@host.command("remove", context_settings=_POSITIONAL_SETTINGS)
@click.argument("args", nargs=-1, metavar="ALIAS")
@click.pass_obj
def host_remove(obj: CliContext, args: tuple[str, ...]) -> None:
    """Remove the host configured as ALIAS.

    Removing an alias that is not configured succeeds without changes.
    """
    if len(args) != 1:
        obj.fail(InvalidArgumentError("Incorrect number of arguments for host remove command."))

    try:
        message = remove_host(obj.store, args[0])
    except McliError as e:
        obj.fail(e)

    obj.print_message(message)


@host.command("list")
@click.pass_obj
def host_list(obj: CliContext) -> None:
    """List all hosts, sorted by alias."""
    try:
        messages = list_hosts(obj.store)
    except McliError as e:
        obj.fail(e)

    if not messages:
        obj.print_empty("No hosts configured.")
        return

    for message in messages:
        obj.print_message(message)
