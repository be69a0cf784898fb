"""CLI output styling utilities.

Provides consistent styling helpers for CLI output:
- Red for error messages (with cross)
- Dim for neutral/empty state messages
- A fixed color per host field role for 'config host' output
"""

from __future__ import annotations

__all__ = [
    "HOST_FIELD_STYLES",
    "colorize",
    "format_host_message",
    "style_dim",
    "style_error",
]

from typing import Any

import click

from mcli.hosts import HostMessage

# Field role -> click.style keyword arguments
HOST_FIELD_STYLES: dict[str, dict[str, Any]] = {
    "HostMessage": {"fg": "green"},
    "Alias": {"fg": "cyan", "bold": True},
    "URL": {"fg": "cyan"},
    "AccessKey": {"fg": "blue"},
    "SecretKey": {"fg": "blue"},
    "API": {"fg": "yellow"},
}


def colorize(role: str, text: str) -> str:
    """Style text with the color assigned to a field role.

    Args:
        role: Key of HOST_FIELD_STYLES (e.g., "Alias").
        text: Text to style.

    Returns:
        Styled string. Unknown roles are returned unstyled.
    """
    return click.style(text, **HOST_FIELD_STYLES.get(role, {}))


def style_error(message: str) -> str:
    """Style an error message with cross mark.

    Example:
        >>> click.echo(style_error("File not found"), err=True)
        ✗ File not found
    """
    return click.style(f"✗ {message}", fg="red")


def style_dim(message: str) -> str:
    """Style a neutral/empty state message as dim."""
    return click.style(message, dim=True)


def format_host_message(message: HostMessage) -> str:
    """Render a HostMessage as one line of colored text.

    list lines are laid out in columns: alias padded to alias_width, URL in
    30 characters, then access key (20), secret key (40) and API (20) when
    the host has credentials. Longer values are truncated.

    Args:
        message: Result of a host operation.

    Returns:
        Styled line, without trailing newline.
    """
    if message.op == "add":
        return colorize("HostMessage", f"Added '{message.alias}' successfully.")
    if message.op == "remove":
        return colorize("HostMessage", f"Removed '{message.alias}' successfully.")

    line = colorize("Alias", f"{message.display_alias}: ")
    line += colorize("URL", f"{message.url:<30.30}")
    if message.access_key or message.secret_key:
        line += colorize("AccessKey", f"  {message.access_key:<20.20}")
        line += colorize("SecretKey", f"  {message.secret_key:<40.40}")
        line += colorize("API", f"  {message.api:.20}")
    return line
