"""Tests for host message text rendering."""

import click
import pytest

from mcli.cli.styling import HOST_FIELD_STYLES, colorize, format_host_message, style_error
from mcli.hosts import HostMessage


def _plain(message: HostMessage) -> str:
    return click.unstyle(format_host_message(message))


class TestFormatHostMessage:
    """Text templates per operation."""

    def test_add(self) -> None:
        assert _plain(HostMessage(op="add", alias="s3")) == "Added 's3' successfully."

    def test_remove(self) -> None:
        assert _plain(HostMessage(op="remove", alias="s3")) == "Removed 's3' successfully."

    def test_list_pads_alias(self) -> None:
        line = _plain(HostMessage(op="list", alias="s3", url="https://x.io", alias_width=6))

        assert line.startswith("s3    : https://x.io")

    def test_list_without_width_uses_alias(self) -> None:
        line = _plain(HostMessage(op="list", alias="s3", url="https://x.io"))

        assert line.startswith("s3: https://x.io")

    def test_list_with_credentials(self) -> None:
        message = HostMessage(
            op="list",
            alias="s3",
            url="https://x.io",
            access_key="AKIAEXAMPLE",
            secret_key="SECRETEXAMPLE",
            api="S3v2",
            alias_width=2,
        )

        assert _plain(message) == (
            f"s3: {'https://x.io':<30}  {'AKIAEXAMPLE':<20}  {'SECRETEXAMPLE':<40}  S3v2"
        )

    def test_list_truncates_long_fields(self) -> None:
        message = HostMessage(
            op="list",
            alias="s3",
            url="https://x.io",
            access_key="K" * 20,
            secret_key="S" * 40,
            api="A" * 25,
            alias_width=2,
        )

        assert _plain(message).endswith("  " + "A" * 20)

    def test_alias_is_bold_cyan(self) -> None:
        line = format_host_message(HostMessage(op="list", alias="s3", url="https://x.io", alias_width=2))

        assert line.startswith(click.style("s3: ", fg="cyan", bold=True))


class TestColorize:
    """Role based colors."""

    @pytest.mark.parametrize("role", sorted(HOST_FIELD_STYLES))
    def test_known_roles_are_styled(self, role: str) -> None:
        assert colorize(role, "x") == click.style("x", **HOST_FIELD_STYLES[role])

    def test_unknown_role_is_plain(self) -> None:
        assert click.unstyle(colorize("Nope", "x")) == "x"

    def test_style_error_has_cross(self) -> None:
        assert click.unstyle(style_error("boom")) == "✗ boom"
