"""Unit tests for the root command and its global options."""

import json
import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from mcli import __version__
from mcli.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo --debug handlers between tests."""
    yield
    logger = logging.getLogger("mcli")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


class TestVersion:
    """Tests for --version flag."""

    def test_version_flag_shows_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert result.output.strip() == f"mcli {__version__}"


class TestHelp:
    """Tests for help output."""

    def test_no_command_shows_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "config" in result.output

    def test_short_help_option(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["-h"])

        assert result.exit_code == 0
        assert "--config-dir" in result.output


class TestConfigDir:
    """Config directory selection."""

    def test_env_var(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(
            cli,
            ["config", "host", "add", "s3", "https://s3.amazonaws.com", "", ""],
            env={"MCLI_CONFIG_DIR": str(tmp_path)},
        )

        assert result.exit_code == 0, result.output
        assert "s3" in json.loads((tmp_path / "config.json").read_text())["hosts"]

    def test_option_overrides_env_var(self, runner: CliRunner, tmp_path: Path) -> None:
        option_dir = tmp_path / "option"
        env_dir = tmp_path / "env"

        result = runner.invoke(
            cli,
            ["-C", str(option_dir), "config", "host", "add", "s3", "https://s3.amazonaws.com", "", ""],
            env={"MCLI_CONFIG_DIR": str(env_dir)},
        )

        assert result.exit_code == 0, result.output
        assert (option_dir / "config.json").exists()
        assert not env_dir.exists()

    def test_history_written_beside_config(self, runner: CliRunner, tmp_path: Path) -> None:
        runner.invoke(cli, ["-C", str(tmp_path), "config", "host", "add", "s3", "https://x.io", "", ""])

        event = json.loads((tmp_path / "host_history.jsonl").read_text().splitlines()[0])

        assert event["event"] == "host_added"
        assert event["config_path"] == str(tmp_path / "config.json")


class TestDebug:
    """--debug logging."""

    def test_debug_logs_to_stderr(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["--debug", "-C", str(tmp_path), "config", "host", "list"])

        assert result.exit_code == 0
        assert '"event": "config_not_found"' in result.output

    def test_silent_without_debug(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["--json", "-C", str(tmp_path), "config", "host", "list"])

        assert result.exit_code == 0
        assert result.output == ""
