"""Tests for JSONL logging helpers."""

import json
import logging
from pathlib import Path

from mcli.utils.logging.iso_formatter import ISO8601Formatter
from mcli.utils.logging.logger_setup import close_logger, setup_debug_logging, setup_jsonl_logger


def _record(msg, *args) -> logging.LogRecord:
    return logging.LogRecord("mcli.test", logging.INFO, __file__, 1, msg, args, None)


class TestISO8601Formatter:
    """JSONL formatting."""

    def test_dict_message_is_merged(self) -> None:
        entry = json.loads(ISO8601Formatter().format(_record({"event": "x", "details": {"n": 1}})))

        assert entry["event"] == "x"
        assert entry["details"] == {"n": 1}
        assert entry["level"] == "INFO"

    def test_time_is_utc_millis(self) -> None:
        entry = json.loads(ISO8601Formatter().format(_record("plain")))

        assert entry["time"].endswith("Z")
        assert len(entry["time"]) == len("2025-12-04T10:48:37.123Z")

    def test_string_message_uses_args(self) -> None:
        entry = json.loads(ISO8601Formatter().format(_record("%s hosts", 3)))

        assert entry["message"] == "3 hosts"


class TestSetupJsonlLogger:
    """File logger setup."""

    def test_writes_jsonl(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "history.jsonl"
        logger = setup_jsonl_logger("mcli.test.history", log_file)

        logger.info({"event": "one"})
        logger.info({"event": "two"})
        close_logger(logger)

        events = [json.loads(line)["event"] for line in log_file.read_text().splitlines()]
        assert events == ["one", "two"]

    def test_retargets_on_second_call(self, tmp_path: Path) -> None:
        first = setup_jsonl_logger("mcli.test.retarget", tmp_path / "a.jsonl")
        second = setup_jsonl_logger("mcli.test.retarget", tmp_path / "b.jsonl")

        second.info({"event": "x"})
        close_logger(second)

        assert first is second
        assert (tmp_path / "a.jsonl").read_text() == ""
        assert "x" in (tmp_path / "b.jsonl").read_text()


class TestSetupDebugLogging:
    """Package logger configuration."""

    def test_enabled_sets_debug(self) -> None:
        logger = setup_debug_logging(True)
        try:
            assert logger.level == logging.DEBUG
            assert isinstance(logger.handlers[0], logging.StreamHandler)
        finally:
            close_logger(logger)

    def test_disabled_uses_null_handler(self) -> None:
        logger = setup_debug_logging(False)
        try:
            assert isinstance(logger.handlers[0], logging.NullHandler)
        finally:
            close_logger(logger)
