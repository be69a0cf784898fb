"""Logging utilities for mcli.

- iso_formatter: ISO 8601 timestamp formatting for JSONL logs
- logger_setup: Factory functions for file and stderr loggers

Import directly from submodules:
    from mcli.utils.logging.logger_setup import setup_jsonl_logger
"""

__all__: list[str] = []  # Direct submodule imports required (see docstring)
