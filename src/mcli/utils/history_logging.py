"""Host change history logging.

Appends host lifecycle events to host_history.jsonl next to the config file:
- host_added: alias created or overwritten via 'config host add'
- host_removed: alias removed via 'config host remove'

Credentials are never written to the history; only whether they were set.
"""

from __future__ import annotations

__all__ = [
    "get_host_history_path",
    "log_host_added",
    "log_host_removed",
]

import logging
from pathlib import Path
from typing import Any

from mcli.config import HostConfig
from mcli.constants import APP_NAME, HOST_HISTORY_FILENAME
from mcli.utils.logging.logger_setup import close_logger, setup_jsonl_logger

_HISTORY_LOGGER_NAME = f"{APP_NAME}.hosts.history"

_logger = logging.getLogger(f"{APP_NAME}.history")


def get_host_history_path(config_path: Path) -> Path:
    """Get the history file that belongs to a config file.

    Args:
        config_path: Path to config.json.

    Returns:
        Path to host_history.jsonl in the same directory.
    """
    return config_path.parent / HOST_HISTORY_FILENAME


def _log_history_event(config_path: Path, event: dict[str, Any]) -> None:
    """Append one event. Write failures are reported as warnings only.

    Runs after the config has been saved; the command result does not
    depend on it.
    """
    history_path = get_host_history_path(config_path)
    try:
        history_logger = setup_jsonl_logger(_HISTORY_LOGGER_NAME, history_path)
        history_logger.info({**event, "config_path": str(config_path)})
    except OSError as e:
        _logger.warning(
            {
                "event": "host_history_write_failed",
                "message": f"Failed to write host history: {e}",
                "error_type": type(e).__name__,
                "error_message": str(e),
                "details": {"history_path": str(history_path), "history_event": event["event"]},
            }
        )
    finally:
        # Release the file handle after every event
        close_logger(logging.getLogger(_HISTORY_LOGGER_NAME))


def log_host_added(config_path: Path, alias: str, host: HostConfig, *, replaced: bool) -> None:
    """Record a host_added event.

    Args:
        config_path: Config file that was updated.
        alias: Alias that was set.
        host: New host record.
        replaced: True if the alias already existed and was overwritten.
    """
    _log_history_event(
        config_path,
        {
            "event": "host_added",
            "alias": alias,
            "url": host.url,
            "api": host.api,
            "has_credentials": bool(host.access_key or host.secret_key),
            "replaced": replaced,
        },
    )


def log_host_removed(config_path: Path, alias: str, *, existed: bool) -> None:
    """Record a host_removed event.

    Args:
        config_path: Config file that was updated.
        alias: Alias that was removed.
        existed: False if the alias was not configured (no-op removal).
    """
    _log_history_event(
        config_path,
        {
            "event": "host_removed",
            "alias": alias,
            "existed": existed,
        },
    )
