"""Configuration document and store for mcli.

The config file holds a versioned document with the configured hosts:

    {
      "version": "8",
      "hosts": {
        "s3": {"url": "https://s3.amazonaws.com", "accessKey": "...", "secretKey": "...", "api": "S3v4"}
      }
    }

Commands never touch the file directly. They receive a ConfigStore handle
and go through load()/save(), so tests can pass an in-memory store.

Example usage:
    store = JsonConfigStore(get_config_path())
    config = store.load()
    config.hosts["s3"] = HostConfig(url="https://s3.amazonaws.com")
    store.save(config)
"""

from __future__ import annotations

__all__ = [
    "ConfigStore",
    "HostConfig",
    "JsonConfigStore",
    "McConfig",
    "get_config_dir",
    "get_config_path",
]

import json
import logging
import os
from pathlib import Path
from typing import Protocol

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mcli.constants import APP_NAME, CONFIG_DIR_ENVVAR, CONFIG_FILENAME, CONFIG_VERSION, DEFAULT_API_SIGNATURE
from mcli.exceptions import ConfigurationError
from mcli.utils.file_helpers import get_app_dir, write_json_atomic

_logger = logging.getLogger(f"{APP_NAME}.config")


class HostConfig(BaseModel):
    """One configured storage endpoint.

    Attributes:
        url: Endpoint URL (http or https).
        access_key: Access key, empty for anonymous access.
        secret_key: Secret key, empty for anonymous access.
        api: Request signature version, "S3v4" or "S3v2".
    """

    url: str
    access_key: str = Field(default="", alias="accessKey")
    secret_key: str = Field(default="", alias="secretKey")
    api: str = DEFAULT_API_SIGNATURE

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class McConfig(BaseModel):
    """The whole config document.

    Attributes:
        version: Document layout version, must equal CONFIG_VERSION.
        hosts: Alias -> host record.
    """

    version: str = CONFIG_VERSION
    hosts: dict[str, HostConfig] = Field(default_factory=dict)

    model_config = ConfigDict(extra="ignore")  # Ignore unknown fields for forward compat


class ConfigStore(Protocol):
    """Handle to wherever the config document lives."""

    path: Path

    def load(self) -> McConfig:
        """Return the current document.

        Raises:
            ConfigurationError: If the document cannot be read or is invalid.
        """
        ...

    def save(self, config: McConfig) -> None:
        """Replace the stored document with config.

        Raises:
            ConfigurationError: If the document cannot be written.
        """
        ...


def get_config_dir() -> Path:
    """Get the config directory.

    Returns:
        $MCLI_CONFIG_DIR if set, otherwise the OS application directory.
    """
    env_dir = os.environ.get(CONFIG_DIR_ENVVAR)
    if env_dir:
        return Path(env_dir).expanduser()
    return get_app_dir()


def get_config_path(config_dir: Path | None = None) -> Path:
    """Get the full path to the config file.

    Args:
        config_dir: Directory override (e.g., from --config-dir).

    Returns:
        Path to config.json in the config directory.
    """
    base = config_dir if config_dir is not None else get_config_dir()
    return base / CONFIG_FILENAME


class JsonConfigStore:
    """ConfigStore backed by a JSON file on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> McConfig:
        """Load the document from disk.

        A missing file is not an error: it yields an empty document at the
        current version, which save() will create on first write.

        Returns:
            McConfig: Parsed document.

        Raises:
            ConfigurationError: If the file is unreadable, not valid JSON,
                fails validation, or has an unsupported version.
        """
        if not self.path.exists():
            _logger.debug(
                {
                    "event": "config_not_found",
                    "message": "Config file not found, starting with empty config",
                    "details": {"config_path": str(self.path)},
                }
            )
            return McConfig()

        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigurationError(f"Invalid JSON in config file {self.path}: {e}", path=self.path) from e
        except OSError as e:
            raise ConfigurationError(f"Unable to load config '{self.path}': {e}", path=self.path) from e

        try:
            config = McConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid config in {self.path}: {e}", path=self.path) from e

        if config.version != CONFIG_VERSION:
            raise ConfigurationError(
                f"Unsupported config version '{config.version}' in {self.path} (expected '{CONFIG_VERSION}').",
                path=self.path,
            )

        _logger.debug(
            {
                "event": "config_loaded",
                "message": f"Loaded config with {len(config.hosts)} hosts",
                "details": {"config_path": str(self.path), "host_count": len(config.hosts)},
            }
        )
        return config

    def save(self, config: McConfig) -> None:
        """Write the document to disk atomically with owner-only permissions.

        Args:
            config: Document to persist.

        Raises:
            ConfigurationError: If the file cannot be written.
        """
        try:
            write_json_atomic(self.path, config.model_dump(mode="json", by_alias=True))
        except OSError as e:
            raise ConfigurationError(
                f"Unable to update hosts in config version '{config.version}' at '{self.path}': {e}",
                path=self.path,
            ) from e

        _logger.debug(
            {
                "event": "config_saved",
                "message": f"Saved config with {len(config.hosts)} hosts",
                "details": {"config_path": str(self.path), "host_count": len(config.hosts)},
            }
        )
