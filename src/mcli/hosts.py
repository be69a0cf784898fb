"""Host alias operations: add, remove, list.

Each operation takes an explicit ConfigStore, validates its input before
touching the store, and returns HostMessage results for the command layer
to render. Load/save failures surface as ConfigurationError.
"""

from __future__ import annotations

__all__ = [
    "HostMessage",
    "HostOperation",
    "add_host",
    "list_hosts",
    "remove_host",
    "validate_alias",
]

import json
import logging
from typing import Any, Literal

from pydantic import BaseModel, Field

from mcli.config import ConfigStore, HostConfig
from mcli.constants import API_SIGNATURES, APP_NAME
from mcli.exceptions import InvalidArgumentError
from mcli.utils.history_logging import log_host_added, log_host_removed
from mcli.utils.validation import (
    is_valid_access_key,
    is_valid_alias,
    is_valid_api,
    is_valid_host_url,
    is_valid_secret_key,
    normalize_api,
)

_logger = logging.getLogger(f"{APP_NAME}.hosts")

HostOperation = Literal["add", "remove", "list"]

# Keys dropped from JSON output when empty
_OMIT_EMPTY_JSON_KEYS = ("accessKey", "secretKey", "api")


class HostMessage(BaseModel):
    """Result of a host operation, one per affected or listed alias.

    Attributes:
        op: Operation that produced the message (selects the text template).
        alias: Host alias.
        url: Endpoint URL ("" for remove).
        access_key: Access key, may be empty.
        secret_key: Secret key, may be empty.
        api: Signature version, may be empty.
        alias_width: Column width for the alias in list output.
    """

    op: HostOperation
    alias: str
    url: str = Field(default="", serialization_alias="URL")
    access_key: str = Field(default="", serialization_alias="accessKey")
    secret_key: str = Field(default="", serialization_alias="secretKey")
    api: str = ""
    alias_width: int = 0

    @property
    def display_alias(self) -> str:
        """Alias padded and truncated to alias_width (unchanged when width is 0)."""
        if not self.alias_width:
            return self.alias
        return f"{self.alias:<{self.alias_width}.{self.alias_width}}"

    def to_dict(self) -> dict[str, Any]:
        """JSON form: status first, presentation-only fields and empty keys dropped.

        list entries carry the aligned alias, same as the text rendering.
        """
        data: dict[str, Any] = {"status": "success"}
        data.update(self.model_dump(by_alias=True, exclude={"op", "alias_width"}))
        data["alias"] = self.display_alias
        for key in _OMIT_EMPTY_JSON_KEYS:
            if not data[key]:
                del data[key]
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict())


def validate_alias(alias: str) -> None:
    """Raise InvalidArgumentError unless alias is valid."""
    if not is_valid_alias(alias):
        raise InvalidArgumentError(f"Invalid alias '{alias}'.", value=alias)


def _validate_host_fields(url: str, access_key: str, secret_key: str, api: str) -> None:
    if not is_valid_host_url(url):
        raise InvalidArgumentError(f"Invalid URL '{url}'.", value=url)
    if not is_valid_access_key(access_key):
        raise InvalidArgumentError(f"Invalid access key '{access_key}'.", value=access_key)
    if not is_valid_secret_key(secret_key):
        raise InvalidArgumentError(f"Invalid secret key '{secret_key}'.", value=secret_key)
    # Empty means "use the default signature"
    if api and not is_valid_api(api):
        valid = ", ".join(API_SIGNATURES)
        raise InvalidArgumentError(
            f"Unrecognized API signature '{api}'. Valid options are '[{valid}]'.",
            value=api,
        )


def add_host(
    store: ConfigStore,
    alias: str,
    url: str,
    access_key: str = "",
    secret_key: str = "",
    api: str = "",
) -> HostMessage:
    """Add or overwrite a host entry.

    All fields are validated before the config is loaded, so invalid input
    never modifies the stored document. An existing alias is replaced
    without warning.

    Args:
        store: Config store to update.
        alias: Host alias.
        url: Endpoint URL.
        access_key: Access key ("" for anonymous).
        secret_key: Secret key ("" for anonymous).
        api: Signature version; "" defaults to S3v4.

    Returns:
        HostMessage describing the stored entry.

    Raises:
        InvalidArgumentError: If any field is invalid.
        ConfigurationError: If the config cannot be loaded or saved.
    """
    validate_alias(alias)
    _validate_host_fields(url, access_key, secret_key, api)

    host = HostConfig(url=url, access_key=access_key, secret_key=secret_key, api=normalize_api(api))

    config = store.load()
    replaced = alias in config.hosts
    config.hosts[alias] = host
    store.save(config)

    _logger.debug(
        {
            "event": "host_added",
            "message": f"Host '{alias}' {'replaced' if replaced else 'added'}",
            "details": {"alias": alias, "url": url, "api": host.api},
        }
    )
    log_host_added(store.path, alias, host, replaced=replaced)

    return HostMessage(
        op="add",
        alias=alias,
        url=host.url,
        access_key=host.access_key,
        secret_key=host.secret_key,
        api=host.api,
    )


def remove_host(store: ConfigStore, alias: str) -> HostMessage:
    """Remove a host entry.

    Removing an alias that is not configured is not an error; the document
    is saved unchanged.

    Args:
        store: Config store to update.
        alias: Host alias.

    Returns:
        HostMessage for the removed alias.

    Raises:
        InvalidArgumentError: If alias is invalid.
        ConfigurationError: If the config cannot be loaded or saved.
    """
    validate_alias(alias)

    config = store.load()
    existed = config.hosts.pop(alias, None) is not None
    store.save(config)

    _logger.debug(
        {
            "event": "host_removed",
            "message": f"Host '{alias}' removed" if existed else f"Host '{alias}' was not configured",
            "details": {"alias": alias, "existed": existed},
        }
    )
    log_host_removed(store.path, alias, existed=existed)

    return HostMessage(op="remove", alias=alias)


def list_hosts(store: ConfigStore) -> list[HostMessage]:
    """List configured hosts sorted by alias.

    Every message carries alias_width, the length of the longest alias,
    so text and JSON output carry an aligned alias column.

    Args:
        store: Config store to read.

    Returns:
        One HostMessage per host, in lexicographic alias order.

    Raises:
        ConfigurationError: If the config cannot be loaded.
    """
    config = store.load()
    width = max((len(alias) for alias in config.hosts), default=0)

    return [
        HostMessage(
            op="list",
            alias=alias,
            url=host.url,
            access_key=host.access_key,
            secret_key=host.secret_key,
            api=host.api,
            alias_width=width,
        )
        for alias, host in sorted(config.hosts.items(), key=lambda item: item[0])
    ]
