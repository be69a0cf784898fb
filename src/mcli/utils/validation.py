"""Validation utilities for mcli.

Pure predicates over command-line strings. Each returns a bool and never
raises; callers turn a False result into an InvalidArgumentError that
quotes the offending value.
"""

from __future__ import annotations

__all__ = [
    "is_valid_access_key",
    "is_valid_alias",
    "is_valid_api",
    "is_valid_host_url",
    "is_valid_secret_key",
    "normalize_api",
]

import re
from urllib.parse import urlsplit

from mcli.constants import API_SIGNATURES, DEFAULT_API_SIGNATURE

# Must start with a letter; then letters, digits, hyphens, underscores
_ALIAS_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9_-]*")

# Credential formats accepted by S3-compatible services
_ACCESS_KEY_PATTERN = re.compile(r"[a-zA-Z0-9\-._~]{5,20}")
_SECRET_KEY_PATTERN = re.compile(r"[a-zA-Z0-9\-._~+/]{8,40}")

_HOST_URL_SCHEMES: frozenset[str] = frozenset({"http", "https"})

# Lowercase lookup -> canonical spelling
_API_BY_LOWER: dict[str, str] = {api.lower(): api for api in API_SIGNATURES}


def is_valid_alias(alias: str) -> bool:
    """Check if alias is usable as a host name in the config.

    Args:
        alias: Alias to validate.

    Returns:
        True if alias is non-empty, starts with a letter and contains only
        letters, digits, hyphens and underscores.
    """
    return bool(_ALIAS_PATTERN.fullmatch(alias))


def is_valid_host_url(url: str) -> bool:
    """Check if URL is an absolute HTTP or HTTPS endpoint.

    Args:
        url: URL string to validate.

    Returns:
        True if URL has an http/https scheme and a host part.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        # Raised for malformed netlocs such as unbalanced IPv6 brackets
        return False
    return parts.scheme in _HOST_URL_SCHEMES and bool(parts.netloc)


def is_valid_access_key(access_key: str) -> bool:
    """Check access key shape.

    Empty is accepted: hosts without credentials are anonymous.
    """
    if not access_key:
        return True
    return bool(_ACCESS_KEY_PATTERN.fullmatch(access_key))


def is_valid_secret_key(secret_key: str) -> bool:
    """Check secret key shape.

    Empty is accepted: hosts without credentials are anonymous.
    """
    if not secret_key:
        return True
    return bool(_SECRET_KEY_PATTERN.fullmatch(secret_key))


def is_valid_api(api: str) -> bool:
    """Check if api names a supported signature version.

    Comparison is case-insensitive. The empty string is not valid here;
    callers that allow an omitted API default it with normalize_api().

    Args:
        api: API signature string (e.g., "S3v4").

    Returns:
        True if api is one of S3v4 or S3v2.
    """
    return api.lower() in _API_BY_LOWER


def normalize_api(api: str) -> str:
    """Return the canonical spelling of an API signature.

    Args:
        api: Validated API string, or "" for the default.

    Returns:
        "S3v4" or "S3v2".

    Raises:
        ValueError: If api is non-empty and not a supported signature.
    """
    if not api:
        return DEFAULT_API_SIGNATURE
    try:
        return _API_BY_LOWER[api.lower()]
    except KeyError:
        raise ValueError(f"Unsupported API signature '{api}'") from None
