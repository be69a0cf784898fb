"""Application-wide constants for mcli.

Constants that define application behavior and the on-disk config format.
"""

__all__ = [
    # Application identity
    "APP_NAME",
    "CONFIG_DIR_ENVVAR",
    # Config document
    "CONFIG_VERSION",
    "CONFIG_FILENAME",
    "HOST_HISTORY_FILENAME",
    # API signatures
    "API_SIGNATURES",
    "DEFAULT_API_SIGNATURE",
]

# =============================================================================
# Application identity
# =============================================================================

APP_NAME = "mcli"

# Environment variable overriding the config directory (same as --config-dir)
CONFIG_DIR_ENVVAR = "MCLI_CONFIG_DIR"

# =============================================================================
# Config document
# =============================================================================

# Version of the config document layout. Documents with any other version
# are rejected on load.
CONFIG_VERSION = "8"

CONFIG_FILENAME = "config.json"

# JSONL change log of host add/remove events, kept next to the config file
HOST_HISTORY_FILENAME = "host_history.jsonl"

# =============================================================================
# API signatures
# =============================================================================

# Canonical spelling of each supported request signing scheme
API_SIGNATURES: tuple[str, ...] = ("S3v4", "S3v2")

DEFAULT_API_SIGNATURE = "S3v4"
