"""Shared file utilities for mcli.

Provides common utilities used by the config store and history logging:
- get_app_dir: OS-appropriate application directory
- set_secure_permissions: Owner-only file/directory permissions
- write_json_atomic: Write a JSON document via temp file + rename
"""

from __future__ import annotations

__all__ = [
    "get_app_dir",
    "set_secure_permissions",
    "write_json_atomic",
]

import json
import os
import sys
import tempfile
from pathlib import Path
from typing import Any

import click

from mcli.constants import APP_NAME


def get_app_dir() -> Path:
    """Get the OS-appropriate application directory.

    Uses click.get_app_dir() which returns:
    - macOS: ~/Library/Application Support/mcli
    - Linux: ~/.config/mcli (XDG compliant)
    - Windows: C:\\Users\\<user>\\AppData\\Roaming\\mcli

    Returns:
        Path to the application directory.
    """
    return Path(click.get_app_dir(APP_NAME))


def set_secure_permissions(path: Path, *, is_directory: bool = False) -> None:
    """Set secure permissions on file or directory.

    Sets permissions to restrict access to owner only:
    - Directory: 0o700 (rwx------)
    - File: 0o600 (rw-------)

    Does nothing on Windows. Silently ignores permission errors
    (some systems don't allow permission changes).

    Args:
        path: Path to file or directory.
        is_directory: If True, use directory permissions (0o700).
    """
    if sys.platform == "win32":
        return

    try:
        mode = 0o700 if is_directory else 0o600
        path.chmod(mode)
    except OSError:
        pass  # Permission changes might fail on some systems


def write_json_atomic(path: Path, data: dict[str, Any]) -> None:
    """Write data as pretty JSON, replacing path atomically.

    The parent directory is created (owner-only) if missing. Content goes to
    a temp file in the same directory which is then renamed over path, so a
    failed write leaves any existing file untouched.

    Args:
        path: Destination file.
        data: JSON-serializable mapping.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        set_secure_permissions(path.parent, is_directory=True)

    content = json.dumps(data, indent=2) + "\n"  # Trailing newline

    # Same directory ensures rename is atomic (same filesystem)
    fd, temp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f".{path.stem}_",
        suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())

        # Secure permissions before the file becomes visible under its name
        set_secure_permissions(Path(temp_path))

        os.replace(temp_path, path)

    except Exception:
        # Clean up temp file on failure
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise
