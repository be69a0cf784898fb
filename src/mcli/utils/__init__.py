"""Utility modules for mcli.

- file_helpers: app directory, secure permissions, atomic JSON writes
- validation: host alias, URL, credential and API validators
- logging: JSONL formatter and logger setup

Import directly from submodules:
    from mcli.utils.validation import is_valid_alias
"""

__all__: list[str] = []  # Direct submodule imports required (see docstring)
