"""Shared fixtures for mcli tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from mcli.config import McConfig
from mcli.exceptions import ConfigurationError


class MemoryConfigStore:
    """ConfigStore that keeps the document in memory.

    ``path`` only locates the history log; the config itself is never
    written to disk.
    """

    def __init__(self, path: Path, config: McConfig | None = None) -> None:
        self.path = path
        self.config = config if config is not None else McConfig()
        self.save_count = 0

    def load(self) -> McConfig:
        return self.config.model_copy(deep=True)

    def save(self, config: McConfig) -> None:
        self.config = config.model_copy(deep=True)
        self.save_count += 1


class BrokenConfigStore:
    """ConfigStore whose load or save always fails."""

    def __init__(self, path: Path, *, fail_on: str = "load") -> None:
        self.path = path
        self.fail_on = fail_on

    def load(self) -> McConfig:
        if self.fail_on == "load":
            raise ConfigurationError(f"Unable to load config '{self.path}'.", path=self.path)
        return McConfig()

    def save(self, config: McConfig) -> None:
        raise ConfigurationError(f"Unable to update hosts in config '{self.path}'.", path=self.path)


@pytest.fixture
def memory_store(tmp_path: Path) -> MemoryConfigStore:
    """Empty in-memory store; history goes to tmp_path."""
    return MemoryConfigStore(tmp_path / "config.json")


@pytest.fixture
def broken_store(tmp_path: Path):
    """Factory for stores that fail on 'load' or 'save'."""

    def _make(fail_on: str = "load") -> BrokenConfigStore:
        return BrokenConfigStore(tmp_path / "config.json", fail_on=fail_on)

    return _make
