"""Fixtures for integration tests."""

import stat
from pathlib import Path
from typing import Protocol

import pytest

from deepcrawl_test_runner.testing.scripts import fake_cli_source


class WriteScriptFn(Protocol):
    """Protocol for fake CLI creation function."""

    def __call__(self, path: Path, body: str) -> Path:
        """Write an executable script and return its path."""


@pytest.fixture
def write_script() -> WriteScriptFn:
    """Return a function writing an executable Python script to a path."""

    def _write(path: Path, body: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(fake_cli_source(body))
        path.chmod(path.stat().st_mode | stat.S_IXUSR)
        return path

    return _write
