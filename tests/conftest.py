"""Shared fixtures."""

from collections.abc import Generator

import pytest
from aioresponses import aioresponses as aioresponses_cls

from deepcrawl_test_runner.testing.hosts import FakeHost


@pytest.fixture
def aioresponses() -> Generator[aioresponses_cls, None, None]:
    """Intercept all aiohttp requests."""
    with aioresponses_cls() as mocked:
        yield mocked


@pytest.fixture
def host() -> FakeHost:
    """Create a Linux host with an in-memory log."""
    return FakeHost()

