"""Tests for the local host."""

import io
import os
from unittest.mock import AsyncMock, Mock, patch

import pytest

from deepcrawl_test_runner.hosts.local import LocalHost


def test_shell_family_matches_os() -> None:
    """Reports the shell family of the running interpreter."""
    expected = "posix" if os.name == "posix" else "windows"

    assert LocalHost().shell_family == expected


def test_log_writes_lines() -> None:
    """Writes each line to the stream with a newline."""
    stream = io.StringIO()
    host = LocalHost(stream=stream)

    host.log("first")
    host.log("second")

    assert stream.getvalue() == "first\nsecond\n"


@pytest.mark.skipif(os.name != "posix", reason="uname is only available on POSIX")
async def test_identify_runs_uname() -> None:
    """Returns the stripped output of uname."""
    assert await LocalHost().identify() == os.uname().sysname


async def test_identify_raises_on_failure() -> None:
    """Raises OSError when uname exits with an error."""
    process = Mock(returncode=1)
    process.communicate = AsyncMock(return_value=(b"", b"boom\n"))

    with (
        patch(
            "deepcrawl_test_runner.hosts.local.asyncio.create_subprocess_exec",
            new_callable=AsyncMock,
            return_value=process,
        ),
        pytest.raises(OSError, match="uname failed: boom"),
    ):
        await LocalHost().identify()


async def test_identify_propagates_missing_command() -> None:
    """A missing uname binary surfaces as the original OSError."""
    with (
        patch(
            "deepcrawl_test_runner.hosts.local.asyncio.create_subprocess_exec",
            new_callable=AsyncMock,
            side_effect=FileNotFoundError("uname"),
        ),
        pytest.raises(FileNotFoundError),
    ):
        await LocalHost().identify()
