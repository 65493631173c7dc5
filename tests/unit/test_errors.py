"""Tests for the error taxonomy."""

import pytest

from deepcrawl_test_runner.errors import (
    LaunchError,
    ProvisioningError,
    StepError,
    ToolExitError,
    UnsupportedPlatformError,
)


@pytest.mark.parametrize(
    "error_cls", [UnsupportedPlatformError, ProvisioningError, LaunchError]
)
def test_infrastructure_errors_are_step_errors(error_cls: type[Exception]) -> None:
    """Platform, download and launch problems share the StepError base."""
    assert issubclass(error_cls, StepError)


def test_tool_exit_is_not_step_error() -> None:
    """A failure reported by the CLI is distinguishable from infrastructure errors."""
    assert not issubclass(ToolExitError, StepError)


@pytest.mark.parametrize("exit_code", [1, 2, 137, 255, -9])
def test_tool_exit_message_contains_code(exit_code: int) -> None:
    """The message embeds the exit code in quotes."""
    error = ToolExitError(exit_code)

    assert error.exit_code == exit_code
    assert f"'{exit_code}'" in str(error)
    assert str(error) == (
        f"Deepcrawl Automation Hub CLI exited with code '{exit_code}'."
    )
