"""Errors raised while running the build step.

``StepError`` subclasses are infrastructure problems. ``ToolExitError`` is the
CLI reporting a failed test suite and is not part of that tree.
"""

TOOL_NAME = "Deepcrawl Automation Hub CLI"


class StepError(Exception):
    """Base class for errors that prevent the CLI from running to completion."""


class UnsupportedPlatformError(StepError):
    """Raised when the host operating system cannot be mapped to an artifact."""


class ProvisioningError(StepError):
    """Raised when the CLI executable cannot be downloaded or prepared."""


class LaunchError(StepError):
    """Raised when the CLI subprocess cannot be started."""


class StreamReadError(Exception):
    """Raised by an output relay when it can no longer read its stream.

    Never escapes the relay: the error text goes to the job log instead.
    """


class ToolExitError(Exception):
    """Raised when the CLI exits with a non-zero status."""

    def __init__(self, exit_code: int) -> None:
        super().__init__(f"{TOOL_NAME} exited with code '{exit_code}'.")
        self.exit_code = exit_code
