"""Models for step execution results."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, kw_only=True)
class ProcessResult:
    """Outcome of one CLI subprocess."""

    exit_code: int


@dataclass(frozen=True, kw_only=True)
class StepResult:
    """Result reported back to the CI job.

    ``failure`` means the CLI itself reported a failed test suite, ``error``
    means the step could not get that far (platform, download, launch).
    """

    status: Literal["success", "failure", "error"]
    message: str | None = None
    exit_code: int | None = None

    @property
    def ok(self) -> bool:
        """Whether the job step should be marked successful."""
        return self.status == "success"
