"""Abstract base class for the machine that runs the CLI."""

from abc import ABC, abstractmethod
from typing import Literal, TypeAlias

ShellFamily: TypeAlias = Literal["posix", "windows"]


class Host(ABC):
    """The node a job step executes on, as seen by the runner.

    Platform detection must happen on the node that will launch the CLI, so
    every host-specific query goes through this interface rather than the
    runner's own process.
    """

    @property
    @abstractmethod
    def shell_family(self) -> ShellFamily:
        """Return the shell family of the host."""

    @abstractmethod
    async def identify(self) -> str:
        """Run the host identification command and return its output.

        Raises:
            OSError: If the command cannot be run on the host

        """

    @abstractmethod
    def log(self, line: str) -> None:
        """Write one line to the job log."""
