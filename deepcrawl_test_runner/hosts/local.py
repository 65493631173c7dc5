"""Host implementation for the machine the runner itself is running on."""

import asyncio
import os
import sys
from dataclasses import dataclass, field
from typing import TextIO

from deepcrawl_test_runner.hosts.base import Host, ShellFamily


@dataclass(kw_only=True)
class LocalHost(Host):
    """Local machine, logging tool output to a text stream."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)

    @property
    def shell_family(self) -> ShellFamily:
        """Map ``os.name`` to a shell family."""
        return "posix" if os.name == "posix" else "windows"

    async def identify(self) -> str:
        """Return the output of ``uname``."""
        process = await asyncio.create_subprocess_exec(
            "uname",
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        stdout, stderr = await process.communicate()

        if process.returncode != 0:
            raise OSError(f"uname failed: {stderr.decode().strip()}")

        return stdout.decode().strip()

    def log(self, line: str) -> None:
        """Write the line and flush so output shows up live in the job log."""
        print(line, file=self.stream, flush=True)
