"""Resolve which platform build of the CLI the host needs."""

import logging
from enum import StrEnum

from deepcrawl_test_runner.errors import UnsupportedPlatformError
from deepcrawl_test_runner.hosts.base import Host

log = logging.getLogger(__name__)


class Platform(StrEnum):
    """Platforms the CLI is released for."""

    LINUX = "linux"
    MACOS = "macos"
    WINDOWS = "windows"

    @property
    def filename(self) -> str:
        """Release asset name for this platform."""
        return ARTIFACT_FILENAMES[self]

    @property
    def needs_path_prefix(self) -> bool:
        """Whether a file in the working directory must be invoked as ``./name``."""
        return self is not Platform.WINDOWS

    @property
    def has_executable_bit(self) -> bool:
        """Whether the downloaded file must be marked executable."""
        return self is not Platform.WINDOWS


ARTIFACT_FILENAMES = {
    Platform.LINUX: "deepcrawl-test-linux",
    Platform.MACOS: "deepcrawl-test-macos",
    Platform.WINDOWS: "deepcrawl-test-win.exe",
}


async def resolve_platform(host: Host) -> Platform:
    """Determine the platform of the host that will run the CLI.

    Any POSIX system that does not identify as Darwin is treated as Linux,
    BSDs included.

    Args:
        host: Host the CLI will be launched on

    Returns:
        The resolved platform

    Raises:
        UnsupportedPlatformError: If the host does not identify itself at all
        OSError: If the identification command cannot be run

    """
    if host.shell_family != "posix":
        log.info(
            "Resolved platform: %s (shell: %s)", Platform.WINDOWS, host.shell_family
        )
        return Platform.WINDOWS

    system = (await host.identify()).strip()
    if not system:
        raise UnsupportedPlatformError("Host identification returned no system name")

    platform = Platform.MACOS if system.startswith("Darwin") else Platform.LINUX
    log.info("Resolved platform: %s (uname: %s)", platform, system)
    return platform
