"""Location of the released CLI executable for each platform."""

import re
from dataclasses import dataclass

from deepcrawl_test_runner.models.config import DEFAULT_DOWNLOAD_BASE_URL
from deepcrawl_test_runner.platforms import Platform

CLI_VERSION = "1.1.2"
DOWNLOAD_URL_TEMPLATE = "{base_url}/v{version}/{filename}"

_DOWNLOAD_URL_PATTERN = re.compile(
    r"^(?P<base_url>.+)/v(?P<version>[^/]+)/(?P<filename>[^/]+)$"
)


@dataclass(frozen=True, kw_only=True)
class ArtifactReference:
    """The CLI release asset to download for one invocation."""

    version: str
    platform: Platform
    filename: str
    download_url: str

    @classmethod
    def for_platform(
        cls,
        platform: Platform,
        base_url: str = DEFAULT_DOWNLOAD_BASE_URL,
        version: str = CLI_VERSION,
    ) -> "ArtifactReference":
        """Build the reference for the given platform."""
        filename = platform.filename
        return cls(
            version=version,
            platform=platform,
            filename=filename,
            download_url=build_download_url(base_url, version, filename),
        )


def build_download_url(base_url: str, version: str, filename: str) -> str:
    """Substitute version and filename into the download URL template."""
    return DOWNLOAD_URL_TEMPLATE.format(
        base_url=base_url.rstrip("/"), version=version, filename=filename
    )


def parse_download_url(url: str) -> tuple[str, str]:
    """Recover ``(version, filename)`` from a download URL.

    Raises:
        ValueError: If the URL does not follow the download URL template

    """
    match = _DOWNLOAD_URL_PATTERN.match(url)
    if match is None:
        raise ValueError(f"Not a CLI download URL: {url}")
    return match["version"], match["filename"]
