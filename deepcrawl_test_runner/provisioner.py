"""Download the CLI executable into a run-scoped directory."""

import hashlib
import logging
import re
import stat
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path

import aiohttp

from deepcrawl_test_runner.artifact import ArtifactReference
from deepcrawl_test_runner.errors import ProvisioningError
from deepcrawl_test_runner.models.config import RunnerSettings
from deepcrawl_test_runner.platforms import Platform

log = logging.getLogger(__name__)

RUN_DIRECTORY_ROOT = ".deepcrawl-test"
CHUNK_SIZE = 64 * 1024
EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH
RUN_ID_DIGEST_LENGTH = 12

_UNSAFE_PATH_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def run_directory(workspace: Path, run_id: str) -> Path:
    """Return the working directory reserved for one job run.

    The name is the run id with characters that are unsafe in a path
    component replaced by ``_``, followed by a digest of the exact run id, so
    ``my job #12`` becomes ``my_job__12-<digest>``. Ids that differ only in
    unsafe characters, whitespace or case still get separate directories.
    """
    if not run_id:
        raise ValueError(f"Invalid run identity: {run_id!r}")
    safe_id = _UNSAFE_PATH_CHARS.sub("_", run_id)
    digest = hashlib.sha256(run_id.encode()).hexdigest()[:RUN_ID_DIGEST_LENGTH]
    return workspace / RUN_DIRECTORY_ROOT / f"{safe_id}-{digest}"


@dataclass(frozen=True, kw_only=True)
class ArtifactProvisioner:
    """Fetches the CLI release asset for a platform."""

    settings: RunnerSettings
    session: aiohttp.ClientSession = field(repr=False)

    @classmethod
    @asynccontextmanager
    async def from_settings(
        cls, settings: RunnerSettings
    ) -> AsyncGenerator["ArtifactProvisioner", None]:
        """Create provisioner with managed session lifecycle."""
        timeout = aiohttp.ClientTimeout(total=settings.http_timeout)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            yield cls(settings=settings, session=session)

    async def provision(self, platform: Platform, target_dir: Path) -> Path:
        """Download the executable for ``platform`` into ``target_dir``.

        Every call downloads again and overwrites any previous file; nothing
        is reused between runs.

        Args:
            platform: Platform to fetch the executable for
            target_dir: Run-scoped directory, created if missing

        Returns:
            Path of the executable, ready to launch

        Raises:
            ProvisioningError: On any network or filesystem failure

        """
        artifact = ArtifactReference.for_platform(
            platform, base_url=self.settings.download_base_url
        )
        path = target_dir / artifact.filename

        log.info("Downloading %s to %s", artifact.download_url, path)
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ProvisioningError(f"Failed to create {target_dir}: {e}") from e

        try:
            await self._download(artifact.download_url, path)
            if platform.has_executable_bit:
                path.chmod(path.stat().st_mode | EXECUTE_BITS)
        except (aiohttp.ClientError, TimeoutError, OSError) as e:
            path.unlink(missing_ok=True)
            raise ProvisioningError(
                f"Failed to provision {artifact.download_url}: {e}"
            ) from e

        log.info("Provisioned %s (%d bytes)", path, path.stat().st_size)
        return path

    async def _download(self, url: str, path: Path) -> None:
        async with self.session.get(url) as response:
            response.raise_for_status()
            with path.open("wb") as f:
                async for chunk in response.content.iter_chunked(CHUNK_SIZE):
                    f.write(chunk)
