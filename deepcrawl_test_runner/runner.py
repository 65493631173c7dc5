"""Run one Automation Hub build step from start to finish."""

import logging
from collections.abc import Mapping
from pathlib import Path

from deepcrawl_test_runner.command import build_command, redact_command
from deepcrawl_test_runner.errors import StepError, ToolExitError
from deepcrawl_test_runner.hosts.base import Host
from deepcrawl_test_runner.models.config import InvocationConfig, RunnerSettings
from deepcrawl_test_runner.models.result import StepResult
from deepcrawl_test_runner.platforms import Platform, resolve_platform
from deepcrawl_test_runner.process import run_process
from deepcrawl_test_runner.provisioner import ArtifactProvisioner, run_directory

log = logging.getLogger(__name__)


async def run(
    config: InvocationConfig,
    env: Mapping[str, str],
    run_id: str,
    host: Host,
    *,
    workspace: Path | None = None,
    settings: RunnerSettings | None = None,
) -> StepResult:
    """Provision the CLI, run it, and report the outcome.

    Args:
        config: Job configuration
        env: Job environment, used for credential fallback
        run_id: Identity of the job run; scopes the working directory and is
            passed to the CLI as ``--ciBuildId``
        host: Host to run on and log to
        workspace: Directory holding the run-scoped directories (default: cwd)
        settings: Runner settings

    Returns:
        ``success`` on exit code 0, ``failure`` on a non-zero exit code, and
        ``error`` if the CLI could not be provisioned or started

    Raises:
        ValueError: If ``run_id`` cannot name a directory

    """
    if settings is None:
        settings = RunnerSettings()
    work_dir = run_directory(workspace or Path.cwd(), run_id)

    try:
        await _run(config, env, run_id, host, work_dir, settings)
    except ToolExitError as e:
        log.error("%s", e)
        return StepResult(status="failure", message=str(e), exit_code=e.exit_code)
    except (StepError, OSError) as e:
        log.error("Build step failed: %s", e, exc_info=e)
        return StepResult(status="error", message=str(e))

    return StepResult(status="success", exit_code=0)


async def _run(
    config: InvocationConfig,
    env: Mapping[str, str],
    run_id: str,
    host: Host,
    work_dir: Path,
    settings: RunnerSettings,
) -> None:
    platform = await resolve_platform(host)

    async with ArtifactProvisioner.from_settings(settings) as provisioner:
        executable = await provisioner.provision(platform, work_dir)

    command = build_command(platform, config, env, ci_build_id=run_id)
    log.info("Running %s in %s", " ".join(redact_command(command)), work_dir)

    await run_process(
        command,
        cwd=work_dir,
        host=host,
        executable=executable if platform is Platform.WINDOWS else None,
    )
