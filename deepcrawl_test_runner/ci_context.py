"""Detect the job run identity from CI environment variables."""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, kw_only=True)
class CIEnvironment:
    """Environment variable names one CI system uses for run identity."""

    name: str
    run_id_keys: tuple[str, ...]
    workspace_key: str


@dataclass(frozen=True, kw_only=True)
class RunContext:
    """Identity and workspace of the current job run."""

    ci: str
    run_id: str
    workspace: Path | None = None


CI_ENVIRONMENTS = (
    CIEnvironment(
        name="jenkins", run_id_keys=("BUILD_TAG",), workspace_key="WORKSPACE"
    ),
    CIEnvironment(
        name="github-actions",
        run_id_keys=("GITHUB_RUN_ID", "GITHUB_RUN_ATTEMPT"),
        workspace_key="GITHUB_WORKSPACE",
    ),
    CIEnvironment(
        name="gitlab-ci", run_id_keys=("CI_JOB_ID",), workspace_key="CI_PROJECT_DIR"
    ),
    CIEnvironment(
        name="azure-devops",
        run_id_keys=("BUILD_BUILDID", "SYSTEM_JOBATTEMPT"),
        workspace_key="BUILD_SOURCESDIRECTORY",
    ),
    CIEnvironment(
        name="bitbucket",
        run_id_keys=("BITBUCKET_BUILD_NUMBER",),
        workspace_key="BITBUCKET_CLONE_DIR",
    ),
)


def detect_run_context(env: Mapping[str, str]) -> RunContext | None:
    """Return the run context of the first CI system found in ``env``.

    The first key of a CI system must be set for it to match; further keys
    (such as retry attempts) are appended to the run id with ``-`` when set.
    """
    for ci in CI_ENVIRONMENTS:
        primary, *extra = ci.run_id_keys
        if not env.get(primary):
            continue
        parts = [env[primary], *(env[key] for key in extra if env.get(key))]
        workspace = env.get(ci.workspace_key)
        return RunContext(
            ci=ci.name,
            run_id="-".join(parts),
            workspace=Path(workspace) if workspace else None,
        )
    return None
