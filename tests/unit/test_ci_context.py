"""Tests for CI run context detection."""

from pathlib import Path

import pytest

from deepcrawl_test_runner.ci_context import RunContext, detect_run_context


@pytest.mark.parametrize(
    ("env", "expected"),
    [
        (
            {"BUILD_TAG": "jenkins-site-tests-42", "WORKSPACE": "/var/jenkins/ws"},
            RunContext(
                ci="jenkins",
                run_id="jenkins-site-tests-42",
                workspace=Path("/var/jenkins/ws"),
            ),
        ),
        (
            {
                "GITHUB_RUN_ID": "9876",
                "GITHUB_RUN_ATTEMPT": "2",
                "GITHUB_WORKSPACE": "/home/runner/work/repo",
            },
            RunContext(
                ci="github-actions",
                run_id="9876-2",
                workspace=Path("/home/runner/work/repo"),
            ),
        ),
        (
            {"CI_JOB_ID": "555", "CI_PROJECT_DIR": "/builds/group/project"},
            RunContext(
                ci="gitlab-ci", run_id="555", workspace=Path("/builds/group/project")
            ),
        ),
        (
            {"BUILD_BUILDID": "101", "SYSTEM_JOBATTEMPT": "1"},
            RunContext(ci="azure-devops", run_id="101-1"),
        ),
        (
            {"BITBUCKET_BUILD_NUMBER": "12", "BITBUCKET_CLONE_DIR": "/opt/atlassian"},
            RunContext(ci="bitbucket", run_id="12", workspace=Path("/opt/atlassian")),
        ),
    ],
)
def test_detects_ci(env: dict[str, str], expected: RunContext) -> None:
    """Reads run identity and workspace from each supported CI system."""
    assert detect_run_context(env) == expected


def test_returns_none_outside_ci() -> None:
    """Returns None when no CI variables are set."""
    assert detect_run_context({"HOME": "/root"}) is None


def test_ignores_attempt_without_run_id() -> None:
    """An attempt number alone does not identify a run."""
    assert detect_run_context({"GITHUB_RUN_ATTEMPT": "1"}) is None


def test_ignores_empty_values() -> None:
    """Empty variables are treated as unset."""
    assert detect_run_context({"BUILD_TAG": "", "CI_JOB_ID": "7"}) == RunContext(
        ci="gitlab-ci", run_id="7"
    )
