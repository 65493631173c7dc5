"""Build the argument vector for the CLI."""

from collections.abc import Mapping, Sequence

from pydantic import SecretStr

from deepcrawl_test_runner.models.config import InvocationConfig
from deepcrawl_test_runner.platforms import Platform

USER_KEY_ID_ENV = "DEEPCRAWL_AUTOMATION_HUB_USER_KEY_ID"
USER_KEY_SECRET_ENV = "DEEPCRAWL_AUTOMATION_HUB_USER_KEY_SECRET"

SECRET_FLAG = "--userKeySecret="
REDACTED = "****"


def resolve_credential(
    configured: str | SecretStr | None, env: Mapping[str, str], env_key: str
) -> str:
    """Pick the configured value, else the environment variable, else ``""``."""
    if isinstance(configured, SecretStr):
        configured = configured.get_secret_value()
    if configured:
        return configured
    return env.get(env_key, "")


def executable_argument(platform: Platform) -> str:
    """Return the executable relative to the directory the CLI is launched in."""
    if platform.needs_path_prefix:
        return f"./{platform.filename}"
    return platform.filename


def build_command(
    platform: Platform,
    config: InvocationConfig,
    env: Mapping[str, str],
    ci_build_id: str,
) -> list[str]:
    """Assemble the CLI invocation.

    The secret is only turned into plain text here, as the vector is built.

    Args:
        platform: Resolved host platform
        config: Job configuration
        env: Job environment used for credential fallback
        ci_build_id: Identity of the job run

    Returns:
        Executable followed by exactly five ``--name=value`` flags

    """
    user_key_id = resolve_credential(config.user_key_id, env, USER_KEY_ID_ENV)
    user_key_secret = resolve_credential(
        config.user_key_secret, env, USER_KEY_SECRET_ENV
    )
    return [
        executable_argument(platform),
        f"--testSuiteId={config.test_suite_id}",
        f"--userKeyId={user_key_id}",
        f"{SECRET_FLAG}{user_key_secret}",
        f"--ciBuildId={ci_build_id}",
        f"--startOnly={str(config.start_only).lower()}",
    ]


def redact_command(command: Sequence[str]) -> list[str]:
    """Return a copy of ``command`` that is safe to log."""
    return [
        f"{SECRET_FLAG}{REDACTED}" if arg.startswith(SECRET_FLAG) else arg
        for arg in command
    ]
