"""CLI entry point for the Automation Hub build step."""

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

from pydantic import SecretStr

from deepcrawl_test_runner.ci_context import detect_run_context
from deepcrawl_test_runner.command import USER_KEY_SECRET_ENV
from deepcrawl_test_runner.hosts.local import LocalHost
from deepcrawl_test_runner.models.config import (
    DEFAULT_DOWNLOAD_BASE_URL,
    InvocationConfig,
    RunnerSettings,
)
from deepcrawl_test_runner.models.result import StepResult
from deepcrawl_test_runner.runner import run

log = logging.getLogger("deepcrawl_test_runner")

STATUS_SYMBOLS = {
    "success": "✅",
    "failure": "❌",
    "error": "❗",
}


def exit_code_for(result: StepResult) -> int:
    """Map a step result to the exit status of this process.

    A tool failure keeps the CLI's own code where it fits in an exit status.
    """
    if result.status == "success":
        return 0
    if result.status == "failure" and result.exit_code and 0 < result.exit_code < 256:
        return result.exit_code
    return 1


def log_result(result: StepResult) -> None:
    """Log the final outcome of the step."""
    symbol = STATUS_SYMBOLS.get(result.status, "?")
    if result.message:
        log.info("%s %s: %s", symbol, result.status, result.message)
    else:
        log.info("%s %s", symbol, result.status)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Run a Deepcrawl Automation Hub test suite as a CI build step"
    )
    parser.add_argument(
        "--test-suite-id",
        required=True,
        help="Automation Hub test suite to run",
    )
    parser.add_argument(
        "--user-key-id",
        default=None,
        help="API user key id (default: $DEEPCRAWL_AUTOMATION_HUB_USER_KEY_ID)",
    )
    parser.add_argument(
        "--user-key-secret-env",
        default=None,
        metavar="NAME",
        help=(
            "Environment variable holding the API user key secret "
            "(default: $DEEPCRAWL_AUTOMATION_HUB_USER_KEY_SECRET)"
        ),
    )
    parser.add_argument(
        "--start-only",
        action="store_true",
        help="Start the build without waiting for its results",
    )
    parser.add_argument(
        "--run-id",
        default=None,
        help="Unique identity of this job run (default: detected from CI env)",
    )
    parser.add_argument(
        "--workspace",
        type=Path,
        default=None,
        help="Directory for run-scoped working directories (default: CI workspace)",
    )
    parser.add_argument(
        "--download-base-url",
        default=DEFAULT_DOWNLOAD_BASE_URL,
        help="Base URL of the CLI release downloads",
    )
    return parser.parse_args(argv)


async def main_async(args: argparse.Namespace, env: Mapping[str, str]) -> int:
    """Run the step described by ``args`` and return the exit status."""
    context = detect_run_context(env)
    run_id = args.run_id or (context.run_id if context else None)
    if not run_id:
        log.error("No run identity given and none found in the CI environment")
        return 2

    workspace = args.workspace or (context.workspace if context else None)
    if context:
        log.info("Detected CI: %s (run %s)", context.ci, context.run_id)

    secret = None
    if args.user_key_secret_env:
        secret = env.get(args.user_key_secret_env)
        if not secret:
            log.warning(
                "$%s is unset or empty, falling back to $%s",
                args.user_key_secret_env,
                USER_KEY_SECRET_ENV,
            )

    try:
        config = InvocationConfig(
            test_suite_id=args.test_suite_id,
            user_key_id=args.user_key_id,
            user_key_secret=SecretStr(secret) if secret else None,
            start_only=args.start_only,
        )
        settings = RunnerSettings(download_base_url=args.download_base_url)
        result = await run(
            config,
            env,
            run_id,
            LocalHost(),
            workspace=workspace,
            settings=settings,
        )
    except ValueError as e:
        log.error("Invalid configuration: %s", e)
        return 2

    log_result(result)
    return exit_code_for(result)


def main() -> None:
    """CLI entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    sys.exit(asyncio.run(main_async(args, os.environ)))


if __name__ == "__main__":  # pragma: no cover
    main()
