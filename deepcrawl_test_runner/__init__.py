"""Run Deepcrawl Automation Hub test suites from a CI job step."""

from deepcrawl_test_runner.models.config import InvocationConfig, RunnerSettings
from deepcrawl_test_runner.models.result import StepResult
from deepcrawl_test_runner.runner import run

__all__ = ["InvocationConfig", "RunnerSettings", "StepResult", "run"]
