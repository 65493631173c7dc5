"""Hosts the build step can run against."""

from deepcrawl_test_runner.hosts.base import Host, ShellFamily
from deepcrawl_test_runner.hosts.local import LocalHost

__all__ = ["Host", "LocalHost", "ShellFamily"]
