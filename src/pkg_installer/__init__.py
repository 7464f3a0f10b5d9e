"""Async package installation for npm, yarn, pnpm and bun projects."""

from pkg_installer.config import InstallerConfig
from pkg_installer.detection import detect_package_manager
from pkg_installer.errors import (
    ConfigurationError,
    ExecutableNotFoundError,
    InstallError,
    ProcessExecutionError,
)
from pkg_installer.installer import PackageInstaller, run_pkg_manager_install
from pkg_installer.models import InstallRequest, PackageManager
from pkg_installer.runner import AsyncioProcessRunner, ProcessOutcome

__all__ = [
    "AsyncioProcessRunner",
    "ConfigurationError",
    "ExecutableNotFoundError",
    "InstallError",
    "InstallRequest",
    "InstallerConfig",
    "PackageInstaller",
    "PackageManager",
    "ProcessExecutionError",
    "ProcessOutcome",
    "detect_package_manager",
    "run_pkg_manager_install",
]
