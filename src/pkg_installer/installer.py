"""Package manager install wrapper."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from pkg_installer.commands import build_install_args, build_install_command
from pkg_installer.config import InstallerConfig
from pkg_installer.errors import (
    ConfigurationError,
    ExecutableNotFoundError,
    ProcessExecutionError,
)
from pkg_installer.models import InstallRequest, PackageManager
from pkg_installer.ports import Logger, ProcessRunner
from pkg_installer.runner import AsyncioProcessRunner

logger = logging.getLogger(__name__)


class PackageInstaller:
    """Install packages with npm, yarn, pnpm or bun.

    Each ``install`` call spawns at most one child process through the
    injected runner and either returns ``None`` or raises. Nothing is retried.
    """

    def __init__(
        self,
        runner: Optional[ProcessRunner] = None,
        config: Optional[InstallerConfig] = None,
        log: Optional[Logger] = None,
    ):
        """Initialize the installer.

        Args:
            runner: Process execution capability (default: AsyncioProcessRunner)
            config: Installer settings (default: read from the environment)
            log: Logger to report progress to (default: module logger)
        """
        self.runner = runner or AsyncioProcessRunner()
        self.config = config or InstallerConfig()
        self.log = log or logger

    def build_args(self, request: InstallRequest) -> list[str]:
        """Return the argument list ``install`` would run, without running it."""
        return build_install_args(request)

    async def install(self, request: InstallRequest) -> None:
        """Run the install command described by ``request``.

        Args:
            request: What to install, where, and with which package manager

        Raises:
            ConfigurationError: Unsupported package manager or missing project
                directory. No process is spawned.
            ExecutableNotFoundError: The package manager is not installed.
            ProcessExecutionError: The package manager exited non-zero.
        """
        manager = PackageManager.from_identifier(request.package_manager)

        project_dir = Path(request.project_dir)
        if not project_dir.is_dir():
            raise ConfigurationError(f"Project directory does not exist: {project_dir}")

        if not request.packages and self.config.skip_empty_install:
            self.log.info(f"No packages requested for {manager.value}, skipping install")
            return

        args = build_install_args(request)
        command = build_install_command(request)

        self.log.info(f"Running '{command}' in {project_dir}")
        try:
            outcome = await self.runner.run(args, cwd=project_dir)
        except ExecutableNotFoundError:
            self.log.error(f"{manager.value} is not installed or not on PATH")
            raise

        if outcome.stdout:
            emit = self.log.info if self.config.log_output else self.log.debug
            emit(f"{manager.value} output:\n{outcome.stdout}")

        if outcome.return_code != 0:
            diagnostics = outcome.stderr or outcome.stdout
            self.log.error(f"'{command}' failed (exit {outcome.return_code})")
            raise ProcessExecutionError(
                f"{manager.value} exited with status {outcome.return_code}",
                command=args,
                exit_code=outcome.return_code,
                stderr=diagnostics,
            )

        self.log.info(
            f"Installed {len(request.packages)} package(s) with {manager.value} "
            f"in {outcome.duration_sec:.1f}s"
        )


async def run_pkg_manager_install(
    *,
    package_manager: PackageManager | str,
    dev_mode: bool,
    project_dir: Path | str,
    packages: Iterable[str],
) -> None:
    """Install ``packages`` with a default ``PackageInstaller``."""
    request = InstallRequest(
        package_manager=package_manager,
        dev_mode=dev_mode,
        project_dir=Path(project_dir),
        packages=tuple(packages),
    )
    await PackageInstaller().install(request)


__all__ = ["PackageInstaller", "run_pkg_manager_install"]
