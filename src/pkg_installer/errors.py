"""Exception hierarchy for package installation."""

from __future__ import annotations

from typing import Sequence


class InstallError(RuntimeError):
    """Base class for every failure raised by the installer."""


class ConfigurationError(InstallError):
    """The install request cannot be executed as given.

    Raised before any process is spawned (unsupported package manager,
    missing project directory).
    """


class ProcessExecutionError(InstallError):
    """The package manager process failed.

    Attributes:
        command: Argument list that was (or would have been) executed
        exit_code: Process exit status, ``None`` if the process never ran
        stderr: Captured diagnostic output, verbatim
    """

    def __init__(
        self,
        message: str,
        *,
        command: Sequence[str] = (),
        exit_code: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = tuple(command)
        self.exit_code = exit_code
        self.stderr = stderr


class ExecutableNotFoundError(ProcessExecutionError):
    """The package manager executable is not available on this host."""

    def __init__(self, executable: str, *, command: Sequence[str] = ()) -> None:
        super().__init__(
            f"Executable not found: {executable}",
            command=command,
            exit_code=None,
        )
        self.executable = executable


__all__ = [
    "ConfigurationError",
    "ExecutableNotFoundError",
    "InstallError",
    "ProcessExecutionError",
]
