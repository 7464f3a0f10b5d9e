"""Asyncio child-process runner."""

from __future__ import annotations

import asyncio
import logging
import shutil
import time
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from pkg_installer.errors import ExecutableNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProcessOutcome:
    """Result of a finished child process."""

    return_code: int
    """Process exit status."""

    stdout: str = ""
    """Standard output, decoded as UTF-8."""

    stderr: str = ""
    """Standard error, decoded as UTF-8."""

    duration_sec: float = 0.0
    """Wall-clock run time in seconds."""

    @property
    def ok(self) -> bool:
        return self.return_code == 0


class AsyncioProcessRunner:
    """Run one command per call with ``asyncio.create_subprocess_exec``.

    The child inherits the parent's environment. There is no timeout: the call
    completes when the child exits or the awaiting task is cancelled, in which
    case the child is killed and reaped before ``CancelledError`` propagates.
    """

    async def run(self, args: Sequence[str], *, cwd: Path) -> ProcessOutcome:
        """Run ``args`` in ``cwd`` and wait for it to exit.

        Args:
            args: Command argument list, executable first
            cwd: Working directory for the child

        Returns:
            ProcessOutcome for any exit status.

        Raises:
            ExecutableNotFoundError: If ``args[0]`` cannot be found or launched.
        """
        if not args:
            raise ValueError("Cannot run an empty command")

        executable = shutil.which(args[0])
        if executable is None:
            raise ExecutableNotFoundError(args[0], command=args)

        start_time = time.monotonic()
        logger.debug(f"Spawning {list(args)} in {cwd}")

        try:
            process = await asyncio.create_subprocess_exec(
                executable,
                *args[1:],
                cwd=str(cwd),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise ExecutableNotFoundError(args[0], command=args) from e

        try:
            stdout, stderr = await process.communicate()
        except asyncio.CancelledError:
            logger.warning(f"Cancelled, killing {args[0]} (pid {process.pid})")
            with suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            raise

        duration = time.monotonic() - start_time

        return ProcessOutcome(
            return_code=process.returncode,
            stdout=(stdout or b"").decode("utf-8", errors="replace"),
            stderr=(stderr or b"").decode("utf-8", errors="replace"),
            duration_sec=duration,
        )


__all__ = ["AsyncioProcessRunner", "ProcessOutcome"]
