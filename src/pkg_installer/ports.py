"""Protocols for the installer's external collaborators."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, Sequence

if TYPE_CHECKING:
    from pkg_installer.runner import ProcessOutcome


class ProcessRunner(Protocol):
    async def run(self, args: Sequence[str], *, cwd: Path) -> ProcessOutcome: ...


class Logger(Protocol):
    """Minimal logger protocol accepted by the installer."""

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


__all__ = ["Logger", "ProcessRunner"]
