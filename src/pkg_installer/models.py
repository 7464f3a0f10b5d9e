from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from pkg_installer.errors import ConfigurationError


class PackageManager(str, Enum):
    """Supported JavaScript package managers."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    BUN = "bun"

    @classmethod
    def from_identifier(cls, value: PackageManager | str) -> PackageManager:
        """Resolve a raw identifier against the supported set.

        Raises:
            ConfigurationError: If ``value`` is not a supported package manager.
        """

        try:
            return cls(value)
        except ValueError:
            supported = ", ".join(m.value for m in cls)
            raise ConfigurationError(
                f"Unsupported package manager: {value!r} (expected one of: {supported})"
            ) from None

    @property
    def install_verb(self) -> str:
        # yarn adds new dependencies with `add`; `yarn install` only syncs the lockfile
        return "add" if self is PackageManager.YARN else "install"


class InstallRequest(BaseModel):
    """A single install invocation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    package_manager: PackageManager | str = Field(
        description="Package manager identifier, validated when the request is executed"
    )
    dev_mode: bool = Field(default=False, description="Install as development dependencies")
    project_dir: Path = Field(description="Existing directory the command runs in")
    packages: tuple[str, ...] = Field(
        default=(), description="Package specs in install order (e.g. 'zod@3.22.0')"
    )


__all__ = ["InstallRequest", "PackageManager"]
