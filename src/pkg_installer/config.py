from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from pkg_installer.env import get_bool

ENV_PREFIX = "PKG_INSTALLER_"


@dataclass(slots=True)
class InstallerConfig:
    """Typed configuration for the package installer."""

    # Empty package lists run the bare install verb unless this is set
    skip_empty_install: bool = field(
        default_factory=lambda: get_bool("PKG_INSTALLER_SKIP_EMPTY", False)
    )
    # Log child stdout at INFO instead of DEBUG
    log_output: bool = field(
        default_factory=lambda: get_bool("PKG_INSTALLER_LOG_OUTPUT", False)
    )

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> InstallerConfig:
        """Create a configuration instance from a mapping (defaults to os.environ).

        Keys outside the ``PKG_INSTALLER_`` namespace are ignored; unknown keys
        inside it are rejected.
        """

        if env is None:
            return cls()

        data = {k: v for k, v in env.items() if k.startswith(ENV_PREFIX)}
        config = cls(
            skip_empty_install=get_bool("PKG_INSTALLER_SKIP_EMPTY", False, env=data),
            log_output=get_bool("PKG_INSTALLER_LOG_OUTPUT", False, env=data),
        )

        unknown = sorted(set(data) - {"PKG_INSTALLER_SKIP_EMPTY", "PKG_INSTALLER_LOG_OUTPUT"})
        if unknown:
            raise ValueError(f"Unknown package installer config keys: {', '.join(unknown)}")
        return config


__all__ = ["ENV_PREFIX", "InstallerConfig"]
