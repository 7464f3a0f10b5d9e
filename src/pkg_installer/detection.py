"""Detect which package manager launched the current process."""

from __future__ import annotations

from pkg_installer.env import EnvMapping, get_str
from pkg_installer.models import PackageManager

USER_AGENT_VAR = "npm_config_user_agent"


def detect_package_manager(env: EnvMapping | None = None) -> PackageManager:
    """Infer the package manager from ``npm_config_user_agent``.

    npm, yarn, pnpm and bun all export the variable to scripts they run,
    e.g. ``"pnpm/8.15.0 npm/? node/v20.11.0 linux x64"``. Falls back to npm
    when the variable is missing or unrecognised.
    """
    user_agent = get_str(USER_AGENT_VAR, "", env=env).strip().lower()

    for manager in (PackageManager.YARN, PackageManager.PNPM, PackageManager.BUN):
        if user_agent.startswith(f"{manager.value}/"):
            return manager
    return PackageManager.NPM


__all__ = ["USER_AGENT_VAR", "detect_package_manager"]
