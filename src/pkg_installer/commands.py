"""Install command construction.

Commands are built as argument lists and handed to the process runner
unchanged, so package names are never re-parsed by a shell.
"""

from __future__ import annotations

from pkg_installer.models import InstallRequest, PackageManager

DEV_FLAG = "-D"


def build_install_args(request: InstallRequest) -> list[str]:
    """Build the argument list for ``request``.

    Layout: ``<manager> <verb> [-D] <packages...>``

    Raises:
        ConfigurationError: If the request names an unsupported package manager.
    """
    manager = PackageManager.from_identifier(request.package_manager)

    args = [manager.value, manager.install_verb]
    if request.dev_mode:
        args.append(DEV_FLAG)
    args.extend(request.packages)
    return args


def build_install_command(request: InstallRequest) -> str:
    """Render ``request`` as a flat command line for logs and error messages.

    Keeps the historic ``"<manager> <verb> <flag> <packages>"`` shape, so a
    non-dev request leaves an empty flag slot (``"npm install  zod"``).
    Never executed.
    """
    manager = PackageManager.from_identifier(request.package_manager)

    flag = DEV_FLAG if request.dev_mode else ""
    return f"{manager.value} {manager.install_verb} {flag} {' '.join(request.packages)}"


__all__ = ["DEV_FLAG", "build_install_args", "build_install_command"]
