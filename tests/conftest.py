"""Shared pytest fixtures for pkg-installer tests."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from pkg_installer.config import InstallerConfig
from pkg_installer.installer import PackageInstaller
from pkg_installer.runner import ProcessOutcome


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Provide an existing project directory."""
    project = tmp_path / "proj"
    project.mkdir()
    return project


@pytest.fixture
def mock_runner():
    """Mock ProcessRunner that reports a successful exit by default."""
    runner = AsyncMock()
    runner.run = AsyncMock(return_value=ProcessOutcome(return_code=0, stdout="added 1 package"))
    return runner


@pytest.fixture
def installer(mock_runner) -> PackageInstaller:
    """PackageInstaller wired to the mock runner with default settings."""
    return PackageInstaller(runner=mock_runner, config=InstallerConfig.from_env({}))
