"""Unit tests for AsyncioProcessRunner."""

import asyncio
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from pkg_installer.errors import ExecutableNotFoundError
from pkg_installer.runner import AsyncioProcessRunner, ProcessOutcome


@pytest.fixture
def runner():
    return AsyncioProcessRunner()


@pytest.fixture
def which_npm():
    with patch("pkg_installer.runner.shutil.which", return_value="/usr/bin/npm") as which:
        yield which


def _mock_process(returncode=0, stdout=b"", stderr=b""):
    process = MagicMock()
    process.pid = 4242
    process.returncode = returncode
    process.communicate = AsyncMock(return_value=(stdout, stderr))
    process.wait = AsyncMock()
    process.kill = MagicMock()
    return process


@pytest.mark.asyncio
async def test_run_success(runner, which_npm):
    with patch("asyncio.create_subprocess_exec") as mock_subprocess:
        mock_subprocess.return_value = _mock_process(stdout=b"added 1 package")

        outcome = await runner.run(["npm", "install", "zod"], cwd=Path("/tmp/proj"))

        assert outcome.ok is True
        assert outcome.return_code == 0
        assert outcome.stdout == "added 1 package"
        assert outcome.duration_sec >= 0.0

        call_args = mock_subprocess.call_args[0]
        assert call_args == ("/usr/bin/npm", "install", "zod")
        assert mock_subprocess.call_args.kwargs["cwd"] == "/tmp/proj"
        assert "env" not in mock_subprocess.call_args.kwargs


@pytest.mark.asyncio
async def test_run_nonzero_exit_returns_outcome(runner, which_npm):
    with patch("asyncio.create_subprocess_exec") as mock_subprocess:
        mock_subprocess.return_value = _mock_process(returncode=1, stderr=b"npm ERR! code E404")

        outcome = await runner.run(["npm", "install", "nope"], cwd=Path("/tmp/proj"))

        assert outcome.ok is False
        assert outcome.return_code == 1
        assert "E404" in outcome.stderr


@pytest.mark.asyncio
async def test_run_decodes_invalid_utf8(runner, which_npm):
    with patch("asyncio.create_subprocess_exec") as mock_subprocess:
        mock_subprocess.return_value = _mock_process(returncode=1, stderr=b"bad \xff byte")

        outcome = await runner.run(["npm", "install"], cwd=Path("/tmp/proj"))

        assert outcome.stderr.startswith("bad ")


@pytest.mark.asyncio
async def test_missing_executable_never_spawns(runner):
    with patch("pkg_installer.runner.shutil.which", return_value=None), patch(
        "asyncio.create_subprocess_exec"
    ) as mock_subprocess:
        with pytest.raises(ExecutableNotFoundError) as exc:
            await runner.run(["bun", "install"], cwd=Path("/tmp/proj"))

        mock_subprocess.assert_not_called()
        assert exc.value.executable == "bun"
        assert exc.value.command == ("bun", "install")
        assert exc.value.exit_code is None


@pytest.mark.asyncio
async def test_spawn_file_not_found_mapped(runner, which_npm):
    with patch("asyncio.create_subprocess_exec") as mock_subprocess:
        mock_subprocess.side_effect = FileNotFoundError("npm")

        with pytest.raises(ExecutableNotFoundError):
            await runner.run(["npm", "install"], cwd=Path("/tmp/proj"))


@pytest.mark.asyncio
async def test_empty_command_rejected(runner):
    with pytest.raises(ValueError):
        await runner.run([], cwd=Path("/tmp/proj"))


@pytest.mark.asyncio
async def test_cancellation_kills_child(runner, which_npm):
    started = asyncio.Event()

    async def slow_communicate():
        started.set()
        await asyncio.sleep(10.0)
        return (b"", b"")

    process = _mock_process()
    process.communicate = slow_communicate

    with patch("asyncio.create_subprocess_exec") as mock_subprocess:
        mock_subprocess.return_value = process

        task = asyncio.create_task(runner.run(["npm", "install", "zod"], cwd=Path("/tmp/proj")))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

    process.kill.assert_called_once()
    process.wait.assert_awaited_once()


@pytest.mark.asyncio
async def test_cancellation_after_exit_tolerates_missing_process(runner, which_npm):
    started = asyncio.Event()

    async def slow_communicate():
        started.set()
        await asyncio.sleep(10.0)
        return (b"", b"")

    process = _mock_process()
    process.communicate = slow_communicate
    process.kill.side_effect = ProcessLookupError()

    with patch("asyncio.create_subprocess_exec") as mock_subprocess:
        mock_subprocess.return_value = process

        task = asyncio.create_task(runner.run(["npm", "install"], cwd=Path("/tmp/proj")))
        await started.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

    process.wait.assert_awaited_once()


def test_outcome_ok_property():
    assert ProcessOutcome(return_code=0).ok is True
    assert ProcessOutcome(return_code=127).ok is False
