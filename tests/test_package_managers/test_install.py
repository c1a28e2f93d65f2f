"""Unit tests for package manager installation (nestforge.package_managers).

Tests cover:
- The install command and working directory
- Per-manager silent flags
- Failures raising InstallError with the manual command
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from nestforge.package_managers import (
    InstallError,
    NpmPackageManager,
    PnpmPackageManager,
    YarnPackageManager,
)
from nestforge.runners import NpmRunner, PnpmRunner, RunnerError, YarnRunner

pytestmark = pytest.mark.unit


def _with_mock_run(runner, side_effect=None):
    runner.run = AsyncMock(return_value="", side_effect=side_effect)
    return runner


class TestInstall:
    @pytest.mark.asyncio
    async def test_npm_install_runs_in_project_directory(self, tmp_path: Path):
        runner = _with_mock_run(NpmRunner())
        project = tmp_path / "demo-app"

        await NpmPackageManager(runner).install(project, "npm")

        runner.run.assert_awaited_once_with(
            ["install", "--silent"], collect=True, cwd=project
        )

    @pytest.mark.asyncio
    async def test_yarn_uses_silent_flag(self, tmp_path: Path):
        runner = _with_mock_run(YarnRunner())
        await YarnPackageManager(runner).install(tmp_path, "yarn")
        assert runner.run.call_args.args[0] == ["install", "--silent"]

    @pytest.mark.asyncio
    async def test_pnpm_uses_reporter_flag(self, tmp_path: Path):
        runner = _with_mock_run(PnpmRunner())
        await PnpmPackageManager(runner).install(tmp_path, "pnpm")
        assert runner.run.call_args.args[0] == ["install", "--reporter=silent"]

    @pytest.mark.asyncio
    async def test_success_prints_get_started_hint(self, tmp_path: Path, capsys):
        runner = _with_mock_run(NpmRunner())
        await NpmPackageManager(runner).install(tmp_path / "demo-app", "npm")

        out = capsys.readouterr().out
        assert "$ cd demo-app" in out
        assert "$ npm run start" in out

    @pytest.mark.asyncio
    async def test_failure_raises_with_manual_command(self, tmp_path: Path):
        runner = _with_mock_run(
            NpmRunner(),
            side_effect=RunnerError("exit 1", command="npm install --silent", stderr="ERR!"),
        )

        with pytest.raises(InstallError) as exc_info:
            await NpmPackageManager(runner).install(tmp_path, "npm")

        exc = exc_info.value
        assert "npm install" in str(exc)
        assert exc.command == "npm install --silent"
        assert exc.stderr == "ERR!"

    def test_name_is_runner_binary(self):
        assert PnpmPackageManager(PnpmRunner()).name == "pnpm"
