"""Unit tests for ``nestforge build`` flag handling (nestforge.commands.build).

Tests cover:
- Option context contents and order
- ``--tsc`` overriding ``--webpack``
- Unknown builders rejected before the action runs
- The typeCheck advisory for non-swc builders
"""

from __future__ import annotations

import argparse
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from nestforge.commands import BuildCommand

pytestmark = pytest.mark.unit


def _command() -> BuildCommand:
    action = MagicMock()
    action.handle = AsyncMock(return_value=0)
    return BuildCommand(action)


def _parse(command: BuildCommand, argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    command.load(parser.add_subparsers())
    return parser.parse_args(["build", *argv])


class TestBuildContexts:
    def test_defaults(self):
        command = _command()
        inputs, options = command.contexts(_parse(command, []))

        assert inputs.value("app") is None
        assert options.names() == [
            "config", "webpack", "watch", "watchAssets", "path", "webpackPath",
            "builder", "typeCheck",
        ]
        assert options.value("watch") is False
        assert options.get("webpack").value is None
        assert options.get("typeCheck").value is None

    def test_flags_are_recorded(self):
        command = _command()
        inputs, options = command.contexts(
            _parse(
                command,
                [
                    "api", "-c", "nest-cli.prod.json", "-p", "tsconfig.app.json",
                    "--watch", "--watchAssets", "--webpackPath", "webpack.prod.js",
                    "-b", "swc", "--type-check",
                ],
            )
        )

        assert inputs.value("app") == "api"
        assert options.value("config") == "nest-cli.prod.json"
        assert options.value("path") == "tsconfig.app.json"
        assert options.value("watch") is True
        assert options.value("watchAssets") is True
        assert options.value("webpackPath") == "webpack.prod.js"
        assert options.value("builder") == "swc"
        assert options.value("typeCheck") is True

    def test_tsc_overrides_webpack(self):
        command = _command()
        _, options = command.contexts(_parse(command, ["--tsc", "--webpack"]))
        assert options.get("webpack").value is False

    def test_webpack_flag_alone(self):
        command = _command()
        _, options = command.contexts(_parse(command, ["--webpack"]))
        assert options.value("webpack") is True

    def test_type_check_warns_without_swc(self):
        command = _command()
        with patch("nestforge.commands.build.print_warning") as warn:
            _, options = command.contexts(_parse(command, ["--type-check", "-b", "tsc"]))

        warn.assert_called_once()
        assert "typeCheck" in warn.call_args.args[0]
        assert options.value("typeCheck") is True

    def test_type_check_with_swc_does_not_warn(self):
        command = _command()
        with patch("nestforge.commands.build.print_warning") as warn:
            command.contexts(_parse(command, ["--type-check", "--builder", "swc"]))
        warn.assert_not_called()


class TestBuildHandle:
    @pytest.mark.asyncio
    async def test_valid_flags_reach_action(self):
        command = _command()
        code = await command.handle(_parse(command, ["--tsc", "--webpack"]))

        assert code == 0
        command.action.handle.assert_awaited_once()
        _, options = command.action.handle.await_args.args
        assert options.value("webpack") is False

    @pytest.mark.asyncio
    async def test_unknown_builder_aborts_before_action(self):
        command = _command()
        with patch("nestforge.commands.base.print_error") as error:
            code = await command.handle(_parse(command, ["--builder", "unknown-tool"]))

        assert code == 1
        command.action.handle.assert_not_awaited()
        message = error.call_args.args[0]
        assert "unknown-tool" in message
        assert "tsc, webpack, swc" in message
