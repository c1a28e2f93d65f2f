"""Unit tests for ``nestforge new`` flag handling (nestforge.commands.new).

Tests cover:
- Option context contents, order and config defaults
- Language normalisation and rejection
- The ``n`` alias
"""

from __future__ import annotations

import argparse
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from nestforge.commands import InvalidOptionError, NewCommand
from nestforge.commands.new import normalize_language
from nestforge.config import Config

pytestmark = pytest.mark.unit


def _command(config: Config | None = None) -> NewCommand:
    action = MagicMock()
    action.handle = AsyncMock(return_value=0)
    return NewCommand(action, config)


def _parse(command: NewCommand, argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    command.load(parser.add_subparsers())
    return parser.parse_args(argv)


class TestNormalizeLanguage:
    @pytest.mark.parametrize(
        "language,expected",
        [("ts", "ts"), ("TypeScript", "ts"), ("js", "js"), ("JAVASCRIPT", "js")],
    )
    def test_accepted(self, language, expected):
        assert normalize_language(language) == expected

    def test_unset_passes_through(self):
        assert normalize_language(None) is None

    def test_rejected(self):
        with pytest.raises(InvalidOptionError, match='Invalid language "python"'):
            normalize_language("python")


class TestNewContexts:
    def test_defaults(self):
        command = _command()
        inputs, options = command.contexts(_parse(command, ["new"]))

        assert inputs.get("name").value is None
        assert options.names() == [
            "directory", "dry-run", "skip-git", "skip-install", "strict",
            "packageManager", "collection", "language",
        ]
        assert options.value("dry-run") is False
        assert options.get("packageManager").value is None
        assert options.value("collection") == "@nestjs/schematics"
        assert options.value("language") == "ts"

    def test_flags_are_recorded(self):
        command = _command()
        inputs, options = command.contexts(
            _parse(
                command,
                ["new", "demo-app", "-d", "-g", "-s", "-p", "pnpm", "-l", "javascript",
                 "--directory", "apps/demo", "--strict"],
            )
        )

        assert inputs.value("name") == "demo-app"
        assert options.value("directory") == "apps/demo"
        assert options.value("dry-run") is True
        assert options.value("skip-git") is True
        assert options.value("skip-install") is True
        assert options.value("strict") is True
        assert options.value("packageManager") == "pnpm"
        assert options.value("language") == "js"

    def test_alias(self):
        command = _command()
        inputs, _ = command.contexts(_parse(command, ["n", "demo-app"]))
        assert inputs.value("name") == "demo-app"

    def test_config_defaults(self):
        command = _command(Config(default_language="js"))
        _, options = command.contexts(_parse(command, ["new"]))
        assert options.value("language") == "js"


class TestNewHandle:
    @pytest.mark.asyncio
    async def test_invalid_language_aborts_before_action(self):
        command = _command()
        with patch("nestforge.commands.base.print_error") as error:
            code = await command.handle(_parse(command, ["new", "demo-app", "-l", "rust"]))

        assert code == 1
        command.action.handle.assert_not_awaited()
        assert "rust" in error.call_args.args[0]

    @pytest.mark.asyncio
    async def test_contexts_reach_action(self):
        command = _command()
        await command.handle(_parse(command, ["new", "demo-app", "--skip-install"]))

        inputs, options = command.action.handle.await_args.args
        assert inputs.value("name") == "demo-app"
        assert options.value("skip-install") is True
