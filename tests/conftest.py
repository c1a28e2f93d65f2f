"""Shared pytest fixtures for the nestforge test suite.

Provides reusable fixtures for:
- Command contexts shaped like a parsed ``new`` invocation
- A scripted prompter that answers questions without a terminal
- Mocked strategies (collection, package manager, git) for the pipeline
- Mock subprocess helpers
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from nestforge.config import Config
from nestforge.context import CommandContext, ContextEntry
from nestforge.questions import PromptError, Prompter, Question
from nestforge.runners import GitRunner
from nestforge.utils import normalize_to_kebab_or_snake_case


# ---------------------------------------------------------------------------
# Contexts
# ---------------------------------------------------------------------------

@pytest.fixture
def new_contexts():
    """Factory for ``(inputs, options)`` in the order ``NewCommand`` builds them.

    Usage:
        def test_new(new_contexts):
            inputs, options = new_contexts("demo-app", skip_install=True)
    """
    def factory(
        name: str | None = "demo-app",
        *,
        directory: str | None = None,
        dry_run: bool = False,
        skip_git: bool = False,
        skip_install: bool = False,
        strict: bool = False,
        package_manager: str | None = "npm",
        collection: str | None = "@nestjs/schematics",
        language: str | None = "ts",
    ) -> tuple[CommandContext, CommandContext]:
        options = CommandContext(
            [
                ContextEntry("directory", directory),
                ContextEntry("dry-run", dry_run),
                ContextEntry("skip-git", skip_git),
                ContextEntry("skip-install", skip_install),
                ContextEntry("strict", strict),
                ContextEntry("packageManager", package_manager),
                ContextEntry("collection", collection),
                ContextEntry("language", language),
            ]
        )
        inputs = CommandContext([ContextEntry("name", name)])
        return inputs, options

    return factory


@pytest.fixture
def config() -> Config:
    """Default configuration with a short command timeout."""
    return Config(command_timeout=30)


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------

class ScriptedPrompter(Prompter):
    """Prompter that answers from a dict and records every session."""

    def __init__(self, answers: dict[str, Any] | None = None, fail: bool = False) -> None:
        super().__init__(interactive=True)
        self.answers = answers or {}
        self.fail = fail
        self.sessions: list[list[str]] = []

    async def prompt(self, questions: Sequence[Question]) -> dict[str, Any]:
        self.sessions.append([question.name for question in questions])
        if self.fail:
            raise PromptError("stdin is not an interactive terminal")
        return {
            question.name: self.answers[question.name]
            for question in questions
            if question.name in self.answers
        }


@pytest.fixture
def scripted_prompter():
    """Factory for ``ScriptedPrompter`` instances.

    Usage:
        def test_prompt(scripted_prompter):
            prompter = scripted_prompter({"name": "demo-app"})
    """
    def factory(answers: dict[str, Any] | None = None, fail: bool = False) -> ScriptedPrompter:
        return ScriptedPrompter(answers, fail=fail)

    return factory


# ---------------------------------------------------------------------------
# Mock strategies
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_strategies(tmp_path: Path):
    """Patch the pipeline's factories with mocks; nothing is spawned.

    The collection's ``execute`` creates the project directory under
    ``tmp_path`` (``--directory`` if given, else the name) so that later steps
    have somewhere to write.  Yields a namespace with ``collection``,
    ``package_manager`` and ``git`` mocks.
    """
    collection = MagicMock()
    package_manager = MagicMock()
    package_manager.install = AsyncMock()
    git = MagicMock(spec=GitRunner)
    git.init = AsyncMock(return_value="Initialized empty Git repository")

    async def _generate(name, options, extra_flags=()):
        values = {option.name: option.value for option in options}
        directory = values.get("directory") or normalize_to_kebab_or_snake_case(
            values["name"]
        )
        (tmp_path / directory).mkdir(parents=True, exist_ok=True)

    collection.execute = AsyncMock(side_effect=_generate)

    collections = MagicMock()
    collections.create.return_value = collection
    package_managers = MagicMock()
    package_managers.create.return_value = package_manager
    runners = MagicMock()
    runners.create.return_value = git

    with patch("nestforge.pipeline.collection_factory", return_value=collections), \
         patch("nestforge.pipeline.package_manager_factory", return_value=package_managers), \
         patch("nestforge.pipeline.runner_factory", return_value=runners):
        yield SimpleNamespace(
            collection=collection,
            collections=collections,
            package_manager=package_manager,
            package_managers=package_managers,
            git=git,
            runners=runners,
        )


# ---------------------------------------------------------------------------
# Mock Subprocess
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_subprocess():
    """Mock asyncio subprocess for testing command execution.

    Returns a factory that creates mock subprocess instances with configurable
    stdout, stderr, and return codes.

    Usage:
        def test_command(mock_subprocess):
            proc = mock_subprocess(stdout="output", returncode=0)
            with patch("asyncio.create_subprocess_exec", return_value=proc):
                ...
    """
    def factory(
        stdout: str = "",
        stderr: str = "",
        returncode: int = 0,
    ) -> AsyncMock:
        mock_proc = AsyncMock()
        mock_proc.communicate = AsyncMock(
            return_value=(stdout.encode("utf-8"), stderr.encode("utf-8"))
        )
        mock_proc.returncode = returncode
        mock_proc.pid = 99999
        mock_proc.kill = MagicMock()
        mock_proc.wait = AsyncMock(return_value=returncode)
        return mock_proc

    return factory
