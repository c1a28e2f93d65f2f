"""External process runners.

Key classes:
    AbstractRunner - spawns one binary and reports failures as RunnerError
    GitRunner      - ``git init`` for new projects (failures are VcsError)
    Runner         - allowed runner names, resolved by ``runner_factory``
"""

from __future__ import annotations

from enum import Enum
from functools import partial

from nestforge.config import Config
from nestforge.strategies import StrategyFactory

from .base import (
    AbstractRunner,
    NpmRunner,
    NpxRunner,
    PnpmRunner,
    RunnerError,
    SchematicRunner,
    YarnRunner,
)
from .git import GitRunner, VcsError


class Runner(str, Enum):
    """External tools nestforge can spawn."""

    SCHEMATIC = "schematic"
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    GIT = "git"
    NPX = "npx"


def runner_factory(config: Config | None = None) -> StrategyFactory[Runner, AbstractRunner]:
    """Build the runner factory for *config* (defaults when omitted)."""
    config = config or Config()
    timeout = config.command_timeout
    return StrategyFactory(
        "runner",
        Runner,
        {
            Runner.SCHEMATIC: partial(
                SchematicRunner, config.binaries.schematics, timeout=timeout
            ),
            Runner.NPM: partial(NpmRunner, timeout=timeout),
            Runner.YARN: partial(YarnRunner, timeout=timeout),
            Runner.PNPM: partial(PnpmRunner, timeout=timeout),
            Runner.GIT: partial(GitRunner, config.binaries.git, timeout=timeout),
            Runner.NPX: partial(NpxRunner, config.binaries.npx, timeout=timeout),
        },
    )


__all__ = [
    "AbstractRunner",
    "GitRunner",
    "NpmRunner",
    "NpxRunner",
    "PnpmRunner",
    "Runner",
    "RunnerError",
    "SchematicRunner",
    "VcsError",
    "YarnRunner",
    "runner_factory",
]
