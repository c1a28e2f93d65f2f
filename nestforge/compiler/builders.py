"""Builder strategies: tsc, webpack and swc.

Every builder shells out through the ``npx`` runner so the compiler installed
in the project's ``node_modules`` is used.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from nestforge.config import Config
from nestforge.runners import AbstractRunner, Runner, RunnerError, runner_factory
from nestforge.strategies import StrategyFactory
from nestforge.utils import console

from .configuration import DEFAULT_TSCONFIG, DEFAULT_WEBPACK_CONFIG


class Builder(str, Enum):
    """Compilers the build command can dispatch to."""

    TSC = "tsc"
    WEBPACK = "webpack"
    SWC = "swc"


class BuildError(Exception):
    """Raised when a compiler process fails."""

    def __init__(self, message: str, builder: str = "", command: str = ""):
        self.builder = builder
        self.command = command
        super().__init__(message)


@dataclass
class BuildOptions:
    """Resolved inputs of one build."""

    cwd: Path = field(default_factory=Path.cwd)
    app: str | None = None
    source_root: str = "src"
    out_dir: str = "dist"
    ts_config_path: str = DEFAULT_TSCONFIG
    webpack_config_path: str = DEFAULT_WEBPACK_CONFIG
    watch: bool = False
    watch_assets: bool = False
    type_check: bool = False

    @property
    def watch_mode(self) -> bool:
        # Watching assets only makes sense while the compiler watches too.
        return self.watch or self.watch_assets


class AbstractBuilder:
    name: Builder

    def __init__(self, runner: AbstractRunner) -> None:
        self.runner = runner

    def commands(self, options: BuildOptions) -> list[list[str]]:
        """Return the compiler invocations (arguments after ``npx``), in order."""
        raise NotImplementedError

    async def build(self, options: BuildOptions) -> None:
        """Run every compiler invocation in ``options.cwd``.

        Raises:
            BuildError: On the first invocation that fails.
        """
        for command in self.commands(options):
            console.print(f"[dim]> {self.runner.binary} {' '.join(command)}[/dim]")
            try:
                await self.runner.run(command, cwd=options.cwd)
            except RunnerError as exc:
                raise BuildError(
                    str(exc), builder=self.name.value, command=exc.command
                ) from exc


class TscBuilder(AbstractBuilder):
    name = Builder.TSC

    def commands(self, options: BuildOptions) -> list[list[str]]:
        command = ["tsc", "-p", options.ts_config_path]
        if options.watch_mode:
            command.append("--watch")
        return [command]


class WebpackBuilder(AbstractBuilder):
    name = Builder.WEBPACK

    def commands(self, options: BuildOptions) -> list[list[str]]:
        command = ["webpack", "--config", options.webpack_config_path]
        if options.watch_mode:
            command.append("--watch")
        return [command]


class SwcBuilder(AbstractBuilder):
    """swc transpiles only; ``type_check`` adds a ``tsc --noEmit`` pass first."""

    name = Builder.SWC

    def commands(self, options: BuildOptions) -> list[list[str]]:
        commands: list[list[str]] = []
        if options.type_check:
            commands.append(["tsc", "--noEmit", "-p", options.ts_config_path])
        command = ["swc", options.source_root, "--out-dir", options.out_dir]
        if options.watch_mode:
            command.append("--watch")
        commands.append(command)
        return commands


def builder_factory(
    config: Config | None = None,
) -> StrategyFactory[Builder, AbstractBuilder]:
    """Build the builder factory; a blank name resolves to ``tsc``."""
    runners = runner_factory(config)
    return StrategyFactory(
        "builder",
        Builder,
        {
            Builder.TSC: lambda: TscBuilder(runners.create(Runner.NPX)),
            Builder.WEBPACK: lambda: WebpackBuilder(runners.create(Runner.NPX)),
            Builder.SWC: lambda: SwcBuilder(runners.create(Runner.NPX)),
        },
        default=Builder.TSC,
    )
