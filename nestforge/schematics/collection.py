"""Schematics collections: the generators that write project files."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from nestforge.config import Config
from nestforge.runners import AbstractRunner, Runner, RunnerError, runner_factory
from nestforge.strategies import StrategyFactory, UnsupportedStrategyError

from .options import SchematicOption


class Collection(str, Enum):
    """Schematics collections nestforge knows how to drive."""

    NESTJS = "@nestjs/schematics"


class GenerationError(Exception):
    """Raised when a collection fails to materialise files."""

    def __init__(self, message: str, schematic: str = "", command: str = ""):
        self.schematic = schematic
        self.command = command
        super().__init__(message)


class AbstractCollection:
    """Runs schematics of one collection through the schematics runner."""

    def __init__(self, collection: str, runner: AbstractRunner) -> None:
        self.collection = collection
        self.runner = runner

    async def execute(
        self,
        name: str,
        options: Sequence[SchematicOption],
        extra_flags: Sequence[str] = (),
    ) -> None:
        """Run schematic *name* with *options*, in order.

        Raises:
            GenerationError: If the schematics process fails.
        """
        command = [
            f"{self.collection}:{name}",
            *(option.to_command_string() for option in options),
            *extra_flags,
        ]
        try:
            await self.runner.run(command)
        except RunnerError as exc:
            raise GenerationError(
                str(exc), schematic=name, command=exc.command
            ) from exc


class NestCollection(AbstractCollection):
    def __init__(self, runner: AbstractRunner) -> None:
        super().__init__(Collection.NESTJS.value, runner)


def collection_factory(
    config: Config | None = None,
) -> StrategyFactory[Collection, AbstractCollection]:
    """Build the collection factory; blank names resolve to the config default.

    Raises:
        UnsupportedStrategyError: If the configured default is not a known
            collection.
    """
    config = config or Config()
    try:
        default = Collection(config.default_collection)
    except ValueError:
        raise UnsupportedStrategyError(
            "collection",
            config.default_collection,
            [collection.value for collection in Collection],
        ) from None

    runners = runner_factory(config)
    return StrategyFactory(
        "collection",
        Collection,
        {
            Collection.NESTJS: lambda: NestCollection(runners.create(Runner.SCHEMATIC)),
        },
        default=default,
    )
