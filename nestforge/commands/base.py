"""Base class for CLI commands."""

from __future__ import annotations

import argparse

from nestforge.actions import AbstractAction
from nestforge.context import CommandContext
from nestforge.utils import print_error


class InvalidOptionError(Exception):
    """Raised when a flag value is rejected before the action runs."""


class AbstractCommand:
    """Registers one subcommand and turns its flags into contexts.

    Subclasses implement ``load`` and ``contexts``; ``handle`` validates and
    hands the contexts to the action, which only runs when validation passed.
    """

    name: str = ""

    def __init__(self, action: AbstractAction) -> None:
        self.action = action

    def load(self, subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
        raise NotImplementedError

    def contexts(self, args: argparse.Namespace) -> tuple[CommandContext, CommandContext]:
        """Return ``(inputs, options)`` for *args*.

        Raises:
            InvalidOptionError: If a flag value is not accepted.
        """
        raise NotImplementedError

    async def handle(self, args: argparse.Namespace) -> int:
        try:
            inputs, options = self.contexts(args)
        except InvalidOptionError as exc:
            print_error(str(exc))
            return 1
        return await self.action.handle(inputs, options)
