"""CLI entry point for ``nestforge`` / ``python -m nestforge``."""

from __future__ import annotations

import argparse
import asyncio
import sys

from pydantic import ValidationError

from nestforge import __version__
from nestforge.actions import BuildAction, NewAction
from nestforge.commands import AbstractCommand, BuildCommand, NewCommand
from nestforge.config import Config
from nestforge.utils import print_error


def build_parser(config: Config) -> argparse.ArgumentParser:
    """Create the top-level parser with every subcommand registered."""
    parser = argparse.ArgumentParser(
        prog="nestforge",
        description="nestforge -- scaffold and build Nest applications",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  nestforge new demo-app --package-manager pnpm\n"
            "  nestforge new demo-app --dry-run\n"
            "  nestforge build --builder swc --type-check\n"
        ),
    )
    parser.add_argument("-v", "--version", action="version", version=__version__)
    subparsers = parser.add_subparsers(title="commands", metavar="<command>")

    commands: list[AbstractCommand] = [
        NewCommand(NewAction(config), config),
        BuildCommand(BuildAction(config)),
    ]
    for command in commands:
        command.load(subparsers)
    return parser


def main(argv: list[str] | None = None) -> None:
    try:
        config = Config.from_env()
    except (OSError, ValueError, ValidationError) as exc:
        print_error(f"Invalid nestforge configuration: {exc}")
        sys.exit(1)

    parser = build_parser(config)
    args = parser.parse_args(argv)

    command: AbstractCommand | None = getattr(args, "command", None)
    if command is None:
        parser.print_help()
        sys.exit(1)

    sys.exit(asyncio.run(command.handle(args)))


if __name__ == "__main__":
    main()
