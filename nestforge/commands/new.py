"""``nestforge new [name]``."""

from __future__ import annotations

import argparse

from nestforge.actions import AbstractAction
from nestforge.config import Config
from nestforge.context import CommandContext, ContextEntry

from .base import AbstractCommand, InvalidOptionError

AVAILABLE_LANGUAGES: dict[str, str] = {
    "js": "js",
    "ts": "ts",
    "javascript": "js",
    "typescript": "ts",
}


def normalize_language(language: str | None) -> str | None:
    """Map a ``--language`` value to ``js`` / ``ts`` (case-insensitive).

    Raises:
        InvalidOptionError: For anything other than JavaScript or TypeScript.
    """
    if not language:
        return language
    normalized = AVAILABLE_LANGUAGES.get(language.lower())
    if normalized is None:
        raise InvalidOptionError(
            f'Invalid language "{language}" selected. '
            'Available languages are "typescript" or "javascript"'
        )
    return normalized


class NewCommand(AbstractCommand):
    name = "new"

    def __init__(self, action: AbstractAction, config: Config | None = None) -> None:
        super().__init__(action)
        self.config = config or Config()

    def load(self, subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
        parser = subparsers.add_parser(
            self.name, aliases=["n"], help="Generate Nest application."
        )
        parser.add_argument("name", nargs="?", default=None)
        parser.add_argument("--directory", help="Specify the destination directory.")
        parser.add_argument(
            "-d", "--dry-run", dest="dry_run", action="store_true",
            help="Report actions that would be performed without writing out results.",
        )
        parser.add_argument(
            "-g", "--skip-git", dest="skip_git", action="store_true",
            help="Skip git repository initialization.",
        )
        parser.add_argument(
            "-s", "--skip-install", dest="skip_install", action="store_true",
            help="Skip package installation.",
        )
        parser.add_argument(
            "-p", "--package-manager", dest="package_manager",
            help="Specify package manager.",
        )
        parser.add_argument(
            "-l", "--language", default=self.config.default_language,
            help="Programming language to be used (TypeScript or JavaScript).",
        )
        parser.add_argument(
            "-c", "--collection", default=self.config.default_collection,
            help="Schematics collection to use.",
        )
        parser.add_argument(
            "--strict", action="store_true", help="Enables strict mode in TypeScript."
        )
        parser.set_defaults(command=self)
        return parser

    def contexts(self, args: argparse.Namespace) -> tuple[CommandContext, CommandContext]:
        options = CommandContext(
            [
                ContextEntry("directory", args.directory),
                ContextEntry("dry-run", bool(args.dry_run)),
                ContextEntry("skip-git", bool(args.skip_git)),
                ContextEntry("skip-install", bool(args.skip_install)),
                ContextEntry("strict", bool(args.strict)),
                ContextEntry("packageManager", args.package_manager),
                ContextEntry("collection", args.collection),
                ContextEntry("language", normalize_language(args.language)),
            ]
        )
        inputs = CommandContext([ContextEntry("name", args.name)])
        return inputs, options
