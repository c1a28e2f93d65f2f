"""``nestforge build [app]``."""

from __future__ import annotations

import argparse

from nestforge.compiler import Builder
from nestforge.context import CommandContext, ContextEntry
from nestforge.utils import print_warning

from .base import AbstractCommand, InvalidOptionError

AVAILABLE_BUILDERS: list[str] = [builder.value for builder in Builder]


class BuildCommand(AbstractCommand):
    name = "build"

    def load(self, subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
        parser = subparsers.add_parser(self.name, help="Build Nest application.")
        parser.add_argument("app", nargs="?", default=None)
        parser.add_argument("-c", "--config", help="Path to nest-cli configuration file.")
        parser.add_argument("-p", "--path", help="Path to tsconfig file.")
        parser.add_argument(
            "-w", "--watch", action="store_true", help="Run in watch mode (live-reload)."
        )
        parser.add_argument(
            "-b", "--builder", help=f"Builder to be used ({', '.join(AVAILABLE_BUILDERS)})."
        )
        parser.add_argument(
            "--watchAssets",
            dest="watch_assets",
            action="store_true",
            help="Watch non-ts (e.g., .graphql) files mode.",
        )
        parser.add_argument(
            "--webpack",
            action="store_true",
            default=None,
            help="Use webpack for compilation (deprecated option, use --builder instead).",
        )
        parser.add_argument(
            "--type-check",
            dest="type_check",
            action="store_true",
            default=None,
            help="Enable type checking (when SWC is used).",
        )
        parser.add_argument(
            "--webpackPath", dest="webpack_path", help="Path to webpack configuration."
        )
        parser.add_argument("--tsc", action="store_true", help="Use tsc for compilation.")
        parser.set_defaults(command=self)
        return parser

    def contexts(self, args: argparse.Namespace) -> tuple[CommandContext, CommandContext]:
        options = CommandContext()
        options.add(ContextEntry("config", args.config))

        # --tsc overrides the deprecated --webpack flag.
        webpack = False if args.tsc else args.webpack
        options.add(ContextEntry("webpack", webpack))
        options.add(ContextEntry("watch", bool(args.watch)))
        options.add(ContextEntry("watchAssets", bool(args.watch_assets)))
        options.add(ContextEntry("path", args.path))
        options.add(ContextEntry("webpackPath", args.webpack_path))

        if args.builder and args.builder not in AVAILABLE_BUILDERS:
            raise InvalidOptionError(
                f"Invalid builder option: {args.builder}. "
                f"Available builders: {', '.join(AVAILABLE_BUILDERS)}"
            )
        options.add(ContextEntry("builder", args.builder))

        if args.type_check and args.builder != Builder.SWC.value:
            print_warning('"typeCheck" will not have any effect when "builder" is not "swc".')
        options.add(ContextEntry("typeCheck", args.type_check))

        inputs = CommandContext([ContextEntry("app", args.app)])
        return inputs, options
