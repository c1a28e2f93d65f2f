"""``build`` action: resolve the builder and compile the application."""

from __future__ import annotations

import time
from typing import Any

from pydantic import ValidationError

from nestforge.compiler import (
    BuildError,
    BuildOptions,
    CompilerOptions,
    ProjectConfiguration,
    builder_factory,
)
from nestforge.compiler.configuration import DEFAULT_TSCONFIG, DEFAULT_WEBPACK_CONFIG
from nestforge.context import CommandContext
from nestforge.strategies import UnsupportedStrategyError
from nestforge.utils import format_duration, print_error, print_success

from .base import AbstractAction


def _first_set(*values: Any) -> Any:
    """Return the first value that is not ``None``."""
    for value in values:
        if value is not None:
            return value
    return None


class BuildAction(AbstractAction):
    """Compiles one application with the tsc, webpack or swc builder."""

    def resolve_builder_name(
        self, options: CommandContext, compiler_options: CompilerOptions
    ) -> str:
        """Pick the builder: ``--builder`` > webpack flag > configuration > tsc."""
        explicit = options.value("builder")
        if explicit:
            return str(explicit)
        webpack = _first_set(options.value("webpack"), compiler_options.webpack)
        if webpack:
            return "webpack"
        return compiler_options.builder or "tsc"

    def build_options(
        self,
        inputs: CommandContext,
        options: CommandContext,
        source_root: str,
        compiler_options: CompilerOptions,
    ) -> BuildOptions:
        return BuildOptions(
            cwd=self.cwd,
            app=inputs.value("app"),
            source_root=source_root,
            ts_config_path=_first_set(
                options.value("path"), compiler_options.ts_config_path, DEFAULT_TSCONFIG
            ),
            webpack_config_path=_first_set(
                options.value("webpackPath"),
                compiler_options.webpack_config_path,
                DEFAULT_WEBPACK_CONFIG,
            ),
            watch=bool(options.value("watch", False)),
            watch_assets=bool(
                options.value("watchAssets") or compiler_options.watch_assets
            ),
            type_check=bool(
                _first_set(options.value("typeCheck"), compiler_options.type_check)
            ),
        )

    async def handle(self, inputs: CommandContext, options: CommandContext) -> int:
        app = inputs.value("app")
        try:
            configuration = ProjectConfiguration.load(options.value("config"), self.cwd)
        except (FileNotFoundError, ValidationError) as exc:
            print_error(str(exc))
            return 1

        try:
            source_root, compiler_options = configuration.resolve_app(app)
        except KeyError:
            print_error(
                f'Could not find "{app}" in the "projects" section of the '
                "configuration file."
            )
            return 1

        factory = builder_factory(self.config)
        try:
            builder = factory.create(self.resolve_builder_name(options, compiler_options))
        except UnsupportedStrategyError as exc:
            print_error(
                f"Invalid builder option: {exc.identifier}. "
                f"Available builders: {', '.join(exc.allowed)}"
            )
            return 1

        build_options = self.build_options(inputs, options, source_root, compiler_options)
        started = time.monotonic()
        try:
            await builder.build(build_options)
        except BuildError as exc:
            print_error(str(exc))
            return 1

        if not build_options.watch_mode:
            print_success(
                f"Build ({builder.name.value}) completed in "
                f"{format_duration(time.monotonic() - started)}"
            )
        return 0
