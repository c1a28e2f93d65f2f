"""Compilation support for the ``build`` command."""

from nestforge.compiler.builders import (
    AbstractBuilder,
    BuildError,
    Builder,
    BuildOptions,
    SwcBuilder,
    TscBuilder,
    WebpackBuilder,
    builder_factory,
)
from nestforge.compiler.configuration import CompilerOptions, ProjectConfiguration

__all__ = [
    "AbstractBuilder",
    "BuildError",
    "BuildOptions",
    "Builder",
    "CompilerOptions",
    "ProjectConfiguration",
    "SwcBuilder",
    "TscBuilder",
    "WebpackBuilder",
    "builder_factory",
]
