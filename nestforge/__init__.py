"""nestforge -- project scaffolding and build CLI.

Collects CLI flags and interactive answers into an ordered ``CommandContext``,
resolves them against pluggable strategies (package manager, schematics
collection, builder) and drives the creation pipeline::

    nestforge new demo-app --package-manager pnpm
    nestforge build --builder swc --type-check
"""

from nestforge.config import Config
from nestforge.context import (
    CommandContext,
    ContextEntry,
    MissingRequiredInputError,
    overlay,
)
from nestforge.strategies import StrategyFactory, UnsupportedStrategyError

__version__ = "0.1.0"

__all__ = [
    "CommandContext",
    "Config",
    "ContextEntry",
    "MissingRequiredInputError",
    "StrategyFactory",
    "UnsupportedStrategyError",
    "overlay",
]
