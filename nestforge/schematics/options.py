"""Schematic options and their projection from a command context."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from nestforge.context import CommandContext
from nestforge.utils import normalize_to_kebab_or_snake_case

# Control-only inputs: meaningful to the pipeline, never to the generator.
EXCLUDED_INPUT_NAMES: frozenset[str] = frozenset({"skip-install"})


@dataclass(frozen=True)
class SchematicOption:
    """A single ``--option`` passed to a schematics collection."""

    name: str
    value: Any

    @property
    def normalized_name(self) -> str:
        """Option name in kebab case (``packageManager`` -> ``package-manager``)."""
        return re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", self.name).lower()

    def to_command_string(self) -> str:
        """Render the option as one command-line argument.

        Booleans become ``--flag`` / ``--no-flag``; the ``name`` option is
        normalised the same way the project directory is.
        """
        if isinstance(self.value, bool):
            prefix = "" if self.value else "no-"
            return f"--{prefix}{self.normalized_name}"
        if isinstance(self.value, str) and self.name == "name":
            return f"--{self.normalized_name}={normalize_to_kebab_or_snake_case(self.value)}"
        return f"--{self.normalized_name}={self.value}"


def map_schematic_options(
    context: CommandContext,
    excluded: Iterable[str] = EXCLUDED_INPUT_NAMES,
) -> list[SchematicOption]:
    """Project *context* onto the flat option list a collection consumes.

    Entries are emitted in insertion order.  Names in *excluded* and entries
    whose value is ``None`` are dropped.
    """
    excluded_names = set(excluded)
    options: list[SchematicOption] = []

    def _collect(entry) -> None:
        if entry.name in excluded_names or entry.value is None:
            return
        options.append(SchematicOption(entry.name, entry.value))

    context.for_each_entry(_collect)
    return options
