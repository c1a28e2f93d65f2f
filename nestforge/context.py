"""Ordered, name-keyed input context for a single command invocation.

A ``CommandContext`` is populated once from parsed CLI flags, filled in by
interactive completion and then read by the actions.  Entries keep their
insertion order (used for option projection) but are looked up by name.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class MissingRequiredInputError(Exception):
    """Raised when a required context entry was never resolved."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing required input: '{name}'")


@dataclass
class ContextEntry(Generic[T]):
    """One resolved-or-pending input value.  ``None`` means unresolved."""

    name: str
    value: T | None = None


class CommandContext:
    """Ordered collection of ``ContextEntry`` objects keyed by name."""

    def __init__(self, entries: Iterable[ContextEntry[Any]] | None = None) -> None:
        self._entries: dict[str, ContextEntry[Any]] = {}
        for entry in entries or ():
            self.add(entry)

    # -- Mutation ------------------------------------------------------------

    def add(self, entry: ContextEntry[Any]) -> None:
        """Insert *entry*; a later add with the same name wins.

        The overwritten entry keeps its original position.
        """
        self._entries[entry.name] = ContextEntry(entry.name, entry.value)

    def set(self, entry: ContextEntry[Any]) -> None:
        """Overwrite the value of an existing entry in place."""
        existing = self._entries.get(entry.name)
        if existing is None:
            self.add(entry)
            return
        existing.value = entry.value

    def merge_with(self, other: CommandContext) -> None:
        """Add every entry of *other* into this context (``other`` wins)."""
        other.for_each_entry(self.add)

    # -- Access --------------------------------------------------------------

    def get(self, name: str, required: bool = False) -> ContextEntry[Any] | None:
        """Return the entry called *name*.

        Args:
            name: Entry name.
            required: When ``True`` a missing entry, or one whose value is
                still ``None``, raises ``MissingRequiredInputError``.
        """
        entry = self._entries.get(name)
        if required and (entry is None or entry.value is None):
            raise MissingRequiredInputError(name)
        return entry

    def value(self, name: str, default: Any = None) -> Any:
        """Return the value of *name*, or *default* when unset."""
        entry = self._entries.get(name)
        if entry is None or entry.value is None:
            return default
        return entry.value

    def for_each_entry(self, fn: Callable[[ContextEntry[Any]], None]) -> None:
        """Call *fn* on every entry in insertion order."""
        for entry in list(self._entries.values()):
            fn(entry)

    def names(self) -> list[str]:
        return list(self._entries)

    def __iter__(self) -> Iterator[ContextEntry[Any]]:
        return iter(list(self._entries.values()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __repr__(self) -> str:
        items = ", ".join(f"{e.name}={e.value!r}" for e in self._entries.values())
        return f"CommandContext({items})"


def overlay(base: CommandContext, overrides: CommandContext) -> CommandContext:
    """Return a new context holding *base* with *overrides* applied on top.

    Entries of *base* come first in iteration order; any name defined in both
    takes its value from *overrides*.  Neither argument is modified.
    """
    merged = CommandContext()
    merged.merge_with(base)
    merged.merge_with(overrides)
    return merged
