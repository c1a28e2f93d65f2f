"""Name-to-implementation resolution for pluggable subsystems.

Package managers, schematics collections, builders and runners are all
selected by a user-supplied string.  Each kind defines its allowed names once,
as a ``str`` enum, and a ``StrategyFactory`` maps every member to the class
implementing it.  The same enum drives validation, dispatch and the
interactive choice list, so the three cannot drift apart.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


class UnsupportedStrategyError(Exception):
    """Raised when an identifier is not one of the allowed names for its kind."""

    def __init__(self, kind: str, identifier: str | None, allowed: list[str]) -> None:
        self.kind = kind
        self.identifier = identifier
        self.allowed = allowed
        super().__init__(
            f"Unsupported {kind}: {identifier!r}. "
            f"Available options: {', '.join(allowed)}"
        )


class StrategyFactory(Generic[E, T]):
    """Resolves a validated identifier to a fresh strategy implementation.

    The factory keeps no state between calls: every ``create`` builds a new
    implementation, so it can be shared freely.
    """

    def __init__(
        self,
        kind: str,
        choices: type[E],
        implementations: Mapping[E, Callable[[], T]],
        default: E | None = None,
    ) -> None:
        missing = [member for member in choices if member not in implementations]
        if missing:
            raise ValueError(
                f"No {kind} implementation registered for: "
                f"{', '.join(str(m.value) for m in missing)}"
            )
        self.kind = kind
        self.choices = choices
        self._implementations = dict(implementations)
        self.default = default

    @property
    def allowed(self) -> list[str]:
        """Allowed identifiers, in declaration order."""
        return [str(member.value) for member in self.choices]

    def resolve(self, identifier: str | E | None = None) -> E:
        """Validate *identifier* and return its enum member.

        A blank identifier falls back to the default, when one exists.

        Raises:
            UnsupportedStrategyError: If the identifier is unknown, or blank
                with no default.
        """
        if isinstance(identifier, self.choices):
            return identifier
        if identifier is None or (isinstance(identifier, str) and not identifier.strip()):
            if self.default is None:
                raise UnsupportedStrategyError(self.kind, identifier, self.allowed)
            return self.default
        try:
            return self.choices(identifier)
        except ValueError:
            raise UnsupportedStrategyError(self.kind, identifier, self.allowed) from None

    def create(self, identifier: str | E | None = None) -> T:
        """Return a new implementation for *identifier*.

        Validation happens before anything is instantiated.
        """
        member = self.resolve(identifier)
        return self._implementations[member]()
