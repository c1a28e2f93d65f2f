"""Interactive questions asked when required inputs are missing.

Questions are plain Pydantic models; ``Prompter`` renders them one at a time
with ``rich.prompt`` and returns ``{question.name: answer}`` so answers can be
written back into the context entry of the same name.
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator
from rich.console import Console
from rich.prompt import Prompt

from nestforge.utils import console as default_console


class PromptError(Exception):
    """Raised when answers cannot be collected (e.g. no interactive terminal)."""

    def __init__(self, message: str, question: str = ""):
        self.question = question
        super().__init__(message)


class QuestionKind(str, Enum):
    INPUT = "input"
    SELECT = "select"


class Question(BaseModel):
    """One prompt; ``name`` must match the context entry it fills."""

    name: str = Field(..., min_length=1)
    message: str
    kind: QuestionKind = QuestionKind.INPUT
    choices: list[str] = Field(default_factory=list)
    default: str | None = None

    @model_validator(mode="after")
    def _select_needs_choices(self) -> "Question":
        if self.kind is QuestionKind.SELECT and not self.choices:
            raise ValueError(f"Select question '{self.name}' has no choices")
        return self


def input_question(name: str, message: str, default: str | None = None) -> Question:
    """Free-text question with an optional suggested answer."""
    return Question(name=name, message=message, default=default)


def select_question(name: str, message: str, choices: Sequence[str]) -> Question:
    """Single choice from *choices*; the first choice is the default."""
    return Question(
        name=name,
        message=message,
        kind=QuestionKind.SELECT,
        choices=list(choices),
        default=choices[0] if choices else None,
    )


class Prompter:
    """Asks questions sequentially on the terminal."""

    def __init__(
        self,
        console: Console | None = None,
        interactive: bool | None = None,
        ask: Callable[..., Any] = Prompt.ask,
    ) -> None:
        self.console = console or default_console
        self._interactive = interactive
        self._ask = ask

    @property
    def interactive(self) -> bool:
        if self._interactive is not None:
            return self._interactive
        return sys.stdin.isatty()

    async def prompt(self, questions: Sequence[Question]) -> dict[str, Any]:
        """Ask every question in order and return the answers by name.

        Raises:
            PromptError: If the terminal is not interactive or input ends.
        """
        answers: dict[str, Any] = {}
        for question in questions:
            if not self.interactive:
                raise PromptError(
                    f"Cannot ask '{question.message}': stdin is not an interactive "
                    f"terminal. Pass the value on the command line instead.",
                    question=question.name,
                )
            answers[question.name] = await asyncio.to_thread(self._ask_one, question)
        return answers

    def _ask_one(self, question: Question) -> Any:
        kwargs: dict[str, Any] = {"console": self.console}
        if question.kind is QuestionKind.SELECT:
            kwargs["choices"] = question.choices
        if question.default is not None:
            kwargs["default"] = question.default
        try:
            return self._ask(question.message, **kwargs)
        except (EOFError, KeyboardInterrupt) as exc:
            raise PromptError(
                f"No answer given for '{question.name}'", question=question.name
            ) from exc
