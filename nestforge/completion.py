"""Fills missing required inputs by prompting the user.

Completion is an ordered list of resolution steps.  A step whose entry
already holds a value is skipped; otherwise it opens one prompt session and
writes the answers back into its context.  Sessions never overlap.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from nestforge.config import Config
from nestforge.context import CommandContext, ContextEntry
from nestforge.package_managers import PackageManager
from nestforge.questions import Prompter, Question, input_question, select_question
from nestforge.ui import MESSAGES
from nestforge.utils import print_info


def replace_input_missing_information(
    context: CommandContext, answers: Mapping[str, Any]
) -> None:
    """Overwrite every still-unset entry of *context* that has an answer.

    Entries without a matching answer stay ``None``.
    """

    def _replace(entry: ContextEntry[Any]) -> None:
        if entry.value is None and entry.name in answers:
            context.set(ContextEntry(entry.name, answers[entry.name]))

    context.for_each_entry(_replace)


@dataclass
class ResolutionStep:
    """One input that may need a prompt session."""

    context: CommandContext
    name: str
    questions: Callable[[], list[Question]]

    def is_satisfied(self) -> bool:
        return bool(self.context.value(self.name))


class InputCompleter:
    """Prompts for the project name and package manager when not supplied."""

    def __init__(self, prompter: Prompter | None = None, config: Config | None = None) -> None:
        self.prompter = prompter or Prompter()
        self.config = config or Config()

    def resolution_steps(
        self, inputs: CommandContext, options: CommandContext
    ) -> list[ResolutionStep]:
        return [
            ResolutionStep(
                inputs,
                "name",
                lambda: [
                    input_question(
                        "name",
                        MESSAGES.PROJECT_NAME_QUESTION,
                        self.config.default_project_name,
                    )
                ],
            ),
            ResolutionStep(
                options,
                "packageManager",
                lambda: [
                    select_question(
                        "packageManager",
                        MESSAGES.PACKAGE_MANAGER_QUESTION,
                        [manager.value for manager in PackageManager],
                    )
                ],
            ),
        ]

    async def complete(self, inputs: CommandContext, options: CommandContext) -> None:
        """Resolve missing inputs in place.

        Raises:
            PromptError: If a required answer cannot be collected.
        """
        print_info(MESSAGES.PROJECT_INFORMATION_START)
        print_info()

        for step in self.resolution_steps(inputs, options):
            if step.is_satisfied():
                continue
            # Blank values are treated as unset so the answer can land.
            step.context.set(ContextEntry(step.name, None))
            answers = await self.prompter.prompt(step.questions())
            replace_input_missing_information(step.context, answers)
