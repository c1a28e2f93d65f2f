"""``new`` action: run the creation pipeline and exit."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

from nestforge.completion import InputCompleter
from nestforge.config import Config
from nestforge.context import CommandContext
from nestforge.pipeline import CreationPipeline, PipelineReport
from nestforge.questions import Prompter

from .base import AbstractAction


class NewAction(AbstractAction):
    """Creates a project, then terminates the process explicitly.

    Exit code 0 once the last step has run (whatever the outcome of the
    non-fatal steps), 1 when a fatal step failed.
    """

    def __init__(
        self,
        config: Config | None = None,
        cwd: str | Path | None = None,
        prompter: Prompter | None = None,
    ) -> None:
        super().__init__(config, cwd)
        self.prompter = prompter or Prompter()
        self.report: PipelineReport | None = None

    def create_pipeline(
        self, inputs: CommandContext, options: CommandContext
    ) -> CreationPipeline:
        return CreationPipeline(
            inputs,
            options,
            config=self.config,
            completer=InputCompleter(self.prompter, self.config),
            cwd=self.cwd,
        )

    async def handle(self, inputs: CommandContext, options: CommandContext) -> NoReturn:
        pipeline = self.create_pipeline(inputs, options)
        self.report = await pipeline.run()
        sys.exit(self.report.exit_code)
