"""Base class for command actions."""

from __future__ import annotations

from pathlib import Path

from nestforge.config import Config
from nestforge.context import CommandContext


class AbstractAction:
    """Performs the work of one command once its flags are validated."""

    def __init__(self, config: Config | None = None, cwd: str | Path | None = None) -> None:
        self.config = config or Config()
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()

    async def handle(self, inputs: CommandContext, options: CommandContext) -> int:
        """Run the action and return a process exit code."""
        raise NotImplementedError
