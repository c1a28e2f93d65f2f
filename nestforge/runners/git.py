"""Git runner used to initialise the repository of a new project."""

from __future__ import annotations

from pathlib import Path

from .base import AbstractRunner, RunnerError


class VcsError(RunnerError):
    """Raised when a git operation on the new project fails."""


class GitRunner(AbstractRunner):
    def __init__(self, binary: str = "git", timeout: int = 600) -> None:
        super().__init__(binary, timeout=timeout)

    async def init(self, directory: str | Path) -> str | None:
        """Run ``git init`` inside *directory*.

        Raises:
            VcsError: If git is missing or the command fails.
        """
        try:
            return await self.run("init", collect=True, cwd=directory)
        except RunnerError as exc:
            raise VcsError(str(exc), command=exc.command, stderr=exc.stderr) from exc
