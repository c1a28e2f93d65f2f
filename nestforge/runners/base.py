"""Child-process runners for the external tools nestforge drives."""

from __future__ import annotations

from pathlib import Path

from nestforge.utils import run_command


class RunnerError(Exception):
    """Raised when an external command cannot be started or exits non-zero."""

    def __init__(self, message: str, command: str = "", stderr: str = ""):
        self.command = command
        self.stderr = stderr
        super().__init__(message)


class AbstractRunner:
    """Runs one external binary, optionally with fixed leading arguments.

    Output is inherited by the terminal unless ``collect`` is requested, in
    which case stdout is captured and returned.
    """

    def __init__(
        self,
        binary: str,
        args: tuple[str, ...] = (),
        timeout: int = 600,
    ) -> None:
        self.binary = binary
        self.args = args
        self.timeout = timeout

    async def run(
        self,
        command: str | list[str],
        collect: bool = False,
        cwd: str | Path | None = None,
    ) -> str | None:
        """Run ``<binary> <args> <command>``.

        Args:
            command: Subcommand and arguments; a string is split on whitespace.
            collect: Capture and return stdout instead of streaming it.
            cwd: Working directory for the child process.

        Returns:
            Captured stdout when *collect* is set, otherwise ``None``.

        Raises:
            RunnerError: If the binary is missing, times out or exits non-zero.
        """
        argv = command.split() if isinstance(command, str) else list(command)
        cmd = [self.binary, *self.args, *argv]
        cmd_str = " ".join(cmd)

        try:
            returncode, stdout, stderr = await run_command(
                cmd, cwd=cwd, timeout=self.timeout, capture=collect
            )
        except FileNotFoundError:
            raise RunnerError(
                f"Command not found: {self.binary}", command=cmd_str
            ) from None

        if returncode != 0:
            raise RunnerError(
                f"Failed to execute command (exit {returncode}): {cmd_str}"
                + (f"\n{stderr}" if stderr else ""),
                command=cmd_str,
                stderr=stderr,
            )

        return stdout if collect else None

    def raw_full_command(self, command: str) -> str:
        """Return the command line a user would type to run *command*."""
        return " ".join([self.binary, *self.args, command])


class SchematicRunner(AbstractRunner):
    """Runs the schematics CLI that materialises project files."""

    def __init__(self, binary: str = "schematics", timeout: int = 600) -> None:
        super().__init__(binary, timeout=timeout)


class NpmRunner(AbstractRunner):
    def __init__(self, timeout: int = 600) -> None:
        super().__init__("npm", timeout=timeout)


class YarnRunner(AbstractRunner):
    def __init__(self, timeout: int = 600) -> None:
        super().__init__("yarn", timeout=timeout)


class PnpmRunner(AbstractRunner):
    def __init__(self, timeout: int = 600) -> None:
        super().__init__("pnpm", timeout=timeout)


class NpxRunner(AbstractRunner):
    """Runs locally-installed node binaries (``tsc``, ``webpack``, ``swc``)."""

    def __init__(self, binary: str = "npx", timeout: int = 600) -> None:
        super().__init__(binary, timeout=timeout)
