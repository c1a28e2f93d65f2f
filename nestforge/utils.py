"""Shared utility functions for nestforge.

Provides async command execution, name normalisation and the Rich-based
output helpers every command prints through.
"""

from __future__ import annotations

import asyncio
import re
from pathlib import Path

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn

from nestforge.ui import ERROR_PREFIX, INFO_PREFIX

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int = 600,
    capture: bool = True,
) -> tuple[int, str, str]:
    """Run a command asynchronously.

    Args:
        cmd: Program followed by its arguments.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams).

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.

    Raises:
        FileNotFoundError: If the program is not installed.
    """
    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=stdout_pipe,
        stderr=stderr_pipe,
        cwd=str(cwd) if cwd else None,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def normalize_to_kebab_or_snake_case(name: str) -> str:
    """Convert a project name to the directory/package name used on disk.

    * Splits camelCase words with a hyphen.
    * Replaces runs of whitespace with a single hyphen.
    * Lowercases the result.  Existing hyphens and underscores are kept.

    Examples::

        normalize_to_kebab_or_snake_case("DemoApp") -> "demo-app"
        normalize_to_kebab_or_snake_case("my first_app") -> "my-first_app"
    """
    result = re.sub(r"([a-z0-9])([A-Z])", r"\1-\2", name.strip())
    result = re.sub(r"\s+", "-", result)
    return result.lower()


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(3.7)    -> "3.7s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message behind the ``Error`` prefix."""
    console.print(f"{ERROR_PREFIX} [red]{message}[/red]")


def print_warning(message: str) -> None:
    """Print a yellow advisory behind the ``Info`` prefix."""
    console.print(f"{INFO_PREFIX} [yellow]{message}[/yellow]")


def print_info(message: str = "") -> None:
    console.print(message)


def create_progress() -> Progress:
    """Create a Rich spinner for long-running child processes.

    Returns:
        A ``Progress`` instance suitable for use as a context manager.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )
