"""Package manager strategies used to install a new project's dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from nestforge.runners import AbstractRunner, RunnerError
from nestforge.ui import MESSAGES
from nestforge.utils import console, create_progress, print_info, print_success


class InstallError(Exception):
    """Raised when dependency installation fails."""

    def __init__(self, message: str, command: str = "", stderr: str = ""):
        self.command = command
        self.stderr = stderr
        super().__init__(message)


@dataclass(frozen=True)
class PackageManagerCommands:
    """Subcommands and flags that differ between package managers."""

    install: str = "install"
    silent_flag: str = "--silent"


class AbstractPackageManager:
    """Installs dependencies through one package manager binary."""

    commands = PackageManagerCommands()

    def __init__(self, runner: AbstractRunner) -> None:
        self.runner = runner

    @property
    def name(self) -> str:
        return self.runner.binary

    async def install(self, directory: str | Path, package_manager: str) -> None:
        """Install the dependencies of the project in *directory*.

        Args:
            directory: Project root containing ``package.json``.
            package_manager: Name shown in the "get started" hint.

        Raises:
            InstallError: If the package manager fails; the message tells the
                user which command to run manually.
        """
        project_dir = Path(directory)
        args = [self.commands.install, self.commands.silent_flag]

        with create_progress() as progress:
            progress.add_task(MESSAGES.PACKAGE_MANAGER_INSTALLATION_IN_PROGRESS, total=None)
            try:
                await self.runner.run(args, collect=True, cwd=project_dir)
            except RunnerError as exc:
                manual = self.runner.raw_full_command(self.commands.install)
                raise InstallError(
                    MESSAGES.package_manager_installation_failed(manual),
                    command=exc.command,
                    stderr=exc.stderr,
                ) from exc

        print_success(MESSAGES.package_manager_installation_succeed(project_dir.name))
        print_info(MESSAGES.GET_STARTED_INFORMATION)
        print_info()
        console.print(f"  [dim]{MESSAGES.change_dir_command(project_dir.name)}[/dim]")
        console.print(f"  [dim]{MESSAGES.start_command(package_manager)}[/dim]")
        print_info()
