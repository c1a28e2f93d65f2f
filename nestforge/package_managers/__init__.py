"""Package manager strategies (npm, yarn, pnpm)."""

from __future__ import annotations

from enum import Enum

from nestforge.config import Config
from nestforge.runners import Runner, runner_factory
from nestforge.strategies import StrategyFactory

from .base import AbstractPackageManager, InstallError, PackageManagerCommands


class PackageManager(str, Enum):
    """Package managers a project can be installed with.

    Also the choice list offered when the user is asked to pick one.
    """

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


class NpmPackageManager(AbstractPackageManager):
    commands = PackageManagerCommands(install="install", silent_flag="--silent")


class YarnPackageManager(AbstractPackageManager):
    commands = PackageManagerCommands(install="install", silent_flag="--silent")


class PnpmPackageManager(AbstractPackageManager):
    commands = PackageManagerCommands(install="install", silent_flag="--reporter=silent")


def package_manager_factory(
    config: Config | None = None,
) -> StrategyFactory[PackageManager, AbstractPackageManager]:
    """Build the package manager factory.  There is no default manager."""
    runners = runner_factory(config)
    return StrategyFactory(
        "package manager",
        PackageManager,
        {
            PackageManager.NPM: lambda: NpmPackageManager(runners.create(Runner.NPM)),
            PackageManager.YARN: lambda: YarnPackageManager(runners.create(Runner.YARN)),
            PackageManager.PNPM: lambda: PnpmPackageManager(runners.create(Runner.PNPM)),
        },
    )


__all__ = [
    "AbstractPackageManager",
    "InstallError",
    "NpmPackageManager",
    "PackageManager",
    "PackageManagerCommands",
    "PnpmPackageManager",
    "YarnPackageManager",
    "package_manager_factory",
]
