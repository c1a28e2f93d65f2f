"""CLI commands: flag parsing and validation in front of the actions."""

from nestforge.commands.base import AbstractCommand, InvalidOptionError
from nestforge.commands.build import BuildCommand
from nestforge.commands.new import NewCommand

__all__ = ["AbstractCommand", "BuildCommand", "InvalidOptionError", "NewCommand"]
