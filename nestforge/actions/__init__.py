"""Command actions -- the work behind ``new`` and ``build``."""

from nestforge.actions.base import AbstractAction
from nestforge.actions.build import BuildAction
from nestforge.actions.new import NewAction

__all__ = ["AbstractAction", "BuildAction", "NewAction"]
