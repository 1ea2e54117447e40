"""Yureka UI commands: ``init``, ``add`` and ``remove``.

Each command is an object built from a ``Config`` and returns a result model
from its async ``run`` method.  Fatal problems are raised as
``yureka.exceptions.YurekaError`` subclasses for the CLI to report.
"""

from yureka.commands.add import AddCommand, AddResult
from yureka.commands.base import BaseCommand
from yureka.commands.init import InitCommand, InitResult, ProjectSettings
from yureka.commands.remove import RemoveCommand, RemoveResult

__all__ = [
    "AddCommand",
    "AddResult",
    "BaseCommand",
    "InitCommand",
    "InitResult",
    "ProjectSettings",
    "RemoveCommand",
    "RemoveResult",
]
