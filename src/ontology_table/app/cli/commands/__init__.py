"""
CLI command implementations.

- base.py: Base command class with config, logging and batch handling
- inspect.py: InspectCommand
- export.py: ExportCommand
- formats.py: FormatsCommand
"""

from .base import BaseCommand
from .export import ExportCommand
from .formats import FormatsCommand
from .inspect import InspectCommand

COMMANDS = {
    'inspect': InspectCommand,
    'export': ExportCommand,
    'formats': FormatsCommand,
}

__all__ = [
    'BaseCommand',
    'InspectCommand',
    'ExportCommand',
    'FormatsCommand',
    'COMMANDS',
]
