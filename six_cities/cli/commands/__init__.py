from .base import Command
from .help import HelpCommand
from .version import VersionCommand
from .import_data import ImportCommand

__all__ = [
    'Command',
    'HelpCommand',
    'VersionCommand',
    'ImportCommand',
]
