# Readers for offer data files

from .base import FileReader
from .tsv import TSVFileReader

__all__ = [
    'FileReader',
    'TSVFileReader',
]
