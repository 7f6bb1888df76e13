"""
Version CLI Command

Prints the version recorded in the project's package.json
"""

import json
import logging
import click
from pathlib import Path

from .base import Command
from ...cli_utils import DEFAULT_VERSION_FILE, echo_error
from ...exceptions import VersionReadError

logger = logging.getLogger(__name__)


class VersionCommand(Command):

    def __init__(self, file_path: str = DEFAULT_VERSION_FILE):
        self.file_path = file_path

    @property
    def name(self) -> str:
        return '--version'

    def _read_version(self) -> str:
        """
        Load the version string from the config file

        Raises:
            VersionReadError: If the file is unreadable, not JSON, or has no version
        """
        try:
            content = json.loads(Path(self.file_path).resolve().read_text(encoding='utf-8'))
        except (OSError, ValueError, RecursionError) as e:
            raise VersionReadError(str(e)) from e

        if not isinstance(content, dict) or 'version' not in content:
            raise VersionReadError("Failed to parse json content.")

        return str(content['version'])

    def execute(self, *parameters: str) -> None:
        try:
            version = self._read_version()
        except VersionReadError as e:
            logger.debug(f"Version lookup failed for {self.file_path}: {e}")
            echo_error(f"Failed to read version from {self.file_path}", str(e))
            return

        click.secho(version, fg='blue')
