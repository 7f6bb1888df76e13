"""
Import CLI Command

Reads a TSV file of offers and prints the decoded records
"""

import logging
import click

from .base import Command
from ...readers import TSVFileReader
from ...cli_utils import echo_error, print_detailed_offer

logger = logging.getLogger(__name__)


class ImportCommand(Command):

    @property
    def name(self) -> str:
        return '--import'

    def execute(self, *parameters: str) -> None:
        filename = parameters[0] if parameters else None

        if not filename:
            echo_error("Please provide path to file. Example: --import <path>")
            return

        file_reader = TSVFileReader(filename.strip())

        # Only Exception subclasses are reported; KeyboardInterrupt and friends propagate
        try:
            file_reader.read()
            offers = file_reader.to_array()
        except Exception as e:
            logger.debug(f"Import failed for {filename}: {str(e)}")
            echo_error(f"Can't import data from file: {filename}", str(e))
            return

        click.echo(f"📄 Imported {len(offers)} offer(s) from {filename}")
        click.echo("=" * 80)
        for i, offer in enumerate(offers, 1):
            print_detailed_offer(offer, i)
