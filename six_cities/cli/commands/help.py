"""
Help CLI Command

Prints usage for all available commands
"""

import click

from .base import Command


class HelpCommand(Command):

    @property
    def name(self) -> str:
        return '--help'

    def execute(self, *parameters: str) -> None:
        click.echo(click.style("🔧 Six Cities - prepares offer data for the REST API server", bold=True))
        click.echo("=" * 50)
        click.echo()
        click.echo("Usage:")
        click.echo("  python main.py --<command> [arguments]")
        click.echo()
        click.echo("📋 COMMANDS:")
        click.echo(f"  {click.style('--version', fg='green')}              - Print the version number")
        click.echo(f"  {click.style('--help', fg='green')}                 - Print this text")
        click.echo(f"  {click.style('--import <path>', fg='green')}        - Import offers from a TSV file")
