import logging
import click

from .application import CLIApplication
from .commands import HelpCommand, VersionCommand, ImportCommand


def create_application() -> CLIApplication:
    """Build the application with every command registered"""
    application = CLIApplication()
    application.register_commands([
        HelpCommand(),
        VersionCommand(),
        ImportCommand(),
    ])
    return application


# click's own option parsing and --help are switched off: every token,
# flags included, goes to CLIApplication untouched. A bare "--" is still
# click's end-of-options marker and is dropped.
@click.command(context_settings={
    'ignore_unknown_options': True,
    'allow_extra_args': True,
    'help_option_names': [],
})
@click.argument('argv', nargs=-1, type=click.UNPROCESSED)
def cli(argv):
    """Six Cities - prepares offer data for the REST API server"""
    logging.basicConfig(level=logging.INFO)
    create_application().process_command(list(argv))


if __name__ == '__main__':
    cli()
