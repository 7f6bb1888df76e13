import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .commands.base import Command
from ..cli_utils import DEFAULT_COMMAND, FLAG_PREFIX
from ..exceptions import CommandAlreadyRegisteredError

logger = logging.getLogger(__name__)


class CLIApplication:
    """Maps `--flag value ...` arguments to a single registered command"""

    def __init__(self, default_command: str = DEFAULT_COMMAND):
        self.default_command = default_command
        self._commands: Mapping[str, Command] = MappingProxyType({})

    @property
    def commands(self) -> Mapping[str, Command]:
        return self._commands

    def register_commands(self, command_list: Sequence[Command]) -> None:
        """
        Register commands under their names

        Raises:
            CommandAlreadyRegisteredError: If a name is already taken
        """
        commands: Dict[str, Command] = dict(self._commands)
        for command in command_list:
            if command.name in commands:
                raise CommandAlreadyRegisteredError(f"Command {command.name} is already registered")
            commands[command.name] = command
        self._commands = MappingProxyType(commands)

    def get_command(self, command_name: Optional[str]) -> Command:
        """Return the named command, or the default one if it is unknown"""
        if command_name in self._commands:
            return self._commands[command_name]
        return self._commands[self.default_command]

    def parse_command(self, cli_arguments: Sequence[str]) -> Tuple[Optional[str], List[str]]:
        """
        Find the first flag and the arguments that follow it.

        Tokens before the first flag are discarded. Scanning stops at the
        next flag, since only one command runs per invocation.

        Returns:
            (command name or None, arguments)
        """
        command_name: Optional[str] = None
        arguments: List[str] = []

        for argument in cli_arguments:
            if argument.startswith(FLAG_PREFIX):
                if command_name is not None:
                    logger.info(f"Ignoring {argument} and everything after it: only {command_name} runs")
                    break
                command_name = argument
            elif command_name is not None and argument:
                arguments.append(argument)

        return command_name, arguments

    def process_command(self, argv: Sequence[str]) -> None:
        command_name, arguments = self.parse_command(argv)

        if command_name is None:
            self.get_command(self.default_command).execute()
            return

        self.get_command(command_name).execute(*arguments)
