from abc import ABC, abstractmethod


class Command(ABC):
    """Abstract base class for CLI commands"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Flag the command is registered under, e.g. '--help'"""
        pass

    @abstractmethod
    def execute(self, *parameters: str) -> None:
        """
        Run the command

        Args:
            parameters: Arguments collected after the command's flag
        """
        pass
