from abc import ABC, abstractmethod
from typing import List

from ..models import Offer


class FileReader(ABC):
    """Abstract base class for offer data files"""

    @abstractmethod
    def read(self) -> None:
        """
        Load the raw file contents into memory

        Raises:
            FileReadError: If the file is missing or unreadable
        """
        pass

    @abstractmethod
    def to_array(self) -> List[Offer]:
        """
        Decode the loaded contents into offers, in file order

        Raises:
            FileNotReadError: If read() has not succeeded yet
        """
        pass
