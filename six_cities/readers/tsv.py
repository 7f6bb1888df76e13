import logging
from typing import List, Optional

from .base import FileReader
from .fields import OFFER_FIELDS
from ..models import Offer
from ..exceptions import FileReadError, FileNotReadError

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = '\t'


class TSVFileReader(FileReader):
    """Reads offers from a tab-separated file, one offer per line"""

    def __init__(self, filename: str):
        self.filename = filename
        self._raw_data: Optional[str] = None

    def read(self) -> None:
        """Read the whole file as UTF-8 text"""
        try:
            with open(self.filename, 'r', encoding='utf-8') as f:
                self._raw_data = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(str(e)) from e
        logger.info(f"Read {len(self._raw_data)} characters from {self.filename}")

    def to_array(self) -> List[Offer]:
        if self._raw_data is None:
            raise FileNotReadError("File was not read")

        offers = [
            self.parse_line(line)
            for line in self._raw_data.split('\n')
            if line.strip()
        ]
        logger.info(f"Parsed {len(offers)} offers from {self.filename}")
        return offers

    @staticmethod
    def parse_line(line: str) -> Offer:
        """
        Decode one TSV row into an Offer.

        Rows shorter than the schema are padded with None, so trailing
        attributes come out as None instead of failing the row. Extra
        columns are ignored.
        """
        values: List[Optional[str]] = line.rstrip('\r').split(FIELD_SEPARATOR)
        if len(values) < len(OFFER_FIELDS):
            logger.warning(f"Short row: expected {len(OFFER_FIELDS)} fields, got {len(values)}")
            values.extend([None] * (len(OFFER_FIELDS) - len(values)))

        return Offer(**{
            name: decode(raw)
            for (name, decode), raw in zip(OFFER_FIELDS, values)
        })
