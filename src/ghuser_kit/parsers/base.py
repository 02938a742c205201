# parsers/base.py

from abc import ABC, abstractmethod

from .models import ParsedTable


class TableParser(ABC):
    @abstractmethod
    def parse(self, text: str) -> ParsedTable:
        """
        Parse fully materialized text into a table.

        Requirements:
        - Deterministic output for same input
        - Never raises for any string input
        - No state kept between calls
        """
        raise NotImplementedError
