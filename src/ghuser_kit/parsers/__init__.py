from .base import TableParser
from .csv_parser import CsvParser, parse_csv
from .models import ParsedTable
from .numeric import parse_float_prefix

__all__ = [
    "CsvParser",
    "ParsedTable",
    "TableParser",
    "parse_csv",
    "parse_float_prefix",
]
