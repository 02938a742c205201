# parsers/csv_parser.py

import logging
from time import monotonic

from ghuser_kit.observability import names
from ghuser_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import TableParser
from .models import ParsedTable
from .numeric import parse_float_prefix

logger = logging.getLogger(__name__)

DELIMITERS = (",", ";", "\t")
QUOTE = '"'


class CsvParser(TableParser):
    """
    Heuristic delimited-text parser.
    - Sniffs the delimiter from the first line only
    - Honors double-quoted spans within a single line
    - Infers a header row when no first-row cell starts with a number
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def parse(self, text: str) -> ParsedTable:
        start = monotonic()

        text = text.replace("\r\n", "\n").replace("\r", "\n")
        if text.startswith("\ufeff"):
            text = text[1:]

        lines = text.split("\n")
        delimiter = sniff_delimiter(lines[0])
        logger.debug("Using delimiter %r", delimiter)

        rows = []
        for line in lines:
            row = [_unquote(f) for f in split_line(line, delimiter)]
            if len(row) > 1 or row[0] != "":
                rows.append(row)

        table = self._infer_header(rows)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.CSV_PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.CSV_ROWS_PARSED, len(table.rows))
        return table

    def _infer_header(self, rows: list[list[str]]) -> ParsedTable:
        if not rows:
            return ParsedTable(headers=[], rows=[])

        first = rows[0]
        if all(parse_float_prefix(cell) is None for cell in first):
            logger.debug("Treating first row as header: %s", first)
            return ParsedTable(headers=first, rows=rows[1:])

        return ParsedTable(headers=None, rows=rows)


def sniff_delimiter(line: str) -> str:
    """Pick the candidate occurring most often in `line`; earlier wins ties."""
    best = DELIMITERS[0]
    best_count = 0
    for candidate in DELIMITERS:
        count = line.count(candidate)
        if count > best_count:
            best, best_count = candidate, count
    return best


def split_line(line: str, delimiter: str) -> list[str]:
    """
    Split `line` on `delimiter` outside quoted spans.

    A delimiter is a boundary when the quotes between it and the end of the
    line pair up, so the scan runs right to left and toggles on each quote.
    On lines with an odd quote count this keeps the leftmost quote unpaired.
    """
    fields = []
    quoted = False
    end = len(line)
    for i in range(len(line) - 1, -1, -1):
        char = line[i]
        if char == QUOTE:
            quoted = not quoted
        elif char == delimiter and not quoted:
            fields.append(line[i + 1 : end])
            end = i
    fields.append(line[:end])
    fields.reverse()
    return fields


def _unquote(field: str) -> str:
    if len(field) >= 2 and field.startswith(QUOTE) and field.endswith(QUOTE):
        return field[1:-1].replace(QUOTE * 2, QUOTE)
    return field


def parse_csv(
    text: str, *, metrics_hook: MetricsHook = NoOpMetricsHook()
) -> ParsedTable:
    return CsvParser(metrics_hook=metrics_hook).parse(text)
