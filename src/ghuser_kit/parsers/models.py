# parsers/models.py

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ParsedTable:
    """Result of parsing delimited text.

    `headers` is None when the first row looks like data; in that case the
    first line is the first entry of `rows`.
    """

    headers: list[str] | None
    rows: list[list[str]] = field(default_factory=list)
