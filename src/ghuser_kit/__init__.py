# Decoding
from .decoding import DataUrl, decode_base64_to_text, parse_data_url

# GitHub
from .github import (
    GitHubConfig,
    GitHubUsersClient,
    LookupOutcome,
    UserLookupError,
    format_date,
    lookup_creation_date,
    token_from_url,
)

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import CsvParser, ParsedTable, TableParser, parse_csv

__all__ = [
    # Decoding
    "DataUrl",
    "decode_base64_to_text",
    "parse_data_url",
    # GitHub
    "GitHubConfig",
    "GitHubUsersClient",
    "LookupOutcome",
    "UserLookupError",
    "format_date",
    "lookup_creation_date",
    "token_from_url",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "CsvParser",
    "ParsedTable",
    "TableParser",
    "parse_csv",
]
