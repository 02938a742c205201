# parsers/numeric.py

import re

# Whitespace skipped before the number: ASCII controls, space separators,
# line/paragraph separators and the byte-order mark.
_LEADING_SPACE = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

_FLOAT_PREFIX = re.compile(
    rf"[{_LEADING_SPACE}]*"
    r"(?P<number>[+-]?(?:Infinity|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


def parse_float_prefix(text: str) -> float | None:
    """
    Parse the longest numeric prefix of `text`.

    Returns None when no prefix parses. Trailing garbage is ignored, so
    "12abc" gives 12.0 and "1e5x" gives 100000.0.
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group("number").replace("Infinity", "inf"))
