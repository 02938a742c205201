# decoding/base64_text.py

import base64
import logging
import re

from ghuser_kit.observability import names
from ghuser_kit.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)

_ASCII_WHITESPACE = re.compile(r"[\t\n\f\r ]+")
_NON_ALPHABET = re.compile(r"[^A-Za-z0-9+/]")


def forgiving_b64decode(data: str) -> bytes:
    """
    Decode base64 the way browsers' atob() does.

    ASCII whitespace is ignored and padding is optional. Raises ValueError
    for input that cannot be base64.
    """
    data = _ASCII_WHITESPACE.sub("", data)
    if len(data) % 4 == 0:
        if data.endswith("=="):
            data = data[:-2]
        elif data.endswith("="):
            data = data[:-1]
    if len(data) % 4 == 1:
        raise ValueError("base64 input has invalid length")
    if _NON_ALPHABET.search(data):
        raise ValueError("base64 input contains invalid characters")
    return base64.b64decode(data + "=" * (-len(data) % 4), validate=True)


def bytes_to_text(raw: bytes) -> str:
    # Leading BOM is dropped, invalid sequences become U+FFFD.
    return raw.decode("utf-8-sig", errors="replace")


def decode_base64_to_text(
    b64: str, *, metrics_hook: MetricsHook = NoOpMetricsHook()
) -> str:
    """Decode a base64 string to UTF-8 text, or "" when it is not valid base64."""
    try:
        return bytes_to_text(forgiving_b64decode(b64))
    except ValueError as e:
        logger.error("Failed to decode base64 string: %s", e)
        metrics_hook.increment(names.DECODE_ERRORS_TOTAL, labels={"kind": "base64"})
        return ""
