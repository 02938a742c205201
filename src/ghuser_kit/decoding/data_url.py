# decoding/data_url.py

import logging
import re
from urllib.parse import unquote

from ghuser_kit.observability import names
from ghuser_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base64_text import bytes_to_text, forgiving_b64decode
from .models import DataUrl

logger = logging.getLogger(__name__)

DATA_URL_PREFIX = "data:"
DEFAULT_MIME = "text/plain"

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def parse_data_url(
    url: str, *, metrics_hook: MetricsHook = NoOpMetricsHook()
) -> DataUrl | None:
    """
    Split a `data:` URL into MIME type, base64 flag and decoded text.

    Returns None for anything that is not a data URL. A payload that fails
    to decode is logged and reported as empty text.
    """
    if not url.startswith(DATA_URL_PREFIX):
        return None

    header, _, payload = url[len(DATA_URL_PREFIX) :].partition(",")
    params = header.split(";")
    mime = params[0] or DEFAULT_MIME
    is_base64 = "base64" in params

    text = ""
    if is_base64:
        # Commas are not base64; anything after one is ignored.
        payload = payload.split(",", 1)[0]
        try:
            text = bytes_to_text(forgiving_b64decode(payload))
        except ValueError as e:
            logger.error("Failed to decode base64 data URL: %s", e)
            metrics_hook.increment(
                names.DECODE_ERRORS_TOTAL, labels={"kind": "base64"}
            )
    else:
        try:
            text = _percent_decode(payload)
        except ValueError as e:
            logger.error("Failed to decode URL-encoded data: %s", e)
            metrics_hook.increment(
                names.DECODE_ERRORS_TOTAL, labels={"kind": "percent"}
            )

    return DataUrl(mime=mime, is_base64=is_base64, text=text)


def _percent_decode(payload: str) -> str:
    # Strict: a stray "%" or an escape that is not UTF-8 is an error.
    if _MALFORMED_ESCAPE.search(payload):
        raise ValueError("malformed percent escape")
    return unquote(payload, errors="strict")
