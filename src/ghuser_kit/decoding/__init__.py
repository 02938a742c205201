from .base64_text import decode_base64_to_text
from .data_url import parse_data_url
from .models import DataUrl

__all__ = [
    "DataUrl",
    "decode_base64_to_text",
    "parse_data_url",
]
