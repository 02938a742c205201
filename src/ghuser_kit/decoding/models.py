# decoding/models.py

from dataclasses import dataclass


@dataclass(frozen=True)
class DataUrl:
    mime: str
    is_base64: bool
    text: str
