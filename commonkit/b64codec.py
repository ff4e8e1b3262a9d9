"""Base64 encoding with a basic and a file-safe alphabet."""

from __future__ import annotations

import base64
from enum import Enum

_BASIC_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_FSAFE_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-,"

# The decoder scans only characters of the basic alphabet, whatever alphabet
# is chosen for the value lookup.
_SCAN_CHARS = frozenset(_BASIC_CHARS)
_TO_FSAFE = str.maketrans("+/", "-,")
_NOT_FOUND = 0xFF


class Alphabet(Enum):
    """Character set used for the last two base64 digits."""

    BASIC = _BASIC_CHARS
    FSAFE = _FSAFE_CHARS


def b64encode(data: bytes, alphabet: Alphabet = Alphabet.BASIC) -> str:
    """Encode bytes as base64 text padded with '='."""
    text = base64.b64encode(bytes(data)).decode("ascii")
    if alphabet is Alphabet.FSAFE:
        text = text.translate(_TO_FSAFE)
    return text


def _decode_group(values: list[int]) -> bytes:
    count = len(values)
    c0, c1, c2, c3 = values + [_NOT_FOUND] * (4 - count)
    decoded = bytes((
        ((c0 << 2) + ((c1 & 0x30) >> 4)) & 0xFF,
        (((c1 & 0x0F) << 4) + ((c2 & 0x3C) >> 2)) & 0xFF,
        (((c2 & 0x03) << 6) + c3) & 0xFF,
    ))
    return decoded if count == 4 else decoded[:count - 1]


def b64decode(text: str, alphabet: Alphabet = Alphabet.BASIC) -> bytes:
    """Decode base64 text.

    Decoding stops at the first '=' or at the first character outside
    A-Z, a-z, 0-9, '+' and '/'. A character of that set that is missing from
    the chosen alphabet decodes as the value 0xFF.
    """
    lookup = {ch: value for value, ch in enumerate(alphabet.value)}
    values: list[int] = []
    for ch in text:
        if ch == "=" or ch not in _SCAN_CHARS:
            break
        values.append(lookup.get(ch, _NOT_FOUND))
    return b"".join(
        _decode_group(values[start:start + 4]) for start in range(0, len(values), 4)
    )