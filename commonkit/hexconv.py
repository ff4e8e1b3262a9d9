"""Conversions between integers, bytes and hex or binary strings."""

from __future__ import annotations

import string

_HEX_DIGITS = frozenset(string.hexdigits)
_LOWER_HEX = frozenset("0123456789abcdef")
_TRIM_CHARS = "".join(chr(code) for code in range(33))
_UNEVEN_MESSAGE = "Number of hex characters in data is uneven!"


class HexFormatError(ValueError):
    """Raised when text is not valid hex data."""


def hex_string_to_int(text: str) -> int:
    """Parse a string of hex digits; an empty string gives 0."""
    bad = [ch for ch in text if ch not in _HEX_DIGITS]
    if bad:
        raise HexFormatError(f"invalid hex character {bad[0]!r} in {text!r}")
    return int(text, 16) if text else 0


def int_to_hex_string(value: int) -> str:
    """Format a 32-bit integer as upper-case hex of even length."""
    text = f"{value & 0xFFFFFFFF:X}"
    return "0" + text if len(text) % 2 else text


def bin_string_to_int(text: str) -> int:
    """Parse a binary string; every character other than '1' counts as 0."""
    bits = "".join("1" if ch == "1" else "0" for ch in text)
    return int(bits, 2) if bits else 0


def int_to_bin_string(value: int) -> str:
    """Format a positive integer in binary, zero-padded to a multiple of 7 digits.

    Zero and negative values give "0".
    """
    if value <= 0:
        return "0"
    bits = f"{value:b}"
    width = -(-len(bits) // 7) * 7
    return bits.zfill(width)


def hex_string_to_buf(text: str) -> bytes:
    """Convert pairs of hex digits to bytes; odd-length text gives b""."""
    if len(text) % 2:
        return b""
    return bytes(hex_string_to_int(text[i:i + 2]) for i in range(0, len(text), 2))


def buf_to_hex_string(data: bytes) -> str:
    """Format bytes as upper-case hex, two digits per byte."""
    return bytes(data).hex().upper()


def hex_string_clean_to_buf(text: str) -> bytes:
    """Strip "0x" prefixes and non-hex characters, then convert to bytes.

    Raises HexFormatError when an odd number of hex digits is left.
    """
    cleaned = text.strip(_TRIM_CHARS).lower()
    for token in ("0x", "\n", "\r"):
        cleaned = cleaned.replace(token, "")
    digits = "".join(ch for ch in cleaned if ch in _LOWER_HEX)
    if len(digits) % 2:
        raise HexFormatError(_UNEVEN_MESSAGE)
    return hex_string_to_buf(digits)