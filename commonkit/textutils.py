"""Text and file helpers: URL encoding, file times and code-page conversion."""

from __future__ import annotations

import locale
import os
from datetime import datetime, timezone

_URL_SAFE = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_."
)


def urlencode(text: str | bytes, limit: int | None = None) -> str:
    """Percent-encode everything except letters, digits and '-', '_', '.'.

    ``limit`` is a buffer size that includes a terminator: the result holds at
    most ``limit - 1`` characters, and an escape that would not fit ends it.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must not be negative, got {limit}")
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    raw = raw.split(b"\0", 1)[0]
    parts: list[str] = []
    length = 0
    for byte in raw:
        if limit is not None and length + 1 >= limit:
            break
        if byte in _URL_SAFE:
            parts.append(chr(byte))
            length += 1
        elif limit is None or length + 4 <= limit:
            parts.append(f"%{byte:02X}")
            length += 3
        else:
            break
    return "".join(parts)


def get_file_write_time(path: str | os.PathLike[str]) -> datetime:
    """Return the last write time of an existing file as an aware UTC datetime."""
    with open(path, "rb") as handle:
        mtime = os.fstat(handle.fileno()).st_mtime
    return datetime.fromtimestamp(mtime, tz=timezone.utc)


def utf8_to_ansi(data: bytes | str, encoding: str | None = None) -> bytes:
    """Re-encode UTF-8 bytes in a single-byte code page.

    ``encoding`` defaults to the system's preferred encoding. The input ends at
    the first NUL; undecodable or unmappable characters are replaced.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    raw = raw.split(b"\0", 1)[0]
    target = encoding or locale.getpreferredencoding(False)
    return raw.decode("utf-8", errors="replace").encode(target, errors="replace")