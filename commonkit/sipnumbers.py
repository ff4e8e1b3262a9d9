"""Helpers for telephone numbers found in SIP URIs."""

_NUMBER_CHARS = frozenset("0123456789*#+")


def extract_number_from_uri(uri: str) -> str:
    """Return the user part of a SIP URI, or "" if there is none.

    Positions follow 1-based string semantics: a leading "sip:" is skipped,
    and the text up to the first "@" is returned.
    """
    start = uri.find("sip:") + 1
    if start == 1:
        start += 4
    end = uri.find("@") + 1
    if end <= start:
        return ""
    count = end - start
    first = max(start, 1) - 1
    return uri[first:first + count]


def clean_number(number: str) -> str:
    """Keep only digits and the characters '*', '#' and '+'."""
    return "".join(ch for ch in number if ch in _NUMBER_CHARS)