import os
from datetime import datetime, timezone
from urllib.parse import quote

import pytest
from hypothesis import given
from hypothesis import strategies as st

from commonkit.textutils import get_file_write_time, urlencode, utf8_to_ansi


def test_urlencode_keeps_safe_characters():
    text = "abc-_.XYZ09"
    assert urlencode(text) == text


def test_urlencode_escapes_space():
    assert urlencode("a b") == "a%20b"


@given(st.text(alphabet=st.characters(blacklist_characters="~\x00"), max_size=30))
def test_urlencode_matches_quote(text):
    assert urlencode(text) == quote(text, safe="")


def test_urlencode_limit_truncates_plain_text():
    text = "abcdef"
    assert urlencode(text, 4) == text[:3]


def test_urlencode_limit_stops_before_partial_escape():
    assert urlencode("a b", 4) == "a"


@given(st.text(max_size=20), st.integers(min_value=1, max_value=30))
def test_urlencode_respects_limit(text, limit):
    assert len(urlencode(text, limit)) <= limit - 1


def test_urlencode_zero_limit_is_empty():
    assert urlencode("abc", 0) == ""


def test_urlencode_negative_limit_rejected():
    with pytest.raises(ValueError):
        urlencode("abc", -1)


def test_get_file_write_time(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_bytes(b"data")
    os.utime(path, (1_000_000_000, 1_000_000_000))
    assert get_file_write_time(path) == datetime.fromtimestamp(1_000_000_000, timezone.utc)


def test_get_file_write_time_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        get_file_write_time(tmp_path / "missing.txt")


def test_get_file_write_time_directory(tmp_path):
    with pytest.raises(OSError):
        get_file_write_time(tmp_path)


def test_utf8_to_ansi_converts():
    text = "café"
    assert utf8_to_ansi(text.encode("utf-8"), "cp1252") == text.encode("cp1252")


def test_utf8_to_ansi_replaces_unmappable():
    assert utf8_to_ansi("\u2713".encode("utf-8"), "cp1252") == b"?"


def test_utf8_to_ansi_stops_at_nul():
    assert utf8_to_ansi(b"ab\x00cd", "ascii") == b"ab"


@given(st.text(alphabet=st.characters(min_codepoint=1, max_codepoint=0x7F), max_size=30))
def test_utf8_to_ansi_ascii_unchanged(text):
    assert utf8_to_ansi(text.encode("utf-8"), "cp1252") == text.encode("ascii")