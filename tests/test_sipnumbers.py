from hypothesis import given
from hypothesis import strategies as st

from commonkit.sipnumbers import clean_number, extract_number_from_uri


def test_extract_plain_sip_uri():
    assert extract_number_from_uri("sip:123@example.com") == "123"


def test_extract_without_at_sign():
    assert extract_number_from_uri("sip:123") == ""


def test_extract_empty_user():
    assert extract_number_from_uri("sip:@example.com") == ""


def test_extract_at_before_sip_prefix():
    assert extract_number_from_uri("@sip:123") == ""


def test_extract_empty_string():
    assert extract_number_from_uri("") == ""


@given(st.text(alphabet="0123456789*#+", min_size=1))
def test_extract_round_trip(user):
    assert extract_number_from_uri(f"sip:{user}@example.com") == user


def test_clean_number_strips_separators():
    assert clean_number("+48 (12) 345-67") == "+481234567"


def test_clean_number_keeps_star_and_hash():
    assert clean_number("*#12#") == "*#12#"


def test_clean_number_removes_letters():
    assert clean_number("abc") == ""


@given(st.text())
def test_clean_number_invariants(text):
    result = clean_number(text)
    assert set(result) <= set("0123456789*#+")
    assert clean_number(result) == result
    assert len(result) <= len(text)