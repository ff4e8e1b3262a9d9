import sys

from hypothesis import given
from hypothesis import strategies as st

from commonkit.mathutils import almost_equal


def test_tiny_values_are_equal():
    assert almost_equal(1e-11, -1e-11)
    assert almost_equal(0.0, 0.0)


def test_identical_values_are_equal():
    assert almost_equal(1.0, 1.0)
    assert almost_equal(-5.0, -5.0)


def test_distinct_values_are_not_equal():
    assert not almost_equal(1.0, 1.0 + 1e-9)
    assert not almost_equal(1.0, 2.0)


def test_zero_against_small_nonzero():
    assert not almost_equal(0.0, 1e-9)


def test_one_ulp_apart_is_not_equal():
    x = 1.0
    assert not almost_equal(x, x + sys.float_info.epsilon)


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_reflexive_for_finite_nonzero(x):
    if abs(x) >= 1e-10:
        assert almost_equal(x, x) == (abs(x) * sys.float_info.epsilon > 0)
    else:
        assert almost_equal(x, x)


@given(
    st.floats(allow_nan=False, allow_infinity=False),
    st.floats(allow_nan=False, allow_infinity=False),
)
def test_symmetric(a, b):
    assert almost_equal(a, b) == almost_equal(b, a)