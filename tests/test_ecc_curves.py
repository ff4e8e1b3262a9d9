import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from commonkit.ecc_curves import (
    CURVES,
    DEFAULT_CURVE,
    SECP128R1,
    SECP256R1,
    Point,
)

CURVE_KEYS = list(CURVES)


@pytest.mark.parametrize("key", CURVE_KEYS)
def test_generator_is_on_curve(key):
    assert CURVES[key].is_on_curve(CURVES[key].g)


@pytest.mark.parametrize("key", CURVE_KEYS)
def test_order_times_generator_is_infinity(key):
    assert CURVES[key].multiply(CURVES[key].g, CURVES[key].n) is None


@pytest.mark.parametrize("key", CURVE_KEYS)
def test_compress_round_trip(key):
    point = CURVES[key].multiply(CURVES[key].g, 12345)
    assert CURVES[key].decompress(CURVES[key].compress(point)) == point


@pytest.mark.parametrize("key", CURVE_KEYS)
def test_compressed_length_and_prefix(key):
    data = CURVES[key].compress(CURVES[key].g)
    assert len(data) == CURVES[key].num_bytes + 1
    assert data[0] in (2, 3)
    assert data[0] & 1 == CURVES[key].g.y & 1


def test_default_curve_is_secp256r1():
    assert DEFAULT_CURVE is SECP256R1
    assert DEFAULT_CURVE.compress(DEFAULT_CURVE.g) == SECP256R1.compress(SECP256R1.g)


def test_secp256r1_compressed_generator_prefix():
    data = SECP256R1.compress(SECP256R1.g)
    assert data[0] == 3
    assert data[1:] == SECP256R1.g.x.to_bytes(32, "big")


def test_secp256r1_double_generator_known_value():
    doubled = SECP256R1.double(SECP256R1.g)
    assert doubled.x == 0x7CF27B188D034F7E8A52380304B51AC3C08969E277F21B35A60B48FC47669978
    assert doubled.y == 0x07775510DB8ED040293D9AC69F7430DBBA7DADE63CE982299E04B79D227873D1


def test_double_matches_add_to_self():
    curve = SECP128R1
    assert curve.double(curve.g) == curve.add(curve.g, curve.g)


def test_multiply_three_equals_double_plus_one():
    curve = SECP256R1
    assert curve.multiply(curve.g, 3) == curve.add(curve.double(curve.g), curve.g)


def test_add_negation_gives_infinity():
    curve = SECP128R1
    negated = Point(curve.g.x, curve.p - curve.g.y)
    assert curve.is_on_curve(negated)
    assert curve.add(curve.g, negated) is None


def test_add_with_infinity_is_identity():
    curve = SECP128R1
    assert curve.add(None, curve.g) == curve.g
    assert curve.add(curve.g, None) == curve.g


def test_multiply_by_zero_and_one():
    curve = SECP128R1
    assert curve.multiply(curve.g, 0) is None
    assert curve.multiply(curve.g, 1) == curve.g


def test_multiply_negative_scalar_rejected():
    with pytest.raises(ValueError):
        SECP128R1.multiply(SECP128R1.g, -1)


def test_order_minus_one_is_negation():
    curve = SECP128R1
    result = curve.multiply(curve.g, curve.n - 1)
    assert result == Point(curve.g.x, curve.p - curve.g.y)


def test_point_off_curve_detected():
    curve = SECP256R1
    assert not curve.is_on_curve(Point(curve.g.x, (curve.g.y + 1) % curve.p))
    assert not curve.is_on_curve(None)
    assert not curve.is_on_curve(Point(curve.p, curve.g.y))


@settings(max_examples=25, deadline=None)
@given(st.integers(min_value=1, max_value=2**40), st.integers(min_value=1, max_value=2**40))
def test_scalar_multiplication_is_additive(a, b):
    curve = SECP128R1
    left = curve.multiply(curve.g, a + b)
    right = curve.add(curve.multiply(curve.g, a), curve.multiply(curve.g, b))
    assert left == right
    assert curve.is_on_curve(left)


@settings(max_examples=25, deadline=None)
@given(st.integers(min_value=1, max_value=2**64))
def test_add_is_commutative(k):
    curve = SECP128R1
    q = curve.multiply(curve.g, k)
    assert curve.add(curve.g, q) == curve.add(q, curve.g)


@pytest.mark.parametrize("key", CURVE_KEYS)
def test_mod_sqrt_of_square(key):
    p = CURVES[key].p
    square = CURVES[key].g.y * CURVES[key].g.y % p
    root = CURVES[key].mod_sqrt(square)
    assert root * root % p == square


@settings(max_examples=30)
@given(st.integers(min_value=0, max_value=2**128 - 1))
def test_bytes_round_trip(value):
    curve = SECP128R1
    data = curve.to_bytes(value)
    assert len(data) == 16
    assert curve.from_bytes(data) == value


def test_to_bytes_is_big_endian():
    assert SECP128R1.to_bytes(1) == bytes(15) + b"\x01"


def test_to_bytes_rejects_oversize_value():
    with pytest.raises(ValueError):
        SECP128R1.to_bytes(1 << 128)


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        SECP256R1.from_bytes(bytes(31))


def test_decompress_rejects_wrong_length():
    with pytest.raises(ValueError):
        SECP256R1.decompress(bytes(32))


def test_compress_infinity_rejected():
    with pytest.raises(ValueError):
        SECP256R1.compress(None)


def test_decompress_picks_parity_from_prefix():
    curve = SECP256R1
    body = curve.to_bytes(curve.g.x)
    even = curve.decompress(b"\x02" + body)
    odd = curve.decompress(b"\x03" + body)
    assert even.y & 1 == 0
    assert odd.y & 1 == 1
    assert (even.y + odd.y) % curve.p == 0