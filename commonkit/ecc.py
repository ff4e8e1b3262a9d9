"""Elliptic-curve key generation, ECDH shared secrets and ECDSA signatures."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Optional

from commonkit.ecc_curves import DEFAULT_CURVE, Curve, Point

MAX_TRIES = 16


class EccError(Exception):
    """Raised when a key, secret or signature cannot be produced."""


@dataclass(frozen=True)
class KeyPair:
    """A compressed public key and the matching private key, as bytes."""

    public_key: bytes
    private_key: bytes


def _random_scalar(curve: Curve) -> int:
    return int.from_bytes(secrets.token_bytes(curve.num_bytes), "big")


def _reduce_once(value: int, modulus: int) -> int:
    """Subtract the modulus once if value is not below it."""
    return value - modulus if value >= modulus else value


def _random_nonzero_scalars(curve: Curve):
    """Yield random scalars in [0, n) that are not zero, at most MAX_TRIES draws."""
    for _ in range(MAX_TRIES):
        value = _random_scalar(curve)
        if value == 0:
            continue
        yield _reduce_once(value, curve.n)


def make_key(curve: Curve = DEFAULT_CURVE) -> KeyPair:
    """Create a key pair; raise EccError if no usable key was found."""
    for private in _random_nonzero_scalars(curve):
        public: Optional[Point] = curve.multiply(curve.g, private)
        if public is None:
            continue
        return KeyPair(curve.compress(public), curve.to_bytes(private))
    raise EccError("could not generate a key pair")


def ecdh_shared_secret(
    public_key: bytes, private_key: bytes, curve: Curve = DEFAULT_CURVE
) -> bytes:
    """Compute the shared secret (x coordinate) from a peer public key and own private key.

    Hashing the result before using it as a symmetric key is recommended.
    """
    public = curve.decompress(public_key)
    private = curve.from_bytes(private_key)
    product = curve.multiply(public, private)
    if product is None:
        raise EccError("shared secret is the point at infinity")
    return curve.to_bytes(product.x)


def ecdsa_sign(
    private_key: bytes, message_hash: bytes, curve: Curve = DEFAULT_CURVE
) -> bytes:
    """Sign a hash; the signature is r followed by s, each num_bytes long."""
    d = curve.from_bytes(private_key)
    e = curve.from_bytes(message_hash)
    n = curve.n
    for k in _random_nonzero_scalars(curve):
        point = curve.multiply(curve.g, k)
        if point is None:
            continue
        r = _reduce_once(point.x, n)
        if r == 0:
            continue
        s = (e + r * d) * pow(k, -1, n) % n
        return curve.to_bytes(r) + curve.to_bytes(s)
    raise EccError("could not generate a signature")


def ecdsa_verify(
    public_key: bytes,
    message_hash: bytes,
    signature: bytes,
    curve: Curve = DEFAULT_CURVE,
) -> bool:
    """Tell whether a signature over a hash is valid for the public key."""
    raw = bytes(signature)
    if len(raw) != 2 * curve.num_bytes:
        raise ValueError(
            f"signature must be {2 * curve.num_bytes} bytes, got {len(raw)}"
        )
    public = curve.decompress(public_key)
    r = curve.from_bytes(raw[:curve.num_bytes])
    s = curve.from_bytes(raw[curve.num_bytes:])
    e = curve.from_bytes(message_hash)
    n = curve.n

    if r == 0 or s == 0:
        return False
    if r >= n or s >= n:
        return False

    z = pow(s, -1, n)
    u1 = e * z % n
    u2 = r * z % n
    total = curve.add(curve.multiply(curve.g, u1), curve.multiply(public, u2))
    if total is None:
        return False
    return _reduce_once(total.x, n) == r