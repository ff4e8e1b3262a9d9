"""Short Weierstrass curves (a = -3) over prime fields: point arithmetic and encoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Point:
    """An affine curve point. The point at infinity is represented by None."""

    x: int
    y: int


@dataclass(frozen=True)
class Curve:
    """A curve y^2 = x^3 - 3x + b over GF(p) with base point g of order n."""

    name: str
    num_bytes: int
    p: int
    b: int
    g: Point
    n: int

    @property
    def a(self) -> int:
        """The coefficient a, which is -3 for every supported curve."""
        return self.p - 3

    def _rhs(self, x: int) -> int:
        return ((x * x - 3) * x + self.b) % self.p

    def is_on_curve(self, point: Optional[Point]) -> bool:
        """Tell whether a finite point lies on the curve with coordinates in range."""
        if point is None:
            return False
        if not (0 <= point.x < self.p and 0 <= point.y < self.p):
            return False
        return (point.y * point.y - self._rhs(point.x)) % self.p == 0

    def double(self, point: Optional[Point]) -> Optional[Point]:
        """Return 2 * point."""
        if point is None or point.y % self.p == 0:
            return None
        p = self.p
        slope = (3 * point.x * point.x - 3) * pow(2 * point.y, -1, p) % p
        x3 = (slope * slope - 2 * point.x) % p
        y3 = (slope * (point.x - x3) - point.y) % p
        return Point(x3, y3)

    def add(self, p: Optional[Point], q: Optional[Point]) -> Optional[Point]:
        """Return p + q."""
        if p is None:
            return q
        if q is None:
            return p
        mod = self.p
        if (p.x - q.x) % mod == 0:
            if (p.y - q.y) % mod == 0:
                return self.double(p)
            return None
        slope = (q.y - p.y) * pow(q.x - p.x, -1, mod) % mod
        x3 = (slope * slope - p.x - q.x) % mod
        y3 = (slope * (p.x - x3) - p.y) % mod
        return Point(x3, y3)

    def multiply(self, point: Optional[Point], scalar: int) -> Optional[Point]:
        """Return scalar * point for a non-negative scalar."""
        if scalar < 0:
            raise ValueError(f"scalar must not be negative, got {scalar}")
        result: Optional[Point] = None
        for bit in bin(scalar)[2:]:
            result = self.double(result)
            if bit == "1":
                result = self.add(result, point)
        return result

    def mod_sqrt(self, value: int) -> int:
        """Return value^((p + 1) / 4) mod p, a square root when one exists."""
        return pow(value % self.p, (self.p + 1) // 4, self.p)

    def to_bytes(self, value: int) -> bytes:
        """Encode a field or scalar value as num_bytes big-endian bytes."""
        if not 0 <= value < 1 << (8 * self.num_bytes):
            raise ValueError(f"value does not fit in {self.num_bytes} bytes")
        return value.to_bytes(self.num_bytes, "big")

    def from_bytes(self, data: bytes) -> int:
        """Decode num_bytes big-endian bytes into an integer."""
        raw = bytes(data)
        if len(raw) != self.num_bytes:
            raise ValueError(f"expected {self.num_bytes} bytes, got {len(raw)}")
        return int.from_bytes(raw, "big")

    def compress(self, point: Point) -> bytes:
        """Encode a point as a parity byte (2 or 3) followed by its x coordinate."""
        if point is None:
            raise ValueError("the point at infinity cannot be compressed")
        return bytes((2 + (point.y & 1),)) + self.to_bytes(point.x)

    def decompress(self, compressed: bytes) -> Point:
        """Recover a point from its compressed form."""
        raw = bytes(compressed)
        if len(raw) != self.num_bytes + 1:
            raise ValueError(
                f"compressed point must be {self.num_bytes + 1} bytes, got {len(raw)}"
            )
        x = self.from_bytes(raw[1:])
        y = self.mod_sqrt(self._rhs(x))
        if (y & 1) != (raw[0] & 1):
            y = (self.p - y) % self.p
        return Point(x, y)


SECP128R1 = Curve(
    name="secp128r1",
    num_bytes=16,
    p=0xFFFFFFFDFFFFFFFF_FFFFFFFFFFFFFFFF,
    b=0xE87579C11079F43D_D824993C2CEE5ED3,
    g=Point(
        0x161FF7528B899B2D_0C28607CA52C5B86,
        0xCF5AC8395BAFEB13_C02DA292DDED7A83,
    ),
    n=0xFFFFFFFE00000000_75A30D1B9038A115,
)

SECP192R1 = Curve(
    name="secp192r1",
    num_bytes=24,
    p=0xFFFFFFFFFFFFFFFF_FFFFFFFFFFFFFFFE_FFFFFFFFFFFFFFFF,
    b=0x64210519E59C80E7_0FA7E9AB72243049_FEB8DEECC146B9B1,
    g=Point(
        0x188DA80EB03090F6_7CBF20EB43A18800_F4FF0AFD82FF1012,
        0x07192B95FFC8DA78_631011ED6B24CDD5_73F977A11E794811,
    ),
    n=0xFFFFFFFFFFFFFFFF_FFFFFFFF99DEF836_146BC9B1B4D22831,
)

SECP256R1 = Curve(
    name="secp256r1",
    num_bytes=32,
    p=0xFFFFFFFF00000001_0000000000000000_00000000FFFFFFFF_FFFFFFFFFFFFFFFF,
    b=0x5AC635D8AA3A93E7_B3EBBD55769886BC_651D06B0CC53B0F6_3BCE3C3E27D2604B,
    g=Point(
        0x6B17D1F2E12C4247_F8BCE6E563A440F2_77037D812DEB33A0_F4A13945D898C296,
        0x4FE342E2FE1A7F9B_8EE7EB4A7C0F9E16_2BCE33576B315ECE_CBB6406837BF51F5,
    ),
    n=0xFFFFFFFF00000000_FFFFFFFFFFFFFFFF_BCE6FAADA7179E84_F3B9CAC2FC632551,
)

SECP384R1 = Curve(
    name="secp384r1",
    num_bytes=48,
    p=0xFFFFFFFFFFFFFFFF_FFFFFFFFFFFFFFFF_FFFFFFFFFFFFFFFF_FFFFFFFFFFFFFFFE_FFFFFFFF00000000_00000000FFFFFFFF,
    b=0xB3312FA7E23EE7E4_988E056BE3F82D19_181D9C6EFE814112_0314088F5013875A_C656398D8A2ED19D_2A85C8EDD3EC2AEF,
    g=Point(
        0xAA87CA22BE8B0537_8EB1C71EF320AD74_6E1D3B628BA79B98_59F741E082542A38_5502F25DBF55296C_3A545E3872760AB7,
        0x3617DE4A96262C6F_5D9E98BF9292DC29_F8F41DBD289A147C_E9DA3113B5F0B8C0_0A60B1CE1D7E819D_7A431D7C90EA0E5F,
    ),
    n=0xFFFFFFFFFFFFFFFF_FFFFFFFFFFFFFFFF_FFFFFFFFFFFFFFFF_C7634D81F4372DDF_581A0DB248B0A77A_ECEC196ACCC52973,
)

CURVES: dict[str, Curve] = {
    curve.name: curve for curve in (SECP128R1, SECP192R1, SECP256R1, SECP384R1)
}

DEFAULT_CURVE = SECP256R1