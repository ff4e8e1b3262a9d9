"""WELL512 pseudo-random number generator."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator

_MASK = 0xFFFFFFFF
_STATE_WORDS = 16


class Well512:
    """WELL512 generator over sixteen 32-bit words of state."""

    def __init__(self, state: Iterable[int], index: int = 0) -> None:
        words = list(state)
        if len(words) != _STATE_WORDS:
            raise ValueError(f"state must hold {_STATE_WORDS} words, got {len(words)}")
        if not 0 <= index < _STATE_WORDS:
            raise ValueError(f"index must be in 0..{_STATE_WORDS - 1}, got {index}")
        self.state = [word & _MASK for word in words]
        self.index = index

    @classmethod
    def seeded_randomly(cls) -> Well512:
        """Create a generator whose state is filled with random bits."""
        return cls([random.getrandbits(32) for _ in range(_STATE_WORDS)], 0)

    def next(self) -> int:
        """Advance the generator and return the next 32-bit value."""
        state = self.state
        i = self.index
        a = state[i]
        c = state[(i + 13) & 15]
        b = (a ^ c ^ (a << 16) ^ (c << 15)) & _MASK
        c = state[(i + 9) & 15]
        c ^= c >> 11
        a = b ^ c
        state[i] = a
        d = a ^ ((a << 5) & 0xDA442D24)
        i = (i + 15) & 15
        a = state[i]
        state[i] = (a ^ b ^ d ^ (a << 2) ^ (b << 18) ^ (c << 28)) & _MASK
        self.index = i
        return state[i]

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return self.next()