"""Fixed-size ring-buffer FIFO."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class FifoFull(Exception):
    """Raised when pushing to a full FIFO."""


class FifoEmpty(Exception):
    """Raised when reading from an empty FIFO."""


class Fifo(Generic[T]):
    """Ring buffer of ``size`` slots holding at most ``size - 1`` items."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        self._size = size
        self._data: list[T | None] = [None] * size
        self._read = 0
        self._write = 0

    def push(self, item: T) -> None:
        """Append an item; raise FifoFull when there is no free slot."""
        next_write = (self._write + 1) % self._size
        if next_write == self._read:
            raise FifoFull("FIFO is full")
        self._data[self._write] = item
        self._write = next_write

    def peek(self) -> T:
        """Return the oldest item without removing it."""
        if self._read == self._write:
            raise FifoEmpty("FIFO is empty")
        return self._data[self._read]  # type: ignore[return-value]

    def pop(self) -> T:
        """Remove and return the oldest item."""
        item = self.peek()
        self._data[self._read] = None
        self._read = (self._read + 1) % self._size
        return item

    def __len__(self) -> int:
        return (self._write - self._read) % self._size

    def is_full(self) -> bool:
        """Tell whether a push would fail."""
        return (self._write + 1) % self._size == self._read