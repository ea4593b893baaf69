"""Seeded hash family.

Each member of the family is MurmurHash3 (x64, 128-bit) truncated to its
first 64 bits, keyed by the member's position. Members are pure functions, so
a family is fully described by its size and is rebuilt from the count alone.
"""

from __future__ import annotations

from collections.abc import Iterator

import mmh3

from ..core.types import BitIndex, Element, HashValue
from ..core.validation import check_positive_int


def to_bytes(element: Element) -> bytes:
    """Normalize an element to bytes; str is UTF-8 encoded."""
    if isinstance(element, bytes):
        return element
    if isinstance(element, (bytearray, memoryview)):
        return bytes(element)
    if isinstance(element, str):
        return element.encode("utf-8")
    raise TypeError(f"Element must be bytes-like or str, got {type(element).__name__}")


def hash64(data: bytes, seed: int) -> HashValue:
    """Unsigned 64-bit MurmurHash3 of data under seed."""
    return mmh3.hash64(data, seed, signed=False)[0]


class SeededHashFamily:
    """Ordered set of independent 64-bit hash functions.

    Args:
        count: Number of hash functions; member i uses seed i

    Invariants:
        - Same (count, element, size) always yields the same indexes
        - Holds no per-call state
    """

    def __init__(self, count: int):
        check_positive_int("Hash function count", count)
        self._count = count

    def __len__(self) -> int:
        return self._count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SeededHashFamily):
            return NotImplemented
        return self._count == other._count

    def __repr__(self) -> str:
        return f"SeededHashFamily(count={self._count})"

    def hash(self, data: bytes, position: int) -> HashValue:
        """Value of the hash function at `position` for data."""
        if not 0 <= position < self._count:
            raise IndexError(f"Hash position {position} out of range for {self._count} functions")
        return hash64(data, position)

    def indexes(self, data: bytes, size: int) -> Iterator[BitIndex]:
        """Yield one bit index per hash function, in family order."""
        for seed in range(self._count):
            yield hash64(data, seed) % size
