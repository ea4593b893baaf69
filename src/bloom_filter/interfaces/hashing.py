"""Protocol definition for hash families."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable

from ..core.types import BitIndex, HashValue


@runtime_checkable
class HashFamily(Protocol):
    """Ordered set of independent 64-bit hash functions."""

    def __len__(self) -> int:
        """Number of hash functions."""
        ...

    def hash(self, data: bytes, position: int) -> HashValue:
        """Unsigned 64-bit hash of data by the function at `position`."""
        ...

    def indexes(self, data: bytes, size: int) -> Iterator[BitIndex]:
        """Yield `hash_i(data) mod size` for every function, in order.

        Invariants:
            - Deterministic for a given family size
        """
        ...
