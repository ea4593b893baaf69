"""Protocol definition for Bloom Filter."""

from __future__ import annotations

from typing import BinaryIO, Protocol, runtime_checkable

from ..core.types import Element


@runtime_checkable
class MembershipFilter(Protocol):
    """Probabilistic set membership test."""

    def add(self, element: Element) -> None:
        """Add element to the filter."""
        ...

    def contains(self, element: Element) -> bool:
        """Return True if element may be present; False if definitely absent.

        Invariants:
            - Never False for an element previously added
        """
        ...

    def false_positive_rate(self) -> float:
        """Estimate the current false positive probability."""
        ...

    def serialize(self) -> bytes:
        """Serialize filter to bytes."""
        ...

    @classmethod
    def deserialize(cls, data: bytes) -> MembershipFilter:
        """Deserialize filter from bytes."""
        ...

    def save(self, stream: BinaryIO) -> int:
        """Write the encoded filter to a binary stream."""
        ...
