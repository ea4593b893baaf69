"""Common type definitions for the Bloom filter implementation.

Defines fundamental types used across all components.
"""

from __future__ import annotations

from typing import NamedTuple

# Core primitive types
Element = bytes | bytearray | memoryview | str
BitIndex = int
HashValue = int


class FilterState(NamedTuple):
    """Everything needed to rebuild a filter: packed bits plus configuration."""
    bits: bytes
    size: int
    num_hash_funcs: int
