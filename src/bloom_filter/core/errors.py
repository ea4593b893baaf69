"""Exception hierarchy for the Bloom filter.

Defines all custom exceptions used throughout the implementation.
I/O failures are not wrapped; they surface as the built-in OSError family.
"""

from __future__ import annotations


class BloomFilterError(Exception):
    """Base exception for all Bloom filter errors."""
    pass


class InvalidParameterError(BloomFilterError, ValueError):
    """Raised when sizing or construction parameters are out of range."""
    pass


class FilterDecodeError(BloomFilterError):
    """Raised when persisted filter data is truncated, corrupted or invalid."""
    pass
