"""Bloom filter implementation.

Packed bit-array filter with a seeded MurmurHash3 family and a stable binary
persistence format.
"""

from __future__ import annotations

import logging
from typing import BinaryIO

from ..core.config import BloomConfig
from ..core.errors import InvalidParameterError
from ..core.types import BitIndex, Element, FilterState
from ..core.validation import check_positive_int
from ..interfaces.hashing import HashFamily
from . import codec
from .hashing import SeededHashFamily, to_bytes
from .sizing import optimal_hash_functions, optimal_size


class BloomFilter:
    """Probabilistic set membership test using a packed bit array.

    Args:
        size: Number of bits in the filter (> 0)
        num_hash_funcs: Number of hash functions (> 0)
        logger: Optional diagnostic sink; defaults to this module's logger

    Invariants:
        - False positives are possible
        - False negatives are not possible
        - Size and hash count are fixed at creation time
        - Bits are only ever set, never cleared
    """

    def __init__(self, size: int, num_hash_funcs: int, logger: logging.Logger | None = None):
        check_positive_int("Filter size", size)
        self._size = size
        self._hashes: HashFamily = SeededHashFamily(num_hash_funcs)
        self._bits = bytearray(codec.packed_length(size))
        self._logger = logger if logger is not None else logging.getLogger(__name__)

        self._logger.info(f"Created new Bloom filter: size={size}, num_hash_funcs={num_hash_funcs}")

    @classmethod
    def with_capacity(
        cls,
        expected_elements: int,
        false_positive_rate: float = 0.01,
        logger: logging.Logger | None = None,
    ) -> BloomFilter:
        """Build a filter sized for `expected_elements` at the target FP rate."""
        size = optimal_size(expected_elements, false_positive_rate)
        return cls(size, optimal_hash_functions(size, expected_elements), logger)

    @classmethod
    def from_config(cls, config: BloomConfig, logger: logging.Logger | None = None) -> BloomFilter:
        return cls.with_capacity(config.expected_elements, config.false_positive_rate, logger)

    @property
    def size(self) -> int:
        return self._size

    @property
    def num_hash_funcs(self) -> int:
        return len(self._hashes)

    @property
    def set_bits(self) -> int:
        """Number of bits currently set."""
        return int.from_bytes(self._bits, "little").bit_count()

    def _is_set(self, index: BitIndex) -> bool:
        return bool(self._bits[index >> 3] & (1 << (index & 7)))

    def add(self, element: Element) -> None:
        """Add element to the filter."""
        data = to_bytes(element)
        debug = self._logger.isEnabledFor(logging.DEBUG)
        for i, index in enumerate(self._hashes.indexes(data, self._size)):
            self._bits[index >> 3] |= 1 << (index & 7)
            if debug:
                self._logger.debug(f"Set bit: hash_func={i}, index={index}, element={data!r}")
        if debug:
            self._logger.debug(f"Added element to Bloom filter: {data!r}")

    def contains(self, element: Element) -> bool:
        """Return True if element may be present; False if definitely absent."""
        data = to_bytes(element)
        for i, index in enumerate(self._hashes.indexes(data, self._size)):
            if not self._is_set(index):
                if self._logger.isEnabledFor(logging.DEBUG):
                    self._logger.debug(f"Element not in Bloom filter: element={data!r}, hash_func={i}")
                return False
        if self._logger.isEnabledFor(logging.DEBUG):
            self._logger.debug(f"Element possibly in Bloom filter: {data!r}")
        return True

    def __contains__(self, element: Element) -> bool:
        return self.contains(element)

    def false_positive_rate(self) -> float:
        """Estimate the current FP rate as (set_bits / size) ** num_hash_funcs.

        Assumes bits were set independently and uniformly, so it drifts from
        the observed rate on small filters. Cost is linear in size.
        """
        return (self.set_bits / self._size) ** self.num_hash_funcs

    def state(self) -> FilterState:
        """Snapshot of the bits and configuration."""
        return FilterState(bytes(self._bits), self._size, self.num_hash_funcs)

    @classmethod
    def from_state(cls, state: FilterState, logger: logging.Logger | None = None) -> BloomFilter:
        """Rebuild a filter from a snapshot; the hash family is derived from the count."""
        check_positive_int("Filter size", state.size)
        if len(state.bits) != codec.packed_length(state.size):
            raise InvalidParameterError(
                f"Bit array of {len(state.bits)} bytes does not fit size {state.size}"
            )
        if not codec.padding_is_clear(state.bits, state.size):
            raise InvalidParameterError("Padding bits beyond filter size are set")
        bf = cls(state.size, state.num_hash_funcs, logger)
        bf._bits[:] = state.bits
        return bf

    def serialize(self) -> bytes:
        """Serialize filter to bytes."""
        return codec.encode_state(self.state())

    @classmethod
    def deserialize(cls, data: bytes, logger: logging.Logger | None = None) -> BloomFilter:
        """Deserialize filter from bytes.

        Raises:
            FilterDecodeError: If data is truncated, corrupted or has trailing bytes
        """
        return cls.from_state(codec.decode_state(data), logger)

    def save(self, stream: BinaryIO) -> int:
        """Write the encoded filter to a binary stream; returns bytes written."""
        data = self.serialize()
        stream.write(data)
        self._logger.info(f"Saved Bloom filter: size={self._size}, bytes={len(data)}")
        return len(data)

    @classmethod
    def load(cls, stream: BinaryIO, logger: logging.Logger | None = None) -> BloomFilter:
        """Read one encoded filter from a binary stream."""
        bf = cls.from_state(codec.read_state(stream), logger)
        bf._logger.info(f"Loaded Bloom filter: size={bf.size}, num_hash_funcs={bf.num_hash_funcs}")
        return bf

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BloomFilter):
            return NotImplemented
        return (
            self._size == other._size
            and self._hashes == other._hashes
            and self._bits == other._bits
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return (
            f"BloomFilter(size={self._size}, num_hash_funcs={self.num_hash_funcs}, "
            f"set_bits={self.set_bits})"
        )
