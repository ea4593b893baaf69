"""Bloom filter - probabilistic set membership in Python."""

from .components.file_operations import load_filter_from_file, save_filter_to_file
from .components.filter import BloomFilter
from .components.hashing import SeededHashFamily
from .components.sizing import expected_false_positive_rate, optimal_hash_functions, optimal_size
from .core.config import BloomConfig
from .core.errors import BloomFilterError, FilterDecodeError, InvalidParameterError
from .core.types import Element, FilterState

__all__ = [
    "BloomConfig",
    "BloomFilter",
    "BloomFilterError",
    "FilterDecodeError",
    "InvalidParameterError",
    "SeededHashFamily",
    "optimal_size",
    "optimal_hash_functions",
    "expected_false_positive_rate",
    "save_filter_to_file",
    "load_filter_from_file",
    "Element",
    "FilterState",
]
