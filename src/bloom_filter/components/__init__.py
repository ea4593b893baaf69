"""Bloom filter components."""

from .file_operations import load_filter_from_file, save_filter_to_file
from .filter import BloomFilter
from .hashing import SeededHashFamily
from .sizing import expected_false_positive_rate, optimal_hash_functions, optimal_size

__all__ = [
    "BloomFilter",
    "SeededHashFamily",
    "optimal_size",
    "optimal_hash_functions",
    "expected_false_positive_rate",
    "save_filter_to_file",
    "load_filter_from_file",
]
