"""Bloom filter core package."""

from .config import BloomConfig
from .errors import BloomFilterError, FilterDecodeError, InvalidParameterError

__all__ = ["BloomConfig", "BloomFilterError", "FilterDecodeError", "InvalidParameterError"]
