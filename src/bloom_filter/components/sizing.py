"""Bloom filter sizing.

Pure functions for the standard capacity/accuracy trade-off:

    m = ceil(-n * ln(p) / (ln(2)^2))
    k = ceil((m / n) * ln(2))
"""

from __future__ import annotations

import math

from ..core.errors import InvalidParameterError
from ..core.validation import check_positive_int, check_rate


def optimal_size(expected_elements: int, false_positive_rate: float) -> int:
    """Return the minimum bit-array length reaching the target FP rate.

    Args:
        expected_elements: Number of elements to be inserted (> 0)
        false_positive_rate: Target false positive rate (0 < rate < 1)

    Raises:
        InvalidParameterError: If either argument is out of range
    """
    check_positive_int("expected_elements", expected_elements)
    check_rate(false_positive_rate)
    return math.ceil(-expected_elements * math.log(false_positive_rate) / (math.log(2) ** 2))


def optimal_hash_functions(size: int, expected_elements: int) -> int:
    """Return the hash-function count minimizing the FP rate (at least 1)."""
    check_positive_int("size", size)
    check_positive_int("expected_elements", expected_elements)
    return max(1, math.ceil(size / expected_elements * math.log(2)))


def expected_false_positive_rate(size: int, num_hash_funcs: int, inserted: int) -> float:
    """Theoretical FP rate (1 - e^(-k*n/m))^k after `inserted` distinct elements."""
    check_positive_int("size", size)
    check_positive_int("num_hash_funcs", num_hash_funcs)
    if inserted < 0:
        raise InvalidParameterError(f"inserted must be non-negative, got {inserted}")
    return (1 - math.exp(-num_hash_funcs * inserted / size)) ** num_hash_funcs
