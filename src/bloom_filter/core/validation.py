"""Parameter checks shared by sizing, configuration and construction."""

from __future__ import annotations

import math

from .errors import InvalidParameterError


def check_positive_int(name: str, value: int) -> None:
    """Raise InvalidParameterError unless value is an int > 0 (bool excluded)."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidParameterError(f"{name} must be a positive integer, got {value!r}")


def check_rate(rate: float) -> None:
    """Raise InvalidParameterError unless 0 < rate < 1."""
    if isinstance(rate, bool) or not isinstance(rate, (int, float)) or math.isnan(rate):
        raise InvalidParameterError(f"false_positive_rate must be a number, got {rate!r}")
    if not 0 < rate < 1:
        raise InvalidParameterError(f"false_positive_rate must be in (0, 1), got {rate}")
