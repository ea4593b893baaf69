"""Configuration for the Bloom filter.

Defines the tunable parameters used to size a filter and to drive the demo.
"""

from __future__ import annotations

from dataclasses import dataclass

from .validation import check_positive_int, check_rate


@dataclass
class BloomConfig:
    """Configuration parameters for building and persisting a Bloom filter.

    Attributes:
        expected_elements: Number of elements the filter is sized for
        false_positive_rate: Target FP rate (0 < rate < 1)
        filter_path: File used by save/load helpers
        log_level: Logging level name for the demo tooling
    """

    expected_elements: int = 1000
    false_positive_rate: float = 0.01
    filter_path: str = "bloom_filter.bin"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        check_positive_int("expected_elements", self.expected_elements)
        check_rate(self.false_positive_rate)
