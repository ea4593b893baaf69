"""File helpers around BloomFilter persistence.

Open the file, delegate to BloomFilter.save/load, and close on every path.
OSError and FilterDecodeError propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .filter import BloomFilter

logger = logging.getLogger(__name__)


def save_filter_to_file(bf: BloomFilter, path: str | Path) -> None:
    """Save a Bloom filter to a file, replacing it atomically."""
    path = Path(path)
    temp_path = path.with_name(path.name + ".tmp")
    try:
        with open(temp_path, "wb") as f:
            bf.save(f)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_path, path)
    except BaseException:
        temp_path.unlink(missing_ok=True)
        raise
    logger.info(f"Saved Bloom filter to {path}")


def load_filter_from_file(path: str | Path, logger: logging.Logger | None = None) -> BloomFilter:
    """Load a Bloom filter from a file."""
    with open(path, "rb") as f:
        return BloomFilter.load(f, logger)
