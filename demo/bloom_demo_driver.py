#!/usr/bin/env python3
"""Bloom Filter Demo Driver

Builds a filter from configuration, populates and queries it, saves it to
disk, reloads it and queries again.

Usage:
    python demo/bloom_demo_driver.py --expected-elements 1000 --fpr 0.01 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from bloom_filter import (
    BloomConfig,
    BloomFilter,
    BloomFilterError,
    load_filter_from_file,
    save_filter_to_file,
)

logger = logging.getLogger("bloom_demo")


def create_and_populate(cfg: BloomConfig, elements: list[str]) -> BloomFilter:
    """Size a filter from the config and add the elements."""
    bf = BloomFilter.from_config(cfg)
    for element in elements:
        bf.add(element.encode())
    return bf


def check_filter(bf: BloomFilter, probes: list[str]) -> dict[str, bool]:
    """Query each probe and log the outcomes."""
    results = {probe: bf.contains(probe.encode()) for probe in probes}
    logger.info(
        "Checking Bloom filter: "
        + ", ".join(f"contains_{probe}={hit}" for probe, hit in results.items())
    )
    logger.info(f"Estimated false positive rate: {bf.false_positive_rate():.3e}")
    return results


def save_and_reload(bf: BloomFilter, path: str) -> BloomFilter:
    """Persist the filter and load it back."""
    save_filter_to_file(bf, path)
    logger.info(f"Bloom filter saved to {path}")

    loaded = load_filter_from_file(path)
    logger.info(f"Bloom filter loaded from {path}")
    return loaded


def run_demo(args: argparse.Namespace) -> int:
    """Run the create/check/save/load cycle."""
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        cfg = BloomConfig(
            expected_elements=args.expected_elements,
            false_positive_rate=args.fpr,
            filter_path=args.filter_path,
            log_level=args.log_level,
        )
    except BloomFilterError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    bf = create_and_populate(cfg, args.add)
    before = check_filter(bf, args.check)

    try:
        loaded = save_and_reload(bf, cfg.filter_path)
    except (OSError, BloomFilterError) as e:
        logger.error(f"Error in save and load process: {e}")
        return 1

    after = check_filter(loaded, args.check)
    if before != after:
        logger.error("Reloaded filter disagrees with the original")
        return 1

    if not args.keep_file:
        try:
            os.remove(cfg.filter_path)
        except OSError as e:
            logger.error(f"Failed to delete file: {e}")
            return 1
        logger.info("Bloom filter file deleted")
    return 0


def main() -> None:
    """Parse arguments and run demo."""
    p = argparse.ArgumentParser(description="Bloom filter demo driver")

    p.add_argument(
        "--expected-elements", type=int, default=1000, help="Elements the filter is sized for"
    )
    p.add_argument("--fpr", type=float, default=0.01, help="Target false positive rate")
    p.add_argument(
        "--filter-path", default="bloom_filter.bin", help="File used for save/load"
    )
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    p.add_argument(
        "--add", nargs="*", default=["hello", "world"], help="Elements to insert"
    )
    p.add_argument(
        "--check",
        nargs="*",
        default=["hello", "world", "golang"],
        help="Elements to query",
    )
    p.add_argument(
        "--keep-file", action="store_true", help="Do not delete the saved filter"
    )

    args = p.parse_args()
    sys.exit(run_demo(args))


if __name__ == "__main__":
    main()
