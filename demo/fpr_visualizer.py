#!/usr/bin/env python3
"""Bloom Filter False-Positive Visualizer

Fills a filter sized for --expected-elements at --fpr step by step and plots,
against the number of inserted elements:
    - the observed false positive rate on disjoint probes
    - the filter's own estimate, (set_bits / size) ** k
    - the theoretical rate (1 - e^(-k*n/m)) ** k

Usage:
    python demo/fpr_visualizer.py --expected-elements 5000 --fpr 0.01 --output fpr.png
"""

from __future__ import annotations

import argparse
import random

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from bloom_filter import BloomFilter, expected_false_positive_rate


def measure(
    expected_elements: int, fpr: float, steps: int, probes: int, overfill: float, seed: int
) -> dict[str, list[float]]:
    """Insert random elements in steps and sample the three rates after each step."""
    rng = random.Random(seed)
    bf = BloomFilter.with_capacity(expected_elements, fpr)
    total = int(expected_elements * overfill)
    step = max(1, total // steps)

    series: dict[str, list[float]] = {"n": [], "observed": [], "estimated": [], "theoretical": []}
    inserted = 0
    while inserted < total:
        for _ in range(min(step, total - inserted)):
            # 16-byte elements, 17-byte probes: never the same value
            bf.add(rng.randbytes(16))
            inserted += 1

        hits = sum(1 for _ in range(probes) if bf.contains(rng.randbytes(17)))
        series["n"].append(inserted)
        series["observed"].append(hits / probes)
        series["estimated"].append(bf.false_positive_rate())
        series["theoretical"].append(
            expected_false_positive_rate(bf.size, bf.num_hash_funcs, inserted)
        )

    print(f"Filter: size={bf.size} bits, hash functions={bf.num_hash_funcs}")
    print(
        f"At n={series['n'][-1]}: observed={series['observed'][-1]:.4f}, "
        f"estimated={series['estimated'][-1]:.4f}, theoretical={series['theoretical'][-1]:.4f}"
    )
    return series


def plot(series: dict[str, list[float]], expected_elements: int, fpr: float, output: str) -> None:
    """Plot the three curves and save the figure."""
    fig, ax = plt.subplots(figsize=(10, 6))
    fig.suptitle("Bloom Filter False Positive Rate", fontsize=14, fontweight="bold")

    ax.plot(series["n"], series["observed"], label="observed", linewidth=2)
    ax.plot(series["n"], series["estimated"], label="estimated (set bits)", linestyle="--")
    ax.plot(series["n"], series["theoretical"], label="theoretical", linestyle=":")
    ax.axhline(fpr, color="tab:red", alpha=0.5, label=f"target p={fpr}")
    ax.axvline(expected_elements, color="gray", alpha=0.5, label=f"capacity n={expected_elements}")

    ax.set_xlabel("elements inserted", fontsize=11)
    ax.set_ylabel("false positive rate", fontsize=11)
    ax.set_yscale("log")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="lower right")

    plt.tight_layout()
    fig.savefig(output, dpi=150)
    plt.close(fig)
    print(f"Plot saved: {output}")


def main() -> None:
    """Parse arguments and run visualizer."""
    p = argparse.ArgumentParser(description="Bloom filter false positive visualizer")
    p.add_argument("--expected-elements", type=int, default=5000, help="Filter capacity")
    p.add_argument("--fpr", type=float, default=0.01, help="Target false positive rate")
    p.add_argument("--steps", type=int, default=20, help="Number of samples")
    p.add_argument("--probes", type=int, default=20000, help="Probes per sample")
    p.add_argument(
        "--overfill",
        type=float,
        default=1.5,
        help="Insert this multiple of the capacity",
    )
    p.add_argument("--seed", type=int, default=0, help="Random seed")
    p.add_argument("--output", default="bloom_fpr.png", help="Output image (PNG/PDF/SVG)")

    args = p.parse_args()
    series = measure(
        args.expected_elements, args.fpr, args.steps, args.probes, args.overfill, args.seed
    )
    plot(series, args.expected_elements, args.fpr, args.output)


if __name__ == "__main__":
    main()
