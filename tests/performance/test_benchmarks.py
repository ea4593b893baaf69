"""Performance benchmarks for the Bloom filter implementation."""

import io
import time

import pytest

from bloom_filter import BloomFilter, optimal_hash_functions, optimal_size


@pytest.fixture
def benchmark_filter():
    """Create the filter used by the add/contains benchmarks."""
    return BloomFilter(1000, 3)


def test_add_performance(benchmark_filter):
    """Benchmark repeated inserts of one element."""
    iterations = 50000
    element = b"benchmark"

    start_time = time.time()
    for _ in range(iterations):
        benchmark_filter.add(element)
    duration = time.time() - start_time

    ops_per_second = iterations / duration if duration > 0 else float("inf")
    print(f"\nAdd: {ops_per_second:.0f} ops/sec")

    # Should achieve reasonable throughput
    assert ops_per_second > 5000


def test_contains_performance(benchmark_filter):
    """Benchmark repeated lookups of a present element."""
    iterations = 50000
    element = b"benchmark"
    benchmark_filter.add(element)

    start_time = time.time()
    for _ in range(iterations):
        benchmark_filter.contains(element)
    duration = time.time() - start_time

    ops_per_second = iterations / duration if duration > 0 else float("inf")
    print(f"\nContains: {ops_per_second:.0f} ops/sec")

    assert ops_per_second > 5000


def test_sizing_performance():
    """Benchmark the sizing formulas."""
    iterations = 100000

    start_time = time.time()
    for _ in range(iterations):
        optimal_size(1000, 0.01)
        optimal_hash_functions(1000, 100)
    duration = time.time() - start_time

    print(f"\nSizing: {iterations / duration if duration > 0 else float('inf'):.0f} pairs/sec")
    assert duration < 10.0


def test_serialization_performance():
    """Benchmark save/load of a million-bit filter."""
    bf = BloomFilter.with_capacity(100000, 0.01)
    for i in range(10000):
        bf.add(f"key{i:06d}".encode())

    start_time = time.time()
    buf = io.BytesIO()
    bf.save(buf)
    buf.seek(0)
    loaded = BloomFilter.load(buf)
    duration = time.time() - start_time

    print(f"\nRound trip of {bf.size} bits: {duration * 1000:.1f} ms")
    assert loaded == bf
    assert duration < 5.0
