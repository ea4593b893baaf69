"""Integration tests for the Bloom filter.

Covers the end-to-end flow the demo driver runs:
1. Size a filter from configuration
2. Populate and query it
3. Persist it to disk and reload it
4. Confirm the reloaded filter answers identically
"""

import random
import shutil
import tempfile
from pathlib import Path

import pytest

from bloom_filter import (
    BloomConfig,
    BloomFilter,
    load_filter_from_file,
    optimal_hash_functions,
    optimal_size,
    save_filter_to_file,
)


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield tmpdir
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def config(temp_dir):
    """Demo-sized configuration writing into the temp directory."""
    return BloomConfig(filter_path=str(Path(temp_dir) / "bloom_filter.bin"))


def test_create_populate_persist_reload(config):
    """Test the full create/check/save/load cycle."""
    bf = BloomFilter.from_config(config)
    assert bf.size == optimal_size(1000, 0.01)
    assert bf.num_hash_funcs == optimal_hash_functions(bf.size, 1000)

    bf.add(b"hello")
    bf.add(b"world")
    before = {key: bf.contains(key) for key in (b"hello", b"world", b"golang")}
    assert before[b"hello"] and before[b"world"]
    assert not before[b"golang"]

    save_filter_to_file(bf, config.filter_path)
    loaded = load_filter_from_file(config.filter_path)

    after = {key: loaded.contains(key) for key in before}
    assert after == before
    assert loaded == bf


def test_reloaded_filter_keeps_accepting_inserts(config):
    """A reloaded filter is a full filter, not a read-only view."""
    bf = BloomFilter.from_config(config)
    first_batch = [f"first{i}".encode() for i in range(300)]
    for key in first_batch:
        bf.add(key)

    save_filter_to_file(bf, config.filter_path)
    loaded = load_filter_from_file(config.filter_path)

    second_batch = [f"second{i}".encode() for i in range(300)]
    for key in second_batch:
        loaded.add(key)
        bf.add(key)

    for key in first_batch + second_batch:
        assert key in loaded
    assert loaded == bf


def test_random_workload_round_trip(config):
    """Random elements: no false negatives, identical answers after reload."""
    rng = random.Random(1234)
    elements = [rng.randbytes(16) for _ in range(config.expected_elements)]
    probes = [rng.randbytes(17) for _ in range(5000)]

    bf = BloomFilter.from_config(config)
    for elem in elements:
        bf.add(elem)

    save_filter_to_file(bf, config.filter_path)
    loaded = load_filter_from_file(config.filter_path)

    assert all(elem in loaded for elem in elements)
    assert [bf.contains(p) for p in probes] == [loaded.contains(p) for p in probes]

    fp_rate = sum(1 for p in probes if loaded.contains(p)) / len(probes)
    assert fp_rate <= config.false_positive_rate * 2
    assert loaded.false_positive_rate() == bf.false_positive_rate()
