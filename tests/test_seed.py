"""Tests for the process-wide seed source."""

import threading

import pytest
from shrinkstream import seed as seed_module
from shrinkstream.prng import MASK64
from shrinkstream.seed import random_seed, next_counter


class TestCounter:
    def test_increments(self):
        a = next_counter()
        b = next_counter()
        assert b == (a + 1) & seed_module.COUNTER_MASK

    def test_wraps_at_32_bits(self, monkeypatch):
        monkeypatch.setattr(seed_module, "_counter", seed_module.COUNTER_MASK)
        assert next_counter() == 0

    def test_concurrent_increments_are_unique(self):
        results = []
        lock = threading.Lock()

        def worker():
            values = [next_counter() for _ in range(500)]
            with lock:
                results.extend(values)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 4000
        assert len(set(results)) == 4000


class TestRandomSeed:
    def test_in_range(self):
        s = random_seed()
        assert 0 <= s <= MASK64

    def test_distinct_under_frozen_clock(self, monkeypatch):
        monkeypatch.setattr(seed_module.time, "time_ns", lambda: 1_700_000_000_000_000_000)
        seeds = {random_seed() for _ in range(100)}
        assert len(seeds) == 100
