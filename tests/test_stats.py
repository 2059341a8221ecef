"""Tests for bit-balance statistics."""

import numpy as np
import pytest
from shrinkstream.bitstream import RandomBitStream
from shrinkstream.errors import InvariantViolation
from shrinkstream.prng import MASK64
from shrinkstream.stats import bit_balance, sample_balance, words_to_array


class TestWordsToArray:
    def test_full_width_words(self):
        arr = words_to_array([0, MASK64])
        assert arr.dtype == np.uint64
        assert int(arr[1]) == MASK64


class TestBitBalance:
    def test_known_words(self):
        balance = bit_balance([0b01, 0b11], bits=2)
        assert balance.count == 2
        assert list(balance.frequencies) == [1.0, 0.5]
        assert balance.max_deviation == 0.5
        assert balance.mean == 0.75

    def test_high_bit(self):
        balance = bit_balance([1 << 63, 0], bits=64)
        assert balance.frequencies[63] == 0.5
        assert balance.frequencies[0] == 0.0

    def test_empty_sample(self):
        balance = bit_balance([], bits=8)
        assert balance.count == 0
        assert balance.frequencies.shape == (8,)

    def test_zero_bits(self):
        balance = bit_balance([0, 0], bits=0)
        assert balance.max_deviation == 0.0

    def test_bad_width(self):
        with pytest.raises(InvariantViolation):
            bit_balance([1], bits=65)


class TestSampleBalance:
    def test_prng_is_roughly_balanced(self):
        balance = sample_balance(RandomBitStream(seed=2024), count=4096, bits=64)
        assert balance.count == 4096
        assert balance.max_deviation < 0.05
