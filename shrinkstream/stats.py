"""Bit-balance statistics over drawn words.

Used to sanity check the generator's output: every bit position of a good
stream should be set about half the time.
"""

from dataclasses import dataclass

import numpy as np

from .bitstream import BitStream, bit_mask


@dataclass
class BitBalance:
    """Per-bit frequency of set bits across a sample."""
    bits: int
    count: int
    frequencies: np.ndarray  # shape (bits,), fraction of words with bit i set

    @property
    def max_deviation(self) -> float:
        """Largest distance of any bit's frequency from 0.5."""
        if self.bits == 0:
            return 0.0
        return float(np.max(np.abs(self.frequencies - 0.5)))

    @property
    def mean(self) -> float:
        if self.bits == 0:
            return 0.0
        return float(np.mean(self.frequencies))


def words_to_array(words: list[int]) -> np.ndarray:
    """Pack words into a uint64 array."""
    return np.array(words, dtype=np.uint64)


def bit_balance(words: list[int], bits: int = 64) -> BitBalance:
    """Compute how often each of the low bits is set.

    Args:
        words: Drawn words
        bits: Number of low bits to inspect (0 to 64)

    Returns:
        BitBalance for the sample
    """
    bit_mask(bits)  # rejects widths outside 0-64
    arr = words_to_array(words)
    if len(arr) == 0:
        return BitBalance(bits=bits, count=0, frequencies=np.zeros(bits))

    shifts = np.arange(bits, dtype=np.uint64)
    set_bits = (arr[:, None] >> shifts[None, :]) & np.uint64(1)
    return BitBalance(
        bits=bits,
        count=len(arr),
        frequencies=set_bits.mean(axis=0),
    )


def sample_balance(stream: BitStream, count: int, bits: int = 64) -> BitBalance:
    """Draw count words of the given width from stream and measure them."""
    words = [stream.draw_bits(bits) for _ in range(count)]
    return bit_balance(words, bits)
