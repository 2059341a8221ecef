"""Bitstreams: the entropy source generator code draws from.

Both implementations share a Recorder, so grouping and pruning behave the
same whether the words come from the PRNG or from a replay buffer.
"""

import logging
from abc import ABC, abstractmethod
from collections import deque
from typing import Iterable, Optional

from .errors import Overrun, assert_invariant
from .prng import JSF64, MASK64
from .recorder import Recorder, Recording
from .seed import random_seed

logger = logging.getLogger(__name__)

MAX_BITS = 64


def bit_mask(n: int) -> int:
    """Mask selecting the low n bits, 0 <= n <= 64."""
    assert_invariant(0 <= n <= MAX_BITS, "cannot draw %r bits", n)
    return (1 << n) - 1


class BitStream(ABC):
    """Sequential entropy with nestable groups.

    Implementations hold a ``recorder`` and delegate grouping to it.
    """

    recorder: Recorder

    @abstractmethod
    def draw_bits(self, n: int) -> int:
        """Return the next n bits of entropy as an integer below 2**n."""
        pass

    @abstractmethod
    def begin_group(self, label: str, removable: bool) -> int:
        """Open a group and return a handle for end_group."""
        pass

    @abstractmethod
    def end_group(self, handle: int, discard: bool) -> None:
        """Close the group identified by handle."""
        pass

    def recording(self) -> Recording:
        """Snapshot what this stream has recorded (persisting streams only)."""
        return self.recorder.snapshot()


class RandomBitStream(BitStream):
    """Fresh entropy from a JSF64 generator."""

    def __init__(self, seed: Optional[int] = None, persist: bool = False):
        """Initialize the stream.

        Args:
            seed: Seed for the generator; derived from random_seed() if None
            persist: Keep drawn words and groups for later shrinking
        """
        if seed is None:
            seed = random_seed()
        self.seed = seed & MASK64
        self.rng = JSF64(seed)
        self.recorder = Recorder(persist=persist)

    def draw_bits(self, n: int) -> int:
        mask = bit_mask(n)

        u = self.rng.rand() & mask
        self.recorder.record(u)

        return u

    def begin_group(self, label: str, removable: bool) -> int:
        return self.recorder.begin_group(label, removable)

    def end_group(self, handle: int, discard: bool) -> None:
        self.recorder.end_group(handle, discard)

    def __repr__(self) -> str:
        return f"RandomBitStream(seed={self.seed:#x}, persist={self.recorder.persist})"


class BufferedBitStream(BitStream):
    """Replays a fixed sequence of previously drawn words."""

    def __init__(self, buf: Iterable[int], persist: bool = False):
        """Initialize the stream.

        Args:
            buf: Words to replay, in draw order
            persist: Re-record words and groups during replay
        """
        self.buf = deque(buf)
        self.recorder = Recorder(persist=persist)

    @property
    def remaining(self) -> int:
        return len(self.buf)

    def draw_bits(self, n: int) -> int:
        mask = bit_mask(n)

        if not self.buf:
            logger.debug("Overrun after %d words", self.recorder.data_len)
            raise Overrun(self.recorder.data_len)

        u = self.buf.popleft() & mask
        self.recorder.record(u)

        return u

    def begin_group(self, label: str, removable: bool) -> int:
        return self.recorder.begin_group(label, removable)

    def end_group(self, handle: int, discard: bool) -> None:
        self.recorder.end_group(handle, discard)

    def __repr__(self) -> str:
        return f"BufferedBitStream(remaining={self.remaining}, persist={self.recorder.persist})"
