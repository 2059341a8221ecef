"""Process-wide source of unique seeds."""

import logging
import threading
import time

from .prng import MASK64

logger = logging.getLogger(__name__)

# Wraps like the 32-bit counter it stands in for.
COUNTER_MASK = (1 << 32) - 1

_counter = 0
_counter_lock = threading.Lock()


def next_counter() -> int:
    """Atomically increment the seed counter and return the new value."""
    global _counter
    with _counter_lock:
        _counter = (_counter + 1) & COUNTER_MASK
        return _counter


def random_seed() -> int:
    """Derive a fresh 64-bit seed from the wall clock and the counter.

    The counter keeps seeds distinct when several attempts start within
    one tick of the clock.

    Returns:
        Seed in [0, 2**64)
    """
    seed = (time.time_ns() + next_counter()) & MASK64
    logger.debug("Derived seed %#018x", seed)
    return seed
