"""Entropy recording and replay for property-based test generation."""

from .errors import Overrun, InvariantViolation, assert_invariant
from .prng import JSF64
from .seed import random_seed
from .recorder import Group, Recorder, Recording
from .bitstream import BitStream, RandomBitStream, BufferedBitStream
from .data import Generator, BitStreamData, Slot, unpack_tuple
from .config import Config, StreamConfig, load_config

__all__ = [
    "Overrun",
    "InvariantViolation",
    "assert_invariant",
    "JSF64",
    "random_seed",
    "Group",
    "Recorder",
    "Recording",
    "BitStream",
    "RandomBitStream",
    "BufferedBitStream",
    "Generator",
    "BitStreamData",
    "Slot",
    "unpack_tuple",
    "Config",
    "StreamConfig",
    "load_config",
]
