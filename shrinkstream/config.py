"""Configuration for bitstreams and the CLI tooling."""

import json
import os
from dataclasses import asdict, dataclass, field
from typing import Optional

from dotenv import find_dotenv, load_dotenv

SEED_ENV_VAR = "SHRINKSTREAM_SEED"


@dataclass
class StreamConfig:
    """How to build a random bitstream."""
    # Fixed seed to reproduce a reported failure; None derives a fresh one
    seed: Optional[int] = None

    # Keep words and groups so the attempt can be shrunk
    persist: bool = False


@dataclass
class StatsConfig:
    """Sampling parameters for bit-balance statistics."""
    count: int = 4096
    bits: int = 64


@dataclass
class Config:
    """Complete configuration."""
    stream: StreamConfig = field(default_factory=StreamConfig)
    stats: StatsConfig = field(default_factory=StatsConfig)


def load_config(path: Optional[str] = None) -> Config:
    """Load configuration from JSON file or return defaults."""
    if path is None:
        return Config()

    with open(path) as f:
        data = json.load(f)

    config = Config()

    if "stream" in data:
        config.stream = StreamConfig(**data["stream"])
    if "stats" in data:
        config.stats = StatsConfig(**data["stats"])

    return config


def save_config(config: Config, path: str) -> None:
    """Save configuration to JSON file."""
    with open(path, "w") as f:
        json.dump(asdict(config), f, indent=2)


def parse_seed(text: str) -> int:
    """Parse a decimal or 0x-prefixed hex seed.

    Args:
        text: Seed as written by a user or a failure report

    Returns:
        Seed as an integer
    """
    text = text.strip()
    try:
        return int(text, 0)
    except ValueError:
        raise ValueError(f"Invalid seed: {text!r}") from None


def seed_from_env(env_file: Optional[str] = None) -> Optional[int]:
    """Read a reproduction seed from SHRINKSTREAM_SEED.

    Values from env_file (or a .env found from the working directory) do not
    override variables that are already set.

    Args:
        env_file: Optional path to a .env file

    Returns:
        The seed, or None if the variable is unset or empty
    """
    load_dotenv(env_file or find_dotenv(usecwd=True))
    value = os.environ.get(SEED_ENV_VAR)
    if not value:
        return None
    return parse_seed(value)


def parse_word(text: str) -> int:
    """Parse one replay-buffer word (decimal or 0x hex).

    Args:
        text: Word as printed by the draw command

    Returns:
        Word in [0, 2**64)
    """
    text = text.strip()
    try:
        word = int(text, 0)
    except ValueError:
        raise ValueError(f"Invalid word: {text!r}") from None
    if not 0 <= word < 1 << 64:
        raise ValueError(f"Word out of 64-bit range: {text!r}")
    return word
