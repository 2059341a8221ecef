#!/usr/bin/env python3
"""CLI entry point for inspecting bitstreams."""

import argparse
import logging
import sys
from pathlib import Path

# Add the repository root to path for package imports
sys.path.insert(0, str(Path(__file__).parent))

from shrinkstream.bitstream import RandomBitStream, BufferedBitStream
from shrinkstream.config import load_config, parse_seed, parse_word, seed_from_env
from shrinkstream.errors import Overrun
from shrinkstream.seed import random_seed
from shrinkstream.stats import sample_balance


def resolve_seed(args, config):
    """Pick a seed: command line, then config file, then .env / environment."""
    if args.seed is not None:
        return args.seed
    if config.stream.seed is not None:
        return config.stream.seed
    return seed_from_env()


def cmd_seed(args):
    """Print a fresh seed."""
    print(f"{random_seed():#018x}")


def cmd_draw(args):
    """Draw words from a seeded random stream."""
    config = load_config(args.config)
    stream = RandomBitStream(seed=resolve_seed(args, config), persist=config.stream.persist)
    print(f"Seed: {stream.seed:#018x}")

    for i in range(args.count):
        print(f"  {i:4d}: {stream.draw_bits(args.bits):#x}")


def cmd_replay(args):
    """Replay words through a buffered stream."""
    words = [parse_word(w) for w in args.words]
    count = args.count if args.count is not None else len(words)
    stream = BufferedBitStream(words)

    for i in range(count):
        try:
            u = stream.draw_bits(args.bits)
        except Overrun as e:
            print(f"Overrun: buffer exhausted after {e.consumed} words")
            sys.exit(1)
        print(f"  {i:4d}: {u:#x}")


def cmd_stats(args):
    """Report per-bit balance of PRNG output."""
    config = load_config(args.config)
    count = args.count if args.count is not None else config.stats.count
    bits = args.bits if args.bits is not None else config.stats.bits

    stream = RandomBitStream(seed=resolve_seed(args, config))
    balance = sample_balance(stream, count, bits)

    print(f"Seed: {stream.seed:#018x}")
    print(f"Sampled {balance.count} words of {balance.bits} bits")
    print(f"Mean bit frequency: {balance.mean:.4f}")
    print(f"Max deviation from 0.5: {balance.max_deviation:.4f}")

    if args.show_bits:
        for i, freq in enumerate(balance.frequencies):
            print(f"  bit {i:2d}: {freq:.4f}")


def main():
    parser = argparse.ArgumentParser(
        description="Inspect random and replayed bitstreams"
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to JSON config file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Fresh seed
    seed_parser = subparsers.add_parser("seed", help="Print a fresh seed")
    seed_parser.set_defaults(func=cmd_seed)

    # Draw from a random stream
    draw_parser = subparsers.add_parser("draw", help="Draw words from a random stream")
    draw_parser.add_argument(
        "--seed",
        type=parse_seed,
        default=None,
        help="Seed (decimal or 0x hex); falls back to config, then SHRINKSTREAM_SEED"
    )
    draw_parser.add_argument(
        "--count", "-n",
        type=int,
        default=8,
        help="Number of words to draw"
    )
    draw_parser.add_argument(
        "--bits", "-b",
        type=int,
        default=64,
        help="Width of each draw (0-64)"
    )
    draw_parser.set_defaults(func=cmd_draw)

    # Replay a buffer
    replay_parser = subparsers.add_parser("replay", help="Replay words through a buffered stream")
    replay_parser.add_argument(
        "words",
        nargs="*",
        help="Words to replay (decimal or 0x hex)"
    )
    replay_parser.add_argument(
        "--count", "-n",
        type=int,
        default=None,
        help="Number of draws (defaults to the buffer length)"
    )
    replay_parser.add_argument(
        "--bits", "-b",
        type=int,
        default=64,
        help="Width of each draw (0-64)"
    )
    replay_parser.set_defaults(func=cmd_replay)

    # Bit balance
    stats_parser = subparsers.add_parser("stats", help="Per-bit balance of PRNG output")
    stats_parser.add_argument(
        "--seed",
        type=parse_seed,
        default=None,
        help="Seed (decimal or 0x hex)"
    )
    stats_parser.add_argument(
        "--count", "-n",
        type=int,
        default=None,
        help="Number of words to sample"
    )
    stats_parser.add_argument(
        "--bits", "-b",
        type=int,
        default=None,
        help="Width of each draw (0-64)"
    )
    stats_parser.add_argument(
        "--show-bits",
        action="store_true",
        help="Print the frequency of every bit"
    )
    stats_parser.set_defaults(func=cmd_stats)

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    args.func(args)


if __name__ == "__main__":
    main()
