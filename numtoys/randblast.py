"""Generate bytes from a weak LCG, or search for the seed behind them."""

from __future__ import annotations

import sys
from typing import Iterator

MEGA = 1024 * 1024
_MASK32 = 0xFFFFFFFF


def weak_rand(seed: int) -> tuple[int, int]:
    """One LCG step: returns (next_seed, value in 0..32767)."""
    seed = (seed * 1103515245 + 12345) & _MASK32
    return seed, (seed // 65536) % 32768


def generate(seed: int, length: int = MEGA) -> bytes:
    """``length`` bytes, each the low byte of successive LCG outputs."""
    state = seed & _MASK32
    out = bytearray(length)
    for i in range(length):
        state, value = weak_rand(state)
        out[i] = value % 256
    return bytes(out)


def matches(seed: int, data: bytes) -> bool:
    """True if the generator seeded with ``seed`` reproduces ``data``."""
    if not data:
        return False
    state = seed & _MASK32
    for byte in data:
        state, value = weak_rand(state)
        if value % 256 != byte:
            return False
    return True


def crack(data: bytes, start: int = 0, stop: int = 1 << 32) -> Iterator[int]:
    """Yield every seed in [start, stop) that reproduces ``data``."""
    return (seed for seed in range(start, stop) if matches(seed, data))


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(f"Usage: {sys.argv[0]} <file> [seed]")
        return 1
    if len(args) == 2:
        try:
            seed = int(args[1]) & _MASK32
        except ValueError:
            seed = 0
        try:
            with open(args[0], "wb") as fp:
                fp.write(generate(seed))
        except OSError:
            print(f"Error: could not open file {args[0]}")
            return 1
        print(f"File {args[0]} generated with seed {seed}")
        return 0
    try:
        if args[0] == "-":
            data = sys.stdin.buffer.read(MEGA)
        else:
            with open(args[0], "rb") as fp:
                data = fp.read(MEGA)
    except OSError:
        print(f"Error: could not open file {args[0]}")
        return 1
    if not data:
        print("Error: could not read file")
        return 1
    for seed in crack(data):
        print(f"Seed found: {seed}", flush=True)
    print("Seed not found")
    return 0