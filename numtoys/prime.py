"""Primes by trial division against previously found primes."""

from __future__ import annotations

import math
import sys
from typing import Iterator


def primes_below(limit: int) -> Iterator[int]:
    """Yield primes from 2 up to and including ``limit``."""
    found: list[int] = []
    for candidate in range(2, limit + 1):
        bound = math.isqrt(candidate - 1) + 1
        composite = False
        for p in found:
            if p > bound:
                break
            if candidate % p == 0:
                composite = True
                break
        if not composite:
            found.append(candidate)
            yield candidate


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("No enough arguments")
        return 1
    digits = ""
    for ch in args[0].strip():
        if not ch.isdigit():
            break
        digits += ch
    for p in primes_below(int(digits) if digits else 0):
        print(p)
    return 0