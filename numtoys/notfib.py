"""A four-register shift sequence that looks a bit like Fibonacci."""

from __future__ import annotations

import sys
import time
from typing import Iterator

_MASK = (1 << 64) - 1


def notfib() -> Iterator[tuple[int, int, int, int]]:
    """Yield rows (a, b, c, d) forever, wrapping at 64 bits."""
    a, b, c, d = 1, 0, 0, 0
    while True:
        yield a, b, c, d
        a, b, c, d = (c + d) & _MASK, a, b, c


def _signed(value: int) -> int:
    return value - (1 << 64) if value >> 63 else value


def format_row(row) -> str:
    return "\t".join(f"{_signed(v):21d}" for v in row)


def main(argv=None) -> int:
    try:
        for row in notfib():
            print(format_row(row), flush=True)
            time.sleep(0.2)
    except KeyboardInterrupt:
        pass
    return 0