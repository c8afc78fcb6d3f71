"""Draw a filled circle as text and estimate pi from its area."""

from __future__ import annotations

import math
import sys
from typing import Iterator

_MAX_SIZE = (2**31 - 1) // 2


def _check(size: int) -> None:
    if size < 0 or size >= _MAX_SIZE:
        raise ValueError(f"size out of range: {size}")


def _half_width(x: int, size: int) -> float:
    return math.sqrt(size * size - x * x) * 2


def circle_lines(size: int) -> Iterator[str]:
    """Yield the rows of a circle of radius ``size``, without newlines."""
    _check(size)
    for x in range(-size, size + 1):
        start = math.floor(_half_width(x, size) + 0.5)
        pad = " " * (size * 2 - start)
        yield pad + "#" * (start * 2 + 1) + pad


def estimate_pi(size: int) -> float:
    """Pi from summing the circle's row widths; NaN for size 0."""
    _check(size)
    area = math.fsum(_half_width(x, size) for x in range(-size, size + 1))
    return area / (size * size) if size else math.nan


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 1
    try:
        size = int(args[0])
    except ValueError:
        size = 0
    try:
        lines = circle_lines(size)
        for line in lines:
            sys.stdout.write(line + "\n")
        pi = estimate_pi(size)
    except ValueError:
        return 1
    sys.stderr.write(f"\nPi = {pi:f}\n")
    return 0