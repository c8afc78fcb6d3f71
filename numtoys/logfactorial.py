"""log2(n!) by direct summation."""

from __future__ import annotations

import math
import sys


def log2_factorial(n: int) -> float:
    """Sum of log2(i) for i in 1..n."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return math.fsum(math.log2(i) for i in range(1, n + 1))


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    n = 1
    if len(args) == 1:
        try:
            n = int(args[0])
        except ValueError:
            n = 0
    if n < 1:
        return 1
    print(f"log2({n}!) ~= {log2_factorial(n):.15g}")
    return 0