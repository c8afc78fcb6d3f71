"""Ackermann function with a call counter."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class AckermannResult:
    """The value of A(m, n) and how many calls the recursion makes."""

    m: int
    n: int
    value: int
    calls: int


def ackermann(m: int, n: int) -> AckermannResult:
    """Evaluate A(m, n), counting calls as the plain recursion would."""
    if m < 0 or n < 0:
        raise ValueError("arguments must be non-negative")
    pending = [m]
    current = n
    calls = 0
    while pending:
        level = pending.pop()
        calls += 1
        if level == 0:
            current += 1
        elif current == 0:
            pending.append(level - 1)
            current = 1
        else:
            pending.append(level - 1)
            pending.append(level)
            current -= 1
    return AckermannResult(m, n, current, calls)


def _leading_uint(text: str) -> int:
    digits = ""
    for ch in text.strip():
        if not ch.isdigit():
            break
        digits += ch
    return int(digits) if digits else 0


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("?ARG")
        return 1
    m, n = _leading_uint(args[0]), _leading_uint(args[1])
    start = time.perf_counter()
    result = ackermann(m, n)
    elapsed = time.perf_counter() - start
    print(
        f"\nTotal {elapsed:0.6f} sec, {result.calls} time(s) called, "
        f"ACKERMANN({m}, {n}) = {result.value}"
    )
    usec = elapsed * 1_000_000
    rate = result.calls / usec if usec else float("inf")
    print(f"{rate:0.2f} c/usec")
    return 0