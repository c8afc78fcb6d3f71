"""Large Fibonacci numbers by fast doubling."""

from __future__ import annotations

import sys


def fibonacci(n: int) -> int:
    """F(n) with F(0) = 0 and F(1) = 1."""
    if n < 0:
        raise ValueError("n must be non-negative")
    a, b = 0, 1
    for bit in bin(n)[2:]:
        a, b = a * (2 * b - a), a * a + b * b
        if bit == "1":
            a, b = b, a + b
    return a


def to_raw(value: int) -> bytes:
    """Portable raw integer: 4-byte big-endian signed length, then magnitude."""
    magnitude = abs(value)
    body = magnitude.to_bytes((magnitude.bit_length() + 7) // 8, "big")
    size = -len(body) if value < 0 else len(body)
    return size.to_bytes(4, "big", signed=True) + body


def _leading_uint(text: str) -> int:
    digits = ""
    for ch in text.strip():
        if not ch.isdigit():
            break
        digits += ch
    return int(digits) if digits else 0


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    n = 1 << 20
    raw = False
    if args:
        if args[0].startswith("-"):
            n, raw = _leading_uint(args[0][1:]), True
        else:
            n = _leading_uint(args[0])
    value = fibonacci(n)
    if raw:
        sys.stdout.buffer.write(to_raw(value))
        sys.stdout.flush()
    else:
        sys.set_int_max_str_digits(0) if hasattr(sys, "set_int_max_str_digits") else None
        print(f"{n},\t{value}")
    return 0