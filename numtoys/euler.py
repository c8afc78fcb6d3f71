"""Euler's number: the plain nested series, and a fixed-point long-division method."""

from __future__ import annotations

import math
import sys
from typing import Iterator

import mpmath

WORD_SIZE = 64
GROUP_SIZE = 19
_LONG_DOUBLE_BITS = 64
_LONG_DOUBLE_DIGITS = 18


def series_steps(n: int) -> Iterator[mpmath.mpf]:
    """Yield e = e / i + 1 for i from n down to 1, starting from e = 1.

    Each step is rounded to a 64-bit mantissa, like an x87 long double.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    e = mpmath.mpf(1)
    for i in range(n, 0, -1):
        e = mpmath.fadd(mpmath.fdiv(e, i, prec=_LONG_DOUBLE_BITS), 1, prec=_LONG_DOUBLE_BITS)
        yield e


def _format_series_value(value: mpmath.mpf) -> str:
    text = mpmath.nstr(value, _LONG_DOUBLE_DIGITS)
    return text[:-2] if text.endswith(".0") else text


def stirling_log2_factorial(n: int) -> float:
    """Stirling's estimate of log2(n!)."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return math.log2(2 * math.pi) / 2 + math.log2(n) * (n + 0.5) - n / math.log(2)


def decimal_digits(words: int, word_size: int = WORD_SIZE) -> int:
    """How many decimal digits ``words`` words of ``word_size`` bits can hold."""
    return math.floor(math.log(2) / math.log(10) * words * word_size)


def _word_count(terms: int) -> int:
    return max(0, math.ceil(stirling_log2_factorial(terms) / WORD_SIZE))


def compute_fraction(terms: int, words: int | None = None, intensity: int = 1) -> int:
    """Fractional part of e as a fixed-point integer of ``words`` 64-bit words.

    Divides 1.fraction by terms, terms - 1, ..., 2 in turn, truncating each
    time. ``intensity`` is how many divisors one pass batches; the result does
    not depend on it, but it must lie in 1..terms.
    """
    if terms < 1:
        raise ValueError("Invalid term count")
    if intensity < 1 or intensity > terms:
        raise ValueError("Invalid intensity")
    if words is None:
        words = _word_count(terms)
    if words < 0:
        raise ValueError("word count must be non-negative")
    one = 1 << (words * WORD_SIZE)
    fraction = 0
    for divisor in range(terms, 1, -1):
        fraction = (one + fraction) // divisor
    return fraction


def fraction_groups(fraction: int, words: int, digits: int) -> Iterator[str]:
    """Decimal digits of the fraction: groups of 19, then one shorter group if any remain."""
    bits = words * WORD_SIZE
    mask = (1 << bits) - 1
    full, rest = divmod(digits, GROUP_SIZE)
    for _ in range(full):
        fraction *= 10**GROUP_SIZE
        yield f"{fraction >> bits:0{GROUP_SIZE}d}"
        fraction &= mask
    if rest:
        fraction *= 10**rest
        yield f"{fraction >> bits:0{rest}d}"


def hex_words(fraction: int, words: int) -> list[str]:
    """The fraction's words, most significant first, as 16 hex digits each."""
    mask = (1 << WORD_SIZE) - 1
    return [
        f"{(fraction >> (WORD_SIZE * (words - 1 - i))) & mask:016x}" for i in range(words)
    ]


def _leading_int(text: str) -> int:
    text = text.lstrip()
    sign = 1
    if text[:1] in "+-" and text:
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    return sign * int(digits) if digits else 0


def _scan_uint(text: str) -> int | None:
    text = text.lstrip()
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    return int(digits) if digits else None


def main_normal(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    n = 5
    if len(args) == 1:
        n = _leading_int(args[0])
    try:
        for value in series_steps(n):
            print(f"e -> {_format_series_value(value)}")
    except ValueError:
        return 1
    return 0


def main_pipeline(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    hex_mode = False
    terms = 5
    intensity = 1
    if args:
        first = args[0]
        if first.startswith("-"):
            hex_mode = True
            first = first[1:]
        scanned = _scan_uint(first)
        if scanned is not None:
            terms = scanned
    if len(args) == 2:
        scanned = _scan_uint(args[1])
        if scanned is not None:
            intensity = scanned

    if terms == 0:
        sys.stderr.write("Invalid term count\n")
        return 1
    if intensity == 0 or intensity > terms:
        sys.stderr.write("Invalid intensity\n")
        return 1

    precision = stirling_log2_factorial(terms)
    sys.stderr.write(
        f"estimated required precision: log2({terms}!) ~= {precision:f}bits\n"
    )
    words = max(0, math.ceil(precision / WORD_SIZE))
    sys.stderr.write(
        f"allocated {words} {WORD_SIZE}bit words ({words * WORD_SIZE} bit)\n"
    )
    digits = decimal_digits(words, WORD_SIZE)
    if not hex_mode:
        sys.stderr.write(f"will print {digits} digits\n")

    fraction = compute_fraction(terms, words, intensity)
    sys.stderr.write("\n")

    if hex_mode:
        sys.stdout.write("".join(word + "_" for word in hex_words(fraction, words)) + "\n")
        return 0

    body = "".join(fraction_groups(fraction, words, digits))
    if digits % GROUP_SIZE == 0:
        # The trailing group is printed even when empty, as a bare zero.
        body += "0"
    sys.stdout.write(f"e = 2.{body}\n")
    return 0