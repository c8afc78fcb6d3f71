"""Pi in high precision, by quarter-circle integration or by acos(-1)."""

from __future__ import annotations

import sys

import mpmath


def pi_by_integration(scale: int, precision: int = 4096):
    """Sum sqrt(scale^2 - i^2) for i in 0..scale and rescale to pi."""
    if scale <= 0:
        raise ValueError("scale must be positive")
    with mpmath.workprec(precision):
        square = mpmath.mpf(scale) ** 2
        area = mpmath.mpf(0)
        for i in range(scale + 1):
            area += mpmath.sqrt(square - mpmath.mpf(i) ** 2)
        divisor = scale * scale // 4
        if divisor == 0:
            return mpmath.inf
        return area / divisor


def pi_by_acos(precision: int = 65536):
    """acos(-1) at the given binary precision."""
    with mpmath.workprec(precision):
        return +mpmath.acos(mpmath.mpf(-1))


def format_pi(value, digits: int = 128) -> str:
    """Fixed-point text with ``digits`` places after the point."""
    if not mpmath.isfinite(value):
        return str(value)
    with mpmath.workprec(max(mpmath.mp.prec, digits * 4 + 64)):
        scaled = int(mpmath.nint(abs(value) * mpmath.mpf(10) ** digits))
    sign = "-" if value < 0 else ""
    whole, frac = divmod(scaled, 10**digits)
    return f"{sign}{whole}.{frac:0{digits}d}" if digits else f"{sign}{whole}"


def main_integrate(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 1
    try:
        scale = int(args[0])
    except ValueError:
        return 1
    if scale <= 0:
        return 1
    sys.stderr.write(f"\nPi = {format_pi(pi_by_integration(scale))}\n")
    return 0


def main_fast(argv=None) -> int:
    sys.stderr.write(f"Pi = {format_pi(pi_by_acos())}\n")
    return 0