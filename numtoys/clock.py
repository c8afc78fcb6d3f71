"""Current time printed in several fixed formats."""

from __future__ import annotations

import sys
import time
from datetime import datetime
from decimal import ROUND_HALF_EVEN, Decimal

_NS_PER_SECOND = 1_000_000_000


def format_epoch(seconds: int) -> str:
    """Seconds since the epoch as a decimal integer."""
    return f"{int(seconds)}"


def format_hex_epoch(seconds: int) -> str:
    """Seconds since the epoch in hexadecimal, prefixed with 0x unless zero."""
    seconds = int(seconds)
    return "0" if seconds == 0 else f"{seconds:#x}"


def format_neodate(moment: datetime) -> str:
    """An ISO-8601-like timestamp with a numeric UTC offset."""
    return moment.strftime("%Y-%m-%dT%H:%M:%S%z")


def format_ns(nanoseconds: int) -> str:
    """Epoch time with nine fractional digits."""
    seconds, rest = divmod(int(nanoseconds), _NS_PER_SECOND)
    return f"{seconds}.{rest:09d}"


def format_us(nanoseconds: int) -> str:
    """Epoch time rounded to six fractional digits."""
    value = Decimal(int(nanoseconds)) / _NS_PER_SECOND
    return str(value.quantize(Decimal("0.000001"), rounding=ROUND_HALF_EVEN))


def _emit(text: str) -> int:
    sys.stdout.write(text + "\n")
    return 0


def main_epoch(argv=None) -> int:
    return _emit(format_epoch(int(time.time())))


def main_hex_epoch(argv=None) -> int:
    return _emit(format_hex_epoch(int(time.time())))


def main_neodate(argv=None) -> int:
    return _emit(format_neodate(datetime.now().astimezone()))


def main_ns(argv=None) -> int:
    return _emit(format_ns(time.time_ns()))


def main_us(argv=None) -> int:
    return _emit(format_us(time.time_ns()))