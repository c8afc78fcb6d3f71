"""Euler's number to many digits, with a choice of division core and progress reports."""

from __future__ import annotations

import enum
import getopt
import math
import os
import struct
import sys
import threading
from dataclasses import dataclass
from typing import Callable, Iterable, TextIO

from numtoys.euler import GROUP_SIZE, WORD_SIZE, decimal_digits, stirling_log2_factorial

DEFAULT_TILE_WORDS = 4096

_LIMB_SIZE = 32
_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1
_MAX_MXI_TERMS = _MASK32
# Below this divisor the reciprocal quotient is provably exact, so plain
# big-integer division gives the same limbs.
_EXACT_RECIPROCAL_LIMIT = 1 << 16
_POW10_GROUP = 10**GROUP_SIZE


class Backend(enum.Enum):
    """Which division core computes the fraction."""

    LEGACY = "legacy"
    MXI = "mxi"


DEFAULT_BACKEND = Backend.MXI


class _UsageError(ValueError):
    def __init__(self, message: str, show_usage: bool = True) -> None:
        super().__init__(message)
        self.show_usage = show_usage


@dataclass
class Options:
    """Command-line settings."""

    terms: int = 5
    intensity: int = 1
    tile_words: int = DEFAULT_TILE_WORDS
    verbose: bool = True
    output_file: str | None = None
    backend: Backend = DEFAULT_BACKEND
    show_help: bool = False


def _strtoull(text: str) -> int:
    text = text.lstrip()
    negative = text.startswith("-")
    if text[:1] in ("+", "-"):
        text = text[1:]
    digits = ""
    for ch in text:
        if not ch.isdigit():
            break
        digits += ch
    value = min(int(digits), _MASK64) if digits else 0
    return (-value) & _MASK64 if negative else value


def parse_args(argv=None) -> Options:
    """Parse options; raises ValueError on a bad option or backend name."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        pairs, _ = getopt.gnu_getopt(args, "t:i:T:o:qh", ["impl="])
    except getopt.GetoptError as exc:
        raise _UsageError(str(exc)) from None
    opts = Options()
    for flag, value in pairs:
        if flag == "-t":
            opts.terms = _strtoull(value)
        elif flag == "-i":
            opts.intensity = _strtoull(value)
        elif flag == "-T":
            opts.tile_words = _strtoull(value)
        elif flag == "-o":
            opts.output_file = value
        elif flag == "-q":
            opts.verbose = False
        elif flag == "-h":
            opts.show_help = True
            return opts
        elif flag == "--impl":
            try:
                opts.backend = Backend(value)
            except ValueError:
                raise _UsageError(
                    f"Error: invalid backend '{value}'", show_usage=False
                ) from None
    if opts.tile_words == 0:
        raise _UsageError("Error: Invalid tile size", show_usage=False)
    return opts


class _Progress:
    """Counts work done and, when enabled, reports it once a second on stderr."""

    def __init__(self, end: int, enabled: bool) -> None:
        self.current = 0
        self.end = end
        self._enabled = enabled
        self._last = 0
        self._secs = 0
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def advance(self, count: int) -> None:
        self.current += count

    def _report(self) -> None:
        if self._last > self.end:
            self._last = 0
        self._secs += 1
        current = self.current
        percent = current * 100 / self.end if self.end else math.nan
        sys.stderr.write(
            f">{percent:7.3f}% ({current}/{self.end}) @ {current - self._last} op/s "
            f"({current // self._secs} op/s avg.)\n"
        )
        self._last = current

    def _run(self) -> None:
        while not self._stop.wait(1.0):
            self._report()

    def __enter__(self) -> "_Progress":
        if self._enabled:
            self._thread = threading.Thread(target=self._run, daemon=True)
            self._thread.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()


def _check(terms: int, intensity: int, size: int) -> None:
    if terms < 1:
        raise ValueError("Invalid term count")
    if intensity < 1 or intensity > terms:
        raise ValueError("Invalid intensity")
    if size < 0:
        raise ValueError("size must be non-negative")


def _divide_exact(fraction: int, one: int, divisors: Iterable[int]) -> int:
    for divisor in divisors:
        if divisor > 1:
            fraction = (one + fraction) // divisor
    return fraction


def _compute_legacy(
    words: int, terms: int, intensity: int, advance: Callable[[int], None]
) -> int:
    _check(terms, intensity, words)
    one = 1 << (words * WORD_SIZE)
    fraction = 0
    divisor = terms
    while divisor >= intensity:
        fraction = _divide_exact(fraction, one, range(divisor, divisor - intensity, -1))
        advance(intensity)
        divisor -= intensity
    # What is left is terms % intensity divisors, down to 1.
    fraction = _divide_exact(fraction, one, range(divisor, 0, -1))
    advance(divisor)
    return fraction


def compute_legacy(words: int, terms: int, intensity: int) -> int:
    """Fraction of e over ``words`` 64-bit words, divided in batches of ``intensity``."""
    return _compute_legacy(words, terms, intensity, _Progress(terms, False).advance)


def _reciprocal_pass(fraction: int, limbs: int, divisor: int) -> int:
    reciprocal = (_MASK64 // divisor + 1) & _MASK64
    remainder = 1
    quotients = []
    for (limb,) in struct.iter_unpack(">I", fraction.to_bytes(limbs * 4, "big")):
        partial = (remainder << _LIMB_SIZE) | limb
        quotient = ((reciprocal * partial) >> 64) & _MASK32
        quotients.append(quotient)
        remainder = (partial - quotient * divisor) & _MASK32
    return int.from_bytes(struct.pack(f">{limbs}I", *quotients), "big")


def _divide_reciprocal(fraction: int, limbs: int, divisors: Iterable[int]) -> int:
    one = 1 << (limbs * _LIMB_SIZE)
    for divisor in divisors:
        if divisor <= _EXACT_RECIPROCAL_LIMIT:
            fraction = (one + fraction) // divisor
        else:
            fraction = _reciprocal_pass(fraction, limbs, divisor)
    return fraction


def _compute_mxi(
    limbs: int, terms: int, intensity: int, advance: Callable[[int], None]
) -> int:
    _check(terms, intensity, limbs)
    if terms > _MAX_MXI_TERMS:
        raise ValueError("the mxi core handles at most 2**32 - 1 terms")
    fraction = 0
    divisor = terms
    while divisor > intensity:
        fraction = _divide_reciprocal(
            fraction, limbs, range(divisor, divisor - intensity, -1)
        )
        advance(intensity)
        divisor -= intensity
    fraction = _divide_reciprocal(fraction, limbs, range(divisor, 1, -1))
    advance(divisor - 1)
    return fraction


def compute_mxi(limbs: int, terms: int, intensity: int) -> int:
    """Fraction of e over ``limbs`` 32-bit limbs, using reciprocal division."""
    return _compute_mxi(limbs, terms, intensity, _Progress(terms, False).advance)


def _tile_widths(words: int, tile_words: int) -> list[int]:
    """Tile widths in bits, least significant tile first."""
    count = -(-words // tile_words)
    if count == 0:
        return []
    last = words - (count - 1) * tile_words
    return [last * WORD_SIZE] + [tile_words * WORD_SIZE] * (count - 1)


def _write_fraction(
    fraction: int,
    words: int,
    digits: int,
    out: TextIO,
    tile_words: int,
    advance: Callable[[int], None],
) -> None:
    if tile_words < 1:
        raise ValueError("tile size must be positive")
    total_bits = words * WORD_SIZE
    fraction &= (1 << total_bits) - 1
    widths = _tile_widths(words, tile_words)
    masks = [(1 << bits) - 1 for bits in widths]
    tiles = []
    for bits, mask in zip(widths, masks):
        tiles.append(fraction & mask)
        fraction >>= bits

    out.write("e = 2.")
    for group in range(digits // GROUP_SIZE):
        carry = 0
        next_tiles = []
        for tile, bits, mask in zip(tiles, widths, masks):
            product = tile * _POW10_GROUP + carry
            next_tiles.append(product & mask)
            carry = product >> bits
        tiles = next_tiles
        out.write(f"{carry:0{GROUP_SIZE}d}")
        if group % 4 == 0:
            out.write("\n")
        advance(1)

    rest = digits % GROUP_SIZE
    if rest:
        joined = 0
        for tile, bits in zip(reversed(tiles), reversed(widths)):
            joined = (joined << bits) | tile
        joined *= 10**rest
        out.write(f"{joined >> total_bits:0{rest}d}")
    out.write("\n")


def write_fraction(fraction: int, words: int, digits: int, out: TextIO) -> None:
    """Write 'e = 2.' and ``digits`` decimals, breaking lines every four groups."""
    _write_fraction(
        fraction,
        words,
        digits,
        out,
        DEFAULT_TILE_WORDS,
        _Progress(digits // GROUP_SIZE, False).advance,
    )


def _usage(prog: str) -> None:
    sys.stderr.write(
        f"Usage: {prog} [OPTIONS]\n"
        "\n"
        "Options:\n"
        "  -t TERMS      Number of terms (default: 5)\n"
        "  -i INTENSITY  Intensity for core calculation (default: 1)\n"
        "  -T TILE       Tile size in words for decimal conversion (default: 4096)\n"
        "  --impl=NAME   Calculation backend: legacy or mxi "
        f"(default: {DEFAULT_BACKEND.value})\n"
        "  -o FILE       Output to file instead of stdout\n"
        "  -q            Quiet mode (no progress output)\n"
        "  -h            Show this help\n"
        "\n"
        "Examples:\n"
        f"  {prog} -t 1000000 -i 256 -T 4096        # Large computation to stdout\n"
        f"  {prog} -t 100000 -i 64 -o e_100k.txt    # Output to file\n"
        f"  {prog} -t 1000000 -i 256 -q -o e.txt    # Quiet mode, output to file\n"
    )


def _compute(opts: Options, words: int, progress: _Progress) -> int:
    if opts.backend is Backend.MXI:
        if opts.terms <= _MAX_MXI_TERMS:
            sys.stderr.write("calculating e with 1 thread (mxi)\n")
            return _compute_mxi(words * 2, opts.terms, opts.intensity, progress.advance)
        sys.stderr.write(
            "mxi backend cannot handle this input; "
            "falling back to legacy calculation core\n"
        )
    if words < 1:
        sys.stderr.write("calculating e with 1 thread\n")
    else:
        sys.stderr.write(f"calculating e with 1 threads, intensity = {opts.intensity}\n")
    fraction = _compute_legacy(words, opts.terms, opts.intensity, progress.advance)
    if words >= 1 and opts.terms % opts.intensity:
        sys.stderr.write("Finalizing...\n")
    return fraction


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "ecalc"
    try:
        opts = parse_args(args)
    except _UsageError as exc:
        if exc.show_usage:
            sys.stderr.write(f"{prog}: {exc}\n")
            _usage(prog)
        else:
            sys.stderr.write(f"{exc}\n")
        return 1
    if opts.show_help:
        _usage(prog)
        return 0

    if opts.terms == 0:
        sys.stderr.write("Error: Invalid term count\n")
        return 1
    if opts.intensity == 0 or opts.intensity > opts.terms:
        sys.stderr.write("Error: Invalid intensity\n")
        return 1

    sys.stderr.write(f"using calculation backend: {opts.backend.value}\n")
    precision = stirling_log2_factorial(opts.terms)
    sys.stderr.write(
        f"estimated required precision: log2({opts.terms}!) ~= {precision:f} bits\n"
    )
    words = max(0, math.ceil(precision / WORD_SIZE))
    sys.stderr.write(
        f"allocated {words} {WORD_SIZE}-bit words ({words * WORD_SIZE} bit)\n"
    )
    digits = decimal_digits(words, WORD_SIZE)
    sys.stderr.write(f"will print {digits} digits\n")

    with _Progress(opts.terms, opts.verbose) as progress:
        fraction = _compute(opts, words, progress)

    sys.stderr.write("\n")
    sys.stderr.write("Printing...\n")

    handle = None
    if opts.output_file:
        try:
            handle = open(opts.output_file, "w")
        except OSError as exc:
            sys.stderr.write(f"fopen: {exc.strerror}\n")
            return 1
    out = handle if handle is not None else sys.stdout
    try:
        with _Progress(digits // GROUP_SIZE, opts.verbose) as progress:
            _write_fraction(fraction, words, digits, out, opts.tile_words, progress.advance)
    finally:
        if handle is not None:
            handle.close()
    if handle is not None:
        sys.stderr.write(f"\nOutput written to {opts.output_file}\n")
    return 0