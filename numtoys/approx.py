"""Approximate a number in [0, 1] by a fraction using mediants."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Step:
    """One bisection step on the Stern-Brocot interval."""

    index: int
    low: tuple[int, int]
    high: tuple[int, int]
    mediant: tuple[int, int]
    value: float
    diff: float
    worse: bool


def mediant_steps(target: float, iterations: int) -> Iterator[Step]:
    """Yield up to ``iterations`` steps narrowing in on ``target``."""
    if target > 1:
        raise ValueError("target must not exceed 1")
    low, high = (0, 1), (1, 1)
    last_diff = 2.0
    for index in range(1, iterations + 1):
        mediant = (low[0] + high[0], low[1] + high[1])
        value = mediant[0] / mediant[1]
        diff = target - value
        yield Step(index, low, high, mediant, value, diff, abs(diff) > abs(last_diff))
        if target == value:
            return
        if target < value:
            high = mediant
        elif target > value:
            low = mediant
        last_diff = diff


def format_step(step: Step, iterations: int) -> str:
    marker = ">>>" if step.worse else "   "
    return (
        f"({step.index}/{iterations})\t"
        f"[min: {step.low[0]}/{step.low[1]}, max: {step.high[0]}/{step.high[1]}],\t"
        f"approx => {step.mediant[0]}/{step.mediant[1]} ({step.value:.10f}) :\t"
        f"{marker} diff => {step.diff:.10f}"
    )


def _parse_count(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        try:
            return int(text)
        except ValueError:
            return 0


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("?ARG", file=sys.stderr)
        return 1
    iterations = _parse_count(args[1])
    try:
        target = float(args[0])
    except ValueError:
        print("?INVALID", file=sys.stderr)
        return 1
    if target > 1:
        print("?ONE", file=sys.stderr)
        return 1
    print(f"Input: {args[0]}\nIterations: {iterations}")
    print("=" * 80)
    for step in mediant_steps(target, iterations):
        print(format_step(step, iterations))
    return 0