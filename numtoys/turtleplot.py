"""A tiny turtle that draws on an 81x81 character grid."""

from __future__ import annotations

import re
import sys
from typing import TextIO

PLOT_SIZE = 40
ACTUAL_SIZE = PLOT_SIZE * 2 + 1
_DIRECTIONS = {0: (1, 0), 90: (0, 1), 180: (-1, 0), 270: (0, -1)}
_INT = re.compile(r"\s*([+-]?\d+)")


class Turtle:
    """Pen state, position, heading and the plot itself."""

    def __init__(self) -> None:
        self.plot = [["-"] * ACTUAL_SIZE for _ in range(ACTUAL_SIZE)]
        self.x = 0
        self.y = 0
        self.facing = 0
        self.drawing = False

    @property
    def direction(self) -> tuple[int, int]:
        return _DIRECTIONS[self.facing]

    def pen_up(self) -> None:
        self.drawing = False

    def pen_down(self) -> None:
        self.drawing = True

    def turn_left(self) -> None:
        self.facing = (self.facing + 90) % 360

    def turn_right(self) -> None:
        self.facing = (self.facing - 90) % 360

    def _set(self, x: int, y: int, mark: str) -> None:
        col, row = PLOT_SIZE + x, PLOT_SIZE + y
        if not (0 <= col < ACTUAL_SIZE and 0 <= row < ACTUAL_SIZE):
            raise ValueError(f"position ({x},{y}) is off the plot")
        self.plot[row][col] = mark

    def move(self, distance: int) -> None:
        dx, dy = self.direction
        if self.drawing:
            for i in range(distance + 1):
                self._set(self.x + dx * i, self.y, "#")
            for i in range(distance + 1):
                self._set(self.x, self.y + dy * i, "#")
        self.x += dx * distance
        self.y += dy * distance
        self._set(self.x, self.y, "@")

    def render(self) -> str:
        return "".join(
            "".join(ch * 2 for ch in row) + "\n" for row in reversed(self.plot)
        )

    def status(self) -> str:
        return f"@({self.x},{self.y})\n-> {self.facing}\n"


def run(text: str, out: TextIO) -> Turtle:
    """Interpret a command stream, writing any output to ``out``."""
    turtle = Turtle()
    distance = 0
    pos = 0
    while pos < len(text):
        cmd = text[pos]
        pos += 1
        if cmd == "U":
            turtle.pen_up()
        elif cmd == "D":
            turtle.pen_down()
        elif cmd == "R":
            turtle.turn_right()
        elif cmd == "L":
            turtle.turn_left()
        elif cmd == "M":
            match = _INT.match(text, pos)
            if match:
                distance = int(match.group(1))
                pos = match.end()
            turtle.move(distance)
        elif cmd == "P":
            out.write(turtle.render())
        elif cmd == "?":
            out.write(turtle.status())
        elif cmd == "X":
            break
    return turtle


def main(argv=None) -> int:
    run(sys.stdin.read(), sys.stdout)
    return 0