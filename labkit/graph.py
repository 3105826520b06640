"""Tabulate and plot y = e^(-x^2/20) sin(5x) + ln(|x|+1) cos(2x) in ASCII."""

from __future__ import annotations

import math
import sys
from typing import Iterator, Sequence

WIDTH = 100
ZERO_POSITION = 50
SCALE = 10


def evaluate(x: float) -> float:
    """Value of the graphed function at ``x``."""
    return math.exp(-(x ** 2) / 20) * math.sin(5 * x) + math.log(abs(x) + 1) * math.cos(2 * x)


def sample(start: float, end: float, step: float) -> list[tuple[float, float]]:
    """(x, y) pairs from ``start`` up to ``end``, adding ``step`` each time."""
    if step <= 0:
        raise ValueError("Step must be greater than 0.")
    points = []
    x = start
    while x <= end:
        points.append((x, evaluate(x)))
        x += step
    return points


def plot_bar(y: float) -> str:
    """A 100-character bar with the axis at column 50 and '#' out to y * 10."""
    position = ZERO_POSITION + int(y * SCALE)

    def mark(i: int) -> str:
        if i == ZERO_POSITION:
            return "|"
        if (y >= 0 and ZERO_POSITION < i <= position) or (y < 0 and position <= i < ZERO_POSITION):
            return "#"
        return " "

    return "".join(mark(i) for i in range(WIDTH))


def _extremes(points: Sequence[tuple[float, float]]):
    (x0, y0), *rest = points
    high, low = (x0, y0), (x0, y0)
    for x, y in rest:
        if y >= high[1]:
            high = (x, y)
        elif y < low[1]:
            low = (x, y)
    return high, low


def _tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv=None) -> int:
    tokens = _tokens()

    def ask(prompt: str) -> float:
        print(prompt, end="", flush=True)
        tok = next(tokens, None)
        if tok is None:
            raise EOFError
        return float(tok)

    print("\nOur graph equation is y = e^(-x^2/20) * sin(5x) + ln(|x|+1) * cos(2x)")
    print("State the start and end x values.")
    try:
        start = ask("Start value: ")
        end = ask("End value: ")
        step = ask("By how much shall we increment X? ")
    except (EOFError, ValueError):
        print("\nPlease enter numbers.")
        return 1

    if step <= 0:
        print("\nStep must be greater than 0.")
        return 1

    print(f"\n{'X':<8} {'Y':<8}")
    points = sample(start, end, step)
    for x, y in points:
        print(f"{x:<8.2f} {y:<8.2f}{plot_bar(y)}")

    if points:
        (xmax, ymax), (xmin, ymin) = _extremes(points)
        print(
            f"\nThe maximum value is {ymax:.2f} at x = {xmax:.2f}."
            f"\nThe minimum is {ymin:.2f} at x = {xmin:.2f}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())