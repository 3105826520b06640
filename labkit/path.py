"""Length of a path through a sequence of points read from a file."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from itertools import islice, pairwise
from typing import Iterable, Sequence, TextIO

MAX_POINTS = 30
FILENAME_LIMIT = 29


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def distance(a: Point, b: Point) -> float:
    """Straight-line distance between two points."""
    return math.hypot(b.x - a.x, b.y - a.y)


def total_distance(points: Iterable[Point]) -> float:
    """Sum of the distances between consecutive points."""
    return sum((distance(a, b) for a, b in pairwise(points)), 0.0)


def read_points(stream: TextIO) -> list[Point]:
    """Read 'x y' number pairs until the input ends, a number is malformed,
    or MAX_POINTS points have been read."""
    tokens = (token for line in stream for token in line.split())
    points: list[Point] = []
    while len(points) < MAX_POINTS:
        pair = list(islice(tokens, 2))
        if len(pair) < 2:
            break
        try:
            x, y = float(pair[0]), float(pair[1])
        except ValueError:
            break
        points.append(Point(x, y))
    return points


def format_table(points: Sequence[Point]) -> str:
    """Two-column table of the coordinates."""
    header = f"{'x':>5}   |{'y':>5}   \n" + "-" * 8 + "+" + "-" * 8 + "\n"
    rows = "".join(f"{p.x:7.1f} |{p.y:7.1f} \n" for p in points)
    return header + rows


def main(argv=None) -> int:
    print("Enter file name: ", end="", flush=True)
    filename = sys.stdin.readline().rstrip("\n")[:FILENAME_LIMIT]
    try:
        with open(filename) as handle:
            points = read_points(handle)
    except OSError:
        print("Error opening file.")
        return 1
    if not points:
        print(f"\nNo valid points in file {filename}.")
        return 1
    print(f"\nThere are {len(points)} points:")
    print("\n" + format_table(points), end="")
    print(f"\nThe length of the path through them is {total_distance(points):.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())