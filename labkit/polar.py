"""Quadrant and polar coordinates of a point in the plane."""

from __future__ import annotations

import math
import sys


def quadrant(x: float, y: float) -> int:
    """Quadrant 1-4 of the point, or 0 when it lies on an axis."""
    if x == 0 or y == 0:
        return 0
    if x > 0:
        return 1 if y > 0 else 4
    return 2 if y > 0 else 3


def radius(x: float, y: float) -> float:
    """Distance from the origin."""
    return math.hypot(x, y)


def angle(x: float, y: float) -> float:
    """Angle from the positive x axis in degrees, in (-180, 180]."""
    return math.degrees(math.atan2(y, x))


def main(argv=None) -> int:
    tokens = (tok for line in sys.stdin for tok in line.split())
    print("\nEnter the x and y coordinates for a point in the Cartesian plane system.")
    try:
        print("\nX coordinate: ", end="", flush=True)
        x = float(next(tokens))
        print("Y coordinate: ", end="", flush=True)
        y = float(next(tokens))
    except (StopIteration, ValueError):
        print("\nPlease enter numbers.")
        return 1
    print(
        f"\nThe (x,y) coordinates are in Quadrant {quadrant(x, y)}. "
        f"Polar coordinates: ({radius(x, y):.1f}, {angle(x, y):.1f})."
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())