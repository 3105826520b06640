"""Area of a triangle from its three sides by Heron's formula."""

from __future__ import annotations

import math
import sys


def triangle_area(a: float, b: float, c: float) -> float:
    """Area of the triangle with sides ``a``, ``b`` and ``c``.

    Raises ValueError when no triangle has those sides.
    """
    s = (a + b + c) / 2
    product = s * (s - a) * (s - b) * (s - c)
    if product < 0:
        raise ValueError("the lengths do not form a triangle")
    return math.sqrt(product)


def main(argv=None) -> int:
    tokens = (tok for line in sys.stdin for tok in line.split())
    print("\nEnter the lengths of the three sides of a triangle.", end="")
    sides = []
    try:
        for n in (1, 2, 3):
            prefix = "\n" if n == 1 else ""
            print(f"{prefix}Length {n}: ", end="", flush=True)
            sides.append(float(next(tokens)))
    except (StopIteration, ValueError):
        print("\nPlease enter numbers.")
        return 1
    try:
        area = triangle_area(*sides)
    except ValueError:
        print("\nThose lengths do not form a triangle.")
        return 1
    print(f"\nThe area of the triangle is {area:.2f}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())