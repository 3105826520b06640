"""Average and standard deviation of a sample of grades."""

from __future__ import annotations

import math
import sys
from typing import Sequence

GRADES = (
    96, 73, 62, 87, 80, 63, 93, 79, 71, 99,
    82, 83, 80, 97, 89, 82, 93, 92, 95, 89,
    71, 97, 91, 95, 63, 81, 76, 98, 64, 86,
    74, 79, 98, 82, 77, 68, 87, 70, 75, 97,
    71, 94, 68, 87, 79,
)


def average(values: Sequence[float]) -> float:
    """Arithmetic mean of ``values``."""
    if not values:
        raise ValueError("cannot average an empty sample")
    return sum(values) / len(values)


def std_dev(values: Sequence[float], mean: float) -> float:
    """Population standard deviation of ``values`` around ``mean``."""
    if not values:
        raise ValueError("cannot take the deviation of an empty sample")
    return math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))


def main(argv=None) -> int:
    print(f"\nThere are {len(GRADES)} grades in the array.")
    mean = average(GRADES)
    print(f"Average grade: {mean:.2f}.")
    print(f"\nStandard deviation: {std_dev(GRADES, mean):.2f}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())