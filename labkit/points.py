"""Total points from touchdowns, extra points, field goals and safeties."""

from __future__ import annotations

import sys


def football_points(touchdowns: int, extra_points: int, field_goals: int, safeties: int) -> int:
    """Points scored: 6 per touchdown, 1 per extra point, 3 per field goal, 2 per safety."""
    return touchdowns * 6 + extra_points + field_goals * 3 + safeties * 2


def main(argv=None) -> int:
    tokens = (tok for line in sys.stdin for tok in line.split())
    counts = []
    try:
        for label in ("touchdowns", "extra points", "field goals", "safeties"):
            print(f"Enter the number of {label}: ", end="", flush=True)
            counts.append(int(next(tokens)))
    except (StopIteration, ValueError):
        print("\nPlease enter whole numbers.")
        return 1
    print(f"Total points scored by the Irish: {football_points(*counts)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())