"""Multiplication table with labelled rows and columns."""

from __future__ import annotations

import sys


def multiplication_table(rows: int, cols: int) -> str:
    """The table as text: a header row, a dashed rule and one line per row."""
    header = "*\t" + "".join(f"{x}\t" for x in range(1, cols + 1)) + "\n"
    rule = "  " + "-" * (8 * cols) + "\n"
    body = "".join(
        f"{i} |\t" + "".join(f"{i * j}\t" for j in range(1, cols + 1)) + "\n"
        for i in range(1, rows + 1)
    )
    return header + rule + body


def main(argv=None) -> int:
    tokens = (tok for line in sys.stdin for tok in line.split())
    print("\nEnter the number of rows and columns in the multiplication table.")
    try:
        print("Integer 1 (number of rows): ", end="", flush=True)
        rows = int(next(tokens))
        print("Integer 2 (number of columns: ", end="", flush=True)
        cols = int(next(tokens))
    except (StopIteration, ValueError):
        print("\nPlease enter two integers.")
        return 1
    print("\n" + multiplication_table(rows, cols), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())