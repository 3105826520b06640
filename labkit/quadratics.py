"""Discriminants of integer triples (a, b, c)."""

from __future__ import annotations

import sys


def discriminant(a: int, b: int, c: int) -> int:
    """b^2 - 4ac."""
    return b * b - 4 * a * c


def main(argv=None) -> int:
    tokens = (tok for line in sys.stdin for tok in line.split())

    def ask(prompt: str) -> int:
        print(prompt, end="", flush=True)
        return int(next(tokens))

    print("\nLet's calculate the discriminant of a set of three integers a, b, and c!")
    try:
        while True:
            print("\nTo terminate this program, enter a = 0.")
            a = ask("\nEnter integer a: ")
            if a == 0:
                break
            b = ask("Enter integer b: ")
            c = ask("Enter integer c: ")
            print(f"\nYour three integers are {a}, {b}, and {c}")
            print(f"\nThe discriminant of these three integers is {float(discriminant(a, b, c)):.1f}.")
    except StopIteration:
        pass
    except ValueError:
        print("\nPlease enter integers.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())