"""Menu-driven calculator for the four basic operations."""

from __future__ import annotations

import operator
import sys

_OPERATIONS = {
    1: operator.add,
    2: operator.sub,
    3: operator.mul,
    4: operator.truediv,
}

_MENU = (
    "\n===== MENU =====\n"
    "1 for Addition\n"
    "2 for Subtraction\n"
    "3 for Multiplication\n"
    "4 for Division\n"
    "5 to Exit\n"
    "\nEnter your choice: "
)


def calculate(choice: int, x: float, y: float) -> float:
    """Apply operation ``choice`` (1 add, 2 subtract, 3 multiply, 4 divide)."""
    try:
        op = _OPERATIONS[choice]
    except KeyError:
        raise ValueError(f"invalid choice {choice}; select a number 1-4") from None
    if choice == 4 and y == 0:
        raise ZeroDivisionError("Error: Division by zero!")
    return op(x, y)


def main(argv=None) -> int:
    tokens = (tok for line in sys.stdin for tok in line.split())

    def ask(prompt: str) -> float:
        print(prompt, end="", flush=True)
        return float(next(tokens))

    try:
        while True:
            print(_MENU, end="", flush=True)
            tok = next(tokens)
            try:
                choice = int(tok)
            except ValueError:
                choice = None
            if choice == 5:
                break
            if choice in _OPERATIONS:
                x = ask("Enter the first number: ")
                y = ask("Enter the second number: ")
                try:
                    print(f"\nResult: {calculate(choice, x, y):.2f}")
                except ZeroDivisionError as error:
                    print(error)
            else:
                print("\nInvalid choice. Please select a number 1-5.", end="")
    except StopIteration:
        pass
    except ValueError:
        print("\nPlease enter numbers.")
        return 1
    print("\nThank you for using menucalc!\nExiting program...\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())