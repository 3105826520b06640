"""Amortization schedule for a loan with a fixed monthly payment."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Payment:
    """One month of the schedule."""

    month: int
    payment: float
    interest: float
    balance: float


def minimum_payment(principal: float, rate: float) -> float:
    """First month's interest; a payment must exceed it for the loan to shrink."""
    return (1.0 / 12) * (rate / 100) * principal


def amortize(principal: float, rate: float, payment: float) -> list[Payment]:
    """Month-by-month schedule until the balance reaches zero.

    ``rate`` is the yearly interest rate in percent. The final payment is
    reduced to what is still owed.
    """
    if principal <= 0:
        raise ValueError("principal must be positive")
    if rate <= 0:
        raise ValueError("interest rate must be positive")
    if payment <= 0:
        raise ValueError("payment must be positive")
    floor = minimum_payment(principal, rate)
    if payment <= floor:
        raise ValueError(f"monthly payment must exceed ${floor:.2f}")

    schedule = []
    month = 0
    while True:
        month += 1
        interest = principal * rate / (12.0 * 100)
        if principal + interest < payment:
            payment = principal + interest
        balance = principal + interest - payment
        schedule.append(Payment(month, payment, interest, balance))
        principal = balance
        if principal <= 0:
            return schedule


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

    try:
        principal = 0.0
        while principal <= 0:
            principal = ask("\nEnter the principal (loan amount): $")
            if principal <= 0:
                print("\nPlease enter a positive value.")
        rate = 0.0
        while rate <= 0:
            rate = ask("\nEnter the interest rate: ")
            if rate <= 0:
                print("\nPlease enter a positive value.")
        floor = minimum_payment(principal, rate)
        payment = 0.0
        while payment <= 0 or payment <= floor:
            payment = ask("\nEnter the desired monthly payment: $")
            if payment <= 0:
                print("\nPlease enter a positive value.")
            elif payment <= floor:
                print(
                    f"\nYour desired monthly payment must exceed ${floor:.2f}. "
                    "Please enter your desired payment: "
                )
    except (EOFError, ValueError):
        print("\nPlease enter numbers.")
        return 1

    print(f"\n{'Month':<8}{'Payment':<12}{'Interest':<12}{'Balance':>12}", end="")
    schedule = amortize(principal, rate, payment)
    for row in schedule:
        print(
            f"\n{row.month:<8d}${row.payment:<11.2f}${row.interest:<11.2f}${row.balance:<11.2f}",
            end="",
        )
    print()
    total = sum(row.payment for row in schedule)
    months = len(schedule)
    print(
        f"\nYou paid a total of ${total:.2f} over {months // 12} years and {months % 12} months.",
        end="",
    )
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())