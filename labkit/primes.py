"""Prime numbers by the sieve of Eratosthenes."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

LIMIT = 1000
PER_ROW = 10


def sieve(limit: int = LIMIT) -> list[int]:
    """All primes from 2 up to and including ``limit``."""
    if limit < 2:
        return []
    is_prime = [True] * (limit + 1)
    is_prime[0] = is_prime[1] = False
    for n in range(2, limit + 1):
        if is_prime[n]:
            for multiple in range(n * n, limit + 1, n):
                is_prime[multiple] = False
    return [n for n, prime in enumerate(is_prime) if prime]


def format_primes(primes: Sequence[int], per_row: int = PER_ROW) -> str:
    """Numbers in columns five wide, ``per_row`` to a line, ending in a newline."""
    parts = []
    for count, p in enumerate(primes, start=1):
        parts.append(f"{p:5d} ")
        if count % per_row == 0:
            parts.append("\n")
    parts.append("\n")
    return "".join(parts)


def main(argv=None) -> int:
    """Print the primes from 2 to 1000, ten to a line."""
    parser = argparse.ArgumentParser(
        prog="primes", description="List the primes from 2 to 1000."
    )
    parser.parse_args(argv)
    primes = sieve(LIMIT)
    sys.stdout.write(format_primes(primes, PER_ROW))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())