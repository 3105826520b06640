"""Letter frequencies of a file, with Scrabble points and percentages."""

from __future__ import annotations

import sys
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from string import ascii_letters, ascii_lowercase
from typing import Mapping

FILENAME_LIMIT = 30
CLEAR = "\033[H\033[J"

SCRABBLE_POINTS = dict(
    zip(
        ascii_lowercase,
        (1, 1, 3, 3, 1, 4, 2, 4, 1, 8, 5, 1, 3, 1, 3, 10, 1, 1, 1, 1, 2, 4, 4, 8, 4, 10),
    )
)


@dataclass(frozen=True)
class LetterStats:
    """Character total, letter total and per-letter counts (lower-case keys)."""

    characters: int
    letters: int
    counts: dict[str, int] = field(default_factory=dict)


def count_letters(text: str) -> LetterStats:
    """Count characters and ASCII letters in ``text``, ignoring case."""
    counts = Counter(ch.lower() for ch in text if ch in ascii_letters)
    return LetterStats(len(text), sum(counts.values()), dict(counts))


def scrabble_score(counts: Mapping[str, int]) -> int:
    """Total points of the counted letters."""
    return sum(SCRABBLE_POINTS[letter] * n for letter, n in counts.items())


def letter_percentages(counts: Mapping[str, int], total: int) -> dict[str, float]:
    """Share of each letter a-z in ``total``; NaN throughout when ``total`` is 0."""
    if total == 0:
        return {letter: float("nan") for letter in ascii_lowercase}
    return {letter: counts.get(letter, 0) / total * 100 for letter in ascii_lowercase}


def main(argv=None) -> int:
    print(CLEAR, end="")
    print("--------------------------------------------------")
    print("             LETTER FREQUENCY COUNTER             ")
    print("--------------------------------------------------")
    print("This program reads a file and counts the frequency ")
    print("of each letter (A-Z), ignoring case.\n")
    print("Enter the name of the file you want to analyze: ", end="", flush=True)
    filename = sys.stdin.readline().split("\n", 1)[0][:FILENAME_LIMIT]

    try:
        text = Path(filename).read_bytes().decode("latin-1")
    except OSError:
        print(f"\nError: File '{filename}' not found.")
        return 1

    print(f"\nProcessing file: {filename}")
    print("-" * 44)
    stats = count_letters(text)

    print("\n------------------- RESULTS -------------------")
    print(f"\nTotal number of characters: {stats.characters}")
    print(f"Total number of letters: {stats.letters}")

    print("\n-- Scrabble Points vs Frequency --")
    for letter in ascii_lowercase:
        n = stats.counts.get(letter, 0)
        if n > 0:
            print(f"{letter}: {n} occurrences | {SCRABBLE_POINTS[letter]} points per letter")
    print(f"\nTotal Scrabble points based on letter frequencies: {scrabble_score(stats.counts)}")

    print("\n-- Letter Percentages --")
    for letter, pct in letter_percentages(stats.counts, stats.letters).items():
        print(f"{letter}: {pct:.1f}%")

    print("\n--------------------------------------------------")
    print("Thank you for using the Letter Frequency Counter!")
    print("--------------------------------------------------")
    return 0


if __name__ == "__main__":
    sys.exit(main())