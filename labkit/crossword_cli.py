"""Command-line front end for the crossword generator."""

from __future__ import annotations

import random
import re
import sys
from collections import deque
from typing import Iterable, TextIO

from labkit.crossword import (
    MAX_LETTERS,
    Crossword,
    Word,
    clues_text,
    read_words,
    save_to_file,
    scramble,
)

_MENU = (
    "\nMenu:\n"
    "1. Display Puzzle\n"
    "2. Display Solution\n"
    "3. Display Anagram Clues\n"
    "4. Play Guess the Word\n"
    "5. Exit"
)
_INTEGER = re.compile(r"[+-]?\d+")


class _TokenReader:
    """Reads whitespace-separated tokens from a text stream on demand."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def token(self, limit: int | None = None) -> str | None:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                return None
            self._pending.extend(line.split())
        tok = self._pending.popleft()
        if limit is not None and len(tok) > limit:
            self._pending.appendleft(tok[limit:])
            tok = tok[:limit]
        return tok

    def push_back(self, text: str) -> None:
        self._pending.appendleft(text)

    def discard_line(self) -> None:
        self._pending.clear()


def play_guess_the_word(
    words: Iterable[Word], stdin, stdout: TextIO, rng: random.Random
) -> tuple[int, int]:
    """Ask the player to unscramble each placed word; return (score, total)."""
    reader = stdin if isinstance(stdin, _TokenReader) else _TokenReader(stdin)
    score = total = 0
    for word in words:
        if not word.placed:
            continue
        total += 1
        print(f"\nGuess the word: {scramble(word.text, rng)}", file=stdout)
        print("Your guess: ", end="", file=stdout, flush=True)
        guess = (reader.token(MAX_LETTERS) or "").upper()
        if guess == word.text:
            print("Correct!", file=stdout)
            score += 1
        else:
            print(f"Nope! The correct word was: {word.text}", file=stdout)
    print(f"\nGame over! You got {score} out of {total} correct.", file=stdout)
    return score, total


def _solve(words: list[Word]) -> Crossword:
    crossword = Crossword()
    crossword.solve(words)
    for word in crossword.skipped:
        print(f"Word '{word.text}' is skipped; it could not be placed.")
    return crossword


def _load(path: str, message: str) -> list[Word] | None:
    try:
        with open(path) as handle:
            return read_words(handle)
    except OSError:
        print(f"{message} {path}")
        return None


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    rng = random.Random()

    if len(args) == 2:
        words = _load(args[0], "Error: Could not open input file")
        if words is None:
            return 1
        crossword = _solve(words)
        try:
            save_to_file(args[1], crossword, words, rng)
        except OSError:
            print(f"Error: Could not open file {args[1]} for writing.", file=sys.stderr)
            return 1
        print(f"Puzzle, solution, and clues saved to {args[1]}.")
        return 0

    if len(args) == 1:
        words = _load(args[0], "Error: Could not open file")
        if words is None:
            return 1
    else:
        print("Please enter your words (end with '.'):")
        words = read_words(sys.stdin)

    crossword = _solve(words)
    reader = _TokenReader(sys.stdin)

    while True:
        print(_MENU)
        print("Enter your choice: ", end="", flush=True)
        tok = reader.token()
        if tok is None:
            break
        match = _INTEGER.match(tok)
        if match is None:
            print("Invalid input, please enter a number between 1 and 5.")
            reader.discard_line()
            continue
        if match.end() < len(tok):
            reader.push_back(tok[match.end():])
        choice = int(match.group())

        if choice == 1:
            print("\n" + crossword.puzzle_text(), end="")
        elif choice == 2:
            print("\n" + crossword.solution_text(), end="")
        elif choice == 3:
            print("\n" + clues_text(words, rng), end="")
        elif choice == 4:
            play_guess_the_word(words, reader, sys.stdout, rng)
        elif choice == 5:
            print("Exiting...")
            break
        else:
            print("Invalid option, please try again.")
    return 0


if __name__ == "__main__":
    sys.exit(main())