"""Crossword construction: reading words, placing them on a grid so they
intersect, and rendering the solution, the blank puzzle and anagram clues."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from string import ascii_letters
from typing import Iterable, Iterator, TextIO

BOARD_SIZE = 15
MAX_LETTERS = 15
MAX_WORDS = 20
EMPTY = "."

_BORDER = "-" * (BOARD_SIZE + 2)
_CLUES_HEADER = "CLUES:\nLocation | Direction | Anagram\n"


class Direction(Enum):
    ACROSS = "A"
    DOWN = "D"

    @property
    def label(self) -> str:
        return "Across" if self is Direction.ACROSS else "Down"


@dataclass
class Word:
    """A puzzle word and, once placed, where it sits on the grid."""

    text: str
    row: int = 0
    col: int = 0
    direction: Direction = Direction.ACROSS
    placed: bool = False


def _cells(length: int, row: int, col: int, direction: Direction) -> Iterator[tuple[int, int]]:
    for i in range(length):
        yield (row, col + i) if direction is Direction.ACROSS else (row + i, col)


def _inside(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_alpha(text: str) -> bool:
    """True if every character is an ASCII letter (an empty string counts)."""
    return all(ch in ascii_letters for ch in text)


def _tokens(stream: TextIO) -> Iterator[str]:
    """Whitespace-separated tokens, each cut into pieces of at most MAX_LETTERS."""
    for line in iter(stream.readline, ""):
        for token in line.split():
            for start in range(0, len(token), MAX_LETTERS):
                yield token[start:start + MAX_LETTERS]


def read_words(stream: TextIO) -> list[Word]:
    """Read up to MAX_WORDS valid words, stopping at a lone '.' or a word ending in '.'."""
    words: list[Word] = []
    tokens = _tokens(stream)
    while len(words) < MAX_WORDS:
        entry = next(tokens, None)
        if entry is None or entry == ".":
            break
        if entry.endswith("."):
            entry = entry[:-1]
            if len(entry) > 1 and is_alpha(entry):
                words.append(Word(entry.upper()))
            break
        if is_alpha(entry) and len(entry) > 1:
            words.append(Word(entry.upper()))
        else:
            print(f"\tError: '{entry}' has been ignored. Valid entries are 2-15 letters.")
    return words


def sort_words(words: list[Word]) -> None:
    """Sort in place, longest first, keeping the input order among equal lengths."""
    words.sort(key=lambda w: len(w.text), reverse=True)


def scramble(word: str, rng: random.Random) -> str:
    """A random permutation of the letters of ``word``."""
    return "".join(rng.sample(word, len(word)))


def clues_text(words: Iterable[Word], rng: random.Random) -> str:
    """Clue listing for the placed words: location, direction and an anagram."""
    lines = [
        f"  {w.row:2d},{w.col:<2d}  |  {w.direction.label:<7}  | {scramble(w.text, rng)}\n"
        for w in words
        if w.placed
    ]
    return _CLUES_HEADER + "".join(lines)


class Crossword:
    """A square grid on which words are placed so that they intersect."""

    def __init__(self) -> None:
        self.grid: list[list[str]] = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self.skipped: list[Word] = []

    def _filled(self, row: int, col: int) -> bool:
        return _inside(row, col) and self.grid[row][col] != EMPTY

    def count_overlaps(self, word: str, row: int, col: int, direction: Direction) -> int | None:
        """Score a placement, or None if the word cannot go there.

        A valid placement crosses at least one letter already on the grid,
        touches no other word except at crossings, and stays on the grid.
        """
        grid = self.grid
        across = direction is Direction.ACROSS
        overlaps = 0
        future = 0
        for letter, (r, c) in zip(word, _cells(len(word), row, col, direction)):
            if not _inside(r, c):
                return None
            cell = grid[r][c]
            if cell == letter:
                overlaps += 1
            elif cell == EMPTY:
                future += sum(
                    1
                    for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1))
                    if _inside(nr, nc) and grid[nr][nc] == EMPTY
                )
                sides = ((r - 1, c), (r + 1, c)) if across else ((r, c - 1), (r, c + 1))
                if any(self._filled(*side) for side in sides):
                    return None
            else:
                return None

        length = len(word)
        ends = ((row, col - 1), (row, col + length)) if across else (
            (row - 1, col), (row + length, col))
        if any(self._filled(*end) for end in ends):
            return None
        if overlaps == 0:
            return None
        return overlaps * 3 + future

    def find_best_placement(self, word: str) -> tuple[int, int, Direction] | None:
        """The highest-scoring (row, col, direction) for ``word``, or None."""
        best = None
        best_score = -1
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                for direction in Direction:
                    score = self.count_overlaps(word, row, col, direction)
                    if score is not None and score > best_score:
                        best = (row, col, direction)
                        best_score = score
        return best

    def place_word(self, word: Word) -> None:
        """Write ``word`` on the grid at its position and mark it placed."""
        cells = list(_cells(len(word.text), word.row, word.col, word.direction))
        if not all(_inside(r, c) for r, c in cells):
            raise ValueError(f"word {word.text!r} does not fit on the board")
        for letter, (r, c) in zip(word.text, cells):
            self.grid[r][c] = letter
        word.placed = True

    def _try_place(self, word: Word) -> bool:
        placement = self.find_best_placement(word.text)
        if placement is None:
            return False
        word.row, word.col, word.direction = placement
        self.place_word(word)
        return True

    def solve(self, words: list[Word]) -> int:
        """Place as many words as possible; return how many were placed.

        Sorts ``words`` longest first. Words that could not be placed on the
        first pass are listed in ``skipped`` and retried until no more fit.
        """
        self.skipped = []
        if not words:
            return 0
        sort_words(words)

        first = words[0]
        first.row = BOARD_SIZE // 2
        first.col = (BOARD_SIZE - len(first.text)) // 2
        first.direction = Direction.ACROSS
        self.place_word(first)
        placed = 1

        for word in words[1:]:
            if self._try_place(word):
                placed += 1
            else:
                self.skipped.append(word)

        while True:
            more = 0
            for word in words:
                if not word.placed and self._try_place(word):
                    placed += 1
                    more += 1
            if not more:
                break
        return placed

    def _framed(self, title: str, render) -> str:
        rows = ("|" + "".join(render(cell) for cell in row) + "|" for row in self.grid)
        return "\n".join([f"{title}:", _BORDER, *rows, _BORDER]) + "\n"

    def solution_text(self) -> str:
        """The grid with every placed letter shown."""
        return self._framed("Solution", lambda cell: cell)

    def puzzle_text(self) -> str:
        """The blank puzzle: '#' for unused squares, spaces for letters."""
        return self._framed("Puzzle", lambda cell: "#" if cell == EMPTY else " ")


def save_to_file(path, crossword: Crossword, words: Iterable[Word], rng: random.Random) -> None:
    """Write the solution, the puzzle and the clues to ``path``."""
    clue_lines = [
        f"{w.row:2d},{w.col:<2d}  | {w.direction.label:<7}  | {scramble(w.text, rng)}\n"
        for w in words
        if w.placed
    ]
    content = (
        crossword.solution_text()
        + "\n"
        + crossword.puzzle_text()
        + "\n"
        + _CLUES_HEADER
        + "".join(clue_lines)
    )
    Path(path).write_text(content)