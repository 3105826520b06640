"""Crossword placement that also weighs the free space a word leaves around it."""

from __future__ import annotations

from itertools import takewhile
from typing import Iterable, Iterator

from labkit.crossword import BOARD_SIZE, EMPTY, Crossword, Direction, Word


def _is_empty(crossword: Crossword, row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE and crossword.grid[row][col] == EMPTY


def _run(crossword: Crossword, cells: Iterator[tuple[int, int]]) -> int:
    return sum(1 for _ in takewhile(lambda cell: _is_empty(crossword, *cell), cells))


def future_score(crossword: Crossword, word: str, row: int, col: int, direction: Direction) -> int:
    """Count the free squares around a proposed placement of ``word``.

    Along the word's line, the empty squares before and after it are counted
    up to the first filled square or the edge; across the line, each letter
    adds one for every empty neighbour on either side.
    """
    length = len(word)
    if direction is Direction.ACROSS:
        before = ((row, c) for c in range(col - 1, -1, -1))
        after = ((row, c) for c in range(col + length, BOARD_SIZE))
        sides = [((row - 1, col + i), (row + 1, col + i)) for i in range(length)]
    else:
        before = ((r, col) for r in range(row - 1, -1, -1))
        after = ((r, col) for r in range(row + length, BOARD_SIZE))
        sides = [((row + i, col - 1), (row + i, col + 1)) for i in range(length)]
    beside = sum(
        _is_empty(crossword, *first) + _is_empty(crossword, *second)
        for first, second in sides
    )
    return _run(crossword, before) + _run(crossword, after) + beside


def find_best_placement(
    crossword: Crossword, words: Iterable[Word], word: str
) -> tuple[int, int, Direction] | None:
    """Best crossing of ``word`` with one of the placed ``words``, or None.

    Every shared letter between ``word`` and a placed word gives a candidate
    running the other way; candidates that the grid rejects are skipped and
    the rest are ranked by overlap score plus future score.
    """
    best = None
    best_score = -1
    for placed in words:
        if not placed.placed:
            continue
        new_direction = (
            Direction.DOWN if placed.direction is Direction.ACROSS else Direction.ACROSS
        )
        for j, letter in enumerate(word):
            for k, other in enumerate(placed.text):
                if letter != other:
                    continue
                if new_direction is Direction.ACROSS:
                    row = placed.row + k - j
                    col = placed.col - j
                else:
                    row = placed.row - j
                    col = placed.col + k
                overlaps = crossword.count_overlaps(word, row, col, new_direction)
                if overlaps is None:
                    continue
                score = overlaps + future_score(crossword, word, row, col, new_direction)
                if score > best_score:
                    best = (row, col, new_direction)
                    best_score = score
    return best