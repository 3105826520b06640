"""Conway's Game of Life on a bounded square board."""

from __future__ import annotations

from itertools import product

BOARD_SIZE = 40
ALIVE = "X"
DEAD = " "

_OFFSETS = tuple((dx, dy) for dx, dy in product((-1, 0, 1), repeat=2) if (dx, dy) != (0, 0))


class Board:
    """A square board of live and dead cells; cells outside it are dead."""

    def __init__(self, size: int = BOARD_SIZE) -> None:
        self.size = size
        self.cells: set[tuple[int, int]] = set()

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def _check(self, x: int, y: int, action: str) -> None:
        if not self._inside(x, y):
            raise IndexError(f"Cell ({x}, {y}) is out of bounds and cannot be {action}.")

    def is_alive(self, x: int, y: int) -> bool:
        return (x, y) in self.cells

    def add_cell(self, x: int, y: int) -> None:
        self._check(x, y, "added")
        self.cells.add((x, y))

    def remove_cell(self, x: int, y: int) -> None:
        self._check(x, y, "removed")
        self.cells.discard((x, y))

    def count_neighbors(self, x: int, y: int) -> int:
        return sum((x + dx, y + dy) in self.cells for dx, dy in _OFFSETS)

    def advance(self) -> None:
        """Move the board on by one generation."""
        candidates = {
            (x + dx, y + dy)
            for x, y in self.cells
            for dx, dy in _OFFSETS
            if self._inside(x + dx, y + dy)
        } | self.cells
        self.cells = {
            cell
            for cell in candidates
            if self.count_neighbors(*cell) == 3
            or (cell in self.cells and self.count_neighbors(*cell) == 2)
        }

    def copy(self) -> Board:
        other = Board(self.size)
        other.cells = set(self.cells)
        return other

    def render(self) -> str:
        """The board framed by dashes and bars, 'X' for live cells."""
        border = "-" * (self.size + 2)
        rows = (
            "|" + "".join(ALIVE if (x, y) in self.cells else DEAD for y in range(self.size)) + "|"
            for x in range(self.size)
        )
        return "\n".join([border, *rows, border]) + "\n"