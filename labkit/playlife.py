"""Interactive and batch front end for the Game of Life."""

from __future__ import annotations

import re
import sys
import time
from typing import TextIO

from labkit.life import Board

CLEAR = "\033[H\033[J"
DELAY = 0.2
_ENTRY = re.compile(r"\s*(\S)\s*([+-]?\d+)\s+([+-]?\d+)")


def _warn(error: IndexError) -> None:
    print(f"Warning: {error}")


def process_command(board: Board, command: str, x: int, y: int) -> None:
    """Apply 'a' (add) or 'r' (remove) at (x, y); other commands do nothing."""
    try:
        if command == "a":
            board.add_cell(x, y)
        elif command == "r":
            board.remove_cell(x, y)
    except IndexError as error:
        _warn(error)


def load_batch(stream: TextIO) -> Board:
    """Board built from entries 'c x y'; only 'a' entries add cells."""
    board = Board()
    text = stream.read()
    pos = 0
    while (match := _ENTRY.match(text, pos)) is not None:
        command, x, y = match.group(1), int(match.group(2)), int(match.group(3))
        if command == "a":
            process_command(board, command, x, y)
        pos = match.end()
    return board


def _show(board: Board) -> None:
    print(CLEAR + board.render(), end="", flush=True)


def _animate(board: Board) -> None:
    while True:
        board.advance()
        _show(board)
        time.sleep(DELAY)


def _interactive() -> int:
    board = Board()
    while True:
        _show(board)
        print("Enter command (a x y, r x y, n, q, p): ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            return 0
        parts = line.split()
        if not parts:
            continue
        command = parts[0][0]
        if command in ("a", "r"):
            try:
                x, y = int(parts[1]), int(parts[2])
            except (IndexError, ValueError):
                continue
            process_command(board, command, x, y)
        elif command == "n":
            board.advance()
        elif command == "p":
            try:
                _animate(board)
            except KeyboardInterrupt:
                return 0
        elif command == "q":
            return 0


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return _interactive()
    if len(args) > 1:
        print("Usage: playlife [data file]", file=sys.stderr)
        return 1
    try:
        with open(args[0]) as handle:
            board = load_batch(handle)
    except OSError as error:
        print(f"Error opening file: {error.strerror}", file=sys.stderr)
        return 1
    try:
        _animate(board)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())