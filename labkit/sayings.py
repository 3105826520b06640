"""A small manager for a collection of sayings kept in a text file."""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import Iterable, TextIO

MAX_SAYINGS = 50
MAX_LENGTH = 256
FILENAME_LIMIT = 30

CLEAR = "\033[H\033[J"
_INTEGER = re.compile(r"\s*([+-]?\d+)")
_MENU = (
    "\n---------------------------\n"
    "           MENU           \n"
    "---------------------------\n"
    "1) Display all sayings\n"
    "2) Add a new saying\n"
    "3) Search for a substring\n"
    "4) Save sayings to a file\n"
    "5) Quit"
)


class SayingsFullError(Exception):
    """Raised when a saying is added to a full collection."""


def read_sayings(stream: TextIO) -> list[str]:
    """Read one saying per line, at most MAX_SAYINGS of them.

    A line longer than MAX_LENGTH - 1 characters is split into several sayings.
    """
    sayings: list[str] = []
    chunk_size = MAX_LENGTH - 1
    for line in stream:
        while line and len(sayings) < MAX_SAYINGS:
            chunk, line = line[:chunk_size], line[chunk_size:]
            sayings.append(chunk.split("\n", 1)[0])
        if len(sayings) >= MAX_SAYINGS:
            break
    return sayings


def add_saying(sayings: list[str], text: str) -> None:
    """Append ``text``, cut at its first newline; raise if the list is full."""
    if len(sayings) >= MAX_SAYINGS:
        raise SayingsFullError("Cannot add more sayings; the array is full.")
    sayings.append(text.split("\n", 1)[0])


def search_sayings(sayings: Iterable[str], term: str) -> list[str]:
    """Sayings that contain ``term``, case-sensitively, in their order."""
    return [saying for saying in sayings if term in saying]


def save_sayings(sayings: Iterable[str], path) -> None:
    """Write the sayings to ``path``, one per line."""
    items = list(sayings)
    if not items:
        raise ValueError("No sayings to save.")
    Path(path).write_text("".join(f"{saying}\n" for saying in items))


def _read_line(limit: int | None = None) -> str | None:
    line = sys.stdin.readline()
    if not line:
        return None
    text = line.split("\n", 1)[0]
    return text[:limit] if limit is not None else text


def _read_choice() -> int | None:
    """The menu choice; raises EOFError at end of input, None if not a number."""
    while True:
        line = sys.stdin.readline()
        if not line:
            raise EOFError
        if line.strip():
            match = _INTEGER.match(line)
            return int(match.group(1)) if match else None


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def main(argv=None) -> int:
    print(CLEAR, end="")
    print("-----------------------------------------------")
    print("              SAYINGS MANAGER                  ")
    print("-----------------------------------------------")
    print("This program lets the user load and manage a set")
    print("of sayings from a text file and add new ones.\n")

    _prompt("Enter the name of your sayings repository file: ")
    filename = _read_line(FILENAME_LIMIT) or ""
    try:
        with open(filename) as handle:
            sayings = read_sayings(handle)
    except OSError:
        print(f"\nError: File '{filename}' not found.")
        return 1
    print(f"\nLoaded {len(sayings)} sayings from file: {filename}")

    while True:
        print(_MENU)
        _prompt("Enter your choice (1-5): ")
        try:
            choice = _read_choice()
        except EOFError:
            return 0
        if choice is None:
            print("Invalid input. Please enter a number 1-5.")
            continue

        if choice == 1:
            if not sayings:
                print("\nNo sayings to display.")
            else:
                print(f"\n--- All Sayings ({len(sayings)} total) ---")
                for n, saying in enumerate(sayings, start=1):
                    print(f"{n}) {saying}")
        elif choice == 2:
            if len(sayings) >= MAX_SAYINGS:
                print("Cannot add more sayings; the array is full.")
                continue
            _prompt("Enter a new saying: ")
            text = _read_line(MAX_LENGTH - 1)
            if text is None:
                print("Error reading new saying.")
            else:
                add_saying(sayings, text)
                print("Saying added!")
        elif choice == 3:
            if not sayings:
                print("No sayings to search.")
                continue
            _prompt("Enter text to search for: ")
            term = _read_line(MAX_LENGTH - 1)
            if term is None:
                print("Error reading search term.")
                continue
            print("\n--- Matching Sayings ---")
            matches = search_sayings(sayings, term)
            for saying in matches:
                print(saying)
            if not matches:
                print("No sayings matched your search.")
        elif choice == 4:
            if not sayings:
                print("No sayings to save.")
                continue
            _prompt("Enter the name of the new file: ")
            target = _read_line(FILENAME_LIMIT)
            if target is None:
                print("Error reading output filename.")
                continue
            try:
                save_sayings(sayings, target)
            except OSError:
                print(f"Error opening file '{target}' for writing.")
                continue
            print(f"Sayings saved to '{target}'")
        elif choice == 5:
            print("Goodbye!")
            return 0
        else:
            print("Invalid choice. Please try again.")


if __name__ == "__main__":
    sys.exit(main())