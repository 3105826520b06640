"""Interactive menu for looking up information on US states."""

from __future__ import annotations

import re
import sys

from labkit.states import (
    SearchMode,
    find_state,
    format_state,
    joined_before,
    joined_in,
    read_states,
    sort_by_year,
)

CLEAR = "\033[2J\033[H"
FILENAME_LIMIT = 29
ABRV_LIMIT = 3
NAME_LIMIT = 14
CAPITAL_LIMIT = 29

_MENU = (
    "\n====== 🗺️ STATE INFO MENU ======\n"
    "1. 📜 List all states\n"
    "2. 🔤 Search for information by abbreviation\n"
    "3. 🏷️ Search for information by name\n"
    "4. ⏳ List states that joined before a given year\n"
    "5. 📆 List states that joined in a given year\n"
    "6. 📈 List states in order of joining (sort)\n"
    "7. 🏛️  Search by capital\n"
    "8. ❌ Exit\n"
    "============================="
)
_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _read_line(limit: int | None = None) -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    text = line.rstrip("\n")
    return text[:limit] if limit is not None else text


def _read_int() -> int | None:
    match = _INTEGER.match(_read_line())
    return int(match.group(1)) if match else None


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _show_match(text: str, state) -> None:
    if state is None:
        print("Error: no match found.")
    else:
        print(f"Information for {text}:")
        print(format_state(state))


def main(argv=None) -> int:
    try:
        _prompt("Enter the file name: ")
        filename = _read_line(FILENAME_LIMIT)
    except EOFError:
        return 1
    try:
        with open(filename) as handle:
            states = read_states(handle)
    except OSError:
        print(f"\nError opening file {filename}.")
        return 1

    try:
        while True:
            print(CLEAR, end="")
            print(_MENU)
            _prompt("Enter your choice: ")
            choice = _read_int()

            if choice == 1:
                for state in states:
                    print(format_state(state))
            elif choice == 2:
                _prompt('\nEnter a two-letter abbreviation (e.g. "TX"): ')
                text = _read_line(ABRV_LIMIT)
                _show_match(text, find_state(states, text, SearchMode.ABRV))
            elif choice == 3:
                _prompt('\nEnter state name (e.g. "California"): ')
                text = _read_line(NAME_LIMIT)
                _show_match(text, find_state(states, text, SearchMode.NAME))
            elif choice == 4:
                _prompt("Enter a year: ")
                year = _read_int() or 0
                found = joined_before(states, year)
                for n, state in enumerate(found, start=1):
                    print(f"{n}. {state.name}: {state.year}")
                if not found:
                    print(f"No states found that joined before {year}.")
            elif choice == 5:
                _prompt("Enter a year: ")
                year = _read_int() or 0
                found = joined_in(states, year)
                for n, state in enumerate(found, start=1):
                    print(f"{n}. {state.name}")
                if not found:
                    print(f"No states found that joined in {year}.")
            elif choice == 6:
                states = sort_by_year(states)
                print("\nStates in order of joining the Union:")
                for state in states:
                    print(format_state(state))
            elif choice == 7:
                _prompt('\nEnter state capital (e.g. "Austin": ')
                text = _read_line(CAPITAL_LIMIT)
                state = find_state(states, text, SearchMode.CAPITAL)
                if state is None:
                    print("Error: no such state capital located.")
                else:
                    print(f"{state.name} joined the Union in {state.year}.")
            elif choice == 8:
                print("Goodbye!")
            else:
                print("Error. Enter an integer 1-8.")

            _prompt("\nPress Enter to continue...")
            _read_line()
            if choice == 8:
                return 0
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())