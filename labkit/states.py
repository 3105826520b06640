"""Records of US states: reading them from comma-separated text, searching,
filtering by the year each joined the Union, and sorting."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, TextIO

MAX_STATES = 100
DELIMITER = ","

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class State:
    """One state: abbreviation, name, capital and the year it joined."""

    abrv: str
    name: str
    capital: str
    year: int


class SearchMode(Enum):
    """Which field of a state a search compares against."""

    ABRV = "abrv"
    NAME = "name"
    CAPITAL = "capital"

    def field_of(self, state: State) -> str:
        """The field of ``state`` this mode selects."""
        if self is SearchMode.ABRV:
            return state.abrv
        if self is SearchMode.NAME:
            return state.name
        return state.capital


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def read_states(stream: TextIO) -> list[State]:
    """Read lines of the form 'abbreviation,name,capital,year'.

    Empty fields between repeated delimiters are skipped and blank lines are
    ignored. A line with fewer than four fields, or more than MAX_STATES
    records, raises ValueError.
    """
    states: list[State] = []
    for number, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        fields = [field for field in line.split(DELIMITER) if field]
        if len(fields) < 4:
            raise ValueError(
                f"line {number}: expected abbreviation, name, capital and year"
            )
        if len(states) >= MAX_STATES:
            raise ValueError(f"more than {MAX_STATES} states in the input")
        abrv, name, capital, year = fields[:4]
        states.append(State(abrv, name, capital, _leading_int(year)))
    return states


def format_state(state: State) -> str:
    """One line describing every field of ``state``."""
    return (
        f"Name: {state.name} ({state.abrv}), Capital: {state.capital}, "
        f"Year Founded: {state.year}"
    )


def find_state(states: Iterable[State], text: str, mode: SearchMode) -> State | None:
    """The first state whose field selected by ``mode`` equals ``text`` exactly."""
    return next((state for state in states if mode.field_of(state) == text), None)


def joined_before(states: Iterable[State], year: int) -> list[State]:
    """States that joined strictly before ``year``, in their given order."""
    return [state for state in states if state.year < year]


def joined_in(states: Iterable[State], year: int) -> list[State]:
    """States that joined in ``year``, in their given order."""
    return [state for state in states if state.year == year]


def sort_by_year(states: Iterable[State]) -> list[State]:
    """A new list ordered by joining year; ties keep their original order."""
    return sorted(states, key=lambda state: state.year)