"""Questions about Notre Dame football's season records since 1900."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from itertools import groupby
from typing import Iterator, TextIO

FIRST_YEAR = 1900

WINS = (
    6, 8, 6, 8, 5, 5, 6, 6, 8, 7, 4, 6,
    7, 7, 6, 7, 8, 6, 3, 9, 9, 10, 8, 9,
    10, 7, 9, 7, 5, 9, 10, 6, 6, 3, 6, 7,
    6, 6, 8, 7, 7, 8, 7, 9, 8, 7, 8, 9,
    9, 10, 4, 7, 7, 9, 9, 8, 2, 7, 6, 5,
    2, 5, 5, 2, 9, 7, 9, 8, 7, 8, 10, 8,
    8, 11, 10, 8, 9, 11, 9, 7, 9, 5, 6, 7,
    7, 5, 5, 8, 12, 12, 9, 10, 10, 11, 6, 9,
    8, 7, 9, 5, 9, 5, 10, 5, 6, 9, 10, 3,
    7, 6, 8, 8, 12, 9, 8, 10, 4, 10, 12, 11,
    10, 11, 9, 10, 14,
)

LOSSES = (
    3, 1, 2, 0, 3, 4, 1, 0, 1, 0, 1, 0,
    0, 0, 2, 1, 1, 1, 1, 0, 0, 1, 1, 1,
    0, 2, 1, 1, 4, 0, 0, 2, 2, 5, 3, 1,
    2, 2, 1, 2, 2, 0, 2, 1, 2, 2, 0, 0,
    0, 0, 4, 2, 2, 0, 1, 2, 8, 3, 4, 5,
    8, 5, 5, 7, 1, 2, 0, 2, 2, 2, 1, 2,
    3, 0, 2, 3, 3, 1, 3, 4, 2, 6, 4, 5,
    5, 6, 6, 4, 0, 1, 3, 3, 1, 1, 5, 3,
    3, 6, 3, 7, 3, 6, 3, 7, 6, 3, 3, 9,
    6, 6, 5, 5, 1, 4, 5, 3, 8, 3, 1, 2,
    2, 2, 4, 3, 2,
)

SEASONS = len(WINS)
LAST_YEAR = FIRST_YEAR + SEASONS - 1
NEXT_YEAR = LAST_YEAR + 1
MAX_WINS = 17


@dataclass(frozen=True)
class Prediction:
    """Predicted wins and losses for the coming season."""

    wins: int
    losses: int


def _years() -> range:
    return range(FIRST_YEAR, FIRST_YEAR + SEASONS)


def record(year: int) -> tuple[int, int] | None:
    """(wins, losses) for ``year``; None for the season still to be played."""
    if year < FIRST_YEAR or year > NEXT_YEAR:
        raise ValueError(f"no data for {year}; enter a year between {FIRST_YEAR} and {NEXT_YEAR}")
    if year == NEXT_YEAR:
        return None
    index = year - FIRST_YEAR
    return WINS[index], LOSSES[index]


def losing_years() -> list[int]:
    """Years in which there were more losses than wins."""
    return [year for year, w, l in zip(_years(), WINS, LOSSES) if w < l]


def years_with_at_least(wins: int) -> list[int]:
    """Years with at least ``wins`` wins; ``wins`` must lie in 0..17."""
    if wins < 0 or wins > MAX_WINS:
        raise ValueError(f"wins must be an integer 0-{MAX_WINS}")
    return [year for year, w in zip(_years(), WINS) if w >= wins]


def streaks() -> list[tuple[int, int | None]]:
    """Runs of two or more consecutive winning seasons.

    Each run is (first year, last year); the last year is None when the run
    reaches the most recent season.
    """
    result: list[tuple[int, int | None]] = []
    positive = ((year, w > l) for year, w, l in zip(_years(), WINS, LOSSES))
    for winning, group in groupby(positive, key=lambda item: item[1]):
        years = [year for year, _ in group]
        if winning and len(years) >= 2:
            end = None if years[-1] == LAST_YEAR else years[-1]
            result.append((years[0], end))
    return result


def predict_season(
    seasons: int, recency: bool = False, big_win: bool = False, loss_trend: bool = False
) -> Prediction:
    """Predict the next season from the latest ``seasons`` records.

    ``recency`` weights recent seasons more heavily, ``big_win`` adds a win
    for each undefeated season and ``loss_trend`` takes one away for each
    losing season.
    """
    if seasons <= 0 or seasons > SEASONS:
        raise ValueError(f"seasons must be between 1 and {SEASONS}")
    total_wins = total_losses = weight_sum = 0.0
    for i in range(seasons):
        w, l = WINS[-1 - i], LOSSES[-1 - i]
        weight = (seasons - i) / seasons if recency else 1.0
        total_wins += w * weight
        total_losses += l * weight
        weight_sum += weight
        if big_win and l == 0 and w > 0:
            total_wins += 1
        if loss_trend and w < l:
            total_wins -= 1
    return Prediction(int(total_wins / weight_sum + 0.5), int(total_losses / weight_sum + 0.5))


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _year_list(years: list[int]) -> str:
    return "".join(f"{y}." if y == LAST_YEAR else f"{y}, " for y in years)


def _menu() -> str:
    return (
        "\n\n--------Go IRISH!--------\n"
        "\n--------MENU--------\n"
        "1. Display the record for a given year\n"
        "2. Display years with a losing record\n"
        "3. Display years with at least 'n' wins\n"
        "4. Display positive record streaks\n"
        f"5. Predict the {NEXT_YEAR} season!!!\n"
        "6. Exit"
    )


def main(argv=None) -> int:
    tokens = _tokens(sys.stdin)

    def ask(prompt: str) -> int | None:
        print(prompt, end="", flush=True)
        tok = next(tokens, None)
        if tok is None:
            raise EOFError
        try:
            return int(tok)
        except ValueError:
            return None

    try:
        while True:
            print(_menu())
            choice = ask("")
            if choice == 1:
                year = ask("\nWhich year? ")
                try:
                    result = record(year if year is not None else FIRST_YEAR - 1)
                except ValueError:
                    print(f"\n--- Invalid Entry. Enter a year between {FIRST_YEAR} and {NEXT_YEAR}. ---")
                    continue
                if result is None:
                    print("\n--- Coming Soon! ---")
                else:
                    w, l = result
                    print(f"\n--------Win/Loss Record: {year}--------\n\nWins: {w} | Losses: {l}\nRecord: {w - l}", end="")
            elif choice == 2:
                print("\n--------Years With A Losing Record:--------\n")
                print(", ".join(map(str, losing_years())) + ("." if losing_years() else ""), end="")
            elif choice == 3:
                n = ask("\n'n' =  ")
                try:
                    years = years_with_at_least(n if n is not None else -1)
                except ValueError:
                    print(f"\nInvalid entry. Please enter an integer 0-{MAX_WINS}.")
                    continue
                print(f"\n--------Years With At Least {n} Wins:--------\n")
                print(_year_list(years), end="")
            elif choice == 4:
                print("\n----WINNING STREAKS----\nFor consecutive years during which the "
                      "Fighting Irish maintained a positive net score.")
                for start, end in streaks():
                    prefix = "\n" if start == FIRST_YEAR else ""
                    tail = "and it continues!" if end is None else f"to {end}.\n"
                    print(f"{prefix}\t> {start} {tail}", end="")
            elif choice == 5:
                print(f"\n--- Predict Notre Dame's {NEXT_YEAR} Football Season ---")
                seasons = None
                while seasons is None or seasons <= 0 or seasons > SEASONS:
                    seasons = ask(f"Enter how many past seasons to use for prediction (Max: {SEASONS}): ")
                recency = bool(ask("Use recency weighting? (1 = Yes, 0 = No): "))
                big_win = bool(ask("Boost undefeated seasons? (1 = Yes, 0 = No): "))
                loss_trend = bool(ask("Consider past losing seasons negatively? (1 = Yes, 0 = No): "))
                p = predict_season(seasons, recency, big_win, loss_trend)
                print(f"\n🔮 Predicted {NEXT_YEAR} Record: {p.wins} Wins, {p.losses} Losses")
                factors = []
                if recency:
                    factors.append("Recency Weighted, ")
                if big_win:
                    factors.append("Big Win Boost, ")
                if loss_trend:
                    factors.append("Losing Trends Considered")
                print("(Based on factors: " + "".join(factors) + ")")
            elif choice == 6:
                print("\nThank you! Exiting now......\n\nExit COMPLETE")
                return 0
            else:
                print("\nInvalid entry. Please enter an integer between 1 and 5. To exit, enter '6'.")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())