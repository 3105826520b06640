import io

import pytest

from labkit import football
from labkit.football import (
    Prediction,
    losing_years,
    predict_season,
    record,
    streaks,
    years_with_at_least,
)


def test_record_first_year_from_data():
    assert record(1900) == (football.WINS[0], football.LOSSES[0])


def test_record_last_season():
    assert record(football.LAST_YEAR) == (football.WINS[-1], football.LOSSES[-1])


def test_record_upcoming_season_is_none():
    assert record(football.NEXT_YEAR) is None


@pytest.mark.parametrize("year", [1899, football.NEXT_YEAR + 1])
def test_record_out_of_range(year):
    with pytest.raises(ValueError):
        record(year)


def test_losing_years_invariant():
    years = losing_years()
    assert years == sorted(years)
    for year in years:
        w, l = record(year)
        assert w < l
    others = set(range(1900, football.LAST_YEAR + 1)) - set(years)
    for year in others:
        w, l = record(year)
        assert w >= l


def test_years_with_at_least_zero_is_every_year():
    assert years_with_at_least(0) == list(range(1900, football.LAST_YEAR + 1))


def test_years_with_at_least_filters():
    years = years_with_at_least(10)
    assert all(record(y)[0] >= 10 for y in years)
    assert len(years) == sum(1 for w in football.WINS if w >= 10)


@pytest.mark.parametrize("n", [-1, 18])
def test_years_with_at_least_rejects_bad_input(n):
    with pytest.raises(ValueError):
        years_with_at_least(n)


def test_streaks_are_runs_of_winning_seasons():
    runs = streaks()
    assert runs[0][0] == 1900
    assert runs[-1][1] is None
    previous_end = 1899
    for start, end in runs:
        last = football.LAST_YEAR if end is None else end
        assert last - start >= 1
        assert start > previous_end + 0
        for year in range(start, last + 1):
            w, l = record(year)
            assert w > l
        previous_end = last


def test_predict_single_season_is_that_season():
    w, l = record(football.LAST_YEAR)
    assert predict_season(1) == Prediction(w, l)


def test_predict_loss_trend_never_raises_wins():
    plain = predict_season(football.SEASONS)
    trend = predict_season(football.SEASONS, loss_trend=True)
    assert trend.wins <= plain.wins
    assert trend.losses == plain.losses


def test_predict_big_win_never_lowers_wins():
    plain = predict_season(30)
    boosted = predict_season(30, big_win=True)
    assert boosted.wins >= plain.wins


@pytest.mark.parametrize("n", [0, football.SEASONS + 1])
def test_predict_rejects_bad_season_count(n):
    with pytest.raises(ValueError):
        predict_season(n)


def test_main_shows_record(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1900\n6\n"))
    assert football.main([]) == 0
    w, l = record(1900)
    out = capsys.readouterr().out
    assert f"Wins: {w} | Losses: {l}" in out
    assert "Exit COMPLETE" in out


def test_main_rejects_bad_year(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1800\n6\n"))
    football.main([])
    assert "Invalid Entry" in capsys.readouterr().out