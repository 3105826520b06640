import io
import sys

import pytest

from labkit.sayings import (
    MAX_LENGTH,
    MAX_SAYINGS,
    SayingsFullError,
    add_saying,
    main,
    read_sayings,
    save_sayings,
    search_sayings,
)


def test_read_sayings_strips_newlines():
    assert read_sayings(io.StringIO("one\ntwo\n")) == ["one", "two"]


def test_read_sayings_caps_count():
    text = "".join(f"s{i}\n" for i in range(MAX_SAYINGS + 10))
    result = read_sayings(io.StringIO(text))
    assert len(result) == MAX_SAYINGS
    assert result[-1] == f"s{MAX_SAYINGS - 1}"


def test_read_sayings_splits_long_line():
    line = "a" * 300 + "\n"
    result = read_sayings(io.StringIO(line))
    assert result == ["a" * (MAX_LENGTH - 1), "a" * (300 - (MAX_LENGTH - 1))]


def test_add_saying_appends_first_line():
    sayings = ["old"]
    add_saying(sayings, "new one\nextra")
    assert sayings == ["old", "new one"]


def test_add_saying_full_raises():
    sayings = ["x"] * MAX_SAYINGS
    with pytest.raises(SayingsFullError):
        add_saying(sayings, "more")
    assert len(sayings) == MAX_SAYINGS


def test_search_is_case_sensitive_substring():
    sayings = ["Look before you leap", "Time flies", "look again"]
    assert search_sayings(sayings, "look") == ["look again"]
    assert search_sayings(sayings, "e") == ["Look before you leap", "Time flies"]
    assert search_sayings(sayings, "zzz") == []


def test_save_and_read_round_trip(tmp_path):
    sayings = ["first saying", "second saying"]
    target = tmp_path / "out.txt"
    save_sayings(sayings, target)
    with open(target) as handle:
        assert read_sayings(handle) == sayings


def test_save_empty_raises(tmp_path):
    with pytest.raises(ValueError):
        save_sayings([], tmp_path / "out.txt")


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    (tmp_path / "start.txt").write_text("Haste makes waste\nPractice makes perfect\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def run(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return main([])


def test_main_missing_file(workdir, monkeypatch, capsys):
    assert run(monkeypatch, "absent.txt\n") == 1
    assert "Error: File 'absent.txt' not found." in capsys.readouterr().out


def test_main_display_and_search(workdir, monkeypatch, capsys):
    assert run(monkeypatch, "start.txt\n1\n3\nperfect\n3\nnothing\n5\n") == 0
    out = capsys.readouterr().out
    assert "Loaded 2 sayings from file: start.txt" in out
    assert "2) Practice makes perfect" in out
    assert "No sayings matched your search." in out


def test_main_add_and_save(workdir, monkeypatch, capsys):
    run(monkeypatch, "start.txt\n2\nWaste not\n4\nsaved.txt\n5\n")
    out = capsys.readouterr().out
    assert "Saying added!" in out
    assert "Sayings saved to 'saved.txt'" in out
    with open(workdir / "saved.txt") as handle:
        assert read_sayings(handle)[-1] == "Waste not"


def test_main_invalid_input(workdir, monkeypatch, capsys):
    run(monkeypatch, "start.txt\nabc\n9\n5\n")
    out = capsys.readouterr().out
    assert "Invalid input. Please enter a number 1-5." in out
    assert "Invalid choice. Please try again." in out