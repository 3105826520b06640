import io
import random

import pytest

from labkit.crossword import (
    BOARD_SIZE,
    MAX_WORDS,
    Crossword,
    Direction,
    Word,
    clues_text,
    is_alpha,
    read_words,
    save_to_file,
    scramble,
    sort_words,
)


def _texts(words):
    return [w.text for w in words]


def _assert_consistent(crossword, words):
    for w in words:
        if not w.placed:
            continue
        for i, letter in enumerate(w.text):
            r, c = (w.row, w.col + i) if w.direction is Direction.ACROSS else (w.row + i, w.col)
            assert crossword.grid[r][c] == letter


@pytest.mark.parametrize(
    "text, expected",
    [("abc", True), ("ABCxyz", True), ("ab1", False), ("é", False), ("", True)],
)
def test_is_alpha(text, expected):
    assert is_alpha(text) is expected


def test_read_words_uppercases_and_rejects(capsys):
    words = read_words(io.StringIO("apple c 12 Banana\ncherry. extra\n"))
    assert _texts(words) == ["APPLE", "BANANA", "CHERRY"]
    assert not any(w.placed for w in words)
    out = capsys.readouterr().out
    assert "Error: 'c' has been ignored" in out
    assert "'12' has been ignored" in out


def test_read_words_stops_at_period():
    assert _texts(read_words(io.StringIO("one two . three"))) == ["ONE", "TWO"]


def test_read_words_invalid_last_word_is_dropped_silently(capsys):
    assert _texts(read_words(io.StringIO("one x. two"))) == ["ONE"]
    assert "has been ignored" not in capsys.readouterr().out


def test_read_words_splits_long_tokens():
    words = read_words(io.StringIO("abcdefghijklmnopqrst"))
    assert _texts(words) == ["ABCDEFGHIJKLMNO", "PQRST"]


def test_read_words_limit():
    words = read_words(io.StringIO(" ".join(["ab"] * (MAX_WORDS + 5))))
    assert len(words) == MAX_WORDS


def test_sort_words_is_stable_longest_first():
    words = [Word("AB"), Word("ABCD"), Word("CD"), Word("XYZ")]
    sort_words(words)
    assert _texts(words) == ["ABCD", "XYZ", "AB", "CD"]


def test_scramble_is_permutation():
    s = scramble("CROSSWORD", random.Random(3))
    assert sorted(s) == sorted("CROSSWORD")


def test_empty_crossword_rendering():
    crossword = Crossword()
    solution = crossword.solution_text().splitlines()
    puzzle = crossword.puzzle_text().splitlines()
    assert solution[0] == "Solution:"
    assert solution[1] == solution[-1] == "-----------------"
    assert solution[2:-1] == ["|" + "." * BOARD_SIZE + "|"] * BOARD_SIZE
    assert puzzle[0] == "Puzzle:"
    assert puzzle[2:-1] == ["|" + "#" * BOARD_SIZE + "|"] * BOARD_SIZE


def test_count_overlaps_needs_an_intersection():
    crossword = Crossword()
    assert crossword.count_overlaps("HELLO", 7, 5, Direction.ACROSS) is None
    assert crossword.count_overlaps("HELLO", 0, BOARD_SIZE - 2, Direction.ACROSS) is None


def test_count_overlaps_rejects_conflicting_letters():
    crossword = Crossword()
    crossword.place_word(Word("HELLO", BOARD_SIZE // 2, 5, Direction.ACROSS))
    assert crossword.count_overlaps("JELLO", BOARD_SIZE // 2, 5, Direction.ACROSS) is None
    assert crossword.find_best_placement("QQQ") is None


def test_place_word_off_board():
    crossword = Crossword()
    with pytest.raises(ValueError):
        crossword.place_word(Word("HELLO", 0, BOARD_SIZE - 2, Direction.ACROSS))


def test_solve_crosses_words():
    words = [Word("HELLO"), Word("WORLD")]
    crossword = Crossword()
    assert crossword.solve(words) == 2
    assert all(w.placed for w in words)
    first, second = words
    assert first.text == "HELLO"
    assert first.row == BOARD_SIZE // 2
    assert first.direction is Direction.ACROSS
    assert second.direction is Direction.DOWN
    assert crossword.skipped == []
    _assert_consistent(crossword, words)


def test_solve_skips_unplaceable():
    words = [Word("ABC"), Word("XYZ")]
    crossword = Crossword()
    assert crossword.solve(words) == 1
    assert not words[1].placed
    assert crossword.skipped == [words[1]]


def test_solve_retries_skipped_words():
    words = [Word("HELLO"), Word("XYZ"), Word("ZOO")]
    crossword = Crossword()
    placed = crossword.solve(words)
    assert placed == sum(w.placed for w in words)
    assert [w.text for w in crossword.skipped] == ["XYZ"]
    assert all(w.placed for w in words)
    _assert_consistent(crossword, words)


def test_solve_empty():
    assert Crossword().solve([]) == 0


def test_puzzle_mirrors_solution():
    words = [Word("HELLO"), Word("WORLD")]
    crossword = Crossword()
    crossword.solve(words)
    solution = crossword.solution_text().splitlines()[2:-1]
    puzzle = crossword.puzzle_text().splitlines()[2:-1]
    for srow, prow in zip(solution, puzzle):
        for s, p in zip(srow, prow):
            if s == ".":
                assert p == "#"
            elif s != "|":
                assert p == " "


def test_clues_text():
    words = [Word("HELLO"), Word("WORLD"), Word("QQ")]
    crossword = Crossword()
    crossword.solve(words)
    lines = clues_text(words, random.Random(0)).splitlines()
    assert lines[:2] == ["CLUES:", "Location | Direction | Anagram"]
    placed = [w for w in words if w.placed]
    assert len(lines) == 2 + len(placed)
    for w, line in zip(placed, lines[2:]):
        location, label, anagram = (part.strip() for part in line.split("|"))
        assert location.replace(" ", "") == f"{w.row},{w.col}"
        assert label == w.direction.label
        assert sorted(anagram) == sorted(w.text)


def test_save_to_file(tmp_path):
    words = [Word("HELLO"), Word("WORLD")]
    crossword = Crossword()
    crossword.solve(words)
    target = tmp_path / "out.txt"
    save_to_file(target, crossword, words, random.Random(1))
    content = target.read_text()
    assert content.startswith(crossword.solution_text() + "\n")
    assert crossword.puzzle_text() in content
    clues = content.split("CLUES:\nLocation | Direction | Anagram\n")[1].splitlines()
    assert len(clues) == 2
    for w, line in zip(words, clues):
        assert sorted(line.split("|")[2].strip()) == sorted(w.text)