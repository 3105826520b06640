from labkit.crossword import Crossword, Direction, Word
from labkit.crossword_future import find_best_placement, future_score


def _with_hello():
    crossword = Crossword()
    hello = Word("HELLO", row=7, col=5, direction=Direction.ACROSS)
    crossword.place_word(hello)
    return crossword, hello


def test_future_score_is_symmetric_on_empty_grid():
    crossword = Crossword()
    across = future_score(crossword, "CAT", 7, 6, Direction.ACROSS)
    down = future_score(crossword, "CAT", 6, 7, Direction.DOWN)
    assert across == down
    assert across > 0


def test_edge_row_scores_less_than_middle_row():
    crossword = Crossword()
    edge = future_score(crossword, "CAT", 0, 6, Direction.ACROSS)
    middle = future_score(crossword, "CAT", 7, 6, Direction.ACROSS)
    assert edge < middle


def test_neighbouring_letters_reduce_score():
    crossword = Crossword()
    before = future_score(crossword, "CAT", 7, 6, Direction.ACROSS)
    crossword.place_word(Word("XY", row=6, col=6, direction=Direction.ACROSS))
    after = future_score(crossword, "CAT", 7, 6, Direction.ACROSS)
    assert after < before


def test_find_best_placement_crosses_placed_word():
    crossword, hello = _with_hello()
    result = find_best_placement(crossword, [hello], "WORLD")
    assert result is not None
    row, col, direction = result
    assert direction is Direction.DOWN
    assert crossword.count_overlaps("WORLD", row, col, direction) is not None
    word = Word("WORLD", row=row, col=col, direction=direction)
    crossword.place_word(word)
    assert any(crossword.grid[7][c] == "O" for c in range(15))
    column = "".join(crossword.grid[r][col] for r in range(row, row + 5))
    assert column == "WORLD"


def test_no_shared_letters_gives_none():
    crossword, hello = _with_hello()
    assert find_best_placement(crossword, [hello], "XYZ") is None


def test_unplaced_words_are_ignored():
    crossword = Crossword()
    unplaced = Word("HELLO")
    assert find_best_placement(crossword, [unplaced], "WORLD") is None