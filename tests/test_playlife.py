import io

from labkit.life import BOARD_SIZE
from labkit.playlife import load_batch, main, process_command
from labkit.life import Board


def test_process_add_and_remove():
    board = Board()
    process_command(board, "a", 3, 4)
    assert board.is_alive(3, 4)
    process_command(board, "r", 3, 4)
    assert not board.is_alive(3, 4)


def test_process_out_of_bounds_warns(capsys):
    board = Board()
    process_command(board, "a", BOARD_SIZE, 0)
    assert board.cells == set()
    assert "Warning: Cell (40, 0) is out of bounds and cannot be added." in capsys.readouterr().out


def test_process_unknown_command_ignored():
    board = Board()
    process_command(board, "z", 1, 1)
    assert board.cells == set()


def test_load_batch_only_adds():
    board = load_batch(io.StringIO("a 1 1\na 1 2\nr 1 1\na 2 2\n"))
    assert board.cells == {(1, 1), (1, 2), (2, 2)}


def test_load_batch_stops_at_bad_entry():
    board = load_batch(io.StringIO("a 1 1\nbad\na 2 2\n"))
    assert board.cells == {(1, 1)}


def test_main_usage_error(capsys):
    assert main(["one", "two"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Error opening file" in capsys.readouterr().err


def test_main_interactive(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a 0 0\nq\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "|X" in out
    assert "Enter command" in out