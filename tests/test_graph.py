import io

import pytest

from labkit.graph import evaluate, main, plot_bar, sample


def test_evaluate_at_origin():
    assert evaluate(0.0) == 0.0


def test_sample_covers_range():
    points = sample(0.0, 1.0, 0.5)
    assert [x for x, _ in points] == [0.0, 0.5, 1.0]
    assert all(y == evaluate(x) for x, y in points)


def test_sample_empty_when_start_after_end():
    assert sample(2.0, 1.0, 0.5) == []


@pytest.mark.parametrize("step", [0.0, -1.0])
def test_sample_rejects_non_positive_step(step):
    with pytest.raises(ValueError):
        sample(0.0, 1.0, step)


def test_bar_at_zero_has_only_axis():
    bar = plot_bar(0.0)
    assert len(bar) == 100
    assert bar[50] == "|"
    assert "#" not in bar


def test_positive_bar_extends_right():
    bar = plot_bar(1.0)
    assert bar.count("#") == 10
    assert bar.index("#") > 50


def test_negative_bar_extends_left():
    bar = plot_bar(-1.0)
    assert bar.count("#") == 10
    assert bar.rindex("#") < 50


def test_main_rejects_zero_step(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n1\n0\n"))
    assert main([]) == 1
    assert "Step must be greater than 0." in capsys.readouterr().out