import math

import pytest

from labkit.grades import GRADES, average, main, std_dev


def test_average_simple():
    assert average([1, 2, 3]) == 2


def test_average_bounds():
    mean = average(GRADES)
    assert min(GRADES) <= mean <= max(GRADES)


def test_std_dev_classic_example():
    assert std_dev([2, 4, 4, 4, 5, 5, 7, 9], 5) == 2


def test_std_dev_constant_sample_is_zero():
    assert std_dev([7, 7, 7], 7) == 0


def test_std_dev_is_shift_invariant():
    shifted = [g + 10 for g in GRADES]
    assert math.isclose(
        std_dev(shifted, average(shifted)), std_dev(GRADES, average(GRADES))
    )


def test_empty_sample_raises():
    with pytest.raises(ValueError):
        average([])
    with pytest.raises(ValueError):
        std_dev([], 0)


def test_main_reports_count(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert f"There are {len(GRADES)} grades in the array." in out
    assert f"Average grade: {average(GRADES):.2f}." in out