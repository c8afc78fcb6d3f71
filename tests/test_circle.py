import math

import pytest

from numtoys.circle import circle_lines, estimate_pi, main


def test_dimensions():
    lines = list(circle_lines(5))
    assert len(lines) == 11
    assert all(len(line) == 21 for line in lines)


def test_symmetry_and_full_middle():
    lines = list(circle_lines(6))
    assert lines == lines[::-1]
    assert all(line == line[::-1] for line in lines)
    assert set(lines[6]) == {"#"}


def test_zero_size_is_single_hash():
    assert list(circle_lines(0)) == ["#"]
    assert math.isnan(estimate_pi(0))


def test_pi_estimate_converges():
    assert abs(estimate_pi(2000) - math.pi) < 0.01


def test_negative_rejected():
    with pytest.raises(ValueError):
        list(circle_lines(-1))


def test_main(capsys):
    assert main(["2"]) == 0
    captured = capsys.readouterr()
    assert captured.out.count("\n") == 5
    assert "Pi = " in captured.err
    assert main([]) == 1