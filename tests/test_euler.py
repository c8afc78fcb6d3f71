import math

import mpmath
import pytest

from numtoys import euler
from numtoys.logfactorial import log2_factorial


def _reference_e_digits(count):
    with mpmath.workdps(count + 30):
        text = mpmath.nstr(mpmath.e, count + 20, strip_zeros=False)
    assert text.startswith("2.")
    return text[2 : 2 + count]


def test_series_steps_count_and_convergence():
    values = list(euler.series_steps(25))
    assert len(values) == 25
    assert abs(float(values[-1]) - math.e) < 1e-15


def test_series_steps_single_term_is_two():
    assert list(euler.series_steps(1)) == [2]


def test_series_steps_empty_and_negative():
    assert list(euler.series_steps(0)) == []
    with pytest.raises(ValueError):
        list(euler.series_steps(-1))


def test_series_values_stay_between_one_and_three():
    assert all(1 < v < 3 for v in euler.series_steps(40))


def test_stirling_close_to_exact_sum():
    exact = log2_factorial(1000)
    assert abs(euler.stirling_log2_factorial(1000) - exact) / exact < 1e-6


def test_stirling_rejects_zero():
    with pytest.raises(ValueError):
        euler.stirling_log2_factorial(0)


@pytest.mark.parametrize("words", [1, 2, 3, 5, 10, 37])
def test_decimal_digits_fit_in_words(words):
    digits = euler.decimal_digits(words, 64)
    assert 10**digits <= 2 ** (64 * words) < 10 ** (digits + 1)


def test_compute_fraction_matches_e():
    terms = 60
    fraction = euler.compute_fraction(terms)
    words = math.ceil(euler.stirling_log2_factorial(terms) / 64)
    digits = euler.decimal_digits(words)
    text = "".join(euler.fraction_groups(fraction, words, digits))
    assert len(text) == digits
    assert text[:70] == _reference_e_digits(70)


def test_compute_fraction_fits_in_words():
    fraction = euler.compute_fraction(40, 3)
    assert 0 < fraction < 2 ** (64 * 3)


@pytest.mark.parametrize("intensity", [2, 7, 33, 100])
def test_intensity_does_not_change_result(intensity):
    assert euler.compute_fraction(100, 8, intensity) == euler.compute_fraction(100, 8, 1)


@pytest.mark.parametrize("terms,intensity", [(0, 1), (5, 0), (5, 6)])
def test_compute_fraction_rejects_bad_arguments(terms, intensity):
    with pytest.raises(ValueError):
        euler.compute_fraction(terms, 2, intensity)


def test_fraction_groups_lengths():
    fraction = euler.compute_fraction(50, 4)
    groups = list(euler.fraction_groups(fraction, 4, 45))
    assert [len(g) for g in groups] == [19, 19, 7]


def test_fraction_groups_exact_multiple_has_no_tail():
    fraction = euler.compute_fraction(50, 4)
    groups = list(euler.fraction_groups(fraction, 4, 38))
    assert [len(g) for g in groups] == [19, 19]


def test_hex_words_round_trip():
    fraction = euler.compute_fraction(80, 6)
    parts = euler.hex_words(fraction, 6)
    assert len(parts) == 6
    assert all(len(p) == 16 for p in parts)
    assert int("".join(parts), 16) == fraction


def test_main_normal_default(capsys):
    assert euler.main_normal([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert all(line.startswith("e -> ") for line in lines)
    assert lines[-1].startswith("e -> 2.71")


def test_main_normal_one_term(capsys):
    assert euler.main_normal(["1"]) == 0
    assert capsys.readouterr().out == "e -> 2\n"


def test_main_normal_negative_fails():
    assert euler.main_normal(["-3"]) == 1


def test_main_pipeline_decimal(capsys):
    assert euler.main_pipeline(["60", "4"]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("e = 2." + _reference_e_digits(60))
    assert "will print" in captured.err


def test_main_pipeline_hex(capsys):
    assert euler.main_pipeline(["-60"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.endswith("_")
    parts = out.rstrip("_").split("_")
    fraction = euler.compute_fraction(60)
    assert int("".join(parts), 16) == fraction


def test_main_pipeline_invalid_terms(capsys):
    assert euler.main_pipeline(["0"]) == 1
    assert "Invalid term count" in capsys.readouterr().err


def test_main_pipeline_invalid_intensity(capsys):
    assert euler.main_pipeline(["5", "6"]) == 1
    assert "Invalid intensity" in capsys.readouterr().err