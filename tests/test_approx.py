import pytest

from numtoys.approx import Step, format_step, main, mediant_steps


def test_half_found_immediately():
    steps = list(mediant_steps(0.5, 10))
    assert len(steps) == 1
    assert steps[0].mediant == (1, 2)
    assert steps[0].diff == 0


def test_quarter_converges_and_stops():
    steps = list(mediant_steps(0.25, 50))
    assert steps[-1].value == 0.25
    assert len(steps) < 50


def test_interval_always_brackets_target():
    for step in mediant_steps(0.3183, 30):
        lo = step.low[0] / step.low[1]
        hi = step.high[0] / step.high[1]
        assert lo <= 0.3183 <= hi


def test_iteration_limit():
    assert len(list(mediant_steps(0.1234567, 5))) == 5


def test_above_one_rejected():
    with pytest.raises(ValueError):
        list(mediant_steps(1.5, 3))


def test_format_step_layout():
    step = Step(1, (0, 1), (1, 1), (1, 2), 0.5, 0.0, False)
    text = format_step(step, 3)
    assert text.startswith("(1/3)\t[min: 0/1, max: 1/1],\tapprox => 1/2 (0.5000000000)")
    assert text.endswith("diff => 0.0000000000")


def test_main_errors(capsys):
    assert main(["0.5"]) == 1
    assert main(["abc", "3"]) == 1
    assert main(["2", "3"]) == 1
    assert capsys.readouterr().err == "?ARG\n?INVALID\n?ONE\n"


def test_main_prints_rule(capsys):
    assert main(["0.5", "4"]) == 0
    assert "=" * 80 in capsys.readouterr().out