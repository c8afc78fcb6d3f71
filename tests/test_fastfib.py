import pytest

from numtoys.fastfib import fibonacci, main, to_raw


def test_seeds():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    assert fibonacci(2) == 1


def test_recurrence():
    values = [fibonacci(n) for n in range(300)]
    for i in range(2, 300):
        assert values[i] == values[i - 1] + values[i - 2]


@pytest.mark.parametrize("n", [1, 7, 50, 1001])
def test_cassini(n):
    assert fibonacci(n + 1) * fibonacci(n - 1) - fibonacci(n) ** 2 == (-1) ** n


def test_negative_rejected():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_raw_format():
    assert to_raw(0) == b"\x00\x00\x00\x00"
    assert to_raw(256) == b"\x00\x00\x00\x02\x01\x00"
    assert to_raw(-1) == b"\xff\xff\xff\xff\x01"


def test_main_text(capsys):
    assert main(["10"]) == 0
    assert capsys.readouterr().out == "10,\t55\n"