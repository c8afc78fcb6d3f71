import re
from datetime import datetime, timedelta, timezone

from numtoys import clock


def test_epoch_is_plain_integer():
    assert clock.format_epoch(1234) == "1234"


def test_hex_epoch_prefix_and_zero():
    assert clock.format_hex_epoch(255) == "0xff"
    assert clock.format_hex_epoch(0) == "0"


def test_neodate_format():
    moment = datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=9)))
    assert clock.format_neodate(moment) == "2020-01-02T03:04:05+0900"


def test_ns_pads_fraction():
    assert clock.format_ns(1_000_000_001) == "1.000000001"


def test_us_rounds_to_six_digits():
    assert clock.format_us(1_500_000_000) == "1.500000"
    assert clock.format_us(2_000_000_400) == "2.000000"


def test_main_ns_output_shape(capsys):
    assert clock.main_ns() == 0
    out = capsys.readouterr().out
    assert re.fullmatch(r"\d+\.\d{9}\n", out)


def test_main_hex_epoch_output_shape(capsys):
    assert clock.main_hex_epoch([]) == 0
    assert re.fullmatch(r"0x[0-9a-f]+\n", capsys.readouterr().out)