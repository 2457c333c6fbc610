import pytest
from datetime import date
from exceptions.custom_errors import InvalidTimeFormatError
from utils.time_utils import (
    clamp_to_day,
    is_valid_time,
    min_to_time,
    normalise_date,
    round_half_up,
    slot_label,
    time_to_min,
)


@pytest.mark.parametrize("text, expected", [("00:00", 0), ("07:00", 420), ("7:05", 425), ("23:59", 1439)])
def test_time_to_min(text, expected):
    assert time_to_min(text) == expected


@pytest.mark.parametrize("bad", ["24:00", "12:60", "noon", "12", "", "12:5"])
def test_time_to_min_rejects_malformed(bad):
    with pytest.raises(InvalidTimeFormatError):
        time_to_min(bad)
    assert not is_valid_time(bad)


def test_min_to_time_pads():
    assert min_to_time(425) == "07:05"
    assert min_to_time(0) == "00:00"


@pytest.mark.parametrize(
    "minute, label",
    [(0, "Morning"), (719, "Morning"), (720, "Afternoon"), (899, "Afternoon"), (900, "Evening"), (1199, "Evening"), (1200, "Night")],
)
def test_slot_label_thresholds(minute, label):
    assert slot_label(minute) == label


def test_round_half_up_rounds_halves_up():
    assert round_half_up(585.5) == 586
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4) == 2


def test_clamp_to_day():
    assert clamp_to_day(1500) == 1439
    assert clamp_to_day(-5) == 0


def test_normalise_date():
    assert normalise_date("2026/02/14") == "2026-02-14"
    assert normalise_date(date(2026, 2, 14)) == "2026-02-14"
    assert normalise_date(None) == date.today().isoformat()
    with pytest.raises(ValueError):
        normalise_date("not a date")
