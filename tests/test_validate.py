import pytest
from conftest import make_profile, make_rule
from core.models import AvoidAfterTime, MealTimes, MinSeparationMinutes, OtherSelector, Warn
from exceptions.custom_errors import (
    InvalidRuleError,
    InvalidTimeFormatError,
    NonChronologicalMealsError,
)
from utils.validate import (
    find_duplicate_rule_keys,
    validate_clock_time,
    validate_day_inputs,
    validate_profiles,
    validate_rules,
)


def test_validate_clock_time():
    assert validate_clock_time(None) is None
    assert validate_clock_time("08:15") == 495
    with pytest.raises(InvalidTimeFormatError, match="wakeTime"):
        validate_clock_time("25:00", "wakeTime")


def test_day_inputs_accept_partial_meals():
    validate_day_inputs("06:00", MealTimes(dinner="19:00"))
    validate_day_inputs(None, None)


def test_day_inputs_reject_out_of_order_times():
    with pytest.raises(NonChronologicalMealsError) as e:
        validate_day_inputs("08:00", MealTimes(breakfast="07:30", lunch="07:00"))
    message = str(e.value)
    assert "breakfast must be later than wakeTime" in message
    assert "lunch must be later than breakfast" in message


def test_day_inputs_reject_equal_times():
    with pytest.raises(NonChronologicalMealsError):
        validate_day_inputs("07:00", MealTimes(breakfast="07:00"))


def test_day_inputs_reject_malformed_meal():
    with pytest.raises(InvalidTimeFormatError, match="lunch"):
        validate_day_inputs("07:00", MealTimes(lunch="noon"))


def test_validate_rules_lists_every_problem():
    rules = [
        make_rule("conf", Warn("x"), confidence=120),
        make_rule("neg", MinSeparationMinutes(minutes=-5, other=OtherSelector(type="tag", value="X"))),
        make_rule("late", AvoidAfterTime(time="25:00")),
    ]
    with pytest.raises(InvalidRuleError) as e:
        validate_rules(rules)
    message = str(e.value)
    assert "conf" in message and "neg" in message and "late" in message


def test_validate_rules_accepts_good_rules():
    validate_rules([make_rule("ok", AvoidAfterTime(time="14:00"), confidence=0)])


def test_find_duplicate_rule_keys():
    rules = [make_rule(k, Warn("x")) for k in ("a", "b", "a", "c", "b", "a")]
    assert find_duplicate_rule_keys(rules) == ["a", "b"]


def test_validate_profiles_lists_every_bad_time():
    profiles = [
        make_profile("a", window="25:00-26:00"),
        make_profile("b", avoid_after_time="09:75"),
        make_profile("c", window="08:00-09:00", avoid_after_time="15:00"),
    ]
    with pytest.raises(InvalidTimeFormatError) as e:
        validate_profiles(profiles)
    message = str(e.value)
    assert message.startswith("Invalid item profiles:")
    assert "a window" in message and "b avoidAfterTime" in message
    assert "• c " not in message

    validate_profiles(profiles[2:])
