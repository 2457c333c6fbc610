from core.models import MealTimes
from scheduler.slots import get_default_day_slots
from utils.time_utils import time_to_min


def test_default_anchors():
    slots = get_default_day_slots()
    assert slots.wake == time_to_min("07:00")
    assert slots.breakfast == time_to_min("07:30")
    assert slots.lunch == time_to_min("12:00")
    assert slots.dinner == time_to_min("18:00")
    assert slots.bedtime == time_to_min("21:00")
    assert slots.midmorning == time_to_min("09:45")
    assert slots.afternoon == time_to_min("15:00")


def test_late_wake_pushes_meals():
    slots = get_default_day_slots("10:00")
    assert slots.breakfast == time_to_min("10:30")
    assert slots.lunch == time_to_min("14:30")
    assert slots.dinner == time_to_min("19:30")
    assert slots.bedtime == time_to_min("22:30")


def test_explicit_meals_win():
    slots = get_default_day_slots("06:00", MealTimes(breakfast="06:15", lunch="11:00", dinner="17:00"))
    assert slots.breakfast == time_to_min("06:15")
    assert slots.lunch == time_to_min("11:00")
    assert slots.dinner == time_to_min("17:00")
    assert slots.bedtime == time_to_min("20:00")


def test_partial_meals_derive_the_rest():
    slots = get_default_day_slots("07:00", MealTimes(lunch="13:00"))
    assert slots.breakfast == time_to_min("07:30")
    assert slots.dinner == time_to_min("18:00")


def test_midpoint_rounds_half_up():
    # (450 + 721) / 2 = 585.5
    slots = get_default_day_slots("07:00", MealTimes(lunch="12:01"))
    assert slots.midmorning == 586


def test_bedtime_past_midnight_is_clamped_to_same_day():
    slots = get_default_day_slots("12:00", MealTimes(dinner="22:30"))
    assert slots.bedtime == 1439
    assert slots.wake <= slots.breakfast <= slots.lunch <= slots.dinner <= slots.bedtime


def test_derived_meals_past_midnight_are_clamped():
    slots = get_default_day_slots("20:00")
    assert slots.breakfast == time_to_min("20:30")
    assert slots.lunch == 1439
    assert slots.dinner == 1439
    assert slots.bedtime == 1439
