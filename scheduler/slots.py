from typing import Optional
from core.models import MealTimes
from core.state import DaySlots
from utils.constants import (
    DEFAULT_WAKE_TIME,
    BREAKFAST_AFTER_WAKE_MIN,
    LUNCH_AFTER_BREAKFAST_MIN,
    EARLIEST_LUNCH,
    DINNER_AFTER_LUNCH_MIN,
    EARLIEST_DINNER,
    BEDTIME_AFTER_DINNER_MIN,
)
from utils.time_utils import clamp_to_day, round_half_up, time_to_min


def get_default_day_slots(
    wake_time: Optional[str] = None, meals: Optional[MealTimes] = None
) -> DaySlots:
    """
    Derive the seven anchors of the day from the wake time and any meal times given.

    Missing meals are derived from the previous anchor: breakfast 30 min after
    wake, lunch 4 h after breakfast but not before 12:00, dinner 5 h after
    lunch but not before 18:00. Bedtime is 3 h after dinner.

    Every anchor is clamped to the same calendar day, so a late day ends at
    23:59 instead of rolling over past midnight.
    """
    wake = clamp_to_day(time_to_min(wake_time or DEFAULT_WAKE_TIME))
    meals = meals or MealTimes()

    if meals.breakfast:
        breakfast = time_to_min(meals.breakfast)
    else:
        breakfast = wake + BREAKFAST_AFTER_WAKE_MIN
    breakfast = clamp_to_day(breakfast)

    if meals.lunch:
        lunch = time_to_min(meals.lunch)
    else:
        lunch = max(breakfast + LUNCH_AFTER_BREAKFAST_MIN, time_to_min(EARLIEST_LUNCH))
    lunch = clamp_to_day(lunch)

    if meals.dinner:
        dinner = time_to_min(meals.dinner)
    else:
        dinner = max(lunch + DINNER_AFTER_LUNCH_MIN, time_to_min(EARLIEST_DINNER))
    dinner = clamp_to_day(dinner)

    return DaySlots(
        wake=wake,
        breakfast=breakfast,
        midmorning=round_half_up((breakfast + lunch) / 2),
        lunch=lunch,
        afternoon=round_half_up((lunch + dinner) / 2),
        dinner=dinner,
        bedtime=clamp_to_day(dinner + BEDTIME_AFTER_DINNER_MIN),
    )
