import pandas as pd
from datetime import date as dt_date
from typing import Iterable, Optional, Sequence, Union
from core.models import (
    InteractionRule,
    ItemProfile,
    MealTimes,
    ScheduleInputItem,
    ScheduleOutput,
)
from scheduler.constraints import build_constraints
from scheduler.extractor import finalise_items
from scheduler.scoring import compute_confidence
from scheduler.setup import attach_profiles, merge_rules
from scheduler.slots import get_default_day_slots
from scheduler.solver import schedule_items
from utils.constants import DISCLAIMER, SEPARATION_PASSES
from utils.loader import load_item_profiles
from utils.logger import get_logger
from utils.time_utils import min_to_time, normalise_date
from utils.validate import validate_day_inputs, validate_profiles, validate_rules

logger = get_logger(__name__)


# == Build Schedule ==
def generate_schedule(
    date: Union[str, dt_date, pd.Timestamp, None],
    items: Sequence[ScheduleInputItem],
    profiles: Optional[Iterable[ItemProfile]] = None,
    additional_rules: Iterable[InteractionRule] = (),
    meals: Optional[MealTimes] = None,
    wake_time: Optional[str] = None,
    max_separation_passes: int = SEPARATION_PASSES,
) -> ScheduleOutput:
    """
    Builds the daily timetable for a set of medications and supplements.

    Runs the pipeline anchors -> profiles -> constraints -> placement -> score.
    Unsatisfiable constraints never raise: soft ones become warnings and hard
    avoid-after limits are enforced by clamping.

    Args:
        date: Day the schedule is for; None means today.
        items: Items to schedule.
        profiles: Item profiles; None means the built-in catalog.
        additional_rules: Caller rules, unioned with the built-in rules.
        meals: Optional meal times; missing ones are derived.
        wake_time: "HH:MM"; defaults to 07:00.
        max_separation_passes: Separation passes to allow after placement.

    Raises:
        InvalidTimeFormatError: If a day time or a profile time is malformed.
        NonChronologicalMealsError: If day times are out of order.
        InvalidRuleError: If a caller rule is invalid.
    """
    # === Validate inputs ===
    validate_day_inputs(wake_time, meals)
    additional_rules = list(additional_rules)
    validate_rules(additional_rules)
    if profiles is not None:
        profiles = list(profiles)
        validate_profiles(profiles)
    schedule_date = normalise_date(date)

    # === Setup ===
    logger.info(f"📋 Building schedule for {schedule_date} with {len(items)} item(s)...")
    slots = get_default_day_slots(wake_time, meals)
    logger.info(
        f"Day anchors: wake {min_to_time(slots.wake)}, breakfast {min_to_time(slots.breakfast)}, "
        f"lunch {min_to_time(slots.lunch)}, dinner {min_to_time(slots.dinner)}, "
        f"bedtime {min_to_time(slots.bedtime)}"
    )

    if profiles is None:
        profiles = load_item_profiles()
    enriched = attach_profiles(items, profiles)

    rules = merge_rules(additional_rules)
    constraints = build_constraints(enriched, rules)

    # === Place ===
    result = schedule_items(enriched, constraints, slots, max_separation_passes)

    # === Score ===
    overall_confidence = compute_confidence(enriched, constraints, result.placed)
    logger.info(f"✅ Schedule ready: overall confidence {overall_confidence}")

    return ScheduleOutput(
        date=schedule_date,
        items=finalise_items(result.placed),
        warnings=tuple(result.warnings),
        overall_confidence=overall_confidence,
        disclaimer=DISCLAIMER,
    )
