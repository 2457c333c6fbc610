from typing import Iterable, List, Optional
from core.models import AvoidAfterTime, InteractionRule, ItemProfile, MealTimes, MinSeparationMinutes
from exceptions.custom_errors import (
    InvalidRuleError,
    InvalidTimeFormatError,
    NonChronologicalMealsError,
)
from utils.time_utils import time_to_min


def validate_clock_time(value: Optional[str], field_name: str = "time") -> Optional[int]:
    """
    Validate an optional "HH:MM" clock time.

    Returns:
        Optional[int]: Minutes from midnight, or None if no value was given.

    Raises:
        InvalidTimeFormatError: If the value is present but malformed.
    """
    if value is None:
        return None
    try:
        return time_to_min(value)
    except InvalidTimeFormatError as e:
        raise InvalidTimeFormatError(f"{field_name}: {e}")


def validate_day_inputs(wake_time: Optional[str], meals: Optional[MealTimes]):
    """
    Validate the wake time and meal times of a request.

    Every given time must be well-formed, and the given times must be in
    chronological order: wake < breakfast < lunch < dinner. Missing meals are
    skipped; they are derived later from the ones that are present.

    Raises:
        InvalidTimeFormatError: If any time is malformed.
        NonChronologicalMealsError: If the given times are out of order.
    """
    ordered = [("wakeTime", validate_clock_time(wake_time, "wakeTime"))]
    if meals is not None:
        ordered += [
            ("breakfast", validate_clock_time(meals.breakfast, "breakfast")),
            ("lunch", validate_clock_time(meals.lunch, "lunch")),
            ("dinner", validate_clock_time(meals.dinner, "dinner")),
        ]
    present = [(name, minute) for name, minute in ordered if minute is not None]

    errors = []
    for (prev_name, prev), (name, cur) in zip(present, present[1:]):
        if cur <= prev:
            errors.append(f" • {name} must be later than {prev_name}.\n")

    if errors:
        errors.insert(0, "Recheck your day times:\n")
        raise NonChronologicalMealsError("".join(errors))


def validate_rules(rules: Iterable[InteractionRule]):
    """
    Validate caller-supplied rules beyond what their schema checks.

    Raises:
        InvalidRuleError: Listing every problem found.
    """
    errors = []
    for rule in rules:
        if not 0 <= rule.confidence <= 100:
            errors.append(
                f" • {rule.rule_key}: confidence {rule.confidence} must be between 0 and 100.\n"
            )
        c = rule.constraint
        if isinstance(c, MinSeparationMinutes) and c.minutes < 0:
            errors.append(
                f" • {rule.rule_key}: separation minutes cannot be negative.\n"
            )
        if isinstance(c, AvoidAfterTime):
            try:
                time_to_min(c.time)
            except InvalidTimeFormatError as e:
                errors.append(f" • {rule.rule_key}: {e}\n")

    if errors:
        errors.insert(0, "Invalid interaction rules:\n")
        raise InvalidRuleError("".join(errors))


def validate_profiles(profiles: Iterable[ItemProfile]):
    """
    Check every clock time of caller-supplied profiles.

    Raises:
        InvalidTimeFormatError: Listing every bad window or avoid-after time.
    """
    errors = []
    for profile in profiles:
        timing = profile.timing
        times = [("window", t) for w in timing.preferred_windows for t in (w.start, w.end)]
        if timing.avoid_after_time is not None:
            times.append(("avoidAfterTime", timing.avoid_after_time))
        for field_name, value in times:
            try:
                time_to_min(value)
            except InvalidTimeFormatError as e:
                errors.append(f" • {profile.canonical_name} {field_name}: {e}\n")

    if errors:
        errors.insert(0, "Invalid item profiles:\n")
        raise InvalidTimeFormatError("".join(errors))


def find_duplicate_rule_keys(rules: Iterable[InteractionRule]) -> List[str]:
    """Return rule keys that appear more than once, in first-seen order."""
    seen, dupes = set(), []
    for rule in rules:
        if rule.rule_key in seen and rule.rule_key not in dupes:
            dupes.append(rule.rule_key)
        seen.add(rule.rule_key)
    return dupes
