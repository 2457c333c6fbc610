from core.models import AppliedConstraint, Severity
from core.state import PlacedItem, ScheduleState
from utils.time_utils import time_to_min

"""
This module contains the rules that shape one item's own time of day.
"""


def avoid_after_time_rule(state: ScheduleState, item: PlacedItem, ac: AppliedConstraint):
    """
    Keep the item at or before the constraint's clock time.

    A hard rule clamps the item down to the limit. A soft rule leaves the item
    where it is and records a violation with a warning.
    """
    limit = time_to_min(ac.constraint.time)
    if item.time_min <= limit:
        state.mark_satisfied(item, ac)
        return

    if ac.rule.severity == Severity.HARD:
        item.time_min = limit
        state.mark_satisfied(item, ac)
    else:
        state.mark_violated(item, ac)
        state.warn(
            ac,
            f"{item.display_name} is scheduled after {ac.constraint.time}. "
            "Many people prefer taking it earlier.",
            [item.canonical_name],
        )


def empty_stomach_note(buffer: int) -> str:
    return f"Take on an empty stomach, {buffer} min before food"


def empty_stomach_rule(state: ScheduleState, item: PlacedItem, ac: AppliedConstraint):
    """Snap an item sitting inside the breakfast buffer back to wake. Advisory only."""
    buffer = ac.constraint.buffer_before_food_min
    slots = state.slots
    if slots.breakfast <= item.time_min < slots.breakfast + buffer:
        item.time_min = slots.wake
    if item.time_min == slots.wake:
        item.notes.append(empty_stomach_note(buffer))
    state.mark_satisfied(item, ac)


def with_food_rule(state: ScheduleState, item: PlacedItem, ac: AppliedConstraint):
    if not item.with_food:
        item.notes.append("Take with food")
    state.mark_satisfied(item, ac)
