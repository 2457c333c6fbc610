from typing import Optional, Tuple
from core.models import AppliedConstraint, AvoidAfterTime, MinSeparationMinutes, Severity
from core.state import DaySlots, PlacedItem, ScheduleState
from utils.logger import get_logger
from utils.time_utils import time_to_min

"""
This module contains the minimum-separation rule and the post-placement pass
that settles separations whose other item was placed later.
"""

logger = get_logger(__name__)

PHARMACIST_HINT = "Consider discussing timing with a pharmacist."


def separated_time(
    anchor_min: int, minutes: int, slots: DaySlots, latest: Optional[int] = None
) -> Optional[int]:
    """
    First time at least ``minutes`` away from the anchor that stays inside the
    day: after the anchor if it fits before bedtime, else before it if it fits
    after wake. ``latest`` caps both candidates. None when neither fits.
    """
    upper = slots.bedtime if latest is None else min(slots.bedtime, latest)
    after = anchor_min + minutes
    if after <= upper:
        return after
    before = anchor_min - minutes
    if slots.wake <= before <= upper:
        return before
    return None


def hard_limit(state: ScheduleState, item: PlacedItem) -> Optional[int]:
    """Earliest hard avoid-after time of the item, or None."""
    limits = [
        time_to_min(ac.constraint.time)
        for ac in state.constraints_for(item.canonical_name)
        if isinstance(ac.constraint, AvoidAfterTime) and ac.rule.severity == Severity.HARD
    ]
    return min(limits, default=None)


def choose_mover(target: PlacedItem, other: PlacedItem) -> Tuple[PlacedItem, PlacedItem]:
    """Return (mover, anchor). Prefer moving a flexible other, then a flexible target."""
    if other.enriched.is_flexible:
        return other, target
    if target.enriched.is_flexible:
        return target, other
    return other, target


def min_separation_rule(state: ScheduleState, item: PlacedItem, ac: AppliedConstraint):
    """
    Keep the item at least N minutes from an already-placed other item by
    moving the item itself. Left unresolved when the other item is not placed
    yet; the post-placement pass picks it up.
    """
    other = state.get_placed(ac.other_canonical)
    if other is None:
        return

    minutes = ac.constraint.minutes
    if abs(item.time_min - other.time_min) >= minutes:
        state.mark_satisfied(item, ac)
        return

    new_time = separated_time(other.time_min, minutes, state.slots, hard_limit(state, item))
    if new_time is not None:
        item.time_min = new_time
        state.mark_satisfied(item, ac)
        return

    state.mark_violated(item, ac)
    state.warn(
        ac,
        f"Could not achieve {minutes}-minute separation between "
        f"{item.display_name} and the conflicting item. {PHARMACIST_HINT}",
        [item.canonical_name, ac.other_canonical],
    )


def separation_pass(state: ScheduleState, revisit: bool = False) -> int:
    """
    Settle separation constraints after every item has a time.

    The first pass only looks at constraints no handler has resolved yet. A
    revisit pass re-checks the satisfied ones, since an earlier move may have
    broken them; one that can no longer be met is demoted to violated.

    Returns:
        int: Number of items moved during the pass.
    """
    moves = 0
    for ac in state.constraints:
        if not isinstance(ac.constraint, MinSeparationMinutes) or ac.other_canonical is None:
            continue
        if revisit:
            if id(ac) not in state.satisfied:
                continue
        elif state.is_resolved(ac):
            continue

        target = state.get_placed(ac.target_canonical)
        other = state.get_placed(ac.other_canonical)
        if target is None or other is None:
            continue

        minutes = ac.constraint.minutes
        if abs(target.time_min - other.time_min) >= minutes:
            if not revisit:
                state.mark_satisfied(target, ac)
            continue

        mover, anchor = choose_mover(target, other)
        new_time = separated_time(anchor.time_min, minutes, state.slots, hard_limit(state, mover))
        if new_time is not None:
            logger.info(
                f"↔️ Moving {mover.canonical_name} to keep {minutes} min from {anchor.canonical_name}"
            )
            mover.time_min = new_time
            moves += 1
            if not revisit:
                state.mark_satisfied(target, ac)
            continue

        if revisit:
            state.demote(target, ac)
        else:
            state.mark_violated(target, ac)
        state.warn(
            ac,
            f"Could not achieve {minutes}-minute separation between "
            f"{target.display_name} and {other.display_name}. {PHARMACIST_HINT}",
            [ac.target_canonical, ac.other_canonical],
        )
        logger.info(
            f"⚠️ Separation {ac.rule.rule_key} unresolved for {ac.target_canonical} / {ac.other_canonical}"
        )
    return moves
