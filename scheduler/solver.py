from dataclasses import dataclass
from typing import List, Sequence
from core.constraint_manager import ConstraintManager
from core.models import (
    AppliedConstraint,
    AvoidAfterTime,
    EmptyStomachPreferred,
    EnrichedItem,
    MinSeparationMinutes,
    ScheduleWarning,
    Warn,
    WithFoodRequired,
)
from core.state import DaySlots, PlacedItem, ScheduleState
from core.tags import EMPTY_STOMACH_PREFERRED
from scheduler.rules import (
    avoid_after_time_rule,
    empty_stomach_note,
    empty_stomach_rule,
    min_separation_rule,
    separation_pass,
    warn_rule,
    with_food_rule,
)
from utils.constants import MAX_SEPARATION_PASSES, SEPARATION_PASSES
from utils.logger import get_logger
from utils.time_utils import clamp, time_to_min

logger = get_logger(__name__)


@dataclass
class PlacementResult:
    state: ScheduleState
    """The finished run state, kept for scoring."""
    placed: List[PlacedItem]
    """Items in placement order."""
    warnings: List[ScheduleWarning]
    separation_passes: int
    """Number of post-placement separation passes that ran."""


def prefers_empty_stomach(item: EnrichedItem) -> bool:
    """From the profile flag or the EMPTY_STOMACH_PREFERRED tag."""
    timing = item.timing
    return bool(timing and timing.empty_stomach_preferred) or EMPTY_STOMACH_PREFERRED in item.tags


def placement_order(enriched: Sequence[EnrichedItem]) -> List[EnrichedItem]:
    """Non-flexible items before flexible ones, empty-stomach items first in each group."""
    return sorted(enriched, key=lambda e: (e.is_flexible, not prefers_empty_stomach(e)))


def initial_time(item: EnrichedItem, slots: DaySlots) -> int:
    """Starting minute for an item before any constraint is applied."""
    timing = item.timing
    if prefers_empty_stomach(item):
        return slots.wake
    if timing is None:
        return slots.breakfast
    if timing.preferred_windows:
        return time_to_min(timing.preferred_windows[0].start)
    # with food or no preference: breakfast
    return slots.breakfast


def build_constraint_manager(state: ScheduleState) -> ConstraintManager:
    cm = ConstraintManager(state)
    cm.add_handler(AvoidAfterTime, avoid_after_time_rule)
    cm.add_handler(EmptyStomachPreferred, empty_stomach_rule)
    cm.add_handler(WithFoodRequired, with_food_rule)
    cm.add_handler(Warn, warn_rule)
    cm.add_handler(MinSeparationMinutes, min_separation_rule)
    cm.check_exhaustive()
    return cm


def place_item(cm: ConstraintManager, item: EnrichedItem) -> PlacedItem:
    """
    Place one item: start from its initial time, apply its constraints in
    order, then the profile's own avoid-after limit and the day bounds.
    """
    state = cm.state
    slots = state.slots
    timing = item.timing
    placed = PlacedItem(
        enriched=item,
        time_min=initial_time(item, slots),
        with_food=bool(timing and timing.with_food),
    )

    own = state.constraints_for(item.canonical_name)
    cm.apply_all(placed, own)

    # profile limit only when no rule already governs it
    if (
        timing is not None
        and timing.avoid_after_time
        and not any(isinstance(ac.constraint, AvoidAfterTime) for ac in own)
    ):
        placed.time_min = min(placed.time_min, time_to_min(timing.avoid_after_time))

    placed.time_min = clamp(placed.time_min, slots.wake, slots.bedtime)

    # profile buffer gives the note when no rule already did
    if (
        timing is not None
        and timing.buffer_before_food_min is not None
        and prefers_empty_stomach(item)
        and placed.time_min == slots.wake
        and not any(isinstance(ac.constraint, EmptyStomachPreferred) for ac in own)
    ):
        placed.notes.append(empty_stomach_note(timing.buffer_before_food_min))

    state.add_placed(placed)
    return placed


def schedule_items(
    enriched: Sequence[EnrichedItem],
    constraints: Sequence[AppliedConstraint],
    slots: DaySlots,
    max_separation_passes: int = SEPARATION_PASSES,
) -> PlacementResult:
    """
    Place every item, then settle separations left open during placement.

    Phase 1 places items one by one in placement order. Phase 2 runs the
    separation pass once; with ``max_separation_passes`` above 1 it revisits
    separations until nothing moves or the cap is reached.

    Never raises for constraints that cannot be met; they end up as
    violations and warnings.

    Args:
        enriched (Sequence[EnrichedItem]): Items of the run.
        constraints (Sequence[AppliedConstraint]): Output of the constraint builder.
        slots (DaySlots): Anchors of the day.
        max_separation_passes (int): Upper bound on separation passes, capped by
            MAX_SEPARATION_PASSES.

    Returns:
        PlacementResult: Placements, warnings and the number of passes run.
    """
    passes = clamp(max_separation_passes, 1, MAX_SEPARATION_PASSES)
    state = ScheduleState(enriched=list(enriched), constraints=list(constraints), slots=slots)
    cm = build_constraint_manager(state)

    logger.info("🚀 Phase 1: placing items...")
    for item in placement_order(state.enriched):
        place_item(cm, item)

    logger.info("🚀 Phase 2: settling pending separations...")
    moves = separation_pass(state)
    passes_run = 1
    while moves and passes_run < passes:
        moves = separation_pass(state, revisit=True)
        passes_run += 1
    if moves and passes_run == passes and passes > 1:
        logger.info(f"⚠️ Separations still moving after {passes_run} passes; stopping.")

    logger.info(
        f"✅ Placed {len(state.placed)} item(s) with {len(state.warnings)} warning(s) "
        f"after {passes_run} separation pass(es)."
    )
    return PlacementResult(
        state=state,
        placed=state.placed,
        warnings=state.warnings,
        separation_passes=passes_run,
    )
