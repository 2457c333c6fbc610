from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set
from core.models import AppliedConstraint, EnrichedItem, ScheduleWarning


@dataclass(frozen=True)
class DaySlots:
    """
    The seven anchor times of a day, in minutes from midnight. Computed once
    per run and never changed afterwards.
    """

    wake: int
    """Wake-up time."""
    breakfast: int
    """Breakfast anchor."""
    midmorning: int
    """Midpoint between breakfast and lunch."""
    lunch: int
    """Lunch anchor."""
    afternoon: int
    """Midpoint between lunch and dinner."""
    dinner: int
    """Dinner anchor."""
    bedtime: int
    """Bedtime; the last minute an item may be placed at."""


@dataclass
class PlacedItem:
    """The mutable working record of one item while the scheduler runs."""

    enriched: EnrichedItem
    time_min: int
    """Current placement in minutes from midnight."""
    with_food: bool
    notes: List[str] = field(default_factory=list)
    constraints_satisfied: List[str] = field(default_factory=list)
    """Rule keys resolved for this item, one entry per applied constraint."""
    constraints_violated: List[str] = field(default_factory=list)
    """Rule keys that could not be honoured, one entry per applied constraint."""

    @property
    def canonical_name(self) -> str:
        return self.enriched.canonical_name

    @property
    def display_name(self) -> str:
        return self.enriched.display_name


@dataclass
class ScheduleState:
    """
    A dataclass to hold all the state relevant to placing the items of one
    scheduling run.
    """

    # run inputs
    enriched: List[EnrichedItem]
    """Items joined to their profiles, in input order."""
    constraints: List[AppliedConstraint]
    """Every applied constraint of the run, in builder order."""
    slots: DaySlots
    """The anchors of the day."""

    # collections to fill
    placed: List[PlacedItem] = field(default_factory=list)
    """Items in the order they were placed."""
    placed_by_name: Dict[str, PlacedItem] = field(default_factory=dict)
    """Lookup of placed items by canonical name."""
    warnings: List[ScheduleWarning] = field(default_factory=list)
    """Warnings accumulated during the run; never retracted."""
    satisfied: Set[int] = field(default_factory=set)
    """Ids of applied constraints marked satisfied."""
    violated: Set[int] = field(default_factory=set)
    """Ids of applied constraints marked violated."""

    def constraints_for(self, canonical_name: str) -> List[AppliedConstraint]:
        return [c for c in self.constraints if c.target_canonical == canonical_name]

    def get_placed(self, canonical_name: Optional[str]) -> Optional[PlacedItem]:
        if canonical_name is None:
            return None
        return self.placed_by_name.get(canonical_name)

    def add_placed(self, item: PlacedItem):
        self.placed.append(item)
        # first placement wins when the same canonical name is listed twice
        self.placed_by_name.setdefault(item.canonical_name, item)

    # --- resolution bookkeeping ---
    def is_resolved(self, ac: AppliedConstraint) -> bool:
        return id(ac) in self.satisfied or id(ac) in self.violated

    def mark_satisfied(self, item: PlacedItem, ac: AppliedConstraint):
        self.satisfied.add(id(ac))
        item.constraints_satisfied.append(ac.rule.rule_key)

    def mark_violated(self, item: PlacedItem, ac: AppliedConstraint):
        self.violated.add(id(ac))
        item.constraints_violated.append(ac.rule.rule_key)

    def demote(self, item: PlacedItem, ac: AppliedConstraint):
        """Turn a previously satisfied constraint into a violated one."""
        if id(ac) in self.satisfied:
            self.satisfied.discard(id(ac))
            item.constraints_satisfied.remove(ac.rule.rule_key)
        self.mark_violated(item, ac)

    def warn(self, ac: AppliedConstraint, message: str, affected: Iterable[str]):
        self.warnings.append(
            ScheduleWarning(
                rule_key=ac.rule.rule_key,
                severity=ac.rule.severity,
                confidence=ac.rule.confidence,
                message=message,
                affected_items=tuple(affected),
            )
        )
