from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, List, Literal, Optional, Tuple, Union


class ItemKind(str, Enum):
    MED = "med"
    SUPPLEMENT = "supplement"
    FOOD = "food"


class Severity(str, Enum):
    HARD = "hard"
    SOFT = "soft"


# == Timing profiles ==
@dataclass(frozen=True)
class TimeWindow:
    """A half-open ``[start, end)`` clock-time window, both "HH:MM"."""

    start: str
    end: str


@dataclass(frozen=True)
class TimingProfile:
    preferred_windows: Tuple[TimeWindow, ...] = ()
    """Preferred windows in priority order; only the first one seeds placement."""
    with_food: bool = False
    """Item is normally taken together with a meal."""
    empty_stomach_preferred: bool = False
    """Item should be taken at wake, clear of food."""
    buffer_before_food_min: Optional[int] = None
    """Minutes to wait after the item before eating."""
    avoid_after_time: Optional[str] = None
    """Latest clock time the item should be taken at, if any."""
    stimulant: bool = False
    """Item has a stimulant effect."""
    flexible: bool = False
    """The item's own time may be moved to satisfy another item's separation."""


@dataclass(frozen=True)
class ItemProfile:
    canonical_name: str
    display_name: str
    kind: ItemKind
    tags: FrozenSet[str] = frozenset()
    timing: TimingProfile = field(default_factory=TimingProfile)


# == Constraint variants ==
@dataclass(frozen=True)
class OtherSelector:
    """Describes which other items a separation rule is written against."""

    type: Literal["tag", "name"]
    value: str


@dataclass(frozen=True)
class MinSeparationMinutes:
    minutes: int
    other: OtherSelector


@dataclass(frozen=True)
class WithFoodRequired:
    pass


@dataclass(frozen=True)
class EmptyStomachPreferred:
    buffer_before_food_min: int


@dataclass(frozen=True)
class AvoidAfterTime:
    time: str


@dataclass(frozen=True)
class Warn:
    message: str


Constraint = Union[
    MinSeparationMinutes,
    WithFoodRequired,
    EmptyStomachPreferred,
    AvoidAfterTime,
    Warn,
]

CONSTRAINT_TYPES: Tuple[type, ...] = (
    MinSeparationMinutes,
    WithFoodRequired,
    EmptyStomachPreferred,
    AvoidAfterTime,
    Warn,
)

CONSTRAINT_TYPE_NAMES = {
    MinSeparationMinutes: "MIN_SEPARATION_MINUTES",
    WithFoodRequired: "WITH_FOOD_REQUIRED",
    EmptyStomachPreferred: "EMPTY_STOMACH_PREFERRED",
    AvoidAfterTime: "AVOID_AFTER_TIME",
    Warn: "WARN",
}


# == Rules ==
@dataclass(frozen=True)
class InteractionRule:
    """
    A named, versioned timing policy.

    The rule applies to an item listed in ``applies_to`` or carrying every tag in
    ``applies_if_tags``. When either conflict list is non-empty the rule is
    matched against each other item of the run instead of the item alone.
    """

    rule_key: str
    constraint: Constraint
    applies_to: Tuple[str, ...] = ()
    applies_if_tags: Tuple[str, ...] = ()
    conflicts_with_names: Tuple[str, ...] = ()
    conflicts_with_tags: Tuple[str, ...] = ()
    severity: Severity = Severity.SOFT
    confidence: int = 100
    rationale: str = ""
    references: Tuple[str, ...] = ()
    is_active: bool = True
    version: int = 1

    @property
    def has_conflict_predicate(self) -> bool:
        return bool(self.conflicts_with_names or self.conflicts_with_tags)


# == Run inputs ==
@dataclass(frozen=True)
class ScheduleInputItem:
    canonical_name: str
    display_name: str
    dose: Optional[str] = None
    frequency: str = "daily"


@dataclass(frozen=True)
class MealTimes:
    breakfast: Optional[str] = None
    lunch: Optional[str] = None
    dinner: Optional[str] = None


@dataclass(frozen=True)
class EnrichedItem:
    input: ScheduleInputItem
    profile: Optional[ItemProfile]
    tags: FrozenSet[str] = frozenset()

    @property
    def canonical_name(self) -> str:
        return self.input.canonical_name

    @property
    def display_name(self) -> str:
        return self.input.display_name

    @property
    def timing(self) -> Optional[TimingProfile]:
        return self.profile.timing if self.profile is not None else None

    @property
    def is_flexible(self) -> bool:
        return bool(self.timing and self.timing.flexible)


@dataclass(frozen=True)
class AppliedConstraint:
    """One rule matched against one target item, or one (target, other) pair."""

    rule: InteractionRule
    constraint: Constraint
    target_canonical: str
    other_canonical: Optional[str] = None


# == Run outputs ==
@dataclass(frozen=True)
class ScheduledItem:
    canonical_name: str
    display_name: str
    scheduled_time: str
    slot_label: str
    with_food: bool
    dose: Optional[str] = None
    notes: Tuple[str, ...] = ()
    constraints_satisfied: Tuple[str, ...] = ()
    constraints_violated: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ScheduleWarning:
    rule_key: str
    severity: Severity
    confidence: int
    message: str
    affected_items: Tuple[str, ...]


@dataclass(frozen=True)
class ScheduleOutput:
    date: str
    items: Tuple[ScheduledItem, ...]
    warnings: Tuple[ScheduleWarning, ...]
    overall_confidence: int
    disclaimer: str

    def to_dict(self) -> dict:
        """camelCase, JSON-ready view of the schedule."""
        return {
            "date": self.date,
            "items": [
                {
                    "canonicalName": i.canonical_name,
                    "displayName": i.display_name,
                    "dose": i.dose,
                    "scheduledTime": i.scheduled_time,
                    "slotLabel": i.slot_label,
                    "withFood": i.with_food,
                    "notes": list(i.notes),
                    "constraintsSatisfied": list(i.constraints_satisfied),
                    "constraintsViolated": list(i.constraints_violated),
                }
                for i in self.items
            ],
            "warnings": [
                {
                    "ruleKey": w.rule_key,
                    "severity": w.severity.value,
                    "confidence": w.confidence,
                    "message": w.message,
                    "affectedItems": list(w.affected_items),
                }
                for w in self.warnings
            ],
            "overallConfidence": self.overall_confidence,
            "disclaimer": self.disclaimer,
        }
