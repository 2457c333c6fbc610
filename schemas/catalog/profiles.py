from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Literal, Optional
from core.models import ItemKind, ItemProfile, TimeWindow, TimingProfile
from exceptions.custom_errors import InvalidTimeFormatError
from utils.time_utils import time_to_min

CLOCK = r"^\d{1,2}:\d{2}$"


def check_clock(value: Optional[str]) -> Optional[str]:
    """Reject clock times outside 00:00-23:59 as a validation error."""
    if value is None:
        return value
    try:
        time_to_min(value)
    except InvalidTimeFormatError as e:
        raise ValueError(str(e))
    return value


class TimeWindowSchema(BaseModel):
    start: str = Field(pattern=CLOCK)
    end: str = Field(pattern=CLOCK)

    @field_validator("start", "end")
    @classmethod
    def in_day(cls, v: str) -> str:
        return check_clock(v)


class TimingProfileSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    preferredWindows: List[TimeWindowSchema] = Field(default_factory=list)
    withFood: bool = False
    emptyStomachPreferred: bool = False
    bufferBeforeFoodMin: Optional[int] = Field(default=None, ge=0)
    avoidAfterTime: Optional[str] = Field(default=None, pattern=CLOCK)
    stimulant: bool = False
    flexible: bool = False

    @field_validator("avoidAfterTime")
    @classmethod
    def avoid_after_in_day(cls, v: Optional[str]) -> Optional[str]:
        return check_clock(v)

    def to_domain(self) -> TimingProfile:
        return TimingProfile(
            preferred_windows=tuple(
                TimeWindow(start=w.start, end=w.end) for w in self.preferredWindows
            ),
            with_food=self.withFood,
            empty_stomach_preferred=self.emptyStomachPreferred,
            buffer_before_food_min=self.bufferBeforeFoodMin,
            avoid_after_time=self.avoidAfterTime,
            stimulant=self.stimulant,
            flexible=self.flexible,
        )


class ItemProfileSchema(BaseModel):
    """Wire format of one item profile."""

    model_config = ConfigDict(extra="ignore")

    canonicalName: str = Field(min_length=1)
    displayName: str
    kind: Literal["med", "supplement", "food"] = "supplement"
    tags: List[str] = Field(default_factory=list)
    timing: TimingProfileSchema = Field(default_factory=TimingProfileSchema)

    def to_domain(self) -> ItemProfile:
        return ItemProfile(
            canonical_name=self.canonicalName,
            display_name=self.displayName,
            kind=ItemKind(self.kind),
            tags=frozenset(self.tags),
            timing=self.timing.to_domain(),
        )


def profile_to_dict(profile: ItemProfile) -> dict:
    """camelCase view of a domain profile, the inverse of ``ItemProfileSchema``."""
    t = profile.timing
    timing = {
        "preferredWindows": [
            {"start": w.start, "end": w.end} for w in t.preferred_windows
        ],
        "withFood": t.with_food,
        "emptyStomachPreferred": t.empty_stomach_preferred,
        "bufferBeforeFoodMin": t.buffer_before_food_min,
        "avoidAfterTime": t.avoid_after_time,
        "stimulant": t.stimulant,
        "flexible": t.flexible,
    }
    return {
        "canonicalName": profile.canonical_name,
        "displayName": profile.display_name,
        "kind": profile.kind.value,
        "tags": sorted(profile.tags),
        "timing": timing,
    }
