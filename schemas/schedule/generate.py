from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Any, Dict, List, Optional
from core.models import MealTimes, ScheduleInputItem
from schemas.catalog.profiles import ItemProfileSchema
from utils.constants import DEFAULT_FREQUENCY, MAX_SEPARATION_PASSES, SEPARATION_PASSES


# Define data models
class ScheduleItem(BaseModel):
    """One item to schedule. snake_case keys are accepted as well as camelCase."""

    model_config = ConfigDict(extra="allow")

    canonicalName: str = Field(
        min_length=1, validation_alias=AliasChoices("canonicalName", "canonical_name")
    )
    displayName: str = Field(
        default="", validation_alias=AliasChoices("displayName", "display_name")
    )
    dose: Optional[str] = None
    frequency: str = DEFAULT_FREQUENCY

    def to_domain(self) -> ScheduleInputItem:
        return ScheduleInputItem(
            canonical_name=self.canonicalName,
            display_name=self.displayName or self.canonicalName,
            dose=self.dose,
            frequency=self.frequency or DEFAULT_FREQUENCY,
        )


class Meals(BaseModel):
    breakfast: Optional[str] = None
    lunch: Optional[str] = None
    dinner: Optional[str] = None

    def to_domain(self) -> MealTimes:
        return MealTimes(breakfast=self.breakfast, lunch=self.lunch, dinner=self.dinner)


class ScheduleRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    date: Optional[str] = None
    items: List[ScheduleItem] = Field(default_factory=list)
    meals: Optional[Meals] = None
    wakeTime: Optional[str] = None
    profiles: Optional[List[ItemProfileSchema]] = None
    # raw payloads so malformed rules surface as InvalidRuleError
    additionalRules: List[Dict[str, Any]] = Field(default_factory=list)
    maxSeparationPasses: int = Field(
        default=SEPARATION_PASSES, ge=1, le=MAX_SEPARATION_PASSES
    )
