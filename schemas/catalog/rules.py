from pydantic import BaseModel, ConfigDict, Field
from typing import Annotated, List, Literal, Union
from core.models import (
    CONSTRAINT_TYPE_NAMES,
    AvoidAfterTime,
    EmptyStomachPreferred,
    InteractionRule,
    MinSeparationMinutes,
    OtherSelector,
    Severity,
    Warn,
    WithFoodRequired,
)


# Constraint payloads, discriminated by "type"
class OtherSelectorSchema(BaseModel):
    type: Literal["tag", "name"]
    value: str


class MinSeparationSchema(BaseModel):
    type: Literal["MIN_SEPARATION_MINUTES"]
    minutes: int = Field(ge=0)
    other: OtherSelectorSchema

    def to_domain(self) -> MinSeparationMinutes:
        return MinSeparationMinutes(
            minutes=self.minutes,
            other=OtherSelector(type=self.other.type, value=self.other.value),
        )


class WithFoodSchema(BaseModel):
    type: Literal["WITH_FOOD_REQUIRED"]

    def to_domain(self) -> WithFoodRequired:
        return WithFoodRequired()


class EmptyStomachSchema(BaseModel):
    type: Literal["EMPTY_STOMACH_PREFERRED"]
    bufferBeforeFoodMin: int = Field(ge=0)

    def to_domain(self) -> EmptyStomachPreferred:
        return EmptyStomachPreferred(buffer_before_food_min=self.bufferBeforeFoodMin)


class AvoidAfterSchema(BaseModel):
    type: Literal["AVOID_AFTER_TIME"]
    time: str = Field(pattern=r"^\d{1,2}:\d{2}$")

    def to_domain(self) -> AvoidAfterTime:
        return AvoidAfterTime(time=self.time)


class WarnSchema(BaseModel):
    type: Literal["WARN"]
    message: str

    def to_domain(self) -> Warn:
        return Warn(message=self.message)


ConstraintSchema = Annotated[
    Union[
        MinSeparationSchema,
        WithFoodSchema,
        EmptyStomachSchema,
        AvoidAfterSchema,
        WarnSchema,
    ],
    Field(discriminator="type"),
]


class InteractionRuleSchema(BaseModel):
    """Wire format of one interaction rule (bundled catalog or caller-supplied)."""

    model_config = ConfigDict(extra="ignore")

    ruleKey: str = Field(min_length=1)
    appliesTo: List[str] = Field(default_factory=list)
    appliesIfTags: List[str] = Field(default_factory=list)
    conflictsWithNames: List[str] = Field(default_factory=list)
    conflictsWithTags: List[str] = Field(default_factory=list)
    constraint: ConstraintSchema
    severity: Literal["hard", "soft"] = "soft"
    confidence: int = Field(default=100, ge=0, le=100)
    rationale: str = ""
    references: List[str] = Field(default_factory=list)
    isActive: bool = True
    version: int = 1

    def to_domain(self) -> InteractionRule:
        return InteractionRule(
            rule_key=self.ruleKey,
            constraint=self.constraint.to_domain(),
            applies_to=tuple(self.appliesTo),
            applies_if_tags=tuple(self.appliesIfTags),
            conflicts_with_names=tuple(self.conflictsWithNames),
            conflicts_with_tags=tuple(self.conflictsWithTags),
            severity=Severity(self.severity),
            confidence=self.confidence,
            rationale=self.rationale,
            references=tuple(self.references),
            is_active=self.isActive,
            version=self.version,
        )


def rule_to_dict(rule: InteractionRule) -> dict:
    """camelCase view of a domain rule, the inverse of ``InteractionRuleSchema``."""
    c = rule.constraint
    if type(c) not in CONSTRAINT_TYPE_NAMES:
        raise TypeError(f"Unknown constraint type: {type(c).__name__}")

    constraint = {"type": CONSTRAINT_TYPE_NAMES[type(c)]}
    if isinstance(c, MinSeparationMinutes):
        constraint["minutes"] = c.minutes
        constraint["other"] = {"type": c.other.type, "value": c.other.value}
    elif isinstance(c, EmptyStomachPreferred):
        constraint["bufferBeforeFoodMin"] = c.buffer_before_food_min
    elif isinstance(c, AvoidAfterTime):
        constraint["time"] = c.time
    elif isinstance(c, Warn):
        constraint["message"] = c.message

    return {
        "ruleKey": rule.rule_key,
        "appliesTo": list(rule.applies_to),
        "appliesIfTags": list(rule.applies_if_tags),
        "conflictsWithNames": list(rule.conflicts_with_names),
        "conflictsWithTags": list(rule.conflicts_with_tags),
        "constraint": constraint,
        "severity": rule.severity.value,
        "confidence": rule.confidence,
        "rationale": rule.rationale,
        "references": list(rule.references),
        "isActive": rule.is_active,
        "version": rule.version,
    }
