import pytest
from core.models import (
    InteractionRule,
    ItemKind,
    ItemProfile,
    ScheduleInputItem,
    Severity,
    TimeWindow,
    TimingProfile,
)


def make_item(name: str, display: str = None, dose: str = None) -> ScheduleInputItem:
    return ScheduleInputItem(canonical_name=name, display_name=display or name.title(), dose=dose)


def make_profile(
    name: str,
    kind: ItemKind = ItemKind.SUPPLEMENT,
    tags=(),
    window: str = None,
    **timing,
) -> ItemProfile:
    windows = ()
    if window:
        start, end = window.split("-")
        windows = (TimeWindow(start=start, end=end),)
    return ItemProfile(
        canonical_name=name,
        display_name=name.title(),
        kind=kind,
        tags=frozenset(tags),
        timing=TimingProfile(preferred_windows=windows, **timing),
    )


def make_rule(rule_key: str, constraint, severity: Severity = Severity.SOFT, confidence: int = 80, **kwargs) -> InteractionRule:
    kwargs = {k: tuple(v) if isinstance(v, list) else v for k, v in kwargs.items()}
    return InteractionRule(
        rule_key=rule_key,
        constraint=constraint,
        severity=severity,
        confidence=confidence,
        **kwargs,
    )


@pytest.fixture
def no_builtin_rules(monkeypatch):
    """Run the builder against caller rules only."""
    import scheduler.setup as setup

    original = setup.merge_rules

    monkeypatch.setattr(
        "scheduler.builder.merge_rules",
        lambda additional_rules=(): original(additional_rules, builtin_rules=()),
    )
