from typing import Iterable, List, Sequence
from core.models import AppliedConstraint, EnrichedItem, InteractionRule
from utils.logger import get_logger

logger = get_logger(__name__)


def rule_applies(rule: InteractionRule, item: EnrichedItem) -> bool:
    """
    A rule applies by explicit canonical name or by carrying all of its
    required tags. An empty list never matches, so a rule with both lists
    empty applies to nothing.
    """
    by_name = bool(rule.applies_to) and item.canonical_name in rule.applies_to
    by_tag = bool(rule.applies_if_tags) and all(t in item.tags for t in rule.applies_if_tags)
    return by_name or by_tag


def conflicts_with(rule: InteractionRule, other: EnrichedItem) -> bool:
    by_name = bool(rule.conflicts_with_names) and other.canonical_name in rule.conflicts_with_names
    by_tag = bool(rule.conflicts_with_tags) and any(t in other.tags for t in rule.conflicts_with_tags)
    return by_name or by_tag


def build_constraints(
    enriched: Sequence[EnrichedItem], rules: Iterable[InteractionRule]
) -> List[AppliedConstraint]:
    """
    Match every rule against every item of the run.

    A rule without a conflict predicate yields one constraint per matching
    item. Otherwise it yields one constraint per (item, other item) pair where
    the other item conflicts, never pairing an item with itself.

    Args:
        enriched (Sequence[EnrichedItem]): Items of the run with their profiles.
        rules (Iterable[InteractionRule]): Merged, active rules in priority order.

    Returns:
        List[AppliedConstraint]: Constraints in rule order, then item order.
    """
    applied = []
    for rule in rules:
        for item in enriched:
            if not rule_applies(rule, item):
                continue

            if not rule.has_conflict_predicate:
                applied.append(
                    AppliedConstraint(
                        rule=rule,
                        constraint=rule.constraint,
                        target_canonical=item.canonical_name,
                    )
                )
                continue

            for other in enriched:
                if other is item:
                    continue
                if conflicts_with(rule, other):
                    applied.append(
                        AppliedConstraint(
                            rule=rule,
                            constraint=rule.constraint,
                            target_canonical=item.canonical_name,
                            other_canonical=other.canonical_name,
                        )
                    )

    logger.info(f"Built {len(applied)} applied constraint(s) for {len(enriched)} item(s).")
    return applied
