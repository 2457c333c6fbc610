from typing import Iterable, List, Optional, Sequence
from core.models import (
    EnrichedItem,
    InteractionRule,
    ItemKind,
    ItemProfile,
    ScheduleInputItem,
)
from core.tags import ANY_MED
from scheduler.rules import BUILTIN_RULES
from utils.logger import get_logger
from utils.validate import find_duplicate_rule_keys

logger = get_logger(__name__)


def derive_tags(profile: Optional[ItemProfile]) -> frozenset:
    """Profile tags plus the ANY_MED pseudo-tag for medications."""
    if profile is None:
        return frozenset()
    if profile.kind == ItemKind.MED:
        return profile.tags | {ANY_MED}
    return profile.tags


def attach_profiles(
    items: Sequence[ScheduleInputItem], profiles: Iterable[ItemProfile]
) -> List[EnrichedItem]:
    """
    Join each input item to its profile by canonical name.

    Items without a profile are kept with ``profile=None`` and no tags; they
    are scheduled with no timing preference rather than rejected.
    """
    profile_map = {}
    for p in profiles:
        # first profile wins when a canonical name is supplied twice
        profile_map.setdefault(p.canonical_name, p)

    enriched = []
    for item in items:
        profile = profile_map.get(item.canonical_name)
        enriched.append(
            EnrichedItem(input=item, profile=profile, tags=derive_tags(profile))
        )

    unmatched = [e.canonical_name for e in enriched if e.profile is None]
    if unmatched:
        logger.info(f"No profile for {len(unmatched)} item(s): {', '.join(unmatched)}")
    return enriched


def merge_rules(
    additional_rules: Iterable[InteractionRule] = (),
    builtin_rules: Sequence[InteractionRule] = BUILTIN_RULES,
) -> List[InteractionRule]:
    """
    Union the built-in rules with caller-supplied ones and keep the active ones.

    Built-ins come first, then the caller's rules in the order given. Rules
    sharing a key are all kept.
    """
    merged = list(builtin_rules) + list(additional_rules)

    dupes = find_duplicate_rule_keys(merged)
    if dupes:
        logger.warning(f"⚠️ Duplicate rule keys (all applied): {', '.join(dupes)}")

    active = [r for r in merged if r.is_active]
    dropped = len(merged) - len(active)
    if dropped:
        logger.info(f"Skipping {dropped} inactive rule(s).")
    return active
