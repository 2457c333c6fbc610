import statistics
from typing import Sequence
from core.models import AppliedConstraint, EnrichedItem
from core.state import PlacedItem
from utils.constants import CONFIDENCE_WEIGHTS
from utils.time_utils import clamp, round_half_up


def compute_confidence(
    enriched: Sequence[EnrichedItem],
    constraints: Sequence[AppliedConstraint],
    placed: Sequence[PlacedItem],
) -> int:
    """
    Blend profile coverage, mean rule confidence and the share of satisfied
    constraints into one 0-100 score.

    The score is a heuristic for comparing runs, not a calibrated probability.
    A run with no items scores 100.
    """
    if not enriched:
        return 100

    profile_coverage = sum(1 for e in enriched if e.profile is not None) / len(enriched)

    if constraints:
        avg_rule_confidence = statistics.mean(c.rule.confidence for c in constraints)
    else:
        avg_rule_confidence = 100

    violated = sum(len(p.constraints_violated) for p in placed)
    satisfaction_rate = 1 - violated / max(1, len(constraints))

    raw = (
        CONFIDENCE_WEIGHTS["profile_coverage"] * profile_coverage
        + CONFIDENCE_WEIGHTS["rule_confidence"] * (avg_rule_confidence / 100)
        + CONFIDENCE_WEIGHTS["satisfaction_rate"] * satisfaction_rate
    )
    return clamp(round_half_up(raw * 100), 0, 100)
