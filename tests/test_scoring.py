from conftest import make_item, make_profile, make_rule
from core.models import AppliedConstraint, Warn
from core.state import PlacedItem
from scheduler.scoring import compute_confidence
from scheduler.setup import attach_profiles


def constraint(confidence):
    rule = make_rule(f"r{confidence}", Warn("x"), applies_to=["a"], confidence=confidence)
    return AppliedConstraint(rule=rule, constraint=rule.constraint, target_canonical="a")


def test_no_items_scores_100():
    assert compute_confidence([], [], []) == 100


def test_full_coverage_no_constraints_scores_100():
    enriched = attach_profiles([make_item("a")], [make_profile("a")])
    assert compute_confidence(enriched, [], []) == 100


def test_blend_of_coverage_confidence_and_satisfaction():
    enriched = attach_profiles([make_item("a"), make_item("b")], [make_profile("a")])
    constraints = [constraint(80), constraint(60)]
    placed = [PlacedItem(enriched=enriched[0], time_min=420, with_food=False, constraints_violated=["r60"])]

    # 0.3 * 0.5 + 0.4 * 0.7 + 0.3 * 0.5 = 0.58
    assert compute_confidence(enriched, constraints, placed) == 58


def test_score_stays_in_bounds_with_more_violations_than_constraints():
    enriched = attach_profiles([make_item("a")], [])
    placed = [PlacedItem(enriched=enriched[0], time_min=420, with_food=False, constraints_violated=["x"] * 5)]
    score = compute_confidence(enriched, [constraint(0)], placed)
    assert 0 <= score <= 100
    assert score == 0
