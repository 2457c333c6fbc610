import json
import pytest
from pydantic import ValidationError
from core.models import ItemKind, MinSeparationMinutes, Severity, Warn
from exceptions.custom_errors import CatalogContentError, CatalogLoadError, InvalidRuleError
from schemas.catalog.profiles import profile_to_dict
from schemas.catalog.rules import rule_to_dict
from utils.loader import (
    load_item_profiles,
    load_rule_catalog,
    parse_profiles,
    parse_rules,
    read_catalog,
)


def write_json(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_builtin_rule_catalog_loads():
    catalog = load_rule_catalog()
    keys = [r.rule_key for r in catalog["generic"] + catalog["specific"]]
    assert "iron-vs-divalent-cation" in keys
    assert "thyroid-empty-stomach" in keys
    assert all(r.is_active for r in catalog["generic"])
    iron = next(r for r in catalog["generic"] if r.rule_key == "iron-vs-divalent-cation")
    assert isinstance(iron.constraint, MinSeparationMinutes)
    assert iron.constraint.minutes == 120
    assert iron.severity == Severity.SOFT


def test_builtin_profiles_load_with_unique_names():
    profiles = load_item_profiles()
    names = [p.canonical_name for p in profiles]
    assert len(names) == len(set(names))
    levo = next(p for p in profiles if p.canonical_name == "levothyroxine")
    assert levo.kind == ItemKind.MED
    assert levo.timing.empty_stomach_preferred
    assert levo.timing.buffer_before_food_min == 60


def test_catalogs_are_loaded_once():
    assert load_rule_catalog() is load_rule_catalog()
    assert load_item_profiles() is load_item_profiles()


def test_missing_catalog_file(tmp_path):
    with pytest.raises(CatalogLoadError):
        read_catalog(tmp_path / "absent.json")


def test_unparseable_catalog_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        read_catalog(path)


def test_rule_catalog_needs_both_lists(tmp_path):
    path = write_json(tmp_path / "rules.json", {"generic": []})
    with pytest.raises(CatalogContentError):
        load_rule_catalog(path)


def test_rule_catalog_rejects_unknown_constraint(tmp_path):
    bad = {"ruleKey": "bad", "appliesTo": ["a"], "constraint": {"type": "TELEPORT"}}
    path = write_json(tmp_path / "rules.json", {"generic": [bad], "specific": []})
    with pytest.raises(CatalogContentError):
        load_rule_catalog(path)


def test_profile_catalog_rejects_duplicates(tmp_path):
    profile = {"canonicalName": "a", "displayName": "A", "kind": "supplement"}
    path = write_json(tmp_path / "profiles.json", {"profiles": [profile, profile]})
    with pytest.raises(CatalogContentError):
        load_item_profiles(path)


def test_parse_rules_from_payloads():
    rules = parse_rules(
        [
            {
                "ruleKey": "custom",
                "appliesTo": ["a"],
                "constraint": {"type": "WARN", "message": "hello"},
                "severity": "hard",
                "confidence": 90,
                "unknownField": "ignored",
            }
        ]
    )
    assert rules[0].constraint == Warn(message="hello")
    assert rules[0].severity == Severity.HARD
    assert rules[0].applies_to == ("a",)
    assert parse_rules(None) == []


def test_parse_rules_rejects_bad_payload():
    with pytest.raises(InvalidRuleError):
        parse_rules([{"ruleKey": "bad", "constraint": {"type": "WARN"}, "confidence": 101}])


def test_catalog_views_round_trip():
    rule = load_rule_catalog()["generic"][0]
    assert parse_rules([rule_to_dict(rule)])[0] == rule
    profile = load_item_profiles()[0]
    assert parse_profiles([profile_to_dict(profile)])[0] == profile


@pytest.mark.parametrize(
    "timing",
    [
        {"preferredWindows": [{"start": "25:00", "end": "26:00"}]},
        {"preferredWindows": [{"start": "08:00", "end": "09:75"}]},
        {"avoidAfterTime": "24:00"},
    ],
)
def test_parse_profiles_rejects_times_outside_the_day(timing):
    with pytest.raises(ValidationError, match="between 00:00 and 23:59"):
        parse_profiles([{"canonicalName": "x", "displayName": "X", "timing": timing}])
