import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union
from pydantic import ValidationError
from config.paths import INTERACTION_RULES_PATH, ITEM_PROFILES_PATH
from core.models import InteractionRule, ItemProfile
from core.tags import ALL_TAGS
from exceptions.custom_errors import CatalogContentError, CatalogLoadError, InvalidRuleError
from schemas.catalog.profiles import ItemProfileSchema
from schemas.catalog.rules import InteractionRuleSchema
from utils.logger import get_logger

logger = get_logger(__name__)


def read_catalog(path: Union[str, Path]) -> Dict[str, Any]:
    """Read a bundled JSON catalog file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogLoadError(f"Error loading catalog {Path(path).name}: {e}")


def _parse_rule_list(
    payloads: Iterable[Dict[str, Any]], source: str
) -> Tuple[InteractionRule, ...]:
    rules = []
    for idx, payload in enumerate(payloads):
        try:
            rules.append(InteractionRuleSchema.model_validate(payload).to_domain())
        except ValidationError as e:
            key = payload.get("ruleKey", f"#{idx}") if isinstance(payload, dict) else f"#{idx}"
            raise CatalogContentError(f"Invalid rule {key} in {source}: {e}")
    return tuple(rules)


@lru_cache(maxsize=None)
def load_rule_catalog(
    path: Union[str, Path] = INTERACTION_RULES_PATH,
) -> Dict[str, Tuple[InteractionRule, ...]]:
    """
    Load the built-in interaction rules, split into "generic" (tag-based)
    and "specific" (name-based) sets.

    Loaded once per process; the returned rules are immutable.
    """
    raw = read_catalog(path)
    source = Path(path).name
    if "generic" not in raw or "specific" not in raw:
        raise CatalogContentError(f"{source} must define 'generic' and 'specific' rule lists.")
    return {
        "generic": _parse_rule_list(raw["generic"], source),
        "specific": _parse_rule_list(raw["specific"], source),
    }


@lru_cache(maxsize=None)
def load_item_profiles(
    path: Union[str, Path] = ITEM_PROFILES_PATH,
) -> Tuple[ItemProfile, ...]:
    """Load the built-in item profile catalog. Loaded once per process."""
    raw = read_catalog(path)
    source = Path(path).name
    if "profiles" not in raw:
        raise CatalogContentError(f"{source} must define a 'profiles' list.")

    profiles = []
    seen = set()
    for idx, payload in enumerate(raw["profiles"]):
        try:
            profile = ItemProfileSchema.model_validate(payload).to_domain()
        except ValidationError as e:
            raise CatalogContentError(f"Invalid profile #{idx} in {source}: {e}")
        if profile.canonical_name in seen:
            raise CatalogContentError(
                f"Duplicate canonical name {profile.canonical_name!r} in {source}."
            )
        seen.add(profile.canonical_name)
        profiles.append(profile)

    unknown = sorted(set().union(*(p.tags for p in profiles)) - ALL_TAGS)
    if unknown:
        logger.warning(f"⚠️ Unrecognised tags in {source}: {', '.join(unknown)}")
    return tuple(profiles)


def parse_rules(payloads: Optional[Iterable[Dict[str, Any]]]) -> List[InteractionRule]:
    """Parse caller-supplied rule payloads (camelCase, as stored by the rule store)."""
    rules = []
    for idx, payload in enumerate(payloads or []):
        try:
            rules.append(InteractionRuleSchema.model_validate(payload).to_domain())
        except ValidationError as e:
            key = payload.get("ruleKey", f"#{idx}") if isinstance(payload, dict) else f"#{idx}"
            raise InvalidRuleError(f"Invalid rule {key}: {e}")
    return rules


def parse_profiles(payloads: Optional[Iterable[Dict[str, Any]]]) -> List[ItemProfile]:
    """Parse caller-supplied profile payloads."""
    return [ItemProfileSchema.model_validate(p).to_domain() for p in payloads or []]
