"""
scheduler.rules
---------------

Built-in interaction rules and the handlers that apply each constraint type:

- `timing`: Rules that shape one item's own time (avoid-after, empty stomach, with food).
- `separation`: Minimum separation between two items, plus the post-placement pass.
- `advisory`: Informational warnings that never move an item.

`GENERIC_RULES` (tag based) and `SPECIFIC_RULES` (name based) are loaded once
from config/interaction_rules.json.
"""
from utils.loader import load_rule_catalog
from .timing import *
from .separation import *
from .advisory import *

_catalog = load_rule_catalog()
GENERIC_RULES = _catalog["generic"]
SPECIFIC_RULES = _catalog["specific"]
BUILTIN_RULES = GENERIC_RULES + SPECIFIC_RULES
