"""
Category labels used by the interaction rules and item profiles.

Rules written against a tag apply to every current and future profile that
carries it, so prefer a tag over a list of canonical names.
"""

THYROID_HORMONE = "THYROID_HORMONE"
BISPHOSPHONATE = "BISPHOSPHONATE"
IRON = "IRON"
DIVALENT_CATION = "DIVALENT_CATION"
TETRACYCLINE = "TETRACYCLINE"
FLUOROQUINOLONE = "FLUOROQUINOLONE"
INTEGRASE_INHIBITOR = "INTEGRASE_INHIBITOR"
BINDING_AGENT = "BINDING_AGENT"
ACID_REDUCER = "ACID_REDUCER"
WITH_FOOD_RECOMMENDED = "WITH_FOOD_RECOMMENDED"
STIMULANT = "STIMULANT"
CAFFEINE = "CAFFEINE"
NARROW_THERAPEUTIC_WINDOW = "NARROW_TW"
EMPTY_STOMACH_PREFERRED = "EMPTY_STOMACH_PREFERRED"

# Pseudo-tag matched by every item of kind "med"
ANY_MED = "ANY_MED"

ALL_TAGS = frozenset(
    {
        THYROID_HORMONE,
        BISPHOSPHONATE,
        IRON,
        DIVALENT_CATION,
        TETRACYCLINE,
        FLUOROQUINOLONE,
        INTEGRASE_INHIBITOR,
        BINDING_AGENT,
        ACID_REDUCER,
        WITH_FOOD_RECOMMENDED,
        STIMULANT,
        CAFFEINE,
        NARROW_THERAPEUTIC_WINDOW,
        EMPTY_STOMACH_PREFERRED,
        ANY_MED,
    }
)
