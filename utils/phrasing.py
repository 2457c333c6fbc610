from typing import Dict, Sequence
from core.models import ScheduledItem, Severity
from utils.constants import CONFIDENCE_BANDS, STRONG_LANGUAGE_MIN_CONFIDENCE

"""
Presentation copy for schedules. Wording stays suggestive; only high-confidence
hard rules get directive language.
"""

CONFIDENCE_PHRASES = {
    "high": {
        "label": "Well-supported",
        "sentenceStarter": "This timing is generally well-supported.",
    },
    "moderate": {
        "label": "Commonly recommended",
        "sentenceStarter": "Many people follow this timing approach.",
    },
    "low": {
        "label": "Informational",
        "sentenceStarter": "Limited general guidance is available for this timing.",
    },
}


def get_confidence_band(confidence: int) -> str:
    if confidence >= CONFIDENCE_BANDS["high"]:
        return "high"
    if confidence >= CONFIDENCE_BANDS["moderate"]:
        return "moderate"
    return "low"


def confidence_phrasing(confidence: int) -> Dict[str, str]:
    return dict(CONFIDENCE_PHRASES[get_confidence_band(confidence)])


def item_explanation(item: ScheduledItem, reasons: Sequence[str] = ()) -> str:
    """One-paragraph explanation of where an item landed and why."""
    text = f"{item.display_name} is scheduled at {item.scheduled_time}."
    if reasons:
        text += " " + " ".join(reasons)
    if item.with_food:
        text += " This item is commonly taken with food."
    if item.constraints_violated:
        text += (
            " We were unable to satisfy all timing preferences; consider "
            "discussing this with your pharmacist."
        )
    return text


def severity_verb(severity: Severity, confidence: int) -> str:
    if severity == Severity.HARD and confidence >= STRONG_LANGUAGE_MIN_CONFIDENCE:
        return "should"
    return "may benefit from"
