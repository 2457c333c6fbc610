import json
from config.paths import CONSTANTS_PATH

"""
Loads configuration constants from config/constants.json and exposes them as module-level variables.
Edit constants.json to change values; import from utils.constants to use in code.
"""

with open(CONSTANTS_PATH, "r", encoding="utf-8") as f:
    _constants = json.load(f)

# Expose constants as variables
DEFAULT_WAKE_TIME = _constants["DEFAULT_WAKE_TIME"]
DEFAULT_FREQUENCY = _constants["DEFAULT_FREQUENCY"]

BREAKFAST_AFTER_WAKE_MIN = _constants["BREAKFAST_AFTER_WAKE_MIN"]
LUNCH_AFTER_BREAKFAST_MIN = _constants["LUNCH_AFTER_BREAKFAST_MIN"]
EARLIEST_LUNCH = _constants["EARLIEST_LUNCH"]
DINNER_AFTER_LUNCH_MIN = _constants["DINNER_AFTER_LUNCH_MIN"]
EARLIEST_DINNER = _constants["EARLIEST_DINNER"]
BEDTIME_AFTER_DINNER_MIN = _constants["BEDTIME_AFTER_DINNER_MIN"]
LAST_MINUTE_OF_DAY = _constants["LAST_MINUTE_OF_DAY"]

SLOT_THRESHOLDS = _constants["SLOT_THRESHOLDS"]
NIGHT_SLOT_LABEL = _constants["NIGHT_SLOT_LABEL"]
SLOT_LABELS = list(SLOT_THRESHOLDS) + [NIGHT_SLOT_LABEL]

SEPARATION_PASSES = _constants["SEPARATION_PASSES"]
MAX_SEPARATION_PASSES = _constants["MAX_SEPARATION_PASSES"]

CONFIDENCE_WEIGHTS = _constants["CONFIDENCE_WEIGHTS"]
CONFIDENCE_BANDS = _constants["CONFIDENCE_BANDS"]
STRONG_LANGUAGE_MIN_CONFIDENCE = _constants["STRONG_LANGUAGE_MIN_CONFIDENCE"]

DISCLAIMER = _constants["DISCLAIMER"]
EMPTY_SCHEDULE_MESSAGE = _constants["EMPTY_SCHEDULE_MESSAGE"]
