import math
import re
import pandas as pd
from datetime import datetime, date as dt_date
from typing import Optional, Union
from utils.constants import SLOT_THRESHOLDS, NIGHT_SLOT_LABEL, LAST_MINUTE_OF_DAY
from exceptions.custom_errors import InvalidTimeFormatError

CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


# --- Clock-time conversions ---
def time_to_min(t: str) -> int:
    """Convert an "HH:MM" clock time to minutes from midnight."""
    match = CLOCK_PATTERN.match(str(t).strip())
    if not match:
        raise InvalidTimeFormatError(f"Invalid clock time {t!r}: expected HH:MM.")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidTimeFormatError(
            f"Invalid clock time {t!r}: must be between 00:00 and 23:59."
        )
    return hours * 60 + minutes


def min_to_time(m: int) -> str:
    """Convert minutes from midnight to a zero-padded "HH:MM" string."""
    return f"{m // 60:02d}:{m % 60:02d}"


def slot_label(minute: int) -> str:
    """Return the label of the part of the day a minute-of-day falls in."""
    for label, upper in SLOT_THRESHOLDS.items():
        if minute < upper:
            return label
    return NIGHT_SLOT_LABEL


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives (2.5 -> 3)."""
    return math.floor(value + 0.5)


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


def clamp_to_day(minute: int) -> int:
    """Keep a minute-of-day on the same calendar day (no rollover past midnight)."""
    return clamp(minute, 0, LAST_MINUTE_OF_DAY)


def is_valid_time(t: Optional[str]) -> bool:
    try:
        time_to_min(t)
    except InvalidTimeFormatError:
        return False
    return True


# --- Dates ---
def normalise_date(input_date: Union[str, dt_date, datetime, pd.Timestamp, None]) -> str:
    """
    Convert input to an ISO "YYYY-MM-DD" string.
    Supports formats like:
      - '2026-02-14', '2026/02/14', '20260214', date and Timestamp objects.
    A missing date means today.
    """
    if input_date is None or input_date == "":
        return dt_date.today().isoformat()
    if isinstance(input_date, pd.Timestamp):
        return input_date.date().isoformat()
    if isinstance(input_date, datetime):
        return input_date.date().isoformat()
    if isinstance(input_date, dt_date):
        return input_date.isoformat()
    if isinstance(input_date, str):
        try:
            # pandas handles all common formats using dateutil.parser under the hood
            return pd.to_datetime(input_date, errors="raise").date().isoformat()
        except Exception as e:
            raise ValueError(f"Could not parse date string '{input_date}': {e}")
    raise ValueError(f"Unsupported date type: {type(input_date)}")
