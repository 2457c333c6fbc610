import pandas as pd
from typing import Dict, List, Sequence, Tuple
from core.models import ScheduledItem
from core.state import PlacedItem
from utils.constants import SLOT_LABELS
from utils.time_utils import min_to_time, slot_label


def finalise_items(placed: Sequence[PlacedItem]) -> Tuple[ScheduledItem, ...]:
    """Freeze placed items into output records, in chronological order."""
    ordered = sorted(placed, key=lambda p: p.time_min)
    return tuple(
        ScheduledItem(
            canonical_name=p.canonical_name,
            display_name=p.display_name,
            dose=p.enriched.input.dose,
            scheduled_time=min_to_time(p.time_min),
            slot_label=slot_label(p.time_min),
            with_food=p.with_food,
            notes=tuple(p.notes),
            constraints_satisfied=tuple(p.constraints_satisfied),
            constraints_violated=tuple(p.constraints_violated),
        )
        for p in ordered
    )


def schedule_to_frame(items: Sequence[ScheduledItem]) -> pd.DataFrame:
    """One row per scheduled item."""
    columns = [
        "canonicalName",
        "displayName",
        "dose",
        "scheduledTime",
        "slotLabel",
        "withFood",
        "violations",
    ]
    rows = [
        {
            "canonicalName": i.canonical_name,
            "displayName": i.display_name,
            "dose": i.dose,
            "scheduledTime": i.scheduled_time,
            "slotLabel": i.slot_label,
            "withFood": i.with_food,
            "violations": len(i.constraints_violated),
        }
        for i in items
    ]
    return pd.DataFrame(rows, columns=columns)


def summarize_by_slot(items: Sequence[ScheduledItem]) -> List[Dict]:
    """
    Count the items of each part of the day.

    Every slot label is listed, in day order, even when empty.
    """
    df = schedule_to_frame(items)
    summary = []
    for label in SLOT_LABELS:
        in_slot = df[df["slotLabel"] == label]
        summary.append(
            {
                "slotLabel": label,
                "count": int(len(in_slot)),
                "items": in_slot["canonicalName"].tolist(),
                "withFood": int(in_slot["withFood"].astype(bool).sum()),
            }
        )
    return summary
