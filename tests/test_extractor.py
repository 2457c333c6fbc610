from conftest import make_item, make_profile
from core.state import PlacedItem
from scheduler.extractor import finalise_items, schedule_to_frame, summarize_by_slot
from scheduler.setup import attach_profiles


def placed(name, minute, **kwargs):
    enriched = attach_profiles([make_item(name, dose="1 tab")], [make_profile(name)])[0]
    return PlacedItem(enriched=enriched, time_min=minute, with_food=False, **kwargs)


def test_finalise_sorts_by_time_keeping_ties_in_order():
    items = finalise_items([placed("c", 900), placed("a", 420), placed("b", 420)])
    assert [i.canonical_name for i in items] == ["a", "b", "c"]
    assert [i.scheduled_time for i in items] == ["07:00", "07:00", "15:00"]
    assert [i.slot_label for i in items] == ["Morning", "Morning", "Evening"]
    assert items[0].dose == "1 tab"


def test_finalise_freezes_lists():
    items = finalise_items([placed("a", 420, notes=["Take with food"], constraints_violated=["r"])])
    assert items[0].notes == ("Take with food",)
    assert items[0].constraints_violated == ("r",)


def test_summary_lists_every_slot():
    items = finalise_items([placed("a", 420), placed("b", 1260)])
    summary = summarize_by_slot(items)
    assert [s["slotLabel"] for s in summary] == ["Morning", "Afternoon", "Evening", "Night"]
    assert summary[0]["items"] == ["a"]
    assert summary[3]["count"] == 1
    assert summary[1]["count"] == 0


def test_empty_frame_has_columns():
    df = schedule_to_frame([])
    assert df.empty
    assert "scheduledTime" in df.columns
    assert all(s["count"] == 0 for s in summarize_by_slot([]))
