import pytest
from fastapi.testclient import TestClient
from utils.phrasing import confidence_phrasing


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr("main.API_KEY", None)
    from main import app

    with TestClient(app) as c:
        yield c


def test_health_check(client):
    r = client.get("/api/health/check")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["rules"] > 0 and body["profiles"] > 0


def test_generate_schedule(client):
    r = client.post(
        "/api/schedule/generate",
        json={
            "date": "2026-03-01",
            "wakeTime": "07:00",
            "items": [
                {"canonicalName": "levothyroxine", "displayName": "Levothyroxine"},
                {"canonical_name": "iron_supplement", "display_name": "Iron"},
            ],
        },
    )
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["ok"] is True
    schedule = body["schedule"]
    assert schedule["date"] == "2026-03-01"
    assert {i["canonicalName"] for i in schedule["items"]} == {"levothyroxine", "iron_supplement"}
    assert body["confidenceBand"] in {"high", "moderate", "low"}
    assert sum(s["count"] for s in body["summary"]) == 2


def test_generate_with_caller_profiles_and_rules(client):
    r = client.post(
        "/api/schedule/generate",
        json={
            "date": "2026-03-01",
            "items": [{"canonicalName": "tea"}],
            "profiles": [{"canonicalName": "tea", "displayName": "Tea", "timing": {"preferredWindows": [{"start": "16:00", "end": "17:00"}]}}],
            "additionalRules": [
                {
                    "ruleKey": "tea-late",
                    "appliesTo": ["tea"],
                    "constraint": {"type": "AVOID_AFTER_TIME", "time": "14:00"},
                    "severity": "hard",
                    "confidence": 90,
                }
            ],
        },
    )
    assert r.status_code == 200, r.text
    item = r.json()["schedule"]["items"][0]
    assert item["scheduledTime"] == "14:00"
    assert item["displayName"] == "tea"
    assert item["constraintsSatisfied"] == ["tea-late"]


def test_generate_without_items(client):
    r = client.post("/api/schedule/generate", json={"date": "2026-03-01", "items": []})
    assert r.status_code == 200
    schedule = r.json()["schedule"]
    assert schedule["items"] == []
    assert schedule["overallConfidence"] == 100
    assert schedule["disclaimer"] == "No items to schedule. Add supplements or medications first."
    assert r.json()["confidencePhrasing"] == confidence_phrasing(100)


@pytest.mark.parametrize(
    "payload",
    [
        {"wakeTime": "7am"},
        {"wakeTime": "09:00", "meals": {"breakfast": "08:00"}},
        {"additionalRules": [{"ruleKey": "bad", "constraint": {"type": "NOPE"}}]},
        {"date": "not a date"},
    ],
)
def test_bad_input_is_a_400(client, payload):
    payload = {"items": [{"canonicalName": "omega3"}], **payload}
    r = client.post("/api/schedule/generate", json=payload)
    assert r.status_code == 400, r.text


def test_catalog_routes(client):
    rules = client.get("/api/catalog/rules").json()
    assert any(r["ruleKey"] == "iron-vs-divalent-cation" for r in rules["generic"])
    profiles = client.get("/api/catalog/profiles").json()["profiles"]
    assert any(p["canonicalName"] == "levothyroxine" for p in profiles)


def test_api_key_guard(monkeypatch):
    monkeypatch.setattr("main.API_KEY", "secret")
    from main import app

    with TestClient(app) as c:
        assert c.get("/api/catalog/rules").status_code == 401
        assert c.get("/api/catalog/rules", headers={"x-api-key": "secret"}).status_code == 200
        assert c.get("/api/health/check").status_code == 200


def test_profile_time_outside_the_day_is_rejected(client):
    payload = {
        "items": [{"canonicalName": "x"}],
        "profiles": [{"canonicalName": "x", "displayName": "X", "timing": {"avoidAfterTime": "25:00"}}],
    }
    r = client.post("/api/schedule/generate", json=payload)
    assert r.status_code == 422, r.text
