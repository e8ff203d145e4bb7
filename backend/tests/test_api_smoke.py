import pytest
from fastapi.testclient import TestClient

from conftest import MONDAY


@pytest.fixture
def client(tables, clock):
    # Import after env is set so engine is created with sqlite
    from orbit.main import app  # noqa: WPS433
    from orbit.api.goals import get_clock  # noqa: WPS433

    app.dependency_overrides[get_clock] = lambda: clock
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_root_ok(client):
    r = client.get("/")
    assert r.status_code == 200
    data = r.json()
    assert "message" in data


def test_create_and_list_goal(client):
    cr = client.post("/goals/", json={"title": "Read", "desired_weekly_frequency": 3})
    assert cr.status_code == 200, cr.text
    goal = cr.json()
    assert goal["title"] == "Read"
    assert goal["desired_weekly_frequency"] == 3

    lr = client.get("/goals/")
    assert lr.status_code == 200
    arr = lr.json()
    assert [(g["id"], g["achieved_count"]) for g in arr] == [(goal["id"], 0)]


@pytest.mark.parametrize(
    "payload",
    [
        {"title": "", "desired_weekly_frequency": 3},
        {"title": "Read", "desired_weekly_frequency": 0},
        {"title": "Read", "desired_weekly_frequency": 8},
        {"title": "Read"},
    ],
)
def test_create_goal_validation(client, payload):
    r = client.post("/goals/", json=payload)
    assert r.status_code == 422


def test_blank_title_rejected(client):
    r = client.post("/goals/", json={"title": "   ", "desired_weekly_frequency": 2})
    assert r.status_code == 422
    assert "title" in r.json()["detail"]


def test_complete_and_summary(client, clock):
    clock.now = MONDAY
    goal = client.post("/goals/", json={"title": "A", "desired_weekly_frequency": 2}).json()

    first = client.post(f"/goals/{goal['id']}/achievements")
    assert first.status_code == 200, first.text
    assert first.json()["goal_id"] == goal["id"]

    second = client.post(f"/goals/{goal['id']}/achievements")
    assert second.status_code == 200

    third = client.post(f"/goals/{goal['id']}/achievements")
    assert third.status_code == 409

    sr = client.get("/goals/summary")
    assert sr.status_code == 200
    summary = sr.json()
    assert summary["total"] == 2
    assert summary["total_achieved"] == 2
    assert list(summary["achieved_goals_per_day"]) == ["2026-10-12"]
    assert [e["title"] for e in summary["achieved_goals_per_day"]["2026-10-12"]] == ["A", "A"]


def test_complete_missing_goal(client):
    r = client.post("/goals/42/achievements")
    assert r.status_code == 404


def test_empty_summary(client):
    r = client.get("/goals/summary")
    assert r.status_code == 200
    assert r.json() == {"total_achieved": 0, "total": 0, "achieved_goals_per_day": {}}


def test_list_goals_returns_rows_outside_input_limits(client):
    from orbit.db import SessionLocal  # noqa: WPS433
    from orbit.models.goal import Goal  # noqa: WPS433

    db = SessionLocal()
    try:
        db.add(Goal(title="Legacy", desired_weekly_frequency=0, created_at=MONDAY))
        db.commit()
    finally:
        db.close()

    r = client.get("/goals/")
    assert r.status_code == 200, r.text
    assert r.json()[0]["desired_weekly_frequency"] == 0
