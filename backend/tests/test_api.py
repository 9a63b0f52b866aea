import datetime as dt

import pytest
from fastapi.testclient import TestClient

from research_tracker.core import clock
from research_tracker.core.deps import get_db
from research_tracker.main import app

TODAY = dt.date(2024, 1, 1)
NOW = dt.datetime(2024, 1, 1, 9, 0, tzinfo=dt.timezone.utc)


@pytest.fixture()
def client(session_factory, monkeypatch):
    def _get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    ticks = iter(range(1, 1000))
    monkeypatch.setattr(clock, "today", lambda: TODAY)
    monkeypatch.setattr(clock, "now", lambda: NOW + dt.timedelta(seconds=next(ticks)))
    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def _login(client, username="alice", password="secret1"):
    r = client.post("/auth/register", json={"username": username, "password": password, "first_name": "Alice"})
    assert r.status_code == 200, r.text
    r = client.post("/auth/login", json={"username": username, "password": password})
    assert r.status_code == 200, r.text
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


def test_register_conflict_and_validation(client):
    _login(client)
    r = client.post("/auth/register", json={"username": "alice", "password": "other"})
    assert r.status_code == 409
    assert r.json()["code"] == "conflict"
    r = client.post("/auth/register", json={"username": "", "password": "x"})
    assert r.status_code == 400
    assert r.json()["detail"] == "Username is required"


def test_login_rejects_bad_password(client):
    _login(client)
    r = client.post("/auth/login", json={"username": "alice", "password": "wrong"})
    assert r.status_code == 401


def test_projects_require_token(client):
    assert client.get("/projects").status_code == 401


def test_me(client):
    headers = _login(client)
    r = client.get("/auth/me", headers=headers)
    assert r.json()["username"] == "alice"


def test_project_lifecycle(client):
    headers = _login(client)
    deadline = (TODAY + dt.timedelta(days=3)).isoformat()
    r = client.post("/projects", json={"title": "Coral reefs", "deadline": deadline}, headers=headers)
    assert r.status_code == 200, r.text
    project = r.json()
    assert project["status"] == "DRAFT"
    assert project["deadline_status"] == "APPROACHING"
    assert project["owner"]["username"] == "alice"
    pid = project["id"]

    for _ in range(2):
        r = client.put(f"/projects/{pid}", json={"status": "IN_PROGRESS"}, headers=headers)
        assert r.status_code == 200
        assert r.json()["status"] == "IN_PROGRESS"

    history = client.get(f"/projects/{pid}/status-history", headers=headers).json()
    assert [(h["old_status"], h["new_status"]) for h in history] == [(None, "DRAFT"), ("DRAFT", "IN_PROGRESS")]
    assert history[1]["changed_by"]["username"] == "alice"

    r = client.get("/projects/status/IN_PROGRESS", headers=headers)
    assert [p["id"] for p in r.json()] == [pid]
    r = client.get("/projects/deadlines/upcoming", headers=headers)
    assert [p["id"] for p in r.json()] == [pid]
    assert client.get("/projects/deadlines/overdue", headers=headers).json() == []

    assert client.delete(f"/projects/{pid}", headers=headers).status_code == 200
    r = client.get(f"/projects/{pid}", headers=headers)
    assert r.status_code == 404
    assert r.json()["code"] == "not_found"


def test_unknown_ids_are_not_found(client):
    headers = _login(client)
    assert client.get("/projects/999", headers=headers).status_code == 404
    assert client.put("/projects/999", json={"title": "x"}, headers=headers).status_code == 404
    assert client.get("/projects/999/status-history", headers=headers).status_code == 404
    assert client.get("/projects/user/999", headers=headers).status_code == 404
    assert client.get("/dashboard/user-summary/999", headers=headers).status_code == 404
    assert client.get("/users/999", headers=headers).status_code == 404


def test_dashboard_stats(client):
    headers = _login(client)
    pid = client.post("/projects", json={"title": "Overdue study", "deadline": "2023-12-31"}, headers=headers).json()["id"]
    client.post("/projects", json={"title": "Far away", "deadline": "2024-06-01"}, headers=headers)
    statuses = ["IN_REVIEW", "APPROVED", "IN_PROGRESS", "ON_HOLD", "IN_PROGRESS", "COMPLETED", "IN_PROGRESS",
                "ON_HOLD", "IN_PROGRESS", "CANCELLED"]
    for s in statuses:
        client.put(f"/projects/{pid}", json={"status": s}, headers=headers)

    r = client.get("/dashboard/stats", headers=headers)
    assert r.status_code == 200
    stats = r.json()
    assert stats["total_users"] == 1
    assert stats["total_projects"] == 2
    assert stats["active_projects"] == 0
    assert stats["pending_reviews"] == 0
    assert stats["projects_by_status"]["CANCELLED"] == 1
    changes = stats["recent_status_changes"]
    assert len(changes) == 10
    assert changes[0]["new_status"] == "CANCELLED"
    assert changes[0]["changed_by"] == "alice"
    assert changes[0]["project_title"] == "Overdue study"
    assert [d["project_id"] for d in stats["upcoming_deadlines"]] == [pid]
    assert stats["upcoming_deadlines"][0]["days_until_deadline"] == -1
    assert stats["upcoming_deadlines"][0]["status"] == "OVERDUE"


def test_user_summary(client):
    headers = _login(client)
    me = client.get("/auth/me", headers=headers).json()
    pid = client.post("/projects", json={"title": "A"}, headers=headers).json()["id"]
    client.post("/projects", json={"title": "B"}, headers=headers)
    client.put(f"/projects/{pid}", json={"status": "IN_PROGRESS"}, headers=headers)
    r = client.get(f"/dashboard/user-summary/{me['id']}", headers=headers)
    body = r.json()
    assert body["user"]["username"] == "alice"
    assert body["active_projects"] == 1
    assert body["total_projects"] == 2
    assert body["review_count"] == 0


def test_missing_required_fields_use_error_body(client):
    r = client.post("/auth/register", json={"password": "x"})
    assert r.status_code == 400
    body = r.json()
    assert body["code"] == "validation_error"
    assert "username" in body["message"]
    assert body["detail"] == body["message"]

    headers = _login(client)
    r = client.post("/projects", json={"description": "no title"}, headers=headers)
    assert r.status_code == 400
    assert r.json()["code"] == "validation_error"
    assert "title" in r.json()["message"]
