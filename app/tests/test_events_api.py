from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from app.bootstrap import create_app
from app.core.config import Settings
from app.core.errors import ConfigError, EventRepositoryError
from app.dependencies import build_event_repository
from app.lifecycle import register_lifecycle
from app.repositories.event_base import EventRepository
from app.repositories.memory_event_repo import MemoryEventRepository
from app.schemas.event import EventRecord

NOW = datetime(2026, 10, 16, 12, 0, 0, tzinfo=timezone.utc)


class BrokenRepository(EventRepository):

    async def load_last_event(self, group_id: str) -> Optional[EventRecord]:
        raise EventRepositoryError(f"Failed to load last event for group {group_id!r}")


def make_settings(**overrides) -> Settings:
    values = {"event_repository": "memory", "log_json": False, "api_prefix": "/api"}
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def event_repo():
    repo = MemoryEventRepository()
    repo.add_event("active-group", EventRecord(end_date=NOW + timedelta(hours=2), review_duration_in_hours=1))
    repo.add_event("review-group", EventRecord(end_date=NOW - timedelta(minutes=30), review_duration_in_hours=1))
    repo.add_event("closed-group", EventRecord(end_date=NOW - timedelta(days=2), review_duration_in_hours=1))
    return repo


@pytest.fixture
def client(event_repo):
    app = create_app(make_settings())
    register_lifecycle(app)
    app.state.event_repo = event_repo
    app.state.clock = lambda: NOW
    with TestClient(app) as c:
        yield c


def test_root_says_hello(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["message"] == "Hello World"


def test_health_ready_when_repository_wired(client):
    assert client.get("/health/live").json() == {"status": "alive"}
    assert client.get("/health/ready").json() == {"status": "ready"}


@pytest.mark.parametrize(
    "group_id, expected",
    [
        ("active-group", "active"),
        ("review-group", "pendent"),
        ("closed-group", "done"),
        ("unknown-group", "done"),
    ],
)
def test_event_status_endpoint(client, group_id, expected):
    response = client.get(f"/api/events/{group_id}/status")

    assert response.status_code == 200
    assert response.json() == {"group_id": group_id, "status": expected}


def test_event_status_lookup_failure_returns_503():
    app = create_app(make_settings())
    app.state.event_repo = BrokenRepository()

    with TestClient(app) as c:
        response = c.get("/api/events/g1/status")

    assert response.status_code == 503
    assert response.json()["error"]["code"] == "event_lookup_failed"


def test_event_status_without_repository_returns_503():
    app = create_app(make_settings())

    with TestClient(app) as c:
        response = c.get("/api/events/g1/status")
        ready = c.get("/health/ready")

    assert response.status_code == 503
    assert ready.json() == {"status": "degraded"}


def test_startup_builds_seeded_memory_repository(tmp_path):
    seed = tmp_path / "events.json"
    seed.write_text(
        '[{"group_id": "g1", "end_date": "2026-10-16T12:00:00Z", "review_duration_in_hours": 1}]',
        encoding="utf-8",
    )
    app = create_app(make_settings(events_seed_path=str(seed)))
    register_lifecycle(app)

    with TestClient(app) as c:
        app.state.clock = lambda: NOW
        response = c.get("/api/events/g1/status")

    assert response.json() == {"group_id": "g1", "status": "active"}


def test_huge_review_window_reports_pendent_over_http():
    repo = MemoryEventRepository()
    repo.add_event("long-review", EventRecord(end_date=NOW - timedelta(days=1), review_duration_in_hours=float("inf")))
    app = create_app(make_settings())
    app.state.event_repo = repo
    app.state.clock = lambda: NOW

    with TestClient(app) as c:
        response = c.get("/api/events/long-review/status")

    assert response.status_code == 200
    assert response.json() == {"group_id": "long-review", "status": "pendent"}


def test_shutdown_releases_repository_and_clock(event_repo):
    app = create_app(make_settings())
    register_lifecycle(app)
    app.state.event_repo = event_repo
    app.state.clock = lambda: NOW

    with TestClient(app) as c:
        assert c.get("/health/ready").json() == {"status": "ready"}

    assert app.state.event_repo is None
    assert app.state.clock is None


def test_supabase_repository_requires_credentials():
    with pytest.raises(ConfigError):
        build_event_repository(
            make_settings(event_repository="supabase", supabase_url=None, supabase_service_key=None)
        )


def test_unknown_repository_kind_is_rejected():
    with pytest.raises(ConfigError):
        build_event_repository(make_settings(event_repository="redis"))
