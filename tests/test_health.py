"""Tests for /ping and /health endpoints."""

from datetime import UTC, datetime


def test_sqlite_foreign_keys_enabled(app):
    from parish.models import db

    with app.app_context():
        pragma = db.session.execute(db.text("PRAGMA foreign_keys")).scalar()
        assert pragma == 1


def test_ping_returns_200(client):
    rv = client.get("/ping")
    assert rv.status_code == 200
    assert rv.content_type.startswith("application/json")
    assert rv.get_json()["status"] == "ok"


def test_health_ok_without_scheduler(client):
    rv = client.get("/health")
    data = rv.get_json()
    assert rv.status_code == 200
    assert data["status"] == "ok"
    assert data["database"]["status"] == "ok"
    assert data["scheduler"] == {"running": False, "reason": "disabled"}


def test_health_database_error_is_sanitized(client, monkeypatch):
    from parish.models import db

    def _raise_db_error(*args, **kwargs):
        raise RuntimeError("sqlite:///srv/parish/parish.db is unreachable")

    monkeypatch.setattr(db.session, "execute", _raise_db_error)

    rv = client.get("/health")
    data = rv.get_json()

    assert rv.status_code == 503
    assert data["database"] == {"status": "error", "error": "unavailable"}
    assert "parish.db" not in rv.get_data(as_text=True)


class _DummyJob:
    id = "refresh_liturgical_color"
    next_run_time = datetime(2026, 10, 20, 0, 0, tzinfo=UTC)


class _DummyScheduler:
    running = True

    @staticmethod
    def get_jobs():
        return [_DummyJob()]


def _job_state(failures):
    return {
        "updated_at": "2026-10-19T00:00:00+00:00",
        "jobs": {
            "refresh_liturgical_color": {
                "last_status": "error" if failures else "ok",
                "last_run_at": "2026-10-19T00:00:00+00:00",
                "consecutive_failures": failures,
            }
        },
    }


def test_health_reports_scheduler_jobs(app, client, monkeypatch):
    monkeypatch.setattr(app, "scheduler", _DummyScheduler(), raising=False)
    monkeypatch.setattr(app, "scheduler_state_lock", None, raising=False)
    monkeypatch.setattr(app, "scheduler_state", _job_state(0), raising=False)

    rv = client.get("/health")
    data = rv.get_json()
    assert rv.status_code == 200
    job = data["scheduler"]["jobs"][0]
    assert job["id"] == "refresh_liturgical_color"
    assert job["next_run"].startswith("2026-10-20")
    assert job["last_status"] == "ok"
    assert data["scheduler"]["failing_jobs"] == []


def test_health_scheduler_failure_threshold_marks_degraded(app, client, monkeypatch):
    monkeypatch.setitem(app.config, "SCHEDULER_MAX_CONSECUTIVE_FAILURES", 3)
    monkeypatch.setattr(app, "scheduler", _DummyScheduler(), raising=False)
    monkeypatch.setattr(app, "scheduler_state_lock", None, raising=False)
    monkeypatch.setattr(app, "scheduler_state", _job_state(3), raising=False)

    rv = client.get("/health")
    data = rv.get_json()
    assert rv.status_code == 503
    assert data["status"] == "degraded"
    assert data["scheduler"]["failing_jobs"] == ["refresh_liturgical_color"]


def test_health_scheduler_below_failure_threshold_is_ok(app, client, monkeypatch):
    monkeypatch.setitem(app.config, "SCHEDULER_MAX_CONSECUTIVE_FAILURES", 3)
    monkeypatch.setattr(app, "scheduler", _DummyScheduler(), raising=False)
    monkeypatch.setattr(app, "scheduler_state_lock", None, raising=False)
    monkeypatch.setattr(app, "scheduler_state", _job_state(2), raising=False)

    rv = client.get("/health")
    assert rv.status_code == 200
    assert rv.get_json()["status"] == "ok"


def test_health_scheduler_probe_failure_is_sanitized(app, client, monkeypatch):
    class _BrokenScheduler:
        @property
        def running(self):
            raise RuntimeError("scheduler unreachable")

    monkeypatch.setattr(app, "scheduler", _BrokenScheduler(), raising=False)

    rv = client.get("/health")
    data = rv.get_json()
    assert rv.status_code == 503
    assert data["status"] == "degraded"
    assert data["scheduler"]["reason"] == "probe_failed"


def test_security_headers(client):
    rv = client.get("/ping")
    assert rv.headers["X-Content-Type-Options"] == "nosniff"
    assert rv.headers["X-Frame-Options"] == "DENY"
    assert "Strict-Transport-Security" in rv.headers
