"""Tests for admin management of liturgical color overrides."""

from datetime import date

import pytest

from parish.models import AuditLog, LiturgicalColorOverride

BASE = "/api/liturgical-color-overrides"


def _create(client, day="2024-07-09", color="gold", reason="Parish centenary"):
    return client.post(BASE, json={"date": day, "color": color, "reason": reason})


# ── Access control ─────────────────────────────────────────────────


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", BASE),
        ("get", f"{BASE}/2024-07-09"),
        ("post", BASE),
        ("put", f"{BASE}/2024-07-09"),
        ("delete", f"{BASE}/2024-07-09"),
    ],
)
def test_anonymous_gets_401(client, method, path):
    rv = getattr(client, method)(path, json={})
    assert rv.status_code == 401
    assert rv.get_json()["message"] == "Authentication required"


@pytest.mark.parametrize(
    "method, path",
    [
        ("get", BASE),
        ("post", BASE),
        ("delete", f"{BASE}/2024-07-09"),
    ],
)
def test_non_admin_gets_403(viewer_client, method, path):
    rv = getattr(viewer_client, method)(path, json={"date": "2024-07-09", "color": "gold"})
    assert rv.status_code == 403
    assert LiturgicalColorOverride.query.count() == 0


# ── Create ─────────────────────────────────────────────────────────


def test_create_override(admin_client, admin_user):
    rv = _create(admin_client)
    assert rv.status_code == 201
    data = rv.get_json()
    assert data["date"] == "2024-07-09"
    assert data["color"] == "gold"
    assert data["reason"] == "Parish centenary"
    assert data["created_by"]["email"] == admin_user.email

    override = LiturgicalColorOverride.query.one()
    assert override.date == date(2024, 7, 9)

    # The public color follows immediately
    assert admin_client.get("/api/liturgical-color/2024-07-09").get_json()["color"] == "gold"


def test_create_normalizes_color_and_date(admin_client):
    rv = _create(admin_client, day="2024-07-09T18:30:00", color=" Gold ")
    assert rv.status_code == 201
    assert rv.get_json()["date"] == "2024-07-09"
    assert rv.get_json()["color"] == "gold"


def test_create_without_reason(admin_client):
    rv = admin_client.post(BASE, json={"date": "2024-07-09", "color": "white"})
    assert rv.status_code == 201
    assert rv.get_json()["reason"] == ""


def test_create_duplicate_date_conflicts(admin_client):
    assert _create(admin_client).status_code == 201
    rv = _create(admin_client, color="red")
    assert rv.status_code == 409
    assert "already exists" in rv.get_json()["message"]
    assert LiturgicalColorOverride.query.one().color == "gold"


@pytest.mark.parametrize(
    "payload",
    [
        {"date": "2024-07-09", "color": "teal"},
        {"date": "2024-07-09"},
        {"color": "gold"},
        {"date": "09/07/2024", "color": "gold"},
        {"date": "2024-07-09", "color": "gold", "reason": "x" * 501},
        {"date": "2024-07-09", "color": "gold", "reason": 5},
        {"date": 20240709, "color": "gold"},
        {"date": "1582-10-15", "color": "gold"},
    ],
)
def test_create_validation_errors(admin_client, payload):
    rv = admin_client.post(BASE, json=payload)
    assert rv.status_code == 400
    assert rv.get_json()["errors"]
    assert LiturgicalColorOverride.query.count() == 0


def test_create_requires_json_object(admin_client):
    rv = admin_client.post(BASE, json=["2024-07-09", "gold"])
    assert rv.status_code == 400


def test_create_is_audited(admin_client, admin_user):
    _create(admin_client)
    entry = AuditLog.query.filter_by(action="color_override_created").one()
    assert entry.user_id == admin_user.id
    assert entry.target_type == "color_override"
    assert entry.detail == "2024-07-09 -> gold"


# ── Read ───────────────────────────────────────────────────────────


def test_get_override(admin_client):
    _create(admin_client)
    rv = admin_client.get(f"{BASE}/2024-07-09")
    assert rv.status_code == 200
    assert rv.get_json()["color"] == "gold"


def test_get_missing_override(admin_client):
    rv = admin_client.get(f"{BASE}/2024-07-10")
    assert rv.status_code == 404
    assert rv.get_json()["message"] == "No color override for 2024-07-10"


def test_get_with_invalid_date(admin_client):
    assert admin_client.get(f"{BASE}/tomorrow").status_code == 400


def test_list_is_paginated_newest_first(admin_client):
    for day in ("2024-01-05", "2024-03-05", "2024-02-05"):
        assert _create(admin_client, day=day).status_code == 201

    rv = admin_client.get(f"{BASE}?page=1&limit=2")
    data = rv.get_json()
    assert [o["date"] for o in data["overrides"]] == ["2024-03-05", "2024-02-05"]
    assert data["pagination"] == {"page": 1, "limit": 2, "total": 3, "pages": 2}

    data = admin_client.get(f"{BASE}?page=2&limit=2").get_json()
    assert [o["date"] for o in data["overrides"]] == ["2024-01-05"]


def test_list_limit_is_capped(admin_client):
    data = admin_client.get(f"{BASE}?limit=5000").get_json()
    assert data["pagination"]["limit"] == 100
    assert data["overrides"] == []


# ── Update ─────────────────────────────────────────────────────────


def test_update_override(admin_client):
    _create(admin_client)
    rv = admin_client.put(f"{BASE}/2024-07-09", json={"color": "white", "reason": "Funeral Mass"})
    assert rv.status_code == 200
    assert rv.get_json()["color"] == "white"
    assert rv.get_json()["reason"] == "Funeral Mass"
    assert admin_client.get("/api/liturgical-color/2024-07-09").get_json()["color"] == "white"


def test_update_keeps_reason_when_omitted(admin_client):
    _create(admin_client)
    rv = admin_client.put(f"{BASE}/2024-07-09", json={"color": "red"})
    assert rv.status_code == 200
    assert rv.get_json()["reason"] == "Parish centenary"


def test_update_missing_override(admin_client):
    rv = admin_client.put(f"{BASE}/2024-07-09", json={"color": "red"})
    assert rv.status_code == 404


def test_update_rejects_unknown_color(admin_client):
    _create(admin_client)
    rv = admin_client.put(f"{BASE}/2024-07-09", json={"color": "blue"})
    assert rv.status_code == 400
    assert "color" in rv.get_json()["errors"]


def test_update_rejects_non_string_reason(admin_client):
    _create(admin_client)
    rv = admin_client.put(f"{BASE}/2024-07-09", json={"color": "white", "reason": 5})
    assert rv.status_code == 400
    assert rv.get_json()["errors"]["reason"] == ["Must be a string."]
    assert LiturgicalColorOverride.query.one().color == "gold"


# ── Delete ─────────────────────────────────────────────────────────


def test_delete_override(admin_client):
    _create(admin_client)
    rv = admin_client.delete(f"{BASE}/2024-07-09")
    assert rv.status_code == 200
    assert rv.get_json()["message"] == "Color override for 2024-07-09 deleted"
    assert LiturgicalColorOverride.query.count() == 0
    assert AuditLog.query.filter_by(action="color_override_deleted").count() == 1
    assert admin_client.get("/api/liturgical-color/2024-07-09").get_json()["color"] == "green"


def test_delete_missing_override(admin_client):
    assert admin_client.delete(f"{BASE}/2024-07-09").status_code == 404
