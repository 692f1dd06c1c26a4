"""Landing Zone Routes — HTTP contract for briefing and zone validation.

Invariants tested:
    - GET /landing-zone/ returns the plain-text briefing
    - GET /landing-zone/{zone} returns {zone, isValid, elapsedTime}
    - Unknown zone → 400 INVALID_ZONE, checker never runs
    - Test zones follow the enable_test_zones setting
"""

import pytest
from httpx import ASGITransport, AsyncClient

from landing_zone.config import Settings, get_settings
from landing_zone.core.errors import ZoneNotFoundError
from landing_zone.main import app

BASE = "/api/v1/landing-zone"


async def test_briefing_is_plain_text(client):
    res = await client.get(f"{BASE}/")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/plain")
    assert "R2" in res.text


async def test_valid_zone_payload(client):
    res = await client.get(f"{BASE}/Z1")
    assert res.status_code == 200
    body = res.json()
    assert set(body) == {"zone", "isValid", "elapsedTime"}
    assert body["zone"] == "Z1"
    assert body["isValid"] is True
    assert body["elapsedTime"] >= 0


@pytest.mark.parametrize("zone, expected", [
    ("Z1", True), ("Z2", False), ("Z3", True), ("Z4", True), ("Z5", False),
    ("Z6", True), ("Z7", True), ("Z8", False), ("Z9", True), ("Z10", False),
    ("Z11", False),
])
async def test_zone_verdicts(client, zone, expected):
    res = await client.get(f"{BASE}/{zone}")
    assert res.status_code == 200
    assert res.json()["isValid"] is expected


@pytest.mark.parametrize("zone", ["Z0", "Z12", "z1", "mars"])
async def test_invalid_zone_returns_400(client, zone, monkeypatch):
    called = []

    async def _spy(zone):
        called.append(zone)

    monkeypatch.setattr(
        "landing_zone.api.routes.landing_zone.evaluate_zone", _spy,
    )
    res = await client.get(f"{BASE}/{zone}")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_ZONE"
    assert error["message"] == "Not a valid zone"
    assert error["context"]["zone"] == zone
    assert called == []


async def test_test_zone_rejected_when_disabled(client):
    app.dependency_overrides[get_settings] = lambda: Settings(enable_test_zones=False)
    res = await client.get(f"{BASE}/Z11")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_ZONE"


async def test_unexpected_failure_returns_generic_500(monkeypatch):
    async def _explode(zone):
        raise RuntimeError("lookup exploded")

    monkeypatch.setattr(
        "landing_zone.api.routes.landing_zone.evaluate_zone", _explode,
    )
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        res = await c.get(f"{BASE}/Z1")
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "INTERNAL_ERROR"
    assert "exploded" not in res.text


async def test_missing_survey_returns_404(client, monkeypatch):
    async def _no_survey(zone):
        raise ZoneNotFoundError(zone)

    monkeypatch.setattr(
        "landing_zone.services.evaluate_zone.get_coordinates", _no_survey,
    )
    res = await client.get(f"{BASE}/Z1")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "ZONE_NOT_FOUND"
    assert error["category"] == "resource_not_found"
    assert error["context"]["zone"] == "Z1"
