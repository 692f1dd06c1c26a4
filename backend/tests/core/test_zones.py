"""Zone Catalogue — standard zones, test zones and identifier validation."""

import pytest

from landing_zone.core.errors import InvalidZoneError, ErrorCategory
from landing_zone.core.zones import Zone, TEST_ZONES, allowed_zones, resolve_zone


def test_standard_zones_are_z1_to_z10():
    assert [z.value for z in Zone] == [f"Z{i}" for i in range(1, 11)]


def test_test_zones_only_when_enabled():
    assert "Z11" in TEST_ZONES
    assert "Z11" in allowed_zones(include_test_zones=True)
    assert "Z11" not in allowed_zones(include_test_zones=False)


def test_resolve_returns_valid_zone():
    assert resolve_zone("Z7", include_test_zones=False) == "Z7"
    assert resolve_zone("Z11", include_test_zones=True) == "Z11"


@pytest.mark.parametrize("raw", ["Z0", "Z12", "z1", "Z 1", "", "zone1"])
def test_resolve_rejects_unknown_zone(raw):
    with pytest.raises(InvalidZoneError) as exc_info:
        resolve_zone(raw, include_test_zones=True)
    err = exc_info.value
    assert err.http_status == 400
    assert err.code == "INVALID_ZONE"
    assert err.category == ErrorCategory.VALIDATION
    assert err.context.zone == raw


def test_resolve_rejects_test_zone_when_disabled():
    with pytest.raises(InvalidZoneError):
        resolve_zone("Z11", include_test_zones=False)
