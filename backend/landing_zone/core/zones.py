"""Zone Catalogue — the enumerated landing zones and identifier validation.

Invariants:
    - Standard zones are exactly Z1..Z10
    - Test zones are accepted only when explicitly enabled
    - Matching is exact and case-sensitive ("z1" is not a zone)

Design Decisions:
    - Z11 is a fixture for the "every R1 reading is below some R2 reading"
      boundary; it never changes how containment is decided
"""

from enum import Enum

from landing_zone.core.errors import InvalidZoneError


class Zone(str, Enum):
    """Standard landing zones surveyed by both rovers."""
    Z1 = "Z1"
    Z2 = "Z2"
    Z3 = "Z3"
    Z4 = "Z4"
    Z5 = "Z5"
    Z6 = "Z6"
    Z7 = "Z7"
    Z8 = "Z8"
    Z9 = "Z9"
    Z10 = "Z10"


TEST_ZONES: tuple[str, ...] = ("Z11",)


def allowed_zones(include_test_zones: bool) -> tuple[str, ...]:
    standard = tuple(z.value for z in Zone)
    return standard + TEST_ZONES if include_test_zones else standard


def resolve_zone(raw: str, include_test_zones: bool) -> str:
    """Return `raw` if it names an accepted zone, else raise InvalidZoneError."""
    if raw not in allowed_zones(include_test_zones):
        raise InvalidZoneError(raw)
    return raw
