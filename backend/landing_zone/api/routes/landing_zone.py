"""Landing Zone Routes — mission briefing and per-zone validation.

Invariants:
    - Zone identifier validated before any lookup or check runs
    - Invalid zone → 400 INVALID_ZONE (raised, rendered by global handler)
    - Response body is {zone, isValid, elapsedTime}
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from landing_zone.config import Settings, get_settings
from landing_zone.core.briefing import mission_briefing
from landing_zone.core.zones import resolve_zone
from landing_zone.schemas.landing_zone import ZoneValidation
from landing_zone.services.evaluate_zone import evaluate_zone

router = APIRouter(prefix="/api/v1/landing-zone", tags=["landing-zone"])


@router.get("/", response_class=PlainTextResponse)
async def get_briefing():
    """Describe the task and the accepted zones."""
    return mission_briefing()


@router.get("/{zone}", response_model=ZoneValidation)
async def validate_landing_zone(
    zone: str, settings: Settings = Depends(get_settings),
):
    """Decide whether R2's readings for `zone` are all present in R1's."""
    zone = resolve_zone(zone, include_test_zones=settings.enable_test_zones)
    return await evaluate_zone(zone)
