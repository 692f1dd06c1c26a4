"""Zone Evaluation — fetch a zone's rover readings and decide if it is safe.

Invariants:
    - Only the containment check is timed, never the lookup
    - The zone identifier is already validated by the caller
    - Readings are passed to the checker exactly as the lookup returned them

Design Decisions:
    - Imperative shell around core.containment (pure): IO and timing live here
"""

import logging
import time

from landing_zone.core.containment import is_contained, missing_readings
from landing_zone.infrastructure.coordinates import get_coordinates
from landing_zone.schemas.landing_zone import ZoneValidation

logger = logging.getLogger(__name__)


async def evaluate_zone(zone: str) -> ZoneValidation:
    """Run the containment check for `zone` and time it."""
    coordinates = await get_coordinates(zone)
    primary, secondary = coordinates["R1"], coordinates["R2"]

    start = time.perf_counter()
    is_valid = is_contained(primary, secondary)
    elapsed_ms = (time.perf_counter() - start) * 1000

    logger.info(
        f"Zone {zone} evaluated: {'valid' if is_valid else 'invalid'}",
        extra={"zone": zone, "is_valid": is_valid, "elapsed_ms": elapsed_ms},
    )
    if not is_valid and logger.isEnabledFor(logging.DEBUG):
        missing = missing_readings(primary, secondary)
        logger.debug(
            f"Zone {zone} missing readings: {dict(missing.most_common(10))}",
            extra={"zone": zone},
        )

    return ZoneValidation(zone=zone, is_valid=is_valid, elapsed_time=elapsed_ms)
