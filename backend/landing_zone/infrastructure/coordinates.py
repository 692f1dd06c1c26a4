"""Coordinate Lookup — rover readings recorded for each landing zone.

Invariants:
    - get_coordinates() returns new lists on every call; callers own them
    - The fixture table itself is immutable (tuples only)
    - Every zone in the catalogue, test zones included, has an entry

Design Decisions:
    - Static in-process table: there is no persistence layer
    - Async lookup keeps the route signature stable if the data ever moves
      behind a network call
    - Z9/Z10 generated from fixed seeds so runs are reproducible
"""

import logging
import random
from dataclasses import dataclass
from typing import TypedDict

from landing_zone.core.containment import Reading
from landing_zone.core.errors import ZoneNotFoundError

logger = logging.getLogger(__name__)


class RoverCoordinates(TypedDict):
    R1: list[Reading]
    R2: list[Reading]


@dataclass(frozen=True)
class ZoneSurvey:
    r1: tuple[Reading, ...]
    r2: tuple[Reading, ...]


def _generated_survey(
    seed: int, size: int, sample: int, stray: Reading | None = None,
) -> ZoneSurvey:
    """Large survey where R2 is drawn from R1, plus an optional stray reading."""
    rng = random.Random(seed)
    r1 = [rng.randint(-10_000, 10_000) for _ in range(size)]
    r2 = rng.sample(r1, sample)
    if stray is not None:
        r2.insert(rng.randrange(len(r2) + 1), stray)
    return ZoneSurvey(tuple(r1), tuple(r2))


_SURVEYS: dict[str, ZoneSurvey] = {
    "Z1": ZoneSurvey((10, 20, 20, 30), (20, 30)),
    "Z2": ZoneSurvey((10, 20), (20, 20)),
    "Z3": ZoneSurvey((5, 5, 3), (5, 3)),
    "Z4": ZoneSurvey((1, 2, 3, 4, 5), (2, 4)),
    "Z5": ZoneSurvey((1, 2, 3), (2, 9)),
    "Z6": ZoneSurvey((7, 3, 9, 3, 1, 8), ()),
    "Z7": ZoneSurvey((4.5, 2.25, 9.0, 2.25, -1.5), (2.25, -1.5, 2.25)),
    "Z8": ZoneSurvey((12, 3, 12, 40, 7, 3, 25), (3, 3, 3, 12)),
    "Z9": _generated_survey(seed=9, size=20_000, sample=5_000),
    "Z10": _generated_survey(seed=10, size=20_000, sample=5_000, stray=10_001),
    # every R1 reading is smaller than 5
    "Z11": ZoneSurvey((3, 1, 2), (1, 2, 5)),
}


async def get_coordinates(zone: str) -> RoverCoordinates:
    """Look up both rovers' readings for `zone`."""
    survey = _SURVEYS.get(zone)
    if survey is None:
        logger.error("No survey recorded", extra={"zone": zone})
        raise ZoneNotFoundError(zone)
    return {"R1": list(survey.r1), "R2": list(survey.r2)}
