"""Mission briefing served at the landing zone router root."""

from landing_zone.core.zones import Zone

LANDER_NAME = "The lander"


def mission_briefing() -> str:
    first, last = Zone.Z1.value, Zone.Z10.value
    return (
        f"{LANDER_NAME} needs to find a landing zone, but is not sure which "
        f"of the {len(Zone)} candidate zones has the correct coordinates.\n\n"
        "Two rovers surveyed every zone. One of them shared garbage "
        "coordinates, while the other one malfunctioned in the middle of "
        "its run.\n\n"
        "A zone is safe to land on when every coordinate reported by rover "
        "R2 is also present in the coordinates reported by rover R1, "
        "counting repeated coordinates.\n\n"
        f"The API accepts a landing zone ({first}, Z2, Z3, ... {last}) and "
        "returns an object with the zone, whether that zone is valid, and "
        "the time in milliseconds it took to compute the result."
    )
