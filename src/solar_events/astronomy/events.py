"""Named solar altitude events: sunrise/sunset and the three twilights."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AstronomicalEvent:
    """Sun altitude that defines an event, and whether it refers to the upper limb.

    Attributes:
        target_altitude: Altitude in degrees. ``-35/60`` for sunrise/sunset
            (refraction at the horizon), -6 for civil, -12 for nautical and
            -18 for astronomical twilight.
        upper_limb: True only for sunrise/sunset, where the Sun's apparent
            radius is subtracted so the event marks its upper edge.
        name: Label used by the CLI and API. Not part of equality.
    """

    target_altitude: float
    upper_limb: bool = False
    name: str = field(default="custom", compare=False)


SUNRISE_SUNSET = AstronomicalEvent(-35.0 / 60.0, upper_limb=True, name="sunrise")
CIVIL_TWILIGHT = AstronomicalEvent(-6.0, upper_limb=False, name="civil")
NAUTICAL_TWILIGHT = AstronomicalEvent(-12.0, upper_limb=False, name="nautical")
ASTRONOMICAL_TWILIGHT = AstronomicalEvent(-18.0, upper_limb=False, name="astronomical")

EVENTS: dict[str, AstronomicalEvent] = {
    event.name: event
    for event in (SUNRISE_SUNSET, CIVIL_TWILIGHT, NAUTICAL_TWILIGHT, ASTRONOMICAL_TWILIGHT)
}


def event_by_name(name: str) -> AstronomicalEvent:
    """Look up a catalog event by name (case-insensitive)."""
    try:
        return EVENTS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown event '{name}'. Expected one of: {', '.join(EVENTS)}"
        ) from None
