"""Date-level solar events for an observer.

This module builds on the rise/set solver to provide:
- Sun position (altitude, azimuth) at an instant
- Sunrise, sunset and solar noon
- Civil, nautical and astronomical twilight boundaries
- Day length for any altitude event

Events that do not happen on a date (polar day or night) are reported as
``None`` here rather than raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from solar_events.astronomy.angles import (
    asin_deg,
    atan2_deg,
    cos_deg,
    normalize_revolution,
    sin_deg,
    tan_deg,
)
from solar_events.astronomy.errors import SunAlwaysAboveHorizon, SunAlwaysBelowHorizon
from solar_events.astronomy.events import (
    ASTRONOMICAL_TWILIGHT,
    CIVIL_TWILIGHT,
    NAUTICAL_TWILIGHT,
    SUNRISE_SUNSET,
    AstronomicalEvent,
)
from solar_events.astronomy.riseset import (
    SolarInterval,
    day_length,
    days_since_2000_jan0,
    rise_set_interval,
    solar_noon,
)
from solar_events.astronomy.sidereal import gmst0
from solar_events.astronomy.sun import equatorial_position
from solar_events.models.location import Coordinates

logger = logging.getLogger(__name__)


@dataclass
class SunPosition:
    """Sun position at a specific time and location."""

    altitude_deg: float  # Degrees above horizon (negative = below)
    azimuth_deg: float  # Degrees from north (0=N, 90=E, 180=S, 270=W)
    time: datetime
    is_day: bool  # Sun above horizon


@dataclass
class TwilightTimes:
    """Twilight and sun event times for a specific date and location."""

    date: date

    # Sun events
    sunrise: datetime | None  # Upper limb at the refracted horizon
    sunset: datetime | None
    solar_noon: datetime

    # Civil twilight (sun at -6°)
    civil_twilight_start: datetime | None  # Morning, sun rising toward -6°
    civil_twilight_end: datetime | None  # Evening, sun setting past -6°

    # Nautical twilight (sun at -12°)
    nautical_twilight_start: datetime | None
    nautical_twilight_end: datetime | None

    # Astronomical twilight (sun at -18°)
    astronomical_twilight_start: datetime | None  # True darkness ends after this
    astronomical_twilight_end: datetime | None  # True darkness begins after this


def get_sun_position(coords: Coordinates, time: datetime) -> SunPosition:
    """Calculate sun position at a given time and location.

    Args:
        coords: Geographic coordinates
        time: Time to calculate position for (must be timezone-aware)

    Returns:
        SunPosition with altitude and azimuth in degrees
    """
    if time.tzinfo is None:
        raise ValueError("time must be timezone-aware.")

    utc = time.astimezone(timezone.utc)
    ut_hours = (
        utc.hour
        + utc.minute / 60.0
        + utc.second / 3600.0
        + utc.microsecond / 3_600_000_000.0
    )
    d = days_since_2000_jan0(utc.year, utc.month, utc.day) + ut_hours / 24.0

    sun = equatorial_position(d)
    local_sidereal = normalize_revolution(gmst0(d) + 15.0 * ut_hours + coords.longitude)
    hour_angle = local_sidereal - sun.right_ascension

    sin_alt = sin_deg(coords.latitude) * sin_deg(sun.declination) + cos_deg(
        coords.latitude
    ) * cos_deg(sun.declination) * cos_deg(hour_angle)
    altitude = asin_deg(max(-1.0, min(1.0, sin_alt)))

    azimuth = normalize_revolution(
        atan2_deg(
            sin_deg(hour_angle),
            cos_deg(hour_angle) * sin_deg(coords.latitude)
            - tan_deg(sun.declination) * cos_deg(coords.latitude),
        )
        + 180.0
    )

    return SunPosition(
        altitude_deg=altitude,
        azimuth_deg=azimuth,
        time=time,
        is_day=altitude > 0,
    )


def _crossing(
    coords: Coordinates, on: date, event: AstronomicalEvent
) -> SolarInterval | None:
    """Rise/set interval for an event, or None if the Sun never crosses it."""
    try:
        return rise_set_interval(on, coords, event)
    except (SunAlwaysAboveHorizon, SunAlwaysBelowHorizon) as exc:
        logger.debug(f"No {event.name} crossing: {exc}")
        return None


def get_twilight_times(coords: Coordinates, on: date | datetime) -> TwilightTimes:
    """Calculate twilight and sun event times for a specific date.

    Args:
        coords: Geographic coordinates
        on: Date to calculate for (time portion of a datetime is ignored)

    Returns:
        TwilightTimes with all twilight boundaries and sun events, in UTC
    """
    day = on.date() if isinstance(on, datetime) else on

    sun = _crossing(coords, day, SUNRISE_SUNSET)
    civil = _crossing(coords, day, CIVIL_TWILIGHT)
    nautical = _crossing(coords, day, NAUTICAL_TWILIGHT)
    astro = _crossing(coords, day, ASTRONOMICAL_TWILIGHT)

    return TwilightTimes(
        date=day,
        sunrise=sun.start if sun else None,
        sunset=sun.end if sun else None,
        solar_noon=solar_noon(day, coords),
        civil_twilight_start=civil.start if civil else None,
        civil_twilight_end=civil.end if civil else None,
        nautical_twilight_start=nautical.start if nautical else None,
        nautical_twilight_end=nautical.end if nautical else None,
        astronomical_twilight_start=astro.start if astro else None,
        astronomical_twilight_end=astro.end if astro else None,
    )


class AstronomyCalculator:
    """Calculator for solar events at a specific location.

    This class provides a convenient interface for getting solar data for a
    fixed location, caching twilight summaries per date.

    Example:
        ```python
        calc = AstronomyCalculator(Coordinates(latitude=53.248, longitude=-4.535))

        # Get twilight times for today
        twilight = calc.get_twilight_times(date.today())

        # Get sun position right now
        sun = calc.get_sun_position(datetime.now(timezone.utc))

        # Hours between civil dawn and dusk
        hours = calc.get_day_length(date.today(), CIVIL_TWILIGHT)
        ```
    """

    def __init__(self, coordinates: Coordinates):
        """Initialize calculator for a specific location.

        Args:
            coordinates: Geographic coordinates for calculations
        """
        self.coordinates = coordinates
        self._twilight_cache: dict[str, TwilightTimes] = {}

    def get_sun_position(self, time: datetime) -> SunPosition:
        """Get sun position at the given time."""
        return get_sun_position(self.coordinates, time)

    def get_twilight_times(self, on: date | datetime) -> TwilightTimes:
        """Get twilight times for a date (cached)."""
        day = on.date() if isinstance(on, datetime) else on
        cache_key = day.isoformat()
        if cache_key not in self._twilight_cache:
            self._twilight_cache[cache_key] = get_twilight_times(self.coordinates, day)
        return self._twilight_cache[cache_key]

    def get_rise_set(
        self,
        on: date | datetime,
        event: AstronomicalEvent = SUNRISE_SUNSET,
    ) -> SolarInterval:
        """Rise and set of an event. Raises if the Sun never crosses it."""
        return rise_set_interval(on, self.coordinates, event)

    def get_day_length(
        self,
        on: date | datetime,
        event: AstronomicalEvent = SUNRISE_SUNSET,
    ) -> timedelta:
        """Time the Sun spends above the event altitude."""
        return day_length(on, self.coordinates, event)

    def is_astronomical_night(self, time: datetime) -> bool:
        """Check if it's astronomical night (sun below -18°)."""
        sun = self.get_sun_position(time)
        return sun.altitude_deg < ASTRONOMICAL_TWILIGHT.target_altitude

    def is_night(self, time: datetime) -> bool:
        """Check if it's night (sun below horizon)."""
        sun = self.get_sun_position(time)
        return sun.altitude_deg < 0
