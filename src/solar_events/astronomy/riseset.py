"""Sunrise, sunset and twilight solver.

Given a calendar date, an observer and an ``AstronomicalEvent``, computes
either the length of the diurnal arc (hours the Sun spends above the event
altitude) or the UTC hours at which the Sun crosses that altitude.

Adapted from Paul Schlyter's public-domain ``sunriset.c``. Dates must lie in
1801-2099; the day-number formula is only valid there and is not checked.

Times are returned as fractional hours since 0h UTC of the given date and
are deliberately not wrapped into [0, 24): a value of -0.5 means 23:30 UTC on
the previous day. ``rise_set_interval`` does the rollover when converting to
datetimes.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from solar_events.astronomy.angles import (
    acos_deg,
    cos_deg,
    normalize_revolution,
    normalize_signed_180,
    sin_deg,
)
from solar_events.astronomy.errors import (
    InvalidDateError,
    SunAlwaysAboveHorizon,
    SunAlwaysBelowHorizon,
)
from solar_events.astronomy.events import SUNRISE_SUNSET, AstronomicalEvent
from solar_events.astronomy.sidereal import gmst0
from solar_events.astronomy.sun import (
    EquatorialPosition,
    ecliptic_position,
    equatorial_position,
    obliquity_of_ecliptic,
)
from solar_events.models.location import Coordinates

logger = logging.getLogger(__name__)

MIN_YEAR = 1801
MAX_YEAR = 2099

# Sun's apparent radius at 1 AU, degrees
SUN_RADIUS_AT_1AU = 0.2666


@dataclass(frozen=True)
class RiseSetHours:
    """Rise and set of an event in fractional UTC hours (not wrapped to 0-24)."""

    rise: float
    set: float

    @property
    def duration(self) -> float:
        """Hours between rise and set."""
        return self.set - self.rise

    @property
    def midpoint(self) -> float:
        """UTC hour halfway between rise and set (solar transit)."""
        return (self.rise + self.set) / 2.0


@dataclass(frozen=True)
class SolarInterval:
    """Rise and set of an event as timezone-aware UTC datetimes."""

    start: datetime
    end: datetime

    @property
    def duration(self) -> timedelta:
        return self.end - self.start


def days_since_2000_jan0(year: int, month: int, day: int) -> int:
    """Day number relative to 2000 Jan 0.0 (1999 Dec 31, 0h UT).

    Integer divisions truncate; every operand is positive for 1801-2099 so
    floor division gives the same result.
    """
    return (
        367 * year
        - (7 * (year + (month + 9) // 12)) // 4
        + (275 * month) // 9
        + day
        - 730530
    )


def _local_noon_offset(year: int, month: int, day: int, coordinate: Coordinates) -> float:
    """Days since 2000 Jan 0.0 at 12h local mean solar time."""
    return days_since_2000_jan0(year, month, day) + 0.5 - coordinate.longitude / 360.0


def _event_altitude(event: AstronomicalEvent, distance: float) -> float:
    altitude = event.target_altitude
    if event.upper_limb:
        altitude -= SUN_RADIUS_AT_1AU / distance
    return altitude


def diurnal_arc_hours(
    year: int,
    month: int,
    day: int,
    coordinate: Coordinates,
    event: AstronomicalEvent = SUNRISE_SUNSET,
) -> float:
    """Hours the Sun spends above the event altitude on the given date.

    Never fails: returns 0.0 when the Sun stays below the altitude all day
    and 24.0 when it stays above. Longitude matters little here; latitude
    is critical.
    """
    d = _local_noon_offset(year, month, day, coordinate)
    obliquity = obliquity_of_ecliptic(d)
    sun = ecliptic_position(d)

    sin_decl = sin_deg(obliquity) * sin_deg(sun.longitude)
    cos_decl = math.sqrt(1.0 - sin_decl * sin_decl)

    altitude = _event_altitude(event, sun.distance)
    cost = (sin_deg(altitude) - sin_deg(coordinate.latitude) * sin_decl) / (
        cos_deg(coordinate.latitude) * cos_decl
    )
    if cost >= 1.0:
        return 0.0
    if cost <= -1.0:
        return 24.0
    return (2.0 / 15.0) * acos_deg(cost)


def _transit(d: float, coordinate: Coordinates) -> tuple[float, EquatorialPosition]:
    """UTC hour of meridian transit, and the Sun's position used to find it."""
    # Local sidereal time at this moment
    sidereal = normalize_revolution(gmst0(d) + 180.0 + coordinate.longitude)
    sun = equatorial_position(d)
    return 12.0 - normalize_signed_180(sidereal - sun.right_ascension) / 15.0, sun


def solar_transit_hours(
    year: int,
    month: int,
    day: int,
    coordinate: Coordinates,
) -> float:
    """UTC hour at which the Sun crosses the observer's meridian."""
    tsouth, _ = _transit(_local_noon_offset(year, month, day, coordinate), coordinate)
    return tsouth


def rise_set_hours(
    year: int,
    month: int,
    day: int,
    coordinate: Coordinates,
    event: AstronomicalEvent = SUNRISE_SUNSET,
) -> RiseSetHours:
    """Rise and set of an event in fractional UTC hours.

    Args:
        year: Calendar year, 1801-2099
        month: Calendar month
        day: Calendar day
        coordinate: Observer location. Longitude IS critical here.
        event: Altitude event to solve for

    Returns:
        RiseSetHours relative to 0h UTC of the given date. Either value may
        fall outside [0, 24) when the crossing happens on an adjacent day.

    Raises:
        SunAlwaysAboveHorizon: The Sun stays above the event altitude all day
        SunAlwaysBelowHorizon: The Sun never reaches the event altitude
    """
    d = _local_noon_offset(year, month, day, coordinate)

    # Time when the Sun is due south (north, in the southern hemisphere)
    tsouth, sun = _transit(d, coordinate)

    altitude = _event_altitude(event, sun.distance)
    cost = (
        sin_deg(altitude) - sin_deg(coordinate.latitude) * sin_deg(sun.declination)
    ) / (cos_deg(coordinate.latitude) * cos_deg(sun.declination))

    if cost >= 1.0:
        logger.debug(
            f"Sun below {altitude:.3f} deg all day at {coordinate} on "
            f"{year:04d}-{month:02d}-{day:02d}"
        )
        raise SunAlwaysBelowHorizon(
            f"Sun never reaches {event.target_altitude:g} deg at {coordinate} "
            f"on {year:04d}-{month:02d}-{day:02d}",
            year=year,
            month=month,
            day=day,
            coordinate=coordinate,
            event=event,
        )
    if cost <= -1.0:
        logger.debug(
            f"Sun above {altitude:.3f} deg all day at {coordinate} on "
            f"{year:04d}-{month:02d}-{day:02d}"
        )
        raise SunAlwaysAboveHorizon(
            f"Sun stays above {event.target_altitude:g} deg at {coordinate} "
            f"on {year:04d}-{month:02d}-{day:02d}",
            year=year,
            month=month,
            day=day,
            coordinate=coordinate,
            event=event,
        )

    # Diurnal arc, hours
    t = acos_deg(cost) / 15.0
    return RiseSetHours(rise=tsouth - t, set=tsouth + t)


def _calendar_components(on: date | datetime) -> tuple[int, int, int]:
    """Split a date into (year, month, day), enforcing the supported range."""
    if not isinstance(on, date):
        raise InvalidDateError(f"Expected a date or datetime, got {type(on).__name__}")
    if not MIN_YEAR <= on.year <= MAX_YEAR:
        raise InvalidDateError(
            f"Year {on.year} is outside the supported range {MIN_YEAR}-{MAX_YEAR}",
            year=on.year,
            month=on.month,
            day=on.day,
        )
    return on.year, on.month, on.day


def _utc_midnight(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


def utc_hours_to_datetime(year: int, month: int, day: int, hours: float) -> datetime:
    """Convert fractional UTC hours on a date to a datetime, rounded to the second.

    Hours outside [0, 24) roll over onto the neighbouring day.
    """
    return _utc_midnight(year, month, day) + timedelta(seconds=round(hours * 3600))


def rise_set_interval(
    on: date | datetime,
    coordinate: Coordinates,
    event: AstronomicalEvent = SUNRISE_SUNSET,
) -> SolarInterval:
    """Rise and set of an event on a calendar date, as UTC datetimes.

    The calendar date is taken from ``on`` as given; for a datetime that is
    its own wall-clock date, whatever its timezone.

    Raises:
        InvalidDateError: The year is outside 1801-2099
        SunAlwaysAboveHorizon: The Sun stays above the event altitude all day
        SunAlwaysBelowHorizon: The Sun never reaches the event altitude
    """
    year, month, day = _calendar_components(on)
    hours = rise_set_hours(year, month, day, coordinate, event)
    return SolarInterval(
        start=utc_hours_to_datetime(year, month, day, hours.rise),
        end=utc_hours_to_datetime(year, month, day, hours.set),
    )


def solar_noon(on: date | datetime, coordinate: Coordinates) -> datetime:
    """Time of solar transit on a calendar date, as a UTC datetime."""
    year, month, day = _calendar_components(on)
    return utc_hours_to_datetime(
        year, month, day, solar_transit_hours(year, month, day, coordinate)
    )


def day_length(
    on: date | datetime,
    coordinate: Coordinates,
    event: AstronomicalEvent = SUNRISE_SUNSET,
) -> timedelta:
    """Time the Sun spends above the event altitude on a calendar date."""
    year, month, day = _calendar_components(on)
    return timedelta(hours=diurnal_arc_hours(year, month, day, coordinate, event))
