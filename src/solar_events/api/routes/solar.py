"""Solar event routes.

Every endpoint takes the observer as `lat`/`lon` query parameters (decimal
degrees, east positive) and a calendar `date` or an instant `time`.
"""

from __future__ import annotations

import datetime as dt

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from solar_events.astronomy.calculator import get_sun_position, get_twilight_times
from solar_events.astronomy.events import AstronomicalEvent, event_by_name
from solar_events.astronomy.riseset import (
    MAX_YEAR,
    MIN_YEAR,
    diurnal_arc_hours,
    rise_set_hours,
    utc_hours_to_datetime,
)
from solar_events.config import get_settings
from solar_events.models.location import Coordinates

router = APIRouter()


class DayLengthResponse(BaseModel):
    """Hours the Sun spends above an event altitude."""

    date: dt.date
    latitude: float
    longitude: float
    event: str
    hours: float


class RiseSetResponse(BaseModel):
    """Rise and set of an event.

    `rise_hours`/`set_hours` are relative to 0h UTC of `date` and may fall
    outside 0-24 when the crossing happens on a neighbouring day.
    """

    date: dt.date
    latitude: float
    longitude: float
    event: str
    rise_hours: float
    set_hours: float
    rise: dt.datetime
    set: dt.datetime


class TwilightResponse(BaseModel):
    """All sun events for a date. Events that do not occur are null."""

    date: dt.date
    latitude: float
    longitude: float
    sunrise: dt.datetime | None
    sunset: dt.datetime | None
    solar_noon: dt.datetime
    civil_twilight_start: dt.datetime | None
    civil_twilight_end: dt.datetime | None
    nautical_twilight_start: dt.datetime | None
    nautical_twilight_end: dt.datetime | None
    astronomical_twilight_start: dt.datetime | None
    astronomical_twilight_end: dt.datetime | None


class SunPositionResponse(BaseModel):
    """Sun altitude and azimuth at an instant."""

    time: dt.datetime
    latitude: float
    longitude: float
    altitude_deg: float
    azimuth_deg: float
    is_day: bool


def get_coordinates(
    lat: float = Query(..., ge=-90, le=90, description="Latitude in decimal degrees"),
    lon: float = Query(..., ge=-180, le=180, description="Longitude in decimal degrees"),
) -> Coordinates:
    return Coordinates(latitude=lat, longitude=lon)


def get_event(
    event: str | None = Query(
        default=None,
        description="sunrise, civil, nautical or astronomical",
    ),
) -> AstronomicalEvent:
    """Resolve the event name, falling back to the configured default."""
    try:
        return event_by_name(event or get_settings().default_event)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )


def get_date(
    date: dt.date = Query(..., description="Calendar date (YYYY-MM-DD)"),
) -> dt.date:
    if not MIN_YEAR <= date.year <= MAX_YEAR:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"date must be between {MIN_YEAR} and {MAX_YEAR}",
        )
    return date


@router.get("/day-length", response_model=DayLengthResponse)
async def day_length(
    coords: Coordinates = Depends(get_coordinates),
    date: dt.date = Depends(get_date),
    event: AstronomicalEvent = Depends(get_event),
) -> DayLengthResponse:
    """Get the hours between rise and set of an event (0 or 24 at the poles)."""
    hours = diurnal_arc_hours(date.year, date.month, date.day, coords, event)
    return DayLengthResponse(
        date=date,
        latitude=coords.latitude,
        longitude=coords.longitude,
        event=event.name,
        hours=hours,
    )


@router.get("/rise-set", response_model=RiseSetResponse)
async def rise_set(
    coords: Coordinates = Depends(get_coordinates),
    date: dt.date = Depends(get_date),
    event: AstronomicalEvent = Depends(get_event),
) -> RiseSetResponse:
    """Get the rise and set of an event.

    Responds 422 when the Sun stays above or below the event altitude all day.
    """
    hours = rise_set_hours(date.year, date.month, date.day, coords, event)
    return RiseSetResponse(
        date=date,
        latitude=coords.latitude,
        longitude=coords.longitude,
        event=event.name,
        rise_hours=hours.rise,
        set_hours=hours.set,
        rise=utc_hours_to_datetime(date.year, date.month, date.day, hours.rise),
        set=utc_hours_to_datetime(date.year, date.month, date.day, hours.set),
    )


@router.get("/twilight", response_model=TwilightResponse)
async def twilight(
    coords: Coordinates = Depends(get_coordinates),
    date: dt.date = Depends(get_date),
) -> TwilightResponse:
    """Get sunrise, sunset, solar noon and every twilight boundary."""
    times = get_twilight_times(coords, date)
    return TwilightResponse(
        date=times.date,
        latitude=coords.latitude,
        longitude=coords.longitude,
        sunrise=times.sunrise,
        sunset=times.sunset,
        solar_noon=times.solar_noon,
        civil_twilight_start=times.civil_twilight_start,
        civil_twilight_end=times.civil_twilight_end,
        nautical_twilight_start=times.nautical_twilight_start,
        nautical_twilight_end=times.nautical_twilight_end,
        astronomical_twilight_start=times.astronomical_twilight_start,
        astronomical_twilight_end=times.astronomical_twilight_end,
    )


@router.get("/position", response_model=SunPositionResponse)
async def position(
    coords: Coordinates = Depends(get_coordinates),
    time: dt.datetime = Query(..., description="ISO 8601 instant; naive means UTC"),
) -> SunPositionResponse:
    """Get the Sun's altitude and azimuth at an instant."""
    if time.tzinfo is None:
        time = time.replace(tzinfo=dt.timezone.utc)
    sun = get_sun_position(coords, time)
    return SunPositionResponse(
        time=sun.time,
        latitude=coords.latitude,
        longitude=coords.longitude,
        altitude_deg=sun.altitude_deg,
        azimuth_deg=sun.azimuth_deg,
        is_day=sun.is_day,
    )
