"""Exceptions raised by the rise/set solver."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from solar_events.astronomy.events import AstronomicalEvent
    from solar_events.models.location import Coordinates


class SolarCalculationError(Exception):
    """Base exception for solar event calculations."""

    def __init__(
        self,
        message: str,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        coordinate: Coordinates | None = None,
        event: AstronomicalEvent | None = None,
    ):
        super().__init__(message)
        self.year = year
        self.month = month
        self.day = day
        self.coordinate = coordinate
        self.event = event


class SunAlwaysAboveHorizon(SolarCalculationError):
    """Raised when the Sun stays above the target altitude all day."""

    pass


class SunAlwaysBelowHorizon(SolarCalculationError):
    """Raised when the Sun never reaches the target altitude."""

    pass


class InvalidDateError(SolarCalculationError):
    """Raised when a date falls outside the supported 1801-2099 range."""

    pass
