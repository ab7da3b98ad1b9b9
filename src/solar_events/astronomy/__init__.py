"""Solar position, sunrise/sunset and twilight calculations."""

from solar_events.astronomy.calculator import (
    AstronomyCalculator,
    SunPosition,
    TwilightTimes,
    get_sun_position,
    get_twilight_times,
)
from solar_events.astronomy.errors import (
    InvalidDateError,
    SolarCalculationError,
    SunAlwaysAboveHorizon,
    SunAlwaysBelowHorizon,
)
from solar_events.astronomy.events import (
    ASTRONOMICAL_TWILIGHT,
    CIVIL_TWILIGHT,
    NAUTICAL_TWILIGHT,
    SUNRISE_SUNSET,
    AstronomicalEvent,
    event_by_name,
)
from solar_events.astronomy.riseset import (
    RiseSetHours,
    SolarInterval,
    day_length,
    days_since_2000_jan0,
    diurnal_arc_hours,
    rise_set_hours,
    rise_set_interval,
    solar_noon,
    solar_transit_hours,
)

__all__ = [
    # Calculator
    "AstronomyCalculator",
    "SunPosition",
    "TwilightTimes",
    "get_sun_position",
    "get_twilight_times",
    # Errors
    "SolarCalculationError",
    "SunAlwaysAboveHorizon",
    "SunAlwaysBelowHorizon",
    "InvalidDateError",
    # Events
    "AstronomicalEvent",
    "SUNRISE_SUNSET",
    "CIVIL_TWILIGHT",
    "NAUTICAL_TWILIGHT",
    "ASTRONOMICAL_TWILIGHT",
    "event_by_name",
    # Solver
    "RiseSetHours",
    "SolarInterval",
    "days_since_2000_jan0",
    "diurnal_arc_hours",
    "rise_set_hours",
    "rise_set_interval",
    "solar_transit_hours",
    "solar_noon",
    "day_length",
]
