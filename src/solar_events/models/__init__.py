"""Domain models for solar event calculations."""

from solar_events.models.location import Coordinates

__all__ = [
    "Coordinates",
]
