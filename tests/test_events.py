"""Tests for the named altitude events."""

import dataclasses

import pytest

from solar_events.astronomy.events import (
    ASTRONOMICAL_TWILIGHT,
    CIVIL_TWILIGHT,
    EVENTS,
    NAUTICAL_TWILIGHT,
    SUNRISE_SUNSET,
    AstronomicalEvent,
    event_by_name,
)


class TestCatalog:
    """Tests for the four catalog events."""

    def test_sunrise_sunset(self):
        assert SUNRISE_SUNSET.target_altitude == pytest.approx(-35.0 / 60.0)
        assert SUNRISE_SUNSET.upper_limb is True

    @pytest.mark.parametrize(
        "event,altitude",
        [
            (CIVIL_TWILIGHT, -6.0),
            (NAUTICAL_TWILIGHT, -12.0),
            (ASTRONOMICAL_TWILIGHT, -18.0),
        ],
    )
    def test_twilights_use_sun_centre(self, event: AstronomicalEvent, altitude: float):
        assert event.target_altitude == altitude
        assert event.upper_limb is False

    def test_events_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            CIVIL_TWILIGHT.target_altitude = 0.0  # type: ignore[misc]

    def test_custom_event_equality_ignores_name(self):
        """Test that a custom event equal in altitude matches the catalog one."""
        assert AstronomicalEvent(-6.0) == CIVIL_TWILIGHT
        assert AstronomicalEvent(-6.0, upper_limb=True) != CIVIL_TWILIGHT


class TestEventByName:
    """Tests for event lookup by name."""

    @pytest.mark.parametrize("name", list(EVENTS))
    def test_lookup(self, name: str):
        assert event_by_name(name) is EVENTS[name]

    def test_case_insensitive(self):
        assert event_by_name(" Civil ") is CIVIL_TWILIGHT

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown event 'golden'"):
            event_by_name("golden")
