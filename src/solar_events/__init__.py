"""Low-precision solar ephemeris: sunrise, sunset and twilight times."""

__version__ = "0.1.0"
