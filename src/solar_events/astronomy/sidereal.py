"""Greenwich Mean Sidereal Time."""

from __future__ import annotations

from solar_events.astronomy.angles import normalize_revolution


def gmst0(d: float) -> float:
    """Greenwich Mean Sidereal Time at 0h UT, in degrees.

    Generalised so that it may be evaluated at any instant: GMST0 is defined
    as GMST - UT, which makes the sidereal time at Greenwich simply
    ``gmst0(d) + 15 * UT_hours``. It grows by about four minutes a day and
    equals the Sun's mean longitude plus 180 degrees (ignoring aberration).
    """
    return normalize_revolution(
        (180.0 + 356.0470 + 282.9404) + (0.9856002585 + 4.70935e-5) * d
    )
