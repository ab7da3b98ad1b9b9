"""Sun's ecliptic and equatorial position.

Low-precision orbital elements after Paul Schlyter's "How to compute
planetary positions", the same model used by the classic ``sunriset.c``.
Results are good to roughly a hundredth of a degree between 1801 and 2099,
which is enough for rise/set timing to within a few seconds.

All functions take ``d``, the number of days since 2000 Jan 0.0 UT
(negative before).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from solar_events.astronomy.angles import (
    atan2_deg,
    cos_deg,
    normalize_revolution,
    sin_deg,
    to_degrees,
)


@dataclass(frozen=True)
class EclipticPosition:
    """Sun's geocentric ecliptic coordinates. Ecliptic latitude is taken as 0."""

    longitude: float  # True solar longitude, degrees [0, 360)
    distance: float  # Earth-Sun distance, AU


@dataclass(frozen=True)
class EquatorialPosition:
    """Sun's geocentric equatorial coordinates."""

    right_ascension: float  # Degrees, (-180, 180]
    declination: float  # Degrees, bounded by the obliquity
    distance: float  # AU


def obliquity_of_ecliptic(d: float) -> float:
    """Inclination of Earth's axis to the ecliptic, in degrees."""
    return 23.4393 - 3.563e-7 * d


def ecliptic_position(d: float) -> EclipticPosition:
    """Compute the Sun's true ecliptic longitude and distance.

    Kepler's equation is solved with a single first-order step rather than
    iterated; at Earth's eccentricity the residual is far below the model's
    own error, and reference output depends on this exact form.
    """
    # Mean elements
    mean_anomaly = normalize_revolution(356.0470 + 0.9856002585 * d)
    perihelion = 282.9404 + 4.70935e-5 * d
    e = 0.016709 - 1.151e-9 * d

    eccentric_anomaly = mean_anomaly + to_degrees(e) * sin_deg(mean_anomaly) * (
        1.0 + e * cos_deg(mean_anomaly)
    )
    x = cos_deg(eccentric_anomaly) - e
    y = math.sqrt(1.0 - e * e) * sin_deg(eccentric_anomaly)

    distance = math.sqrt(x * x + y * y)
    true_anomaly = atan2_deg(y, x)
    longitude = normalize_revolution(true_anomaly + perihelion)
    return EclipticPosition(longitude=longitude, distance=distance)


def equatorial_position(d: float) -> EquatorialPosition:
    """Compute the Sun's right ascension, declination and distance."""
    ecliptic = ecliptic_position(d)

    # Ecliptic rectangular coordinates (z = 0)
    x = ecliptic.distance * cos_deg(ecliptic.longitude)
    y = ecliptic.distance * sin_deg(ecliptic.longitude)

    # Rotate about the x axis into the equatorial frame
    obliquity = obliquity_of_ecliptic(d)
    z = y * sin_deg(obliquity)
    y = y * cos_deg(obliquity)

    return EquatorialPosition(
        right_ascension=atan2_deg(y, x),
        declination=atan2_deg(z, math.sqrt(x * x + y * y)),
        distance=ecliptic.distance,
    )
