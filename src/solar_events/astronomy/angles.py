"""Degree-based trigonometry and angle reduction helpers.

All solar formulas in this package work in degrees, so these thin wrappers
keep the radian conversions in one place.
"""

from __future__ import annotations

import math

RADEG = 180.0 / math.pi
DEGRAD = math.pi / 180.0
INV360 = 1.0 / 360.0


def to_radians(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * DEGRAD


def to_degrees(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * RADEG


def normalize_revolution(x: float) -> float:
    """Reduce an angle to the first revolution, [0, 360).

    Floor-based, so negative input wraps forward: ``normalize_revolution(-10)``
    is 350.
    """
    return x - 360.0 * math.floor(x * INV360)


def normalize_signed_180(x: float) -> float:
    """Reduce an angle to [-180, 180)."""
    return x - 360.0 * math.floor(x * INV360 + 0.5)


def sin_deg(x: float) -> float:
    return math.sin(x * DEGRAD)


def cos_deg(x: float) -> float:
    return math.cos(x * DEGRAD)


def tan_deg(x: float) -> float:
    return math.tan(x * DEGRAD)


def asin_deg(x: float) -> float:
    """Arc sine in degrees. Undefined outside [-1, 1]."""
    return RADEG * math.asin(x)


def acos_deg(x: float) -> float:
    """Arc cosine in degrees. Undefined outside [-1, 1]."""
    return RADEG * math.acos(x)


def atan_deg(x: float) -> float:
    return RADEG * math.atan(x)


def atan2_deg(y: float, x: float) -> float:
    """Four-quadrant arc tangent of ``y / x`` in degrees, (-180, 180]."""
    return RADEG * math.atan2(y, x)
