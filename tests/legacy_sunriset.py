"""Straight port of Paul Schlyter's sunriset.c (public domain, 1989-1992).

Kept deliberately close to the C source, including its argument order
(lon before lat) and its status-code return, so it can serve as an
independent reference for the package implementation.
"""

import math

RADEG = 180.0 / math.pi
DEGRAD = math.pi / 180.0
INV360 = 1.0 / 360.0


def days_since_2000_Jan_0(y, m, d):
    return 367 * y - ((7 * (y + ((m + 9) // 12))) // 4) + ((275 * m) // 9) + d - 730530


def sind(x):
    return math.sin(x * DEGRAD)


def cosd(x):
    return math.cos(x * DEGRAD)


def tand(x):
    return math.tan(x * DEGRAD)


def atand(x):
    return RADEG * math.atan(x)


def asind(x):
    return RADEG * math.asin(x)


def acosd(x):
    return RADEG * math.acos(x)


def atan2d(y, x):
    return RADEG * math.atan2(y, x)


def revolution(x):
    return x - 360.0 * math.floor(x * INV360)


def rev180(x):
    return x - 360.0 * math.floor(x * INV360 + 0.5)


def GMST0(d):
    return revolution((180.0 + 356.0470 + 282.9404) + (0.9856002585 + 4.70935E-5) * d)


def sunpos(d):
    """Return (lon, r)."""
    M = revolution(356.0470 + 0.9856002585 * d)
    w = 282.9404 + 4.70935E-5 * d
    e = 0.016709 - 1.151E-9 * d

    E = M + e * RADEG * sind(M) * (1.0 + e * cosd(M))
    x = cosd(E) - e
    y = math.sqrt(1.0 - e * e) * sind(E)
    r = math.sqrt(x * x + y * y)
    v = atan2d(y, x)
    lon = v + w
    if lon >= 360.0:
        lon -= 360.0
    return lon, r


def sun_RA_dec(d):
    """Return (RA, dec, r)."""
    lon, r = sunpos(d)
    x = r * cosd(lon)
    y = r * sind(lon)
    obl_ecl = 23.4393 - 3.563E-7 * d
    z = y * sind(obl_ecl)
    y = y * cosd(obl_ecl)
    RA = atan2d(y, x)
    dec = atan2d(z, math.sqrt(x * x + y * y))
    return RA, dec, r


def __sunriset__(year, month, day, lon, lat, altit, upper_limb):
    """Return (rc, trise, tset). rc is 0, +1 (always above) or -1 (always below)."""
    rc = 0
    d = days_since_2000_Jan_0(year, month, day) + 0.5 - lon / 360.0
    sidtime = revolution(GMST0(d) + 180.0 + lon)
    sRA, sdec, sr = sun_RA_dec(d)
    tsouth = 12.0 - rev180(sidtime - sRA) / 15.0
    sradius = 0.2666 / sr
    if upper_limb:
        altit -= sradius

    cost = (sind(altit) - sind(lat) * sind(sdec)) / (cosd(lat) * cosd(sdec))
    if cost >= 1.0:
        rc = -1
        t = 0.0
    elif cost <= -1.0:
        rc = +1
        t = 12.0
    else:
        t = acosd(cost) / 15.0

    return rc, tsouth - t, tsouth + t


def __daylen__(year, month, day, lon, lat, altit, upper_limb):
    d = days_since_2000_Jan_0(year, month, day) + 0.5 - lon / 360.0
    obl_ecl = 23.4393 - 3.563E-7 * d
    slon, sr = sunpos(d)
    sin_sdecl = sind(obl_ecl) * sind(slon)
    cos_sdecl = math.sqrt(1.0 - sin_sdecl * sin_sdecl)
    sradius = 0.2666 / sr
    if upper_limb:
        altit -= sradius

    cost = (sind(altit) - sind(lat) * sin_sdecl) / (cosd(lat) * cos_sdecl)
    if cost >= 1.0:
        t = 0.0
    elif cost <= -1.0:
        t = 24.0
    else:
        t = (2.0 / 15.0) * acosd(cost)
    return t


def sun_rise_set(year, month, day, lon, lat):
    return __sunriset__(year, month, day, lon, lat, -35.0 / 60.0, 1)


def day_length(year, month, day, lon, lat):
    return __daylen__(year, month, day, lon, lat, -35.0 / 60.0, 1)


def day_civil_twilight_length(year, month, day, lon, lat):
    return __daylen__(year, month, day, lon, lat, -6.0, 0)


def day_nautical_twilight_length(year, month, day, lon, lat):
    return __daylen__(year, month, day, lon, lat, -12.0, 0)


def day_astronomical_twilight_length(year, month, day, lon, lat):
    return __daylen__(year, month, day, lon, lat, -18.0, 0)
