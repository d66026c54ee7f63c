"""Geodesic utilities.

Provides the haversine formula to compute great-circle distances between
latitude/longitude coordinates on a spherical Earth.  The sphere uses
the mean Earth radius, so results differ from ellipsoidal distances by
up to about half a percent.

See https://www.movable-type.co.uk/scripts/latlong.html
"""

import math

EARTH_RADIUS = 6371000.0
"""Mean Earth radius in metres."""

RAD_PER_DEG = math.pi / 180
"""Degree to radian scale factor."""


def _sqrt(x: float) -> float:
    return math.sqrt(x) if x >= 0 else math.nan


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute the great‑circle distance between two points on Earth.

    Coordinates are not range checked.  Non-finite input propagates to
    the result as NaN rather than raising.

    Parameters
    ----------
    lat1, lon1 : float
        Latitude and longitude of point 1 in degrees.
    lat2, lon2 : float
        Latitude and longitude of point 2 in degrees.

    Returns
    -------
    float
        Distance in metres.
    """
    # math.sin raises on infinities where C libm returns NaN
    if not all(math.isfinite(v) for v in (lat1, lon1, lat2, lon2)):
        return math.nan
    phi1 = lat1 * RAD_PER_DEG
    phi2 = lat2 * RAD_PER_DEG
    sin_dphi = math.sin((lat2 - lat1) * RAD_PER_DEG / 2)
    sin_dlambda = math.sin((lon2 - lon1) * RAD_PER_DEG / 2)
    a = sin_dphi * sin_dphi + math.cos(phi1) * math.cos(phi2) * sin_dlambda * sin_dlambda
    # a is not clamped; rounding past [0, 1] gives NaN as in C
    c = 2 * math.atan2(_sqrt(a), _sqrt(1 - a))
    return EARTH_RADIUS * c
