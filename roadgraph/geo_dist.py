"""Great-circle distance between geographic coordinates."""

import math

_PI_DIV_180 = 3.14159265359 / 180.0
EARTH_RADIUS = 6371000.785
"""Earth radius in meters."""


def geo_dist(lat_a: float, lon_a: float, lat_b: float, lon_b: float) -> float:
    """Return the distance in meters between two points given in degrees.

    Latitudes must lie in [-90, 90] and longitudes in [-180, 180].
    """
    cos_lat_diff = math.cos((lat_a - lat_b) * _PI_DIV_180)
    cos_lat_sum = math.cos((lat_a + lat_b) * _PI_DIV_180)
    cos_lon_diff = math.cos((lon_a - lon_b) * _PI_DIV_180)
    c = 0.5 * ((cos_lat_diff + cos_lat_sum) * cos_lon_diff + cos_lat_diff - cos_lat_sum)
    # Rounding can push c marginally outside [-1, 1].
    c = max(-1.0, min(1.0, c))
    return math.acos(c) * EARTH_RADIUS