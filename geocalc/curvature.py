"""
Radii of curvature and meridian arc length on the reference ellipsoid
"""

__all__ = ['meridian_arc_length', 'radius_meridian', 'radius_prime_vertical']

import math

from geocalc.conversion import to_radians
from geocalc.ellipsoid import WGS84


def radius_meridian(lat: float) -> float:
    """
    Radius of curvature in the meridian (north-south) plane, often written M.

    Args:
        lat:
            Latitude in decimal degrees. Not range-checked.

    Returns:
        (float) the radius in meters
    """
    sin_lat = math.sin(to_radians(lat))
    return WGS84.a * (1 - WGS84.e2) / (1 - WGS84.e2 * sin_lat ** 2) ** 1.5


def radius_prime_vertical(lat: float) -> float:
    """
    Radius of curvature in the prime vertical (east-west) plane, often written N.

    Args:
        lat:
            Latitude in decimal degrees. Not range-checked.

    Returns:
        (float) the radius in meters
    """
    sin_lat = math.sin(to_radians(lat))
    return WGS84.a / math.sqrt(1 - WGS84.e2 * sin_lat ** 2)


def meridian_arc_length(lat: float) -> float:
    """
    Distance along the meridian from the equator to the given latitude, using the
    series expansion in e^2, e^4 and e^6 that Transverse Mercator formulas rely on.
    Negative for southern latitudes.

    Args:
        lat:
            Latitude in decimal degrees

    Returns:
        (float) the arc length in meters
    """
    phi = to_radians(lat)
    e2 = WGS84.e2
    e4 = e2 ** 2
    e6 = e2 ** 3
    return WGS84.a * (
        (1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256) * phi
        - (3 * e2 / 8 + 3 * e4 / 32 + 45 * e6 / 1024) * math.sin(2 * phi)
        + (15 * e4 / 256 + 45 * e6 / 1024) * math.sin(4 * phi)
        - (35 * e6 / 3072) * math.sin(6 * phi)
    )
