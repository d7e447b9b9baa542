"""
Forward Universal Transverse Mercator transform
"""

__all__ = ['UTMCoordinate', 'central_meridian', 'to_utm', 'utm_zone']

import math
from typing import NamedTuple

from geocalc._const import (
    UTM_FALSE_EASTING, UTM_FALSE_NORTHING, UTM_K0, UTM_ZONE_COUNT, UTM_ZONE_WIDTH
)
from geocalc.conversion import to_radians
from geocalc.curvature import meridian_arc_length, radius_prime_vertical
from geocalc.ellipsoid import WGS84
from geocalc.utils.functions import round_half_up


class UTMCoordinate(NamedTuple):
    """A UTM position; easting and northing are in meters"""
    zone: int
    hemisphere: str
    easting: float
    northing: float

    def __str__(self):
        return f'{self.zone}{self.hemisphere} {self.easting:.2f}E {self.northing:.2f}N'


def utm_zone(lon: float) -> int:
    """
    The UTM zone number (1-60) containing a longitude. Zone boundaries belong to the
    zone to their east, except 180 which stays in zone 60.

    Args:
        lon:
            Longitude in decimal degrees

    Returns:
        int
    """
    zone = math.floor((lon + 180) / UTM_ZONE_WIDTH) + 1
    return max(1, min(UTM_ZONE_COUNT, zone))


def central_meridian(zone: int) -> float:
    """The longitude (degrees) of a UTM zone's central meridian"""
    return (zone - 1) * UTM_ZONE_WIDTH - 180 + UTM_ZONE_WIDTH / 2


def to_utm(lat: float, lon: float) -> UTMCoordinate:
    """
    Projects a latitude/longitude onto its UTM zone.

    UTM is only meant for latitudes between 80S and 84N. Nothing outside that band is
    rejected, but the results there are increasingly distorted.

    Args:
        lat:
            Latitude in decimal degrees

        lon:
            Longitude in decimal degrees

    Returns:
        UTMCoordinate, with easting and northing rounded to 2 decimal places
    """
    zone = utm_zone(lon)
    phi = to_radians(lat)
    ep2 = WGS84.ep2

    N = radius_prime_vertical(lat)
    T = math.tan(phi) ** 2
    C = ep2 * math.cos(phi) ** 2
    A = math.cos(phi) * (to_radians(lon) - to_radians(central_meridian(zone)))
    M = meridian_arc_length(lat)

    easting = UTM_K0 * N * (
        A
        + (1 - T + C) * A ** 3 / 6
        + (5 - 18 * T + T ** 2 + 72 * C - 58 * ep2) * A ** 5 / 120
    ) + UTM_FALSE_EASTING

    northing = UTM_K0 * (
        M + N * math.tan(phi) * (
            A ** 2 / 2
            + (5 - T + 9 * C + 4 * C ** 2) * A ** 4 / 24
            + (61 - 58 * T + T ** 2 + 600 * C - 330 * ep2) * A ** 6 / 720
        )
    )
    if lat < 0:
        northing += UTM_FALSE_NORTHING

    return UTMCoordinate(
        zone,
        'N' if lat >= 0 else 'S',
        round_half_up(easting, 2),
        round_half_up(northing, 2),
    )
