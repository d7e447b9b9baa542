""" Geodetic metrics for polygons and polylines made of GeoPoints """

__all__ = [
    'EdgeMetrics', 'PolygonSummary',
    'centroid', 'edge_metrics', 'geodesic_area', 'perimeter', 'polygon_summary',
]

from typing import List, NamedTuple, Optional, Sequence

import numpy as np

from geocalc.coordinates import GeoPoint
from geocalc.curvature import radius_meridian, radius_prime_vertical
from geocalc.distance import Rumb, azimuth, azimuth_to_rumb, vincenty_distance
from geocalc.ellipsoid import WGS84
from geocalc.utils.functions import closed_edges, open_edges, to_lat_lon_array
from geocalc.utm import UTMCoordinate, to_utm


class EdgeMetrics(NamedTuple):
    """Direction and length of a single segment"""
    start: GeoPoint
    end: GeoPoint
    azimuth: float
    rumb: Rumb
    distance: float


class PolygonSummary(NamedTuple):
    """Every metric the package reports for a polygon, in meters and square meters"""
    area: float
    perimeter: float
    centroid: GeoPoint
    radius_meridian: float
    radius_prime_vertical: float
    utm: Optional[UTMCoordinate]
    edges: List[EdgeMetrics]


def geodesic_area(points: Sequence[GeoPoint]) -> float:
    """
    Approximate the area enclosed by a polygon using spherical excess on a sphere of
    the ellipsoid's equatorial radius. The result is always non-negative, whatever
    the winding order.

    This is a spherical approximation, not an ellipsoidal area integral, and loses
    accuracy as polygons grow.

    Args:
        points:
            The polygon vertices, in order. The ring is closed implicitly.

    Returns:
        (float) the area in square meters, or 0 for fewer than 3 points
    """
    if len(points) < 3:
        return 0.

    lat_lon = np.radians(to_lat_lon_array(points))
    lat, lon = lat_lon[:, 0], lat_lon[:, 1]
    next_lat, next_lon = np.roll(lat, -1), np.roll(lon, -1)

    total = np.sum((next_lon - lon) * (2 + np.sin(lat) + np.sin(next_lat)))
    return float(abs(total * WGS84.a * WGS84.a / 2))


def perimeter(points: Sequence[GeoPoint]) -> float:
    """
    Sum the Vincenty distance around a polygon, including the closing edge from the
    last vertex back to the first.

    Args:
        points:
            The polygon vertices, in order

    Returns:
        (float) the perimeter in meters, or 0 for fewer than 2 points
    """
    if len(points) < 2:
        return 0.

    return sum(vincenty_distance(p1, p2) for p1, p2 in closed_edges(points))


def centroid(points: Sequence[GeoPoint]) -> GeoPoint:
    """
    Arithmetic mean of the vertex latitudes and longitudes.

    Only meaningful for small polygons that don't cross a pole or the antimeridian;
    it is not a true spherical centroid.

    Returns:
        GeoPoint, or GeoPoint(0, 0) when no points are given
    """
    if len(points) == 0:
        return GeoPoint(0., 0.)

    lat, lon = to_lat_lon_array(points).mean(axis=0)
    return GeoPoint(float(lat), float(lon))


def edge_metrics(points: Sequence[GeoPoint]) -> List[EdgeMetrics]:
    """
    Azimuth, quadrant bearing and Vincenty distance of each consecutive segment.
    The last point is not joined back to the first.
    """
    out = []
    for start, end in open_edges(points):
        forward = azimuth(start, end)
        out.append(
            EdgeMetrics(start, end, forward, azimuth_to_rumb(forward), vincenty_distance(start, end))
        )

    return out


def polygon_summary(points: Sequence[GeoPoint]) -> PolygonSummary:
    """
    Collects area, perimeter, centroid, curvature radii at the centroid latitude, the
    centroid's UTM position and the per-edge metrics of a polygon.

    Args:
        points:
            The polygon vertices, in order

    Returns:
        PolygonSummary
    """
    center = centroid(points)
    return PolygonSummary(
        area=geodesic_area(points),
        perimeter=perimeter(points),
        centroid=center,
        radius_meridian=radius_meridian(center.latitude),
        radius_prime_vertical=radius_prime_vertical(center.latitude),
        utm=to_utm(center.latitude, center.longitude) if len(points) > 0 else None,
        edges=edge_metrics(points),
    )
