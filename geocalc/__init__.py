
from geocalc._version import __version__  # noqa: F401
from geocalc.utils.logging import LOGGER
from geocalc.ellipsoid import Ellipsoid, WGS84
from geocalc.conversion import (
    decimal_to_dms, dms_to_decimal, lat_lon_to_unit_sphere, parse_dms, to_degrees, to_radians
)
from geocalc.coordinates import GeoPoint
from geocalc.curvature import radius_meridian, radius_prime_vertical
from geocalc.distance import azimuth, azimuth_to_rumb, vincenty_distance, vincenty_inverse
from geocalc.calc import centroid, geodesic_area, perimeter, polygon_summary
from geocalc.utm import to_utm
from geocalc.projections import project, project_many, unproject

__all__ = [
    'Ellipsoid',
    'GeoPoint',
    'LOGGER',
    'WGS84',
    'azimuth',
    'azimuth_to_rumb',
    'centroid',
    'decimal_to_dms',
    'dms_to_decimal',
    'geodesic_area',
    'lat_lon_to_unit_sphere',
    'parse_dms',
    'perimeter',
    'polygon_summary',
    'project',
    'project_many',
    'radius_meridian',
    'radius_prime_vertical',
    'to_degrees',
    'to_radians',
    'to_utm',
    'unproject',
    'vincenty_distance',
    'vincenty_inverse',
]
