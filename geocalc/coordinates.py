"""
Representation of a specific point on earth
"""

__all__ = ['GeoPoint']

from typing import Tuple, Union

from geocalc.conversion import Vector3, decimal_to_dms, dms_to_decimal, lat_lon_to_unit_sphere
from geocalc.utm import UTMCoordinate, to_utm


class GeoPoint:
    """
    Representation of a point on the globe (i.e., a lat/lon pair), in decimal degrees.

    Values are stored as given; latitudes outside [-90, 90] and longitudes outside
    [-180, 180] are neither rejected nor wrapped.
    """

    def __init__(
        self,
        latitude: Union[float, int, str],
        longitude: Union[float, int, str],
    ):
        self.latitude = float(latitude)
        self.longitude = float(longitude)

    def __eq__(self, other):
        if not isinstance(other, GeoPoint):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.latitude, self.longitude))

    def __repr__(self):
        return f'<GeoPoint({self.latitude}, {self.longitude})>'

    @classmethod
    def from_dms(cls, lat: Tuple[float, float, float, str], lon: Tuple[float, float, float, str]):
        """
        Creates a GeoPoint from a Degree Minutes Seconds (lat, lon) pair.

        The quadrant value should consist of either 'N'/'S' (latitude) or 'E'/'W'
        (longitude). Non-numeric components count as zero; see dms_to_decimal().

        Args:
            lat:
                Latitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )
            lon:
                Longitude, as a 4-tuple of
                ( <degrees> (float),  <minutes> (float), <seconds> (float), <quadrant> (str) )

        Returns:
            GeoPoint
        """
        return GeoPoint(dms_to_decimal(*lat), dms_to_decimal(*lon))

    def to_dms(self) -> Tuple[Tuple[int, int, float, str], Tuple[int, int, float, str]]:
        """
        Convert the point to a pair of (degrees, minutes, seconds, hemisphere) tuples,
        latitude first. Seconds are rounded to 2 decimal places.
        """
        return (
            (*decimal_to_dms(self.latitude), 'N' if self.latitude >= 0 else 'S'),
            (*decimal_to_dms(self.longitude), 'E' if self.longitude >= 0 else 'W'),
        )

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the point to a tuple of floats (latitude, longitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the order to (longitude, latitude)
        """
        if reverse:
            return self.longitude, self.latitude

        return self.latitude, self.longitude

    def to_sphere(self, radius: float = 1.0) -> Vector3:
        """Places this point on a sphere; see lat_lon_to_unit_sphere()"""
        return lat_lon_to_unit_sphere(self.latitude, self.longitude, radius)

    def to_utm(self) -> UTMCoordinate:
        """Convert this point to a UTMCoordinate"""
        return to_utm(self.latitude, self.longitude)
