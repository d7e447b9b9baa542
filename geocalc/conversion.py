"""
Module for angle and coordinate conversions
"""
__all__ = [
    'DMS', 'DMSParseError', 'Vector3',
    'decimal_to_dms', 'dms_to_decimal', 'lat_lon_to_unit_sphere', 'parse_dms',
    'to_degrees', 'to_radians',
]

import math
import re
from typing import Any, NamedTuple, Optional

from geocalc.utils.functions import round_half_up
from geocalc.utils.logging import LOGGER

_NEGATIVE_DIRECTIONS = ('S', 'W')
_DIRECTIONS = ('N', 'S', 'E', 'W')

# Leading numeric prefix of a string, e.g. "12.5abc" -> "12.5"
_NUMERIC_PREFIX = re.compile(r'^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


class DMSParseError(ValueError):
    """Raised when a degrees/minutes/seconds component cannot be read as a number"""


class DMS(NamedTuple):
    """An unsigned Degrees Minutes Seconds triple"""
    degrees: int
    minutes: int
    seconds: float


class Vector3(NamedTuple):
    """A cartesian point on (or above) a sphere centered at the origin"""
    x: float
    y: float
    z: float


def to_radians(deg: float) -> float:
    """Converts an angle in degrees to radians"""
    return deg * math.pi / 180


def to_degrees(rad: float) -> float:
    """Converts an angle in radians to degrees"""
    return rad * 180 / math.pi


def _coerce_component(value: Any) -> float:
    """
    Reads a DMS component leniently: anything float() accepts passes through,
    strings are read by their leading numeric prefix, and anything else
    (including NaN) becomes 0.
    """
    if isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if match:
            return float(match.group(0))

        LOGGER.debug('DMS component %r is not numeric; treated as 0', value)
        return 0.

    try:
        result = float(value)
    except (TypeError, ValueError):
        LOGGER.debug('DMS component %r is not numeric; treated as 0', value)
        return 0.

    if math.isnan(result):
        LOGGER.debug('DMS component %r is NaN; treated as 0', value)
        return 0.

    return result


def _strict_component(value: Any, label: str) -> float:
    try:
        result = float(value)
    except (TypeError, ValueError) as err:
        raise DMSParseError(f'Invalid {label} value: {value!r}') from err

    if math.isnan(result):
        raise DMSParseError(f'Invalid {label} value: {value!r}')

    return result


def dms_to_decimal(deg: Any, minutes: Any = 0, seconds: Any = 0, direction: Optional[str] = None) -> float:
    """
    Converts a Degrees Minutes Seconds angle to decimal degrees.

    This conversion is permissive: any component that cannot be read as a number
    (None, NaN, or a string without a leading number) counts as zero, and strings
    are read up to their first non-numeric character. Use parse_dms() to reject
    bad input instead.

    Args:
        deg:
            Degrees. Only the magnitude is used; the sign comes from `direction`.

        minutes:
            Minutes of arc

        seconds:
            Seconds of arc

        direction:
            One of 'N', 'S', 'E', 'W'. 'S' and 'W' produce a negative result, any
            other value leaves it positive.

    Returns:
        (float) the angle in decimal degrees
    """
    decimal = (
        abs(_coerce_component(deg)) +
        _coerce_component(minutes) / 60 +
        _coerce_component(seconds) / 3600
    )
    if direction in _NEGATIVE_DIRECTIONS:
        decimal = -decimal

    return decimal


def parse_dms(deg: Any, minutes: Any = 0, seconds: Any = 0, direction: str = 'N') -> float:
    """
    Strict counterpart of dms_to_decimal().

    Raises:
        DMSParseError: if any component is not a number (NaN included), or the
            direction is not one of 'N', 'S', 'E', 'W'
    """
    if direction not in _DIRECTIONS:
        raise DMSParseError(f'Invalid direction {direction!r}; expected one of {_DIRECTIONS}')

    decimal = (
        abs(_strict_component(deg, 'degrees')) +
        _strict_component(minutes, 'minutes') / 60 +
        _strict_component(seconds, 'seconds') / 3600
    )
    if direction in _NEGATIVE_DIRECTIONS:
        decimal = -decimal

    return decimal


def decimal_to_dms(decimal: float) -> DMS:
    """
    Converts decimal degrees to an unsigned Degrees Minutes Seconds triple, with
    seconds rounded to 2 decimal places. The sign of the input is discarded, so the
    caller must keep track of the hemisphere.

    Args:
        decimal:
            The angle in decimal degrees

    Returns:
        DMS
    """
    value = abs(decimal)
    degrees = math.floor(value)
    minutes_float = (value - degrees) * 60
    minutes = math.floor(minutes_float)
    seconds = (minutes_float - minutes) * 60
    return DMS(int(degrees), int(minutes), round_half_up(seconds, 2))


def lat_lon_to_unit_sphere(lat: float, lon: float, radius: float = 1.0) -> Vector3:
    """
    Places a latitude/longitude on a sphere of the given radius, using the Y-up axis
    convention of 3D renderers: +Y is the north pole, and the prime meridian faces +X.

    Args:
        lat:
            Latitude in decimal degrees

        lon:
            Longitude in decimal degrees

        radius:
            (Default 1.0) The radius of the sphere

    Returns:
        Vector3
    """
    phi = to_radians(90 - lat)  # polar angle, measured from +Y
    theta = to_radians(lon + 180)
    return Vector3(
        -radius * math.sin(phi) * math.cos(theta),
        radius * math.cos(phi),
        radius * math.sin(phi) * math.sin(theta),
    )
