"""
Planar map projections.

Each projection maps a latitude/longitude onto a unit square, which project()
reports in percentage units ([0, 100] on both axes, y growing downwards). Only the
equirectangular and Mercator projections can be inverted exactly.

Projections are looked up by id; an id that isn't registered falls back to the
equirectangular projection.
"""

__all__ = [
    'DEFAULT_PROJECTION', 'PlanarPoint', 'Projection',
    'get_projection', 'list_projections', 'project', 'project_many', 'scale_factor',
    'solve_mollweide_theta', 'unproject',
]

import math
from typing import Callable, List, NamedTuple, Optional, Sequence, Tuple, Union

import numpy as np

from geocalc._const import MERCATOR_MAX_LAT, MOLLWEIDE_ITERATIONS
from geocalc.conversion import to_degrees, to_radians
from geocalc.coordinates import GeoPoint
from geocalc.utils.functions import to_lat_lon_array
from geocalc.utils.logging import warn_once

_Forward = Callable[[float, float], Tuple[float, float]]
_Inverse = Callable[[float, float], Tuple[float, float]]

DEFAULT_PROJECTION = 'equirectangular'

# Robinson's empirical table: (|latitude|, parallel length, distance from equator)
_ROBINSON_TABLE = (
    (0, 1.0000, 0.0000),
    (5, 0.9986, 0.0620),
    (10, 0.9954, 0.1240),
    (15, 0.9900, 0.1860),
    (20, 0.9822, 0.2480),
    (25, 0.9730, 0.3100),
    (30, 0.9600, 0.3720),
    (35, 0.9427, 0.4340),
    (40, 0.9216, 0.4958),
    (45, 0.8962, 0.5571),
    (50, 0.8679, 0.6176),
    (55, 0.8350, 0.6769),
    (60, 0.7986, 0.7346),
    (65, 0.7597, 0.7903),
    (70, 0.7186, 0.8435),
    (75, 0.6732, 0.8936),
    (80, 0.6213, 0.9394),
    (85, 0.5722, 0.9761),
    (90, 0.5322, 1.0000),
)
_ROBINSON_STEP = 5


class PlanarPoint(NamedTuple):
    """A projected position, in percent of the map's width (x) and height (y)"""
    x: float
    y: float


class Projection:
    """
    A named map projection.

    Args:
        projection_id:
            The lookup key, e.g. 'mercator'

        name:
            Human-readable name

        kind:
            The projection's class and the property it preserves, e.g.
            'Cylindrical conformal'

        forward:
            Function of (lat, lon) in degrees returning (x, y) on the unit square

        inverse:
            (Optional) Function of normalized (x, y) returning (lat, lon) in degrees

        scale:
            (Optional) Function of latitude in degrees returning the linear scale
            factor along the parallel. Defaults to a constant 1.
    """

    def __init__(
        self,
        projection_id: str,
        name: str,
        kind: str,
        forward: _Forward,
        inverse: Optional[_Inverse] = None,
        scale: Optional[Callable[[float], float]] = None,
    ):
        self.id = projection_id
        self.name = name
        self.kind = kind
        self._forward = forward
        self._inverse = inverse
        self._scale = scale

    def __repr__(self):
        return f'<Projection {self.id}: {self.name} ({self.kind})>'

    @property
    def invertible(self) -> bool:
        """True if this projection has an exact inverse"""
        return self._inverse is not None

    def project(self, lat: float, lon: float) -> PlanarPoint:
        """Projects a lat/lon (degrees) to percentage map coordinates"""
        x, y = self._forward(lat, lon)
        return PlanarPoint(x * 100, y * 100)

    def unproject(self, nx: float, ny: float) -> GeoPoint:
        """
        Converts normalized map coordinates (each in [0, 1], not percent) back to
        a GeoPoint. Projections without an inverse use the equirectangular one.
        """
        inverse = self._inverse
        if inverse is None:
            warn_once(
                f"Projection '{self.id}' has no inverse; the equirectangular inverse "
                "will be used instead. (this warning will not repeat)"
            )
            inverse = _equirectangular_inverse

        lat, lon = inverse(nx, ny)
        return GeoPoint(lat, lon)

    def scale_factor(self, lat: float) -> float:
        """Linear scale factor at the given latitude (degrees)"""
        if self._scale is None:
            return 1.

        return self._scale(lat)


# -------------------------------------------------------------------------
# Forward & inverse formulas
# -------------------------------------------------------------------------

def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _equirectangular_forward(lat: float, lon: float) -> Tuple[float, float]:
    return (lon + 180) / 360, (90 - lat) / 180


def _equirectangular_inverse(nx: float, ny: float) -> Tuple[float, float]:
    return 90 - ny * 180, nx * 360 - 180


def _mercator_forward(lat: float, lon: float) -> Tuple[float, float]:
    # y diverges at the poles
    phi = to_radians(_clamp(lat, -MERCATOR_MAX_LAT, MERCATOR_MAX_LAT))
    return (
        (lon + 180) / 360,
        0.5 - math.log(math.tan(math.pi / 4 + phi / 2)) / (2 * math.pi)
    )


def _mercator_inverse(nx: float, ny: float) -> Tuple[float, float]:
    lat = to_degrees(2 * math.atan(math.exp((0.5 - ny) * 2 * math.pi)) - math.pi / 2)
    return _clamp(lat, -MERCATOR_MAX_LAT, MERCATOR_MAX_LAT), nx * 360 - 180


def solve_mollweide_theta(phi: float, iterations: int = MOLLWEIDE_ITERATIONS) -> Tuple[float, bool]:
    """
    Solve 2θ + sin(2θ) = π·sin(φ) for the Mollweide auxiliary angle θ with a fixed
    number of Newton-Raphson steps, starting from θ = φ.

    The loop exits early if the derivative vanishes, which happens at the poles
    where θ = φ is already the solution.

    Args:
        phi:
            Latitude in radians

        iterations:
            (Default 10) Maximum number of Newton-Raphson steps

    Returns:
        (theta, converged) where converged reports whether the final step moved θ
        by no more than 1e-12 radians
    """
    target = math.pi * math.sin(phi)
    theta, step = phi, math.inf
    for _ in range(iterations):
        derivative = 2 + 2 * math.cos(2 * theta)
        if derivative == 0:
            step = 0.
            break

        step = (2 * theta + math.sin(2 * theta) - target) / derivative
        theta -= step

    return theta, abs(step) <= 1e-12


def _mollweide_forward(lat: float, lon: float) -> Tuple[float, float]:
    theta, _ = solve_mollweide_theta(to_radians(lat))
    return (
        0.5 + (to_radians(lon) / math.pi) * math.cos(theta) * 0.4,
        0.5 - math.sin(theta) * 0.45
    )


def _sinusoidal_forward(lat: float, lon: float) -> Tuple[float, float]:
    phi = to_radians(lat)
    return (
        0.5 + (to_radians(lon) * math.cos(phi)) / math.pi * 0.45,
        0.5 - phi / math.pi * 0.9
    )


def _robinson_forward(lat: float, lon: float) -> Tuple[float, float]:
    abs_lat = abs(lat)
    idx = min(math.floor(abs_lat / _ROBINSON_STEP), len(_ROBINSON_TABLE) - 2)
    lower, upper = _ROBINSON_TABLE[idx], _ROBINSON_TABLE[idx + 1]

    t = (abs_lat - lower[0]) / _ROBINSON_STEP
    plen = lower[1] * (1 - t) + upper[1] * t
    pdfe = lower[2] * (1 - t) + upper[2] * t
    return (
        0.5 + (lon / 180) * plen * 0.45,
        0.5 - (-1 if lat < 0 else 1) * pdfe * 0.45
    )


def _lambert_forward(lat: float, lon: float) -> Tuple[float, float]:
    return (lon + 180) / 360, 0.5 - math.sin(to_radians(lat)) * 0.5


def _secant_scale(lat: float) -> float:
    return 1 / math.cos(to_radians(abs(lat)))


# -------------------------------------------------------------------------
# Registry & dispatch
# -------------------------------------------------------------------------

_PROJECTIONS = {
    proj.id: proj for proj in (
        Projection(
            'equirectangular', 'Equirectangular (Plate Carrée)', 'Cylindrical equidistant',
            _equirectangular_forward, _equirectangular_inverse
        ),
        Projection(
            'mercator', 'Mercator', 'Cylindrical conformal',
            _mercator_forward, _mercator_inverse, _secant_scale
        ),
        Projection(
            'mollweide', 'Mollweide', 'Pseudocylindrical equal-area', _mollweide_forward
        ),
        Projection(
            'sinusoidal', 'Sinusoidal', 'Pseudocylindrical equal-area', _sinusoidal_forward
        ),
        Projection(
            'robinson', 'Robinson', 'Pseudocylindrical compromise', _robinson_forward
        ),
        Projection(
            'lambert', 'Lambert Cylindrical', 'Cylindrical equal-area',
            _lambert_forward, scale=_secant_scale
        ),
    )
}


def get_projection(projection_id: str) -> Projection:
    """
    Look up a projection by id. Unknown ids resolve to the equirectangular
    projection.
    """
    if projection_id not in _PROJECTIONS:
        warn_once(
            f"Unknown projection '{projection_id}'; falling back to {DEFAULT_PROJECTION}. "
            f"Options: {list(_PROJECTIONS.keys())}"
        )
        return _PROJECTIONS[DEFAULT_PROJECTION]

    return _PROJECTIONS[projection_id]


def list_projections() -> List[Projection]:
    """All registered projections, in display order"""
    return list(_PROJECTIONS.values())


def project(lat: float, lon: float, projection_id: str = DEFAULT_PROJECTION) -> PlanarPoint:
    """
    Project a latitude/longitude onto the map plane.

    Args:
        lat:
            Latitude in decimal degrees

        lon:
            Longitude in decimal degrees

        projection_id:
            (Default 'equirectangular') One of the registered projection ids

    Returns:
        PlanarPoint, in percentage units
    """
    return get_projection(projection_id).project(lat, lon)


def unproject(nx: float, ny: float, projection_id: str = DEFAULT_PROJECTION) -> GeoPoint:
    """
    Convert normalized map coordinates (fractions of width and height, each in
    [0, 1]) back to a GeoPoint. Exact for 'equirectangular' and 'mercator' only;
    see Projection.unproject().
    """
    return get_projection(projection_id).unproject(nx, ny)


def project_many(
    points: Union[Sequence[GeoPoint], np.ndarray],
    projection_id: str = DEFAULT_PROJECTION
) -> np.ndarray:
    """
    Project a batch of points.

    Args:
        points:
            A sequence of GeoPoints, or an array-like of [latitude, longitude] rows

        projection_id:
            (Default 'equirectangular') One of the registered projection ids

    Returns:
        An (n, 2) array of [x, y] percentage coordinates
    """
    if len(points) > 0 and isinstance(points[0], GeoPoint):
        lat_lon = to_lat_lon_array(points)
    else:
        lat_lon = np.asarray(points, dtype=float).reshape(-1, 2)

    projection = get_projection(projection_id)
    out = np.empty_like(lat_lon)
    for i, (lat, lon) in enumerate(lat_lon):
        out[i] = projection.project(float(lat), float(lon))

    return out


def scale_factor(lat: float, projection_id: str = DEFAULT_PROJECTION) -> float:
    """
    Linear scale factor along the parallel at a latitude: the secant of the latitude
    for the Mercator and Lambert cylindrical projections, 1 for the others.
    """
    return get_projection(projection_id).scale_factor(lat)
