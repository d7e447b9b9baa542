# geocalc/distance.py
"""
Ellipsoidal distance and direction between two points.

Distances come from Vincenty's inverse formula on the WGS84 ellipsoid. The solver
iterates at most VINCENTY_MAX_ITER times; nearly antipodal points may exhaust that
limit, in which case the best available estimate is returned and the convergence
policy decides whether that is reported.
"""

__all__ = [
    'ConvergenceError', 'Rumb', 'VincentyResult',
    'azimuth', 'azimuth_to_rumb', 'get_convergence_policy', 'set_convergence_policy',
    'vincenty_distance', 'vincenty_inverse',
]

import math
from typing import Literal, NamedTuple, Optional

from geocalc._const import VINCENTY_MAX_ITER, VINCENTY_TOLERANCE
from geocalc.conversion import to_degrees, to_radians
from geocalc.coordinates import GeoPoint
from geocalc.ellipsoid import WGS84
from geocalc.utils.functions import round_half_up
from geocalc.utils.logging import LOGGER


class ConvergenceError(ArithmeticError):
    """Raised when Vincenty's iteration hits its limit under the 'raise' policy"""


class VincentyResult(NamedTuple):
    """Outcome of the inverse solver: distance in meters plus how the loop exited"""
    distance: float
    iterations: int
    converged: bool


class Rumb(NamedTuple):
    """A quadrant bearing, e.g. ('NE', 45.0) for N45E"""
    quadrant: str
    angle: float


# -------------------------------------------------------------------------
# Convergence policy
# -------------------------------------------------------------------------

_POLICIES = ('silent', 'warn', 'raise')

# Declares how non-convergence is reported (default warn)
_convergence_policy = 'warn'


def set_convergence_policy(policy: Literal['silent', 'warn', 'raise']):
    """
    Set the global handling of Vincenty non-convergence.

    Args:
        policy:
            'silent' returns the best-effort distance without comment, 'warn'
            returns it and logs a warning, 'raise' raises ConvergenceError
    """
    global _convergence_policy

    if policy not in _POLICIES:
        raise ValueError(f"Unknown policy '{policy}'. Options: {list(_POLICIES)}")

    _convergence_policy = policy


def get_convergence_policy() -> str:
    """Returns the name of the active convergence policy"""
    return _convergence_policy


def _report_non_convergence(coord1: GeoPoint, coord2: GeoPoint, policy: Optional[str]):
    policy = policy or _convergence_policy
    if policy not in _POLICIES:
        raise ValueError(f"Unknown policy '{policy}'. Options: {list(_POLICIES)}")

    msg = (
        f'Vincenty inverse failed to converge within {VINCENTY_MAX_ITER} iterations '
        f'between {coord1} and {coord2}; the distance is a best-effort estimate'
    )
    if policy == 'raise':
        raise ConvergenceError(msg)

    if policy == 'warn':
        LOGGER.warning(msg)


# -------------------------------------------------------------------------
# Vincenty Implementation (Ellipsoidal)
# -------------------------------------------------------------------------

def vincenty_inverse(coord1: GeoPoint, coord2: GeoPoint, policy: Optional[str] = None) -> VincentyResult:
    """
    Calculate distance using Vincenty's inverse formula (WGS84 ellipsoid), along
    with the number of iterations used and whether lambda converged.

    Coincident points short-circuit to a distance of 0.

    Args:
        coord1:
            The start point

        coord2:
            The end point

        policy:
            (Optional) Overrides the global convergence policy for this call

    Returns:
        VincentyResult
    """
    f = WGS84.f

    L = to_radians(coord2.longitude - coord1.longitude)

    tanU1 = (1 - f) * math.tan(to_radians(coord1.latitude))
    cosU1 = 1 / math.sqrt(1 + tanU1 ** 2)
    sinU1 = tanU1 * cosU1

    tanU2 = (1 - f) * math.tan(to_radians(coord2.latitude))
    cosU2 = 1 / math.sqrt(1 + tanU2 ** 2)
    sinU2 = tanU2 * cosU2

    Lambda = L
    converged = False
    iterations = 0
    for iterations in range(1, VINCENTY_MAX_ITER + 1):
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        sinSigma = math.sqrt((cosU2 * sinLambda) ** 2 +
                             (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2)

        if sinSigma == 0:
            return VincentyResult(0.0, iterations, True)  # Coincident points

        # eq. 15
        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda

        # eq. 16
        sigma = math.atan2(sinSigma, cosSigma)

        # eq. 17
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        # eq. 18
        try:
            cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha
        except ZeroDivisionError:
            # Both points on the equator
            cos2SigmaM = 0

        # eq. 10
        C = f / 16 * cosSqAlpha * (4 + f * (4 - 3 * cosSqAlpha))
        Lambda_prev = Lambda

        # eq. 11
        Lambda = L + (1 - C) * f * sinAlpha * (
                sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        if abs(Lambda - Lambda_prev) <= VINCENTY_TOLERANCE:
            converged = True
            break

    if not converged:
        # Usually (nearly) antipodal points
        _report_non_convergence(coord1, coord2, policy)

    uSq = cosSqAlpha * (WGS84.a ** 2 - WGS84.b ** 2) / (WGS84.b ** 2)
    A = 1 + uSq / 16384 * (4096 + uSq * (-768 + uSq * (320 - 175 * uSq)))
    B = uSq / 1024 * (256 + uSq * (-128 + uSq * (74 - 47 * uSq)))
    deltaSigma = B * sinSigma * (
            cos2SigmaM + B / 4 * (
            cosSigma * (-1 + 2 * cos2SigmaM ** 2) -
            B / 6 * cos2SigmaM * (-3 + 4 * sinSigma ** 2) * (-3 + 4 * cos2SigmaM ** 2)
    )
    )

    return VincentyResult(WGS84.b * A * (sigma - deltaSigma), iterations, converged)


def vincenty_distance(coord1: GeoPoint, coord2: GeoPoint, policy: Optional[str] = None) -> float:
    """
    Calculate distance in meters using Vincenty's inverse formula (WGS84 ellipsoid).

    See vincenty_inverse() for the iteration details.
    """
    return vincenty_inverse(coord1, coord2, policy).distance


# -------------------------------------------------------------------------
# Direction
# -------------------------------------------------------------------------

def azimuth(start: GeoPoint, end: GeoPoint) -> float:
    """
    Calculate the initial bearing (forward azimuth) from start to end, clockwise
    from north.

    Args:
        start: The starting GeoPoint
        end: The ending GeoPoint

    Returns:
        float: Azimuth in degrees, in [0, 360)
    """
    lat1, lat2 = to_radians(start.latitude), to_radians(end.latitude)
    d_lon = to_radians(end.longitude - start.longitude)

    y = math.sin(d_lon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lon)

    return (to_degrees(math.atan2(y, x)) + 360) % 360


def azimuth_to_rumb(azimuth_degrees: float) -> Rumb:
    """
    Express an azimuth as a quadrant bearing: the quadrant label and the angle
    measured from the north or south axis, rounded to 2 decimals.

    Each quadrant is closed at its lower bound, so 90 is SE 90.0, 180 is SW 0.0 and
    270 is NW 90.0.

    Args:
        azimuth_degrees:
            An azimuth in [0, 360)

    Returns:
        Rumb
    """
    if 0 <= azimuth_degrees < 90:
        return Rumb('NE', round_half_up(azimuth_degrees, 2))

    if 90 <= azimuth_degrees < 180:
        return Rumb('SE', round_half_up(180 - azimuth_degrees, 2))

    if 180 <= azimuth_degrees < 270:
        return Rumb('SW', round_half_up(azimuth_degrees - 180, 2))

    return Rumb('NW', round_half_up(360 - azimuth_degrees, 2))
