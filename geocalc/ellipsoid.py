"""
Reference ellipsoid model. Every geodetic calculation in geocalc reads its shape
parameters from an Ellipsoid instance, never from literal numbers.
"""

__all__ = ['Ellipsoid', 'WGS84']

import math


class Ellipsoid:
    """
    An oblate ellipsoid of revolution, defined by its semi-major axis and flattening.
    All other parameters are derived once at construction and the instance is
    read-only afterwards.

    Args:
        a:
            The semi-major (equatorial) axis, in meters

        f:
            The flattening, (a - b) / a

    Attributes:
        a: semi-major axis (meters)
        b: semi-minor axis (meters), a(1 - f)
        f: flattening
        e: first eccentricity
        e2: first eccentricity squared, 1 - (b/a)^2
        ep2: second eccentricity squared, (a^2 - b^2) / b^2
    """

    __slots__ = ('a', 'b', 'f', 'e', 'e2', 'ep2', 'name')

    def __init__(self, a: float, f: float, name: str = ''):
        b = a * (1 - f)
        e2 = 1 - (b / a) ** 2

        object.__setattr__(self, 'name', name)
        object.__setattr__(self, 'a', float(a))
        object.__setattr__(self, 'f', float(f))
        object.__setattr__(self, 'b', b)
        object.__setattr__(self, 'e2', e2)
        object.__setattr__(self, 'e', math.sqrt(e2))
        object.__setattr__(self, 'ep2', (a ** 2 - b ** 2) / b ** 2)

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __delattr__(self, item):
        raise AttributeError(f'{self.__class__.__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self.a == other.a and self.f == other.f

    def __hash__(self):
        return hash((self.a, self.f))

    def __repr__(self):
        label = f'{self.name} ' if self.name else ''
        return f'<Ellipsoid {label}(a={self.a}, f=1/{1 / self.f})>'


WGS84 = Ellipsoid(6378137.0, 1 / 298.257223563, name='WGS84')
