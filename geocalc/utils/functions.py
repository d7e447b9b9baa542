"""Module for miscellaneous multi-use functions"""

__all__ = ['closed_edges', 'open_edges', 'round_half_up', 'to_lat_lon_array']

from typing import Iterator, Sequence, Tuple, TypeVar

import numpy as np

_T = TypeVar('_T')


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def closed_edges(items: Sequence[_T]) -> Iterator[Tuple[_T, _T]]:
    """
    Yields each pair of circularly-adjacent items, i.e. (i, i+1 mod n), so the last
    item is paired back to the first.

    Args:
        items:
            An ordered sequence, usually polygon vertices

    Returns:
        Iterator of 2-tuples
    """
    n = len(items)
    for i in range(n):
        yield items[i], items[(i + 1) % n]


def open_edges(items: Sequence[_T]) -> Iterator[Tuple[_T, _T]]:
    """Yields each consecutive pair without wrapping the last item to the first"""
    for i in range(len(items) - 1):
        yield items[i], items[i + 1]


def to_lat_lon_array(points: Sequence) -> np.ndarray:
    """
    Stacks a sequence of GeoPoints into an (n, 2) float array of [latitude, longitude]
    rows, in decimal degrees.
    """
    if len(points) == 0:
        return np.empty((0, 2), dtype=float)

    return np.array([(p.latitude, p.longitude) for p in points], dtype=float)
