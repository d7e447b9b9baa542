from geocalc import GeoPoint
from geocalc.utils.functions import *


def test_round_half_up():
    assert round_half_up(1.59, 1) == 1.6
    assert round_half_up(1.51, 1) == 1.5
    assert round_half_up(1.55, 1) == 1.6
    assert round_half_up(1.65, 1) == 1.7

    assert round_half_up(-1.59, 1) == -1.6
    assert round_half_up(-1.51, 1) == -1.5
    assert round_half_up(-1.55, 1) == -1.5
    assert round_half_up(-1.65, 1) == -1.6


def test_closed_edges():
    assert list(closed_edges([1, 2, 3])) == [(1, 2), (2, 3), (3, 1)]
    assert list(closed_edges([1])) == [(1, 1)]
    assert list(closed_edges([])) == []


def test_open_edges():
    assert list(open_edges([1, 2, 3])) == [(1, 2), (2, 3)]
    assert list(open_edges([1])) == []
    assert list(open_edges([])) == []


def test_to_lat_lon_array():
    arr = to_lat_lon_array([GeoPoint(1., 2.), GeoPoint(3., 4.)])
    assert arr.shape == (2, 2)
    assert arr.tolist() == [[1., 2.], [3., 4.]]

    assert to_lat_lon_array([]).shape == (0, 2)
