from pytest import approx

from geocalc import GeoPoint
from geocalc.conversion import Vector3
from geocalc.utm import to_utm
from tests.functions import assert_points_equal


def test_geopoint_init():
    p = GeoPoint(1., 0.)
    assert p.latitude == 1.
    assert p.longitude == 0.

    p = GeoPoint('1.0', '0.0')
    assert p.latitude == 1.
    assert p.longitude == 0.

    p = GeoPoint(40, -3)
    assert isinstance(p.latitude, float)

    # Out-of-range values are kept as given
    p = GeoPoint(100., 200.)
    assert p.to_float() == (100., 200.)


def test_geopoint_hash():
    points = [
        GeoPoint(0., 0.),
        GeoPoint(0., 0.),
        GeoPoint(1., 1.)
    ]
    assert len(set(points)) == 2
    assert GeoPoint(0., 0.) in set(points)


def test_geopoint_eq():
    assert GeoPoint(0., 0.) == GeoPoint(0., 0.)
    assert GeoPoint(0., 0.) != GeoPoint(1., 0.)
    assert GeoPoint(1., 0.) != GeoPoint(0., 1.)
    assert GeoPoint(0., 0.) != (0., 0.)


def test_geopoint_repr():
    assert repr(GeoPoint(1., 0.)) == '<GeoPoint(1.0, 0.0)>'


def test_geopoint_to_float():
    assert GeoPoint(1., 2.).to_float() == (1., 2.)
    assert GeoPoint(1., 2.).to_float(reverse=True) == (2., 1.)


def test_geopoint_from_dms():
    assert GeoPoint.from_dms((0, 0, 0., 'N'), (0, 0, 0., 'E')) == GeoPoint(0., 0.)
    assert_points_equal(
        GeoPoint.from_dms((51, 30, 35.514, 'N'), (0, 7, 5.1312, 'W')),
        GeoPoint(51.509865, -0.118092),
    )


def test_geopoint_to_dms():
    assert GeoPoint(51.509865, -0.118092).to_dms() == (
        (51, 30, 35.51, 'N'), (0, 7, 5.13, 'W')
    )
    assert GeoPoint(-12.5, 12.5).to_dms() == ((12, 30, 0., 'S'), (12, 30, 0., 'E'))


def test_geopoint_to_sphere():
    vec = GeoPoint(90., 0.).to_sphere(2.)
    assert isinstance(vec, Vector3)
    assert vec == approx((0., 2., 0.), abs=1e-12)


def test_geopoint_to_utm():
    assert GeoPoint(40.4168, -3.7038).to_utm() == to_utm(40.4168, -3.7038)
