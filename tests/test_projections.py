import math

import numpy as np
from pytest import approx

from geocalc import GeoPoint
from geocalc.projections import *
from tests.functions import assert_points_equal

PROJECTION_IDS = ['equirectangular', 'mercator', 'mollweide', 'sinusoidal', 'robinson', 'lambert']


def test_list_projections():
    assert [x.id for x in list_projections()] == PROJECTION_IDS
    assert get_projection('mercator').kind == 'Cylindrical conformal'
    assert get_projection('mollweide').name == 'Mollweide'


def test_projection_invertible():
    assert get_projection('equirectangular').invertible
    assert get_projection('mercator').invertible
    for projection_id in ('mollweide', 'sinusoidal', 'robinson', 'lambert'):
        assert not get_projection(projection_id).invertible


def test_project_equirectangular():
    assert project(0., 0., 'equirectangular') == PlanarPoint(50., 50.)
    assert project(0., 0.) == PlanarPoint(50., 50.)
    assert project(90., -180., 'equirectangular') == PlanarPoint(0., 0.)
    assert project(-90., 180., 'equirectangular') == PlanarPoint(100., 100.)


def test_unproject_equirectangular():
    assert unproject(0.5, 0.5, 'equirectangular') == GeoPoint(0., 0.)
    assert_points_equal(unproject(0.25, 0.75), GeoPoint(-45., -90.))


def test_project_mercator():
    assert project(0., 0., 'mercator') == approx((50., 50.))
    assert project(90., 0., 'mercator').y == project(85., 0., 'mercator').y
    assert project(-90., 0., 'mercator').y == project(-85., 0., 'mercator').y
    assert project(85., 0., 'mercator').y == approx(0.1638, abs=1e-3)


def test_mercator_round_trip():
    for lat in (-84., -60., -10., 0., 33.3, 80.):
        for lon in (-179., 0., 45.5):
            point = project(lat, lon, 'mercator')
            assert_points_equal(
                unproject(point.x / 100, point.y / 100, 'mercator'),
                GeoPoint(lat, lon),
                abs_tol=1e-9
            )


def test_unproject_mercator_clamp():
    assert unproject(0.5, 0., 'mercator').latitude == 85.
    assert unproject(0.5, 1., 'mercator').latitude == -85.


def test_project_mollweide():
    assert project(0., 0., 'mollweide') == approx((50., 50.))
    assert project(0., 180., 'mollweide') == approx((90., 50.))
    assert project(0., -180., 'mollweide') == approx((10., 50.))
    assert project(90., 0., 'mollweide') == approx((50., 5.))
    assert project(-90., 100., 'mollweide') == approx((50., 95.))


def test_solve_mollweide_theta():
    assert solve_mollweide_theta(0.) == (0., True)
    assert solve_mollweide_theta(math.pi / 2) == (math.pi / 2, True)

    phi = math.radians(45.)
    theta, converged = solve_mollweide_theta(phi)
    assert converged
    assert 2 * theta + math.sin(2 * theta) == approx(math.pi * math.sin(phi), abs=1e-12)

    # A single step from the seed is not enough
    _, converged = solve_mollweide_theta(phi, iterations=1)
    assert not converged


def test_project_sinusoidal():
    assert project(0., 0., 'sinusoidal') == approx((50., 50.))
    assert project(0., 180., 'sinusoidal') == approx((95., 50.))
    assert project(90., 120., 'sinusoidal') == approx((50., 5.))
    assert project(60., 180., 'sinusoidal') == approx((72.5, 20.))


def test_project_robinson():
    assert project(0., 0., 'robinson') == approx((50., 50.))
    assert project(0., 180., 'robinson') == approx((95., 50.))
    assert project(90., 0., 'robinson') == approx((50., 5.))
    assert project(-90., 0., 'robinson') == approx((50., 95.))

    # Interpolated halfway between the 0 and 5 degree rows
    assert project(2.5, 180., 'robinson') == approx((50 + 0.9993 * 45, 50 - 0.031 * 45))
    assert project(-2.5, 0., 'robinson').y == approx(50 + 0.031 * 45)


def test_project_lambert():
    assert project(0., 0., 'lambert') == approx((50., 50.))
    assert project(90., 0., 'lambert') == approx((50., 0.), abs=1e-9)
    assert project(30., 90., 'lambert') == approx((75., 25.))


def test_project_bounds():
    for projection_id in PROJECTION_IDS:
        for lat in range(-90, 91, 15):
            for lon in range(-180, 181, 30):
                x, y = project(lat, lon, projection_id)
                assert -1e-9 <= x <= 100 + 1e-9
                assert -1e-9 <= y <= 100 + 1e-9


def test_project_unknown_projection(caplog):
    assert project(10., 20., 'made up') == project(10., 20., 'equirectangular')
    assert 'made up' in caplog.text
    assert get_projection('made up') is get_projection(DEFAULT_PROJECTION)


def test_unproject_without_inverse(caplog):
    assert unproject(0.5, 0.5, 'sinusoidal') == GeoPoint(0., 0.)
    assert 'no inverse' in caplog.text
    assert unproject(0.25, 0.75, 'robinson') == unproject(0.25, 0.75, 'equirectangular')


def test_project_many():
    points = [GeoPoint(0., 0.), GeoPoint(45., 90.), GeoPoint(-30., -120.)]
    actual = project_many(points, 'robinson')
    assert actual.shape == (3, 2)
    for row, point in zip(actual, points):
        assert tuple(row) == approx(project(point.latitude, point.longitude, 'robinson'))

    actual = project_many(np.array([[0., 0.], [90., -180.]]))
    assert actual.tolist() == [[50., 50.], [0., 0.]]

    assert project_many([]).shape == (0, 2)


def test_scale_factor():
    assert scale_factor(0., 'mercator') == 1.
    assert scale_factor(60., 'mercator') == approx(2.)
    assert scale_factor(-60., 'lambert') == approx(2.)
    assert scale_factor(60., 'sinusoidal') == 1.
    assert scale_factor(60.) == 1.
