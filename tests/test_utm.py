from pytest import approx

from geocalc.utm import *


def test_utm_zone():
    assert utm_zone(-180.) == 1
    assert utm_zone(-177.) == 1
    assert utm_zone(-174.) == 2
    assert utm_zone(-3.7038) == 30
    assert utm_zone(0.) == 31
    assert utm_zone(2.1734) == 31
    assert utm_zone(179.9) == 60
    assert utm_zone(180.) == 60


def test_central_meridian():
    assert central_meridian(1) == -177.
    assert central_meridian(30) == -3.
    assert central_meridian(31) == 3.
    assert central_meridian(60) == 177.


def test_to_utm_central_meridian():
    assert to_utm(0., 3.) == UTMCoordinate(31, 'N', 500_000., 0.)


def test_to_utm_origin():
    utm = to_utm(0., 0.)
    assert utm.zone == 31
    assert utm.hemisphere == 'N'
    # (0, 0) is 3 degrees west of zone 31's central meridian
    assert utm.easting == approx(166_021.44, abs=0.5)
    assert utm.northing == 0.


def test_to_utm_southern_hemisphere():
    utm = to_utm(-33.8688, 151.2093)
    assert utm.zone == 56
    assert utm.hemisphere == 'S'
    assert 0 < utm.northing < 10_000_000

    # Just south of the equator sits just below the false northing
    assert to_utm(-0.0001, 3.).northing == approx(10_000_000 - 11.06, abs=0.5)

    # Mirror image of the northern hemisphere about the false northing
    north, south = to_utm(10., 5.), to_utm(-10., 5.)
    assert south.northing == approx(10_000_000 - north.northing, abs=0.02)
    assert south.easting == approx(north.easting, abs=0.02)


def test_to_utm_easting_symmetry():
    east, west = to_utm(45., 5.), to_utm(45., 1.)
    assert east.easting - 500_000 == approx(500_000 - west.easting, abs=0.02)
    assert east.northing == approx(west.northing, abs=0.02)


def test_to_utm_rounding():
    utm = to_utm(40.4168, -3.7038)
    assert utm.zone == 30
    assert utm.hemisphere == 'N'
    assert round(utm.easting, 2) == utm.easting
    assert round(utm.northing, 2) == utm.northing


def test_utm_coordinate_str():
    assert str(UTMCoordinate(31, 'N', 500_000., 0.)) == '31N 500000.00E 0.00N'
