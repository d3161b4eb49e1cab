
import logging
import math

import pytest

from geogrids import (
    ConvergenceError, Ellipsoid, InvalidCoordinateError, InvalidPointError,
    OutOfRangeError, WGS84
)
from geogrids.projection import (
    _conformal_tau, _invert_conformal, grid_northing, project, unproject
)


def test_project():
    result = project(48.8582, 2.2945)
    assert result.zone == 31
    assert result.hemisphere == 'N'
    assert result.easting == pytest.approx(448251.80, abs=1e-2)
    assert result.northing == pytest.approx(5411932.68, abs=1e-2)

    # West of the central meridian, grid north is west of true north
    assert result.convergence == pytest.approx(-0.531, abs=1e-3)
    assert result.scale > 0.9996

    result = project(0., 0.)
    assert result.zone == 31
    assert result.easting == pytest.approx(166021.443, abs=1e-3)
    assert result.northing == 0.


def test_project_central_meridian():
    result = project(0., 3.)
    assert result.easting == 500000.
    assert result.northing == 0.
    assert result.convergence == 0.
    assert result.scale == pytest.approx(0.9996, abs=1e-12)


def test_project_southern_hemisphere():
    result = project(-33.8568, 151.2153)
    assert result.zone == 56
    assert result.hemisphere == 'S'
    assert 6_000_000 < result.northing < 10_000_000

    # Just south of the equator sits just below the false northing
    result = project(-1e-9, 3.)
    assert result.hemisphere == 'S'
    assert result.northing == pytest.approx(10_000_000, abs=1e-3)


def test_project_zone_exceptions():
    assert project(61., 4.5).zone == 32
    assert project(78., 15.).zone == 33
    assert project(78., 8.9).zone == 31

    # Exception zones project against their own central meridian
    assert project(61., 9.).easting == pytest.approx(500000., abs=1e-6)


def test_project_limits():
    assert project(84., 0.).zone == 31
    assert project(-80., 0.).hemisphere == 'S'

    with pytest.raises(OutOfRangeError):
        project(84.0001, 0.)

    with pytest.raises(OutOfRangeError):
        project(-80.0001, 0.)

    with pytest.raises(InvalidPointError):
        project(float('nan'), 0.)

    with pytest.raises(InvalidPointError):
        project(0., float('inf'))


def test_project_wraps_longitude():
    assert project(10., 362.) == project(10., 2.)
    assert project(10., -181.) == project(10., 179.)


def test_project_logs_wrap_once(caplog):
    with caplog.at_level(logging.DEBUG, logger='geogrids'):
        project(10., 362.)

    assert caplog.text.count('wrapped') == 1


def test_grid_northing():
    assert grid_northing(0.) == 0.
    assert grid_northing(48.8582, 2.2945 - 3) == pytest.approx(
        project(48.8582, 2.2945).northing, abs=1e-6
    )

    # Northern parallels are lowest on the central meridian
    assert grid_northing(64.) == pytest.approx(7097014.16, abs=1e-2)
    assert grid_northing(64., -3.) == pytest.approx(7100467.05, abs=1e-2)
    assert grid_northing(64., 3.) == pytest.approx(grid_northing(64., -3.), abs=1e-6)

    # Southern parallels are lowest at the zone edge
    assert grid_northing(-56., 3.) < grid_northing(-56.)

    with pytest.raises(OutOfRangeError):
        grid_northing(85.)

    with pytest.raises(InvalidPointError):
        grid_northing(float('nan'))


def test_unproject():
    result = unproject(31, 'N', 448251.80, 5411932.68)
    assert result.latitude == pytest.approx(48.8582, abs=1e-6)
    assert result.longitude == pytest.approx(2.2945, abs=1e-6)

    result = unproject(31, 'N', 500000., 0.)
    assert result.latitude == 0.
    assert result.longitude == 3.
    assert result.convergence == 0.
    assert result.scale == pytest.approx(0.9996, abs=1e-12)


def test_round_trip():
    for latitude, longitude in (
        (48.8582, 2.2945),
        (0., 0.),
        (-33.8568, 151.2153),
        (61., 4.5),
        (78., 15.),
        (83.99, -177.),
        (-79.99, 179.),
        (40.7128, -74.006),
        (-54.8019, -68.303),
        (1e-7, -1e-7),
    ):
        forward = project(latitude, longitude)
        inverse = unproject(forward.zone, forward.hemisphere, forward.easting, forward.northing)
        assert inverse.latitude == pytest.approx(latitude, abs=1e-7)
        assert inverse.longitude == pytest.approx(longitude, abs=1e-7)
        assert inverse.convergence == pytest.approx(forward.convergence, abs=1e-7)
        assert inverse.scale == pytest.approx(forward.scale, abs=1e-9)

        again = project(inverse.latitude, inverse.longitude)
        assert again.easting == pytest.approx(forward.easting, abs=1e-5)
        assert again.northing == pytest.approx(forward.northing, abs=1e-5)


def test_round_trip_other_ellipsoid():
    grs80 = Ellipsoid(6378137.0, 1 / 298.257222101)
    forward = project(48.8582, 2.2945, grs80)
    assert forward.easting == pytest.approx(project(48.8582, 2.2945).easting, abs=1e-3)

    inverse = unproject(forward.zone, forward.hemisphere, forward.easting, forward.northing, grs80)
    assert inverse.latitude == pytest.approx(48.8582, abs=1e-7)
    assert inverse.longitude == pytest.approx(2.2945, abs=1e-7)


def test_unproject_invalid():
    with pytest.raises(InvalidCoordinateError):
        unproject(31, 'N', float('nan'), 0.)

    with pytest.raises(InvalidCoordinateError):
        unproject(31, 'N', 500000., float('inf'))

    # Too far outside the zone to invert
    with pytest.raises(ConvergenceError):
        unproject(31, 'N', 1e12, 0.)


def test_unproject_logs_iterations(caplog):
    with caplog.at_level(logging.DEBUG, logger='geogrids'):
        unproject(31, 'N', 448251.80, 5411932.68)

    assert 'converged after' in caplog.text


def test_invert_conformal():
    e = WGS84.e
    for latitude in [*range(-80, 85, 2), 84]:
        tau = math.tan(math.radians(latitude))
        actual, iterations = _invert_conformal(_conformal_tau(tau, e), e)
        assert actual == pytest.approx(tau, rel=1e-12, abs=1e-15)
        assert iterations <= 3

    with pytest.raises(ConvergenceError):
        _invert_conformal(float('nan'), e)

    # Squaring overflows this close to a pole
    with pytest.raises(ConvergenceError):
        _invert_conformal(1e200, e)


def test_conformal_tau():
    e = WGS84.e
    assert _conformal_tau(0., e) == 0.

    # Conformal latitude is closer to the equator than geodetic latitude
    tau = math.tan(math.radians(45.))
    assert 0 < _conformal_tau(tau, e) < tau
    assert _conformal_tau(-tau, e) == pytest.approx(-_conformal_tau(tau, e))


def test_project_against_pyproj():
    pyproj = pytest.importorskip('pyproj')

    for latitude, longitude in (
        (48.8582, 2.2945),
        (-33.8568, 151.2153),
        (61., 4.5),
        (78., 15.),
        (83.9, -2.),
        (-79.9, 100.),
    ):
        forward = project(latitude, longitude)
        epsg = (32600 if forward.hemisphere == 'N' else 32700) + forward.zone
        transformer = pyproj.Transformer.from_crs('EPSG:4326', f'EPSG:{epsg}', always_xy=True)
        easting, northing = transformer.transform(longitude, latitude)

        assert forward.easting == pytest.approx(easting, abs=1e-3)
        assert forward.northing == pytest.approx(northing, abs=1e-3)
