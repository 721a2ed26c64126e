# -*- coding: utf-8 -*-
"""
LANDSAT SOM Tests - Setup, forward, inverse and array dispatch.

Tests configure() over every valid satellite/path, reference values for
LANDSAT 1 path 2 on GRS80, round-trip accuracy near the central meridian,
determinism, the latitude clamp at the poles, divergence signalling, and
the scalar / array / (2,N) dispatch of LandsatSOM.

Dependencies
------------
pytest

Author
------
lsatsom contributors

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

import dataclasses
import math

import numpy as np
import pytest

from lsatsom.ellipsoid import GRS80, WGS84
from lsatsom.exceptions import (
    InvalidPathError,
    InvalidSatelliteError,
    ValidationError,
)
import lsatsom.projection.lsat as lsat_module
from lsatsom.projection.lsat import (
    HALFPI,
    TOL,
    InverseSolution,
    LandsatSOM,
    Projected,
    Undefined,
    configure,
    lsat_forward,
    lsat_inverse,
    _track_longitude,
)
from lsatsom.vocabulary import SolveStatus

# Tolerance of the round trip, radians
ROUND_TRIP_TOL = 1e-6


def _configure(satellite, path, ellipsoid=WGS84):
    return configure(
        satellite, path, ellipsoid.es, ellipsoid.one_es, ellipsoid.rone_es,
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def params():
    """Coefficient bundle for LANDSAT 1, path 1, WGS84."""
    return _configure(1, 1)


@pytest.fixture
def som():
    """LandsatSOM for LANDSAT 1, path 1, WGS84."""
    return LandsatSOM(satellite=1, path=1)


@pytest.fixture
def som_grs80():
    """LandsatSOM for LANDSAT 1, path 2, GRS80."""
    return LandsatSOM(satellite=1, path=2, ellipsoid=GRS80)


# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

class TestConfigure:
    """Test configure() over the full parameter space."""

    @pytest.mark.parametrize('satellite, max_path', [
        (1, 251), (2, 251), (3, 251), (4, 233), (5, 233),
    ])
    def test_all_paths_finite(self, satellite, max_path):
        for path in range(1, max_path + 1):
            bundle = _configure(satellite, path)
            values = (dataclasses.astuple(bundle.series)
                      + (bundle.orbit.lam0, bundle.orbit.p22))
            assert all(math.isfinite(v) for v in values), (satellite, path)

    def test_deterministic(self):
        assert _configure(3, 120) == _configure(3, 120)

    @pytest.mark.parametrize('satellite', [0, 6, -1])
    def test_invalid_satellite(self, satellite):
        with pytest.raises(InvalidSatelliteError) as excinfo:
            _configure(satellite, 1)
        assert excinfo.value.code == -28

    @pytest.mark.parametrize('satellite, path', [(1, 0), (1, 252), (5, 234)])
    def test_invalid_path(self, satellite, path):
        with pytest.raises(InvalidPathError) as excinfo:
            _configure(satellite, path)
        assert excinfo.value.code == -29

    def test_bundle_frozen(self, params):
        with pytest.raises(AttributeError):
            params.series = None

    def test_keeps_ellipsoid_terms(self, params):
        assert params.es == WGS84.es
        assert params.one_es == WGS84.one_es
        assert params.rone_es == WGS84.rone_es


# ---------------------------------------------------------------------------
# Forward
# ---------------------------------------------------------------------------

class TestForward:
    """Test lsat_forward on the unit ellipsoid."""

    def test_central_meridian_equator(self, params):
        result = lsat_forward(0.0, 0.0, params)
        assert isinstance(result, Projected)
        assert math.isfinite(result.x) and math.isfinite(result.y)

    def test_deterministic(self, params):
        first = lsat_forward(0.05, 0.7, params)
        second = lsat_forward(0.05, 0.7, params)
        assert first == second

    @pytest.mark.parametrize('phi', [HALFPI, -HALFPI])
    def test_poles_never_raise(self, params, phi):
        result = lsat_forward(0.1, phi, params)
        assert isinstance(result, (Projected, Undefined))
        if isinstance(result, Projected):
            assert math.isfinite(result.x) and math.isfinite(result.y)

    @pytest.mark.parametrize('phi, clamped', [(2.0, HALFPI), (-2.0, -HALFPI)])
    def test_latitude_clamped(self, params, phi, clamped):
        assert lsat_forward(0.1, phi, params) == lsat_forward(
            0.1, clamped, params)

    @pytest.mark.parametrize('lam, phi', [
        (math.nan, 0.0), (0.0, math.nan), (math.inf, 0.0),
    ])
    def test_non_finite_input_undefined(self, params, lam, phi):
        result = lsat_forward(lam, phi, params)
        assert isinstance(result, Undefined)
        assert result.reason

    def test_north_south_differ(self, params):
        north = lsat_forward(0.0, 0.3, params)
        south = lsat_forward(0.0, -0.3, params)
        assert north.y != south.y

    @pytest.mark.parametrize('phi_deg', [0.0, 6.0, 12.0])
    def test_outside_principal_branch(self, params, phi_deg):
        result = lsat_forward(math.radians(60.0), math.radians(phi_deg),
                              params)
        assert result == Undefined(
            'ground-track parameter outside principal branch')

    def test_outside_principal_branch_is_infinite(self, som):
        x, y = som.forward(math.degrees(som.lam0) + 60.0, 0.0)
        assert x == math.inf and y == math.inf

    def test_iteration_budget_exhausted(self, params, monkeypatch):
        monkeypatch.setattr(lsat_module, 'MAX_STEPS', 1)
        result = lsat_forward(0.0, 0.3, params)
        assert result == Undefined('ground-track iteration did not converge')


class TestTrackLongitude:
    """Test the zero-cosine nudge of the track longitude."""

    def test_away_from_zero_unchanged(self):
        lamt, c = _track_longitude(0.2, 0.1, 1.0)
        assert lamt == 0.2 + 0.1 * 1.0
        assert c == math.cos(lamt)

    def test_zero_cosine_moved(self):
        lamt, c = _track_longitude(HALFPI, 0.0, 0.0)
        assert lamt == HALFPI - TOL
        # Cosine of the moved angle, not of HALFPI
        assert c == math.cos(HALFPI - TOL)
        assert c == pytest.approx(TOL, rel=1e-6)


# ---------------------------------------------------------------------------
# Inverse
# ---------------------------------------------------------------------------

class TestInverse:
    """Test lsat_inverse on the unit ellipsoid."""

    def test_converges_near_origin(self, params):
        solution = lsat_inverse(1e-4, 1e-5, params)
        assert isinstance(solution, InverseSolution)
        assert solution.status is SolveStatus.CONVERGED
        assert solution.converged
        assert 0 < solution.iterations <= 50
        assert math.isfinite(solution.lam) and math.isfinite(solution.phi)

    def test_deterministic(self, params):
        assert lsat_inverse(0.3, 0.01, params) == lsat_inverse(
            0.3, 0.01, params)

    def test_non_finite_input(self, params):
        solution = lsat_inverse(math.inf, math.inf, params)
        assert math.isnan(solution.lam) and math.isnan(solution.phi)
        assert solution.status is SolveStatus.NOT_ATTEMPTED
        assert not solution.converged
        assert solution.iterations == 0

    def test_degenerate_inclination(self, params):
        """|sa| below tolerance recovers latitude without dividing by sa."""
        orbit = dataclasses.replace(params.orbit, sa=0.0)
        degenerate = dataclasses.replace(params, orbit=orbit)
        solution = lsat_inverse(0.2, 0.01, degenerate)
        assert math.isfinite(solution.phi)
        assert abs(solution.phi) <= HALFPI


# ---------------------------------------------------------------------------
# Reference values (LANDSAT 1, path 2, GRS80)
# ---------------------------------------------------------------------------

class TestReferenceValues:
    """Fixed values for +lsat=1 +path=2 +ellps=GRS80."""

    def test_forward(self, som_grs80):
        x, y = som_grs80.forward(2.0, 1.0)
        assert x == pytest.approx(18241950.01455855, abs=1e-2)
        assert y == pytest.approx(9998256.83982293, abs=1e-2)

    def test_inverse(self, som_grs80):
        # Off the forward principal branch: not a round-trip point
        lon, lat = som_grs80.inverse(200.0, 100.0)
        assert lon == pytest.approx(126.00042383453, abs=1e-7)
        assert lat == pytest.approx(0.00172378224, abs=1e-7)


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------

class TestRoundTrip:
    """inverse(forward(p)) == p near the central meridian."""

    @pytest.mark.parametrize('dlam', [-0.05, 0.0, 0.05])
    @pytest.mark.parametrize('phi_deg', [-60.0, -30.0, 0.0, 30.0, 60.0])
    def test_core_round_trip(self, params, dlam, phi_deg):
        phi = math.radians(phi_deg)
        result = lsat_forward(dlam, phi, params)
        if isinstance(result, Undefined):
            pytest.skip(result.reason)
        solution = lsat_inverse(result.x, result.y, params)
        assert solution.converged
        assert abs(solution.lam - dlam) < ROUND_TRIP_TOL
        assert abs(solution.phi - phi) < ROUND_TRIP_TOL

    def test_array_round_trip(self, som):
        lam0 = math.degrees(som.lam0)
        lons = lam0 + np.array([-2.0, -1.0, 0.0, 1.0, 2.0, 0.5])
        lats = np.array([-60.0, -20.0, 0.0, 20.0, 45.0, 60.0])
        xs, ys = som.forward(lons, lats)
        defined = np.isfinite(xs)
        assert defined[2]
        back_lons, back_lats, converged = som.inverse_with_status(
            xs[defined], ys[defined])
        assert np.all(converged)
        tol = math.degrees(ROUND_TRIP_TOL)
        np.testing.assert_allclose(back_lons, lons[defined], atol=tol)
        np.testing.assert_allclose(back_lats, lats[defined], atol=tol)

    def test_round_trip_with_false_origin(self):
        som = LandsatSOM(5, 33, x_0=500000.0, y_0=-100000.0)
        lon = math.degrees(som.lam0) + 1.0
        x, y = som.forward(lon, 10.0)
        back_lon, back_lat = som.inverse(x, y)
        assert back_lon == pytest.approx(lon, abs=1e-6)
        assert back_lat == pytest.approx(10.0, abs=1e-6)


# ---------------------------------------------------------------------------
# LandsatSOM class
# ---------------------------------------------------------------------------

class TestLandsatSOM:
    """Test construction and dispatch of the LandsatSOM wrapper."""

    def test_attributes(self, som):
        assert som.satellite == 1
        assert som.path == 1
        assert som.name == 'lsat'
        assert som.lam0 == som.params.orbit.lam0
        assert som.ellipsoid is WGS84

    def test_ellipsoid_by_name(self):
        som = LandsatSOM(1, 2, ellipsoid='GRS80')
        assert som.ellipsoid is GRS80

    def test_invalid_construction(self):
        with pytest.raises(InvalidSatelliteError):
            LandsatSOM(satellite=7, path=1)
        with pytest.raises(InvalidPathError):
            LandsatSOM(satellite=4, path=250)

    def test_scalar_returns_floats(self, som):
        x, y = som.forward(math.degrees(som.lam0), 0.0)
        assert isinstance(x, float) and isinstance(y, float)
        lon, lat = som.inverse(x, y)
        assert isinstance(lon, float) and isinstance(lat, float)

    def test_array_returns_arrays(self, som):
        lon0 = math.degrees(som.lam0)
        xs, ys = som.forward([lon0, lon0 + 1.0], [0.0, 10.0])
        assert xs.shape == (2,) and ys.shape == (2,)
        lons, lats = som.inverse(xs, ys)
        assert lons.shape == (2,) and lats.shape == (2,)

    def test_stacked_2xN(self, som):
        lon0 = math.degrees(som.lam0)
        pts = np.array([
            [lon0, lon0 + 1.0, lon0 - 1.0],   # lons
            [0.0, 10.0, -10.0],               # lats
        ])
        result = som.forward(pts)
        assert result.shape == (2, 3)
        back = som.inverse(result)
        assert back.shape == (2, 3)
        np.testing.assert_allclose(back, pts, atol=1e-6)

    def test_bad_stacked_shape(self, som):
        with pytest.raises(ValidationError, match="Expected \\(2, N\\)"):
            som.forward(np.zeros((3, 4)))
        with pytest.raises(ValueError):
            som.inverse(np.zeros(5))

    def test_forward_radians_matches_core(self, som):
        assert som.forward_radians(0.01, 0.2) == lsat_forward(
            0.01, 0.2, som.params)

    def test_inverse_radians_matches_core(self, som):
        assert som.inverse_radians(0.4, 0.01) == lsat_inverse(
            0.4, 0.01, som.params)

    def test_scaled_by_semi_major_axis(self, som):
        core = lsat_forward(0.0, 0.2, som.params)
        x, y = som.forward(math.degrees(som.lam0), math.degrees(0.2))
        assert x == pytest.approx(WGS84.a * core.x, rel=1e-12)
        assert y == pytest.approx(WGS84.a * core.y, rel=1e-12)

    def test_false_easting_northing(self):
        plain = LandsatSOM(2, 40)
        shifted = LandsatSOM(2, 40, x_0=1000.0, y_0=-2000.0)
        lon = math.degrees(plain.lam0)
        x, y = plain.forward(lon, 5.0)
        xs, ys = shifted.forward(lon, 5.0)
        assert xs - x == pytest.approx(1000.0)
        assert ys - y == pytest.approx(-2000.0)

    def test_undefined_point_is_infinite(self, som):
        x, y = som.forward(np.nan, 0.0)
        assert x == math.inf and y == math.inf

    def test_inverse_of_sentinel_is_nan(self, som):
        lons, lats, converged = som.inverse_with_status([math.inf], [math.inf])
        assert np.isnan(lons[0]) and np.isnan(lats[0])
        assert not converged[0]

    def test_repeated_calls_bit_identical(self, som):
        lon0 = math.degrees(som.lam0)
        first = som.forward([lon0, lon0 + 2.0], [15.0, -40.0])
        second = som.forward([lon0, lon0 + 2.0], [15.0, -40.0])
        np.testing.assert_array_equal(first[0], second[0])
        np.testing.assert_array_equal(first[1], second[1])

    def test_repr(self, som):
        assert repr(som).startswith("LandsatSOM(satellite=1, path=1")
