# -*- coding: utf-8 -*-
"""
Space Oblique Mercator for LANDSAT - Ellipsoidal forward and inverse.

Implements the Space Oblique Mercator (SOM) projection of Snyder and Linck
(USGS) for the ground tracks of LANDSAT 1-5. A projection instance is fixed
by the satellite number and the path number, which determine the orbit
inclination and the central meridian.

Setup (``configure``) derives the orbit constants and integrates the
series coefficients once. The forward and inverse transforms are pure
functions of their inputs and that immutable bundle, so a configured
``LandsatSOM`` may be shared freely between threads.

Coordinate flow:

    (lon, lat) deg  --wrap(lon - lam0)-->  (lam, phi) rad  --SOM-->
    unit-ellipsoid (x', y')  --a, x_0, y_0-->  (x, y) m

Forward points with no image under the projection (the iteration does not
settle on the principal branch of the ground-track parameter) come back as
``Undefined`` from ``lsat_forward`` and as ``(inf, inf)`` from the array
API. The inverse always returns its last estimate; whether it converged is
carried on ``InverseSolution.status``.

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

# Standard library
import logging
import math
from dataclasses import dataclass
from typing import Tuple, Union

# Third-party
import numpy as np

# lsatsom internal
from lsatsom.ellipsoid import WGS84, Ellipsoid, get_ellipsoid
from lsatsom.orbit import OrbitParameters, orbit_parameters
from lsatsom.projection.base import Projection
from lsatsom.quadrature import (
    SeriesCoefficients,
    integrate_coefficients,
    track_scale,
)
from lsatsom.solver import magnitude_difference, solve_fixed_point
from lsatsom.vocabulary import SolveStatus

logger = logging.getLogger(__name__)

TOL = 1e-7
MAX_STEPS = 50
MAX_BRANCH_ATTEMPTS = 3

HALFPI = 0.5 * math.pi
FORTPI = 0.25 * math.pi
PI_HALFPI = 1.5 * math.pi
TWOPI_HALFPI = 2.5 * math.pi


@dataclass(frozen=True)
class LsatParameters:
    """Everything the SOM transforms read, computed once by ``configure``."""

    orbit: OrbitParameters
    series: SeriesCoefficients
    es: float
    one_es: float
    rone_es: float


@dataclass(frozen=True)
class Projected:
    """Forward result on the unit-semi-major ellipsoid."""

    x: float
    y: float


@dataclass(frozen=True)
class Undefined:
    """Forward result for a point with no image under the projection."""

    reason: str


ForwardResult = Union[Projected, Undefined]


@dataclass(frozen=True)
class InverseSolution:
    """Inverse result.

    ``lam`` is relative to the central meridian. When ``status`` is
    ``EXHAUSTED`` the coordinates come from the last iterate. Non-finite
    input is never iterated and carries ``NOT_ATTEMPTED`` with NaN
    coordinates.
    """

    lam: float
    phi: float
    status: SolveStatus
    iterations: int

    @property
    def converged(self) -> bool:
        return self.status is SolveStatus.CONVERGED


def configure(
    satellite: int,
    path: int,
    es: float,
    one_es: float,
    rone_es: float,
) -> LsatParameters:
    """Validate the orbit selection and build the SOM coefficient bundle.

    Parameters
    ----------
    satellite : int
        LANDSAT number, 1..5.
    path : int
        Path number, 1..251 (LANDSAT 1-3) or 1..233 (LANDSAT 4-5).
    es, one_es, rone_es : float
        Ellipsoid eccentricity squared, ``1 - es`` and ``1 / (1 - es)``.

    Returns
    -------
    LsatParameters

    Raises
    ------
    InvalidSatelliteError
        Code -28.
    InvalidPathError
        Code -29.
    """
    orbit = orbit_parameters(satellite, path, es, one_es, rone_es)
    series = integrate_coefficients(orbit)
    return LsatParameters(
        orbit=orbit, series=series, es=es, one_es=one_es, rone_es=rone_es,
    )


def _aasin(v: float) -> float:
    if v >= 1.0:
        return HALFPI
    if v <= -1.0:
        return -HALFPI
    return math.asin(v)


def _atan_ratio(num: float, den: float) -> float:
    if den == 0.0:
        return math.copysign(HALFPI, num)
    return math.atan(num / den)


def _track_longitude(
    lam: float,
    p22: float,
    lamdp: float,
) -> Tuple[float, float]:
    """Longitude along the rotating track and its cosine, kept off zero.

    Within TOL of a zero cosine the angle is moved by -TOL and the
    returned cosine is that of the moved angle.
    """
    lamt = lam + p22 * lamdp
    c = math.cos(lamt)
    if abs(c) < TOL:
        lamt -= TOL
        c = math.cos(lamt)
    return lamt, c


def lsat_forward(lam: float, phi: float, params: LsatParameters) -> ForwardResult:
    """Project one point.

    Parameters
    ----------
    lam : float
        Longitude relative to the central meridian, radians.
    phi : float
        Latitude in radians, clamped to [-pi/2, pi/2].
    params : LsatParameters

    Returns
    -------
    Projected or Undefined
    """
    if not math.isfinite(lam) or math.isnan(phi):
        return Undefined("non-finite input")

    orbit = params.orbit
    series = params.series
    phi = min(max(phi, -HALFPI), HALFPI)

    lampp = HALFPI if phi >= 0.0 else PI_HALFPI
    slope = params.one_es * math.tan(phi) * orbit.sa

    def branch_step(fac: float):
        def step(sav: float) -> float:
            lamt, c = _track_longitude(lam, orbit.p22, sav)
            return _atan_ratio(slope + math.sin(lamt) * orbit.ca, c) + fac
        return step

    for _ in range(MAX_BRANCH_ATTEMPTS):
        if math.cos(lam + orbit.p22 * lampp) < 0.0:
            fac = lampp + math.sin(lampp) * HALFPI
        else:
            fac = lampp - math.sin(lampp) * HALFPI
        result = solve_fixed_point(
            branch_step(fac), lampp, TOL, MAX_STEPS, magnitude_difference,
        )
        if not result.converged:
            return Undefined("ground-track iteration did not converge")
        lamdp = result.value
        if orbit.rlm < lamdp < orbit.rlm2:
            break
        if lamdp <= orbit.rlm:
            lampp = TWOPI_HALFPI
        elif lamdp >= orbit.rlm2:
            lampp = HALFPI
    else:
        return Undefined("ground-track parameter outside principal branch")

    lamt, _ = _track_longitude(lam, orbit.p22, result.previous)
    sp = math.sin(phi)
    phidp = _aasin(
        (params.one_es * orbit.ca * sp
         - orbit.sa * math.cos(phi) * math.sin(lamt))
        / math.sqrt(1.0 - params.es * sp * sp)
    )
    tangent = math.tan(FORTPI + 0.5 * phidp)
    if not tangent > 0.0:
        return Undefined("transformed latitude at the pole")
    tanph = math.log(tangent)

    sd = math.sin(lamdp)
    s = track_scale(lamdp, orbit)
    d = math.sqrt(orbit.xj * orbit.xj + s * s)
    x = (series.b * lamdp
         + series.a2 * math.sin(2.0 * lamdp)
         + series.a4 * math.sin(lamdp * 4.0)
         - tanph * s / d)
    y = (series.c1 * sd
         + series.c3 * math.sin(lamdp * 3.0)
         + tanph * orbit.xj / d)
    return Projected(x, y)


def lsat_inverse(x: float, y: float, params: LsatParameters) -> InverseSolution:
    """Unproject one point.

    Parameters
    ----------
    x, y : float
        Planar coordinates on the unit-semi-major ellipsoid.
    params : LsatParameters

    Returns
    -------
    InverseSolution
        NaN coordinates for non-finite input (status
        ``NOT_ATTEMPTED``) or when the point lies outside the domain of
        the latitude recovery.
    """
    if not (math.isfinite(x) and math.isfinite(y)):
        return InverseSolution(
            math.nan, math.nan, SolveStatus.NOT_ATTEMPTED, 0,
        )

    orbit = params.orbit
    series = params.series
    xj = orbit.xj

    def step(lamdp: float) -> float:
        s = track_scale(lamdp, orbit)
        return (x + y * s / xj
                - series.a2 * math.sin(2.0 * lamdp)
                - series.a4 * math.sin(lamdp * 4.0)
                - s / xj * (series.c1 * math.sin(lamdp)
                            + series.c3 * math.sin(lamdp * 3.0))
                ) / series.b

    result = solve_fixed_point(step, x / series.b, TOL, MAX_STEPS)
    lamdp = result.value
    s = track_scale(result.previous, orbit)

    sl = math.sin(lamdp)
    # 2 * (atan(exp(z)) - pi/4) == 2 * atan(tanh(z / 2))
    z = math.sqrt(1.0 + s * s / xj / xj) * (
        y - series.c1 * sl - series.c3 * math.sin(lamdp * 3.0))
    phidp = 2.0 * math.atan(math.tanh(0.5 * z))
    dd = sl * sl

    if abs(math.cos(lamdp)) < TOL:
        lamdp -= TOL
    cl = math.cos(lamdp)
    spp = math.sin(phidp)
    sppsq = spp * spp
    radicand = (1.0 + orbit.q * dd) * (1.0 - sppsq) - sppsq * orbit.u
    if radicand < 0.0:
        return InverseSolution(
            math.nan, math.nan, result.status, result.iterations,
        )

    lamt = _atan_ratio(
        (1.0 - sppsq * params.rone_es) * math.tan(lamdp) * orbit.ca
        - spp * orbit.sa * math.sqrt(radicand) / cl,
        1.0 - sppsq * (1.0 + orbit.u),
    )
    sign_lamt = 1.0 if lamt >= 0.0 else -1.0
    sign_cl = 1.0 if cl >= 0.0 else -1.0
    lamt -= HALFPI * (1.0 - sign_cl) * sign_lamt
    lam = lamt - orbit.p22 * lamdp

    if abs(orbit.sa) < TOL:
        phi = _aasin(spp / math.sqrt(
            params.one_es * params.one_es + params.es * sppsq))
    else:
        phi = math.atan(
            (math.tan(lamdp) * math.cos(lamt) - orbit.ca * math.sin(lamt))
            / (params.one_es * orbit.sa)
        )
    return InverseSolution(lam, phi, result.status, result.iterations)


class LandsatSOM(Projection):
    """Space Oblique Mercator projection of a LANDSAT path.

    Parameters
    ----------
    satellite : int
        LANDSAT number, 1..5.
    path : int
        Path number, 1..251 (LANDSAT 1-3) or 1..233 (LANDSAT 4-5).
    ellipsoid : Ellipsoid or str, default=WGS84
        Reference ellipsoid, or its PROJ ``+ellps`` name.
    x_0 : float, default=0.0
        False easting in metres.
    y_0 : float, default=0.0
        False northing in metres.

    Attributes
    ----------
    params : LsatParameters
        Orbit constants and series coefficients, fixed for the lifetime
        of the instance.

    Raises
    ------
    InvalidSatelliteError
        If ``satellite`` is outside 1..5 (code -28).
    InvalidPathError
        If ``path`` is outside the range of the satellite (code -29).

    Examples
    --------
    >>> som = LandsatSOM(satellite=5, path=33)
    >>> x, y = som.forward(-106.0, 39.5)
    >>> lon, lat = som.inverse(x, y)
    """

    name = 'lsat'

    def __init__(
        self,
        satellite: int,
        path: int,
        ellipsoid: Union[Ellipsoid, str] = WGS84,
        x_0: float = 0.0,
        y_0: float = 0.0,
    ) -> None:
        if isinstance(ellipsoid, str):
            ellipsoid = get_ellipsoid(ellipsoid)
        self.params = configure(
            satellite, path, ellipsoid.es, ellipsoid.one_es, ellipsoid.rone_es,
        )
        super().__init__(
            ellipsoid, lam0=self.params.orbit.lam0, x_0=x_0, y_0=y_0,
        )
        logger.debug(
            "Configured %r: b=%.12g a2=%.12g a4=%.12g c1=%.12g c3=%.12g",
            self, self.params.series.b, self.params.series.a2,
            self.params.series.a4, self.params.series.c1,
            self.params.series.c3,
        )

    @property
    def satellite(self) -> int:
        return self.params.orbit.satellite

    @property
    def path(self) -> int:
        return self.params.orbit.path

    def forward_radians(self, lam: float, phi: float) -> ForwardResult:
        """Core forward transform; see :func:`lsat_forward`."""
        return lsat_forward(lam, phi, self.params)

    def inverse_radians(self, x: float, y: float) -> InverseSolution:
        """Core inverse transform; see :func:`lsat_inverse`."""
        return lsat_inverse(x, y, self.params)

    def _forward_array(
        self,
        lam: np.ndarray,
        phi: np.ndarray,
    ) -> Tuple[np.ndarray, np.ndarray]:
        xs = np.full(lam.shape, np.inf)
        ys = np.full(lam.shape, np.inf)
        for i, (lam_i, phi_i) in enumerate(zip(lam.tolist(), phi.tolist())):
            result = lsat_forward(lam_i, phi_i, self.params)
            if isinstance(result, Projected):
                xs[i] = result.x
                ys[i] = result.y
        return xs, ys

    def _inverse_array(
        self,
        x: np.ndarray,
        y: np.ndarray,
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        lam = np.empty(x.shape)
        phi = np.empty(x.shape)
        converged = np.empty(x.shape, dtype=bool)
        for i, (x_i, y_i) in enumerate(zip(x.tolist(), y.tolist())):
            solution = lsat_inverse(x_i, y_i, self.params)
            lam[i] = solution.lam
            phi[i] = solution.phi
            converged[i] = solution.converged
        return lam, phi, converged

    def __repr__(self) -> str:
        return (f"LandsatSOM(satellite={self.satellite}, path={self.path}, "
                f"ellipsoid={self.ellipsoid.name!r}, x_0={self.x_0}, "
                f"y_0={self.y_0})")
