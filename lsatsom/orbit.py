# -*- coding: utf-8 -*-
"""
LANDSAT Orbit Constants - Validation and orbit-shape terms for SOM setup.

Validates the satellite number and path, looks up the orbit geometry of
the satellite's group, and derives the closed-form constants that both
SOM transforms read: the central meridian of the path, the orbit to
Earth rotation rate ratio ``p22``, the sine and cosine of the orbital
inclination, and the eccentricity-dependent shape terms ``w``, ``q``,
``t``, ``u`` and ``xj``.

Orbit geometry per group (Snyder, "Map Projections - A Working Manual",
USGS PP 1395, chapter 27):

========== ======== ================= =============== ===========
group      paths    meridian of path  period (min)    inclination
========== ======== ================= =============== ===========
LANDSAT1-3 251      128.87 deg        103.2669323     99.092 deg
LANDSAT4-5 233      129.30 deg        98.8841202      98.2 deg
========== ======== ================= =============== ===========

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
import numbers
from dataclasses import dataclass
from typing import Dict, Tuple

# lsatsom internal
from lsatsom.exceptions import (
    InvalidPathError,
    InvalidSatelliteError,
    ValidationError,
)
from lsatsom.vocabulary import SatelliteGroup

logger = logging.getLogger(__name__)

DEG_TO_RAD = math.pi / 180.0
MINUTES_PER_DAY = 1440.0

# Smallest |cos(inclination)| kept as-is
CA_EPSILON = 1e-9

# Branch bounds of the ground-track parameter, independent of satellite
RLM = math.pi * (1.0 / 248.0 + 0.5161290322580645)
RLM2 = RLM + 2.0 * math.pi


@dataclass(frozen=True)
class OrbitGeometry:
    """Fixed orbit description shared by a satellite group.

    Attributes
    ----------
    max_path : int
        Number of paths in the repeat cycle.
    meridian_deg : float
        Longitude term of the central meridian formula, degrees.
    period_minutes : float
        Orbit period in minutes; ``p22 = period_minutes / 1440``.
    inclination_deg : float
        Orbital inclination, degrees.
    """

    max_path: int
    meridian_deg: float
    period_minutes: float
    inclination_deg: float


ORBIT_GEOMETRY: Dict[SatelliteGroup, OrbitGeometry] = {
    SatelliteGroup.LANDSAT_1_3: OrbitGeometry(
        max_path=251,
        meridian_deg=128.87,
        period_minutes=103.2669323,
        inclination_deg=99.092,
    ),
    SatelliteGroup.LANDSAT_4_5: OrbitGeometry(
        max_path=233,
        meridian_deg=129.3,
        period_minutes=98.8841202,
        inclination_deg=98.2,
    ),
}


@dataclass(frozen=True)
class OrbitParameters:
    """Orbit constants of one configured satellite and path.

    ``lam0`` is the central meridian in radians. The remaining attributes
    keep the conventional SOM symbol names (Snyder 1987).
    """

    satellite: int
    path: int
    group: SatelliteGroup
    lam0: float
    p22: float
    sa: float
    ca: float
    w: float
    q: float
    t: float
    u: float
    xj: float
    rlm: float = RLM
    rlm2: float = RLM2


def _require_int(value: object, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__} "
            f"{value!r}"
        )
    return int(value)


def validate_satellite(satellite: int) -> SatelliteGroup:
    """Check a LANDSAT number and return its group.

    Raises
    ------
    ValidationError
        If ``satellite`` is not an integer.
    InvalidSatelliteError
        If ``satellite`` is outside 1..5.
    """
    satellite = _require_int(satellite, 'satellite')
    if satellite <= 0 or satellite > 5:
        raise InvalidSatelliteError(satellite)
    return SatelliteGroup.for_satellite(satellite)


def validate_path(path: int, group: SatelliteGroup) -> int:
    """Check a path number against the cycle length of ``group``.

    Raises
    ------
    ValidationError
        If ``path`` is not an integer.
    InvalidPathError
        If ``path`` is outside 1..max_path.
    """
    path = _require_int(path, 'path')
    max_path = ORBIT_GEOMETRY[group].max_path
    if path <= 0 or path > max_path:
        raise InvalidPathError(path, max_path)
    return path


def inclination_terms(alf: float) -> Tuple[float, float]:
    """Sine and cosine of the inclination ``alf`` (radians).

    The cosine is replaced by ``CA_EPSILON`` when its magnitude is below
    it, since several SOM terms divide by it.
    """
    sa = math.sin(alf)
    ca = math.cos(alf)
    if abs(ca) < CA_EPSILON:
        ca = CA_EPSILON
    return sa, ca


def central_meridian(path: int, geometry: OrbitGeometry) -> float:
    """Central meridian of ``path`` in radians."""
    return (DEG_TO_RAD * geometry.meridian_deg
            - 2.0 * math.pi / geometry.max_path * path)


def orbit_parameters(
    satellite: int,
    path: int,
    es: float,
    one_es: float,
    rone_es: float,
) -> OrbitParameters:
    """Validate ``satellite`` / ``path`` and derive the orbit constants.

    Parameters
    ----------
    satellite : int
        LANDSAT number, 1..5.
    path : int
        Path number, 1..251 for LANDSAT 1-3 and 1..233 for LANDSAT 4-5.
    es : float
        Eccentricity squared of the reference ellipsoid.
    one_es : float
        ``1 - es``.
    rone_es : float
        ``1 / (1 - es)``.

    Returns
    -------
    OrbitParameters

    Raises
    ------
    InvalidSatelliteError
        Satellite out of range (code -28).
    InvalidPathError
        Path out of range (code -29).
    ValidationError
        Either value is not an integer.
    """
    group = validate_satellite(satellite)
    path = validate_path(path, group)
    geometry = ORBIT_GEOMETRY[group]

    lam0 = central_meridian(path, geometry)
    p22 = geometry.period_minutes / MINUTES_PER_DAY
    sa, ca = inclination_terms(DEG_TO_RAD * geometry.inclination_deg)

    esc = es * ca * ca
    ess = es * sa * sa
    w = (1.0 - esc) * rone_es
    w = w * w - 1.0
    q = ess * rone_es
    t = ess * (2.0 - es) * rone_es * rone_es
    u = esc * rone_es
    xj = one_es * one_es * one_es

    logger.debug(
        "LANDSAT %d path %d: lam0=%.12f rad, p22=%.12f", satellite, path,
        lam0, p22,
    )
    return OrbitParameters(
        satellite=int(satellite),
        path=path,
        group=group,
        lam0=lam0,
        p22=p22,
        sa=sa,
        ca=ca,
        w=w,
        q=q,
        t=t,
        u=u,
        xj=xj,
    )
