# -*- coding: utf-8 -*-
"""
Ground-Track Quadrature - Fourier coefficients of the SOM series.

Integrates the ground-track correction function over a quarter orbit
with a composite Simpson rule at 9 degree spacing. The weighted samples
are accumulated into the five series coefficients ``b``, ``a2``, ``a4``,
``c1`` and ``c3`` used by the forward and inverse transforms.

The accumulation is a left fold over ``QUADRATURE_SAMPLES``: each sample
adds to the partial sums produced by the ones before it, and the sums are
normalized only once every sample has been visited.

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
import math
from dataclasses import dataclass
from functools import reduce
from typing import Tuple

# lsatsom internal
from lsatsom.orbit import DEG_TO_RAD, OrbitParameters


@dataclass(frozen=True)
class SeriesCoefficients:
    """Fourier coefficients of the SOM ground-track series.

    ``b``, ``a2`` and ``a4`` weight the even harmonics of the along-track
    coordinate; ``c1`` and ``c3`` the odd harmonics of the cross-track
    coordinate.
    """

    b: float = 0.0
    a2: float = 0.0
    a4: float = 0.0
    c1: float = 0.0
    c3: float = 0.0


# (longitude in degrees, Simpson weight), in accumulation order
QUADRATURE_SAMPLES: Tuple[Tuple[float, float], ...] = (
    ((0.0, 1.0),)
    + tuple((lam, 4.0) for lam in (9.0, 27.0, 45.0, 63.0, 81.0))
    + tuple((lam, 2.0) for lam in (18.0, 36.0, 54.0, 72.0))
    + ((90.0, 1.0),)
)

# Normalization applied after the last sample
_DIVISORS = SeriesCoefficients(b=30.0, a2=30.0, a4=60.0, c1=15.0, c3=45.0)


def track_scale(lam: float, orbit: OrbitParameters) -> float:
    """The ``S`` term of the SOM equations at ground-track parameter ``lam``.

    Shared by the quadrature integrand and both transforms.
    """
    sd = math.sin(lam)
    sdsq = sd * sd
    return orbit.p22 * orbit.sa * math.cos(lam) * math.sqrt(
        (1.0 + orbit.t * sdsq)
        / ((1.0 + orbit.w * sdsq) * (1.0 + orbit.q * sdsq))
    )


def accumulate_sample(
    acc: SeriesCoefficients,
    sample: Tuple[float, float],
    orbit: OrbitParameters,
) -> SeriesCoefficients:
    """Add one weighted sample of the correction integrand to ``acc``.

    Parameters
    ----------
    acc : SeriesCoefficients
        Partial sums so far.
    sample : Tuple[float, float]
        ``(longitude_degrees, weight)``.
    orbit : OrbitParameters
        Orbit constants supplying ``p22``, ``sa``, ``ca``, ``w``, ``q``,
        ``t`` and ``xj``.

    Returns
    -------
    SeriesCoefficients
        New partial sums; ``acc`` is left untouched.
    """
    lam_deg, mult = sample
    lam = lam_deg * DEG_TO_RAD
    sd = math.sin(lam)
    sdsq = sd * sd
    s = track_scale(lam, orbit)

    qs = 1.0 + orbit.q * sdsq
    ws = 1.0 + orbit.w * sdsq
    h = math.sqrt(qs / ws) * (ws / (qs * qs) - orbit.p22 * orbit.ca)

    sq = math.sqrt(orbit.xj * orbit.xj + s * s)
    fc_even = mult * (h * orbit.xj - s * s) / sq
    fc_odd = mult * s * (h + orbit.xj) / sq
    return SeriesCoefficients(
        b=acc.b + fc_even,
        a2=acc.a2 + fc_even * math.cos(lam + lam),
        a4=acc.a4 + fc_even * math.cos(lam * 4.0),
        c1=acc.c1 + fc_odd * math.cos(lam),
        c3=acc.c3 + fc_odd * math.cos(lam * 3.0),
    )


def integrate_coefficients(orbit: OrbitParameters) -> SeriesCoefficients:
    """Compute the normalized series coefficients for ``orbit``.

    Parameters
    ----------
    orbit : OrbitParameters

    Returns
    -------
    SeriesCoefficients
    """
    total = reduce(
        lambda acc, sample: accumulate_sample(acc, sample, orbit),
        QUADRATURE_SAMPLES,
        SeriesCoefficients(),
    )
    return SeriesCoefficients(
        b=total.b / _DIVISORS.b,
        a2=total.a2 / _DIVISORS.a2,
        a4=total.a4 / _DIVISORS.a4,
        c1=total.c1 / _DIVISORS.c1,
        c3=total.c3 / _DIVISORS.c3,
    )
