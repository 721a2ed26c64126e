# -*- coding: utf-8 -*-
"""
Reference Ellipsoids - Eccentricity terms consumed by the SOM setup.

Provides the ``Ellipsoid`` value type holding the semi-major axis and
first eccentricity squared, together with the derived quantities the
projection math reads (``one_es = 1 - e^2`` and ``rone_es = 1 / one_es``).

A handful of ellipsoids used with LANDSAT products are built in. Any other
ellipsoid known to PROJ can be resolved by name through pyproj.

Dependencies
------------
pyproj (optional, for names outside the built-in table)

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
from typing import Dict, Optional

# lsatsom internal
from lsatsom._backend import require_pyproj_backend
from lsatsom.exceptions import ValidationError


@dataclass(frozen=True)
class Ellipsoid:
    """Reference ellipsoid described by semi-major axis and eccentricity.

    Parameters
    ----------
    name : str
        Short identifier (PROJ ``+ellps`` style, e.g. ``'WGS84'``).
    a : float
        Semi-major axis in metres.
    es : float
        First eccentricity squared. Must satisfy ``0 < es < 1``; the
        spherical case is not supported by the SOM formulas.
    """

    name: str
    a: float
    es: float

    def __post_init__(self) -> None:
        if not self.a > 0.0:
            raise ValidationError(
                f"Semi-major axis must be positive, got {self.a!r}"
            )
        if not 0.0 < self.es < 1.0:
            raise ValidationError(
                f"Eccentricity squared must be in (0, 1), got {self.es!r}"
            )

    @property
    def one_es(self) -> float:
        """``1 - e^2``."""
        return 1.0 - self.es

    @property
    def rone_es(self) -> float:
        """``1 / (1 - e^2)``."""
        return 1.0 / self.one_es

    @property
    def f(self) -> float:
        """Flattening."""
        return 1.0 - math.sqrt(self.one_es)

    @property
    def b(self) -> float:
        """Semi-minor axis in metres."""
        return self.a * math.sqrt(self.one_es)

    @classmethod
    def from_flattening(
        cls,
        a: float,
        rf: float,
        name: str = 'custom',
    ) -> 'Ellipsoid':
        """Build an ellipsoid from semi-major axis and inverse flattening."""
        if not rf > 0.0:
            raise ValidationError(
                f"Inverse flattening must be positive, got {rf!r}"
            )
        f = 1.0 / rf
        return cls(name=name, a=a, es=f * (2.0 - f))

    @classmethod
    def from_axes(
        cls,
        a: float,
        b: float,
        name: str = 'custom',
    ) -> 'Ellipsoid':
        """Build an ellipsoid from its semi-major and semi-minor axes."""
        if not 0.0 < b <= a:
            raise ValidationError(
                f"Semi-minor axis must be in (0, a], got {b!r}"
            )
        return cls(name=name, a=a, es=1.0 - (b * b) / (a * a))


WGS84 = Ellipsoid.from_flattening(6378137.0, 298.257223563, name='WGS84')
GRS80 = Ellipsoid.from_flattening(6378137.0, 298.257222101, name='GRS80')
CLARKE1866 = Ellipsoid.from_axes(6378206.4, 6356583.8, name='clrk66')
INTERNATIONAL = Ellipsoid.from_flattening(6378388.0, 297.0, name='intl')

_BUILTIN_ELLIPSOIDS: Dict[str, Ellipsoid] = {
    'wgs84': WGS84,
    'grs80': GRS80,
    'clrk66': CLARKE1866,
    'intl': INTERNATIONAL,
}


def get_ellipsoid(name: Optional[str] = None) -> Ellipsoid:
    """Resolve an ellipsoid by its PROJ ``+ellps`` name.

    Built-in names are matched case-insensitively. Other names are looked
    up through ``pyproj.Geod``.

    Parameters
    ----------
    name : str, optional
        Ellipsoid name. ``None`` returns WGS84.

    Returns
    -------
    Ellipsoid

    Raises
    ------
    ValidationError
        If pyproj does not know the name, or it names a sphere.
    DependencyError
        If the name is not built in and pyproj is not installed.
    """
    if name is None:
        return WGS84
    builtin = _BUILTIN_ELLIPSOIDS.get(name.lower())
    if builtin is not None:
        return builtin

    require_pyproj_backend()
    import pyproj

    try:
        geod = pyproj.Geod(ellps=name)
    except (KeyError, pyproj.exceptions.GeodError) as exc:
        raise ValidationError(f"Unknown ellipsoid: {name!r}") from exc
    return Ellipsoid(name=name, a=float(geod.a), es=float(geod.es))
