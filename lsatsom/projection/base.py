# -*- coding: utf-8 -*-
"""
Projection Base Class - Abstract interface for map projections.

Defines the abstract base class that turns a projection's core transform,
expressed in radians on an ellipsoid of unit semi-major axis, into a
user-facing transform between geographic degrees and projected metres.
The base class owns everything that is not specific to one projection:
the central meridian, longitude wrapping, the semi-major axis scale, the
false easting / northing, and scalar / array / stacked input dispatch.

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
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple, Union

# Third-party
import numpy as np

# lsatsom internal
from lsatsom.ellipsoid import WGS84, Ellipsoid
from lsatsom.exceptions import ValidationError

logger = logging.getLogger(__name__)

ArrayLike = Union[float, list, np.ndarray]


def _is_scalar(val: Any) -> bool:
    """Check if a value is a scalar (not array-like)."""
    if isinstance(val, np.ndarray):
        return val.ndim == 0
    return isinstance(val, (int, float, np.integer, np.floating))


def _to_array(val: Any) -> np.ndarray:
    """Convert scalar, list, or array to 1D numpy array of float64."""
    arr = np.asarray(val, dtype=np.float64)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    return arr


def _split_stacked(points: Any) -> Tuple[np.ndarray, np.ndarray]:
    pts = np.asarray(points, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[0] != 2:
        raise ValidationError(f"Expected (2, N) array, got shape {pts.shape}")
    return pts[0], pts[1]


def wrap_longitude(lam: np.ndarray) -> np.ndarray:
    """Wrap longitudes in radians into [-pi, pi].

    Values already inside the interval are returned unchanged.
    """
    lam = np.asarray(lam, dtype=np.float64)
    outside = np.abs(lam) > np.pi
    if not np.any(outside):
        return lam
    wrapped = np.mod(lam + np.pi, 2.0 * np.pi) - np.pi
    return np.where(outside, wrapped, lam)


class Projection(ABC):
    """
    Abstract base class for ellipsoidal map projections.

    ``forward`` and ``inverse`` accept three input forms:

    - **Scalar:** ``proj.forward(lon, lat)``
    - **Separate arrays:** ``proj.forward(lons_array, lats_array)``
    - **Stacked (2, N) array:** ``proj.forward(points_2xN)``

    Coordinate Conventions
    ----------------------
    - **Geographic coordinates:** (lon, lat) in degrees on ``ellipsoid``.
    - **Projected coordinates:** (x, y) in metres, including the false
      easting ``x_0`` and false northing ``y_0``.
    - **Undefined points:** a geographic point with no image under the
      projection maps to ``(inf, inf)``.

    Notes
    -----
    Subclasses implement ``_forward_array`` and ``_inverse_array``, which
    operate on 1D float64 arrays of radians relative to the central
    meridian and on unit-semi-major planar coordinates. The public methods
    handle unit conversion and input dispatch.
    """

    #: Registry key of the projection.
    name: str = ''

    def __init__(
        self,
        ellipsoid: Ellipsoid = WGS84,
        lam0: float = 0.0,
        x_0: float = 0.0,
        y_0: float = 0.0,
    ) -> None:
        """
        Initialize the projection wrapper.

        Parameters
        ----------
        ellipsoid : Ellipsoid, default=WGS84
            Reference ellipsoid.
        lam0 : float, default=0.0
            Central meridian in radians.
        x_0 : float, default=0.0
            False easting in metres.
        y_0 : float, default=0.0
            False northing in metres.
        """
        self.ellipsoid = ellipsoid
        self.lam0 = float(lam0)
        self.x_0 = float(x_0)
        self.y_0 = float(y_0)

    @abstractmethod
    def _forward_array(
        self,
        lam: np.ndarray,
        phi: np.ndarray,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Project arrays of radians to unit-ellipsoid planar coordinates.

        Parameters
        ----------
        lam : np.ndarray
            Longitudes relative to the central meridian (radians, 1D).
        phi : np.ndarray
            Latitudes (radians, 1D).

        Returns
        -------
        Tuple[np.ndarray, np.ndarray]
            (x, y) with ``inf`` marking undefined points.
        """
        pass

    @abstractmethod
    def _inverse_array(
        self,
        x: np.ndarray,
        y: np.ndarray,
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Unproject unit-ellipsoid planar coordinates to radians.

        Parameters
        ----------
        x, y : np.ndarray
            Planar coordinates divided by the semi-major axis (1D).

        Returns
        -------
        Tuple[np.ndarray, np.ndarray, np.ndarray]
            (lam, phi, converged): longitude relative to the central
            meridian, latitude, and per-point convergence flags.
        """
        pass

    def _forward_degrees(
        self,
        lons: np.ndarray,
        lats: np.ndarray,
    ) -> Tuple[np.ndarray, np.ndarray]:
        lam = wrap_longitude(np.radians(lons) - self.lam0)
        x, y = self._forward_array(lam, np.radians(lats))
        undefined = ~(np.isfinite(x) & np.isfinite(y))
        if np.any(undefined):
            logger.debug(
                "%s forward: %d of %d points undefined",
                self.name, int(np.count_nonzero(undefined)), x.size,
            )
        a = self.ellipsoid.a
        xs = np.where(undefined, np.inf, a * x + self.x_0)
        ys = np.where(undefined, np.inf, a * y + self.y_0)
        return xs, ys

    def _inverse_degrees(
        self,
        xs: np.ndarray,
        ys: np.ndarray,
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        a = self.ellipsoid.a
        lam, phi, converged = self._inverse_array(
            (xs - self.x_0) / a, (ys - self.y_0) / a
        )
        if not np.all(converged):
            logger.debug(
                "%s inverse: %d of %d points did not converge",
                self.name, int(np.count_nonzero(~converged)), converged.size,
            )
        lons = np.degrees(wrap_longitude(lam + self.lam0))
        return lons, np.degrees(phi), converged

    def forward(
        self,
        lon_or_points: ArrayLike,
        lat: Optional[ArrayLike] = None,
    ) -> Union[Tuple[float, float],
               Tuple[np.ndarray, np.ndarray],
               np.ndarray]:
        """
        Transform geographic coordinates to projected coordinates.

        Parameters
        ----------
        lon_or_points : float, list, np.ndarray
            Longitude(s) in degrees when ``lat`` is provided, or a
            ``(2, N)`` ndarray of stacked ``[lons; lats]`` when ``lat`` is
            None.
        lat : float, list, or np.ndarray, optional
            Latitude(s) in degrees. Latitudes beyond +/-90 are clamped.

        Returns
        -------
        Tuple[float, float]
            ``(x, y)`` when scalar inputs are given.
        Tuple[np.ndarray, np.ndarray]
            ``(xs, ys)`` when separate array/list inputs are given.
        np.ndarray
            Shape ``(2, N)`` when a ``(2, N)`` stacked array is given.

        Raises
        ------
        ValidationError
            If a stacked input is not shaped ``(2, N)``.

        Examples
        --------
        >>> x, y = proj.forward(-120.0, 45.0)
        >>> xs, ys = proj.forward([-120.0, -119.5], [45.0, 45.5])
        """
        if lat is None:
            lons, lats = _split_stacked(lon_or_points)
            return np.vstack(self._forward_degrees(lons, lats))
        xs, ys = self._forward_degrees(_to_array(lon_or_points), _to_array(lat))
        if _is_scalar(lon_or_points) and _is_scalar(lat):
            return (float(xs[0]), float(ys[0]))
        return xs, ys

    def inverse(
        self,
        x_or_points: ArrayLike,
        y: Optional[ArrayLike] = None,
    ) -> Union[Tuple[float, float],
               Tuple[np.ndarray, np.ndarray],
               np.ndarray]:
        """
        Transform projected coordinates to geographic coordinates.

        Parameters
        ----------
        x_or_points : float, list, np.ndarray
            Easting(s) in metres when ``y`` is provided, or a ``(2, N)``
            ndarray of stacked ``[xs; ys]`` when ``y`` is None.
        y : float, list, or np.ndarray, optional
            Northing(s) in metres.

        Returns
        -------
        Tuple[float, float]
            ``(lon, lat)`` in degrees when scalar inputs are given.
        Tuple[np.ndarray, np.ndarray]
            ``(lons, lats)`` when separate array/list inputs are given.
        np.ndarray
            Shape ``(2, N)`` when a ``(2, N)`` stacked array is given.

        Raises
        ------
        ValidationError
            If a stacked input is not shaped ``(2, N)``.
        """
        if y is None:
            xs, ys = _split_stacked(x_or_points)
            lons, lats, _ = self._inverse_degrees(xs, ys)
            return np.vstack([lons, lats])
        lons, lats, _ = self._inverse_degrees(_to_array(x_or_points),
                                              _to_array(y))
        if _is_scalar(x_or_points) and _is_scalar(y):
            return (float(lons[0]), float(lats[0]))
        return lons, lats

    def inverse_with_status(
        self,
        xs: ArrayLike,
        ys: ArrayLike,
    ) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """
        Inverse transform that also reports per-point convergence.

        Parameters
        ----------
        xs, ys : float, list, or np.ndarray
            Projected coordinates in metres.

        Returns
        -------
        Tuple[np.ndarray, np.ndarray, np.ndarray]
            ``(lons, lats, converged)``; ``converged`` is False where the
            iteration ran out of steps and the coordinates are a best
            effort.
        """
        return self._inverse_degrees(_to_array(xs), _to_array(ys))

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(ellipsoid={self.ellipsoid.name!r}, "
                f"x_0={self.x_0}, y_0={self.y_0})")
