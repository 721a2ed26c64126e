# -*- coding: utf-8 -*-
"""
Projection Registry - Name-based construction and PROJ-style parameters.

Maps projection names to their classes and builds projections from
PROJ-style parameter strings such as::

    +proj=lsat +lsat=5 +path=33 +ellps=WGS84 +x_0=0 +y_0=0

Only the parameters a SOM projection understands are consumed; anything
else (``+units``, ``+no_defs``, ``+type``) is ignored and logged.

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
import importlib
import logging
from typing import Any, Dict, Union

# lsatsom internal
from lsatsom.ellipsoid import Ellipsoid, get_ellipsoid
from lsatsom.exceptions import ValidationError
from lsatsom.projection.base import Projection

logger = logging.getLogger(__name__)

ParamValue = Union[str, int, float, bool]

# Projection registry: maps names to (module_path, class_name)
_PROJECTION_REGISTRY: Dict[str, tuple] = {
    'lsat': ('lsatsom.projection.lsat', 'LandsatSOM'),
}

_KNOWN_PARAMS = frozenset(
    {'proj', 'lsat', 'path', 'ellps', 'a', 'rf', 'b', 'es', 'x_0', 'y_0'}
)


def available_projections() -> list:
    """Sorted list of registered projection names."""
    return sorted(_PROJECTION_REGISTRY)


def get_projection(name: str, **params: Any) -> Projection:
    """Create a projection by registry name.

    Parameters
    ----------
    name : str
        Projection name (case-insensitive), e.g. ``'lsat'``.
    **params
        Keyword arguments forwarded to the projection constructor.

    Returns
    -------
    Projection

    Raises
    ------
    ValidationError
        If *name* is not registered.

    Examples
    --------
    >>> som = get_projection('lsat', satellite=1, path=1)
    """
    key = name.lower()
    if key not in _PROJECTION_REGISTRY:
        raise ValidationError(
            f"Unknown projection: {name!r}. "
            f"Supported projections: {available_projections()}"
        )
    module_path, class_name = _PROJECTION_REGISTRY[key]
    module = importlib.import_module(module_path)
    projection_cls = getattr(module, class_name)
    return projection_cls(**params)


def _convert(value: str) -> ParamValue:
    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            pass
    return value


def parse_proj_string(text: str) -> Dict[str, ParamValue]:
    """Split a PROJ-style parameter string into a dictionary.

    ``+key=value`` tokens become ``{'key': value}`` with integers and
    floats converted; bare ``+flag`` tokens become ``{'flag': True}``.
    The leading ``+`` is optional. Later duplicates override earlier ones.

    Raises
    ------
    ValidationError
        On an empty key.
    """
    params: Dict[str, ParamValue] = {}
    for token in text.split():
        key, sep, value = token.lstrip('+').partition('=')
        if not key:
            raise ValidationError(f"Malformed parameter token: {token!r}")
        params[key] = _convert(value) if sep else True
    return params


def _integer_param(params: Dict[str, ParamValue], key: str) -> int:
    value = params.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"+{key} must be an integer, got {value!r}")
    return value


def _float_param(params: Dict[str, ParamValue], key: str) -> float:
    value = params[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"+{key} must be a number, got {value!r}")
    return float(value)


def ellipsoid_from_params(params: Dict[str, ParamValue]) -> Ellipsoid:
    """Resolve the ellipsoid described by parsed parameters.

    An explicit ``a`` combined with ``rf``, ``b`` or ``es`` takes
    precedence over ``ellps``. Without either, WGS84 is used.
    """
    if 'a' in params:
        a = _float_param(params, 'a')
        if 'rf' in params:
            return Ellipsoid.from_flattening(a, _float_param(params, 'rf'))
        if 'b' in params:
            return Ellipsoid.from_axes(a, _float_param(params, 'b'))
        if 'es' in params:
            return Ellipsoid(name='custom', a=a, es=_float_param(params, 'es'))
        raise ValidationError("+a requires one of +rf, +b or +es")
    ellps = params.get('ellps')
    if ellps is not None and not isinstance(ellps, str):
        raise ValidationError(f"+ellps must be a name, got {ellps!r}")
    return get_ellipsoid(ellps)


def from_proj_string(text: str) -> Projection:
    """Build a projection from a PROJ-style parameter string.

    A missing ``+lsat`` or ``+path`` reads as 0 and is therefore rejected
    with the corresponding range error.

    Raises
    ------
    ValidationError
        If ``+proj`` is missing or unknown, or a parameter is malformed.
    InvalidSatelliteError
        Code -28.
    InvalidPathError
        Code -29.

    Examples
    --------
    >>> som = from_proj_string('+proj=lsat +lsat=5 +path=33 +ellps=GRS80')
    """
    params = parse_proj_string(text)
    name = params.get('proj')
    if not isinstance(name, str):
        raise ValidationError(f"Missing or invalid +proj in {text!r}")

    ignored = sorted(set(params) - _KNOWN_PARAMS)
    if ignored:
        logger.debug("Ignoring parameters: %s", ', '.join(ignored))

    return get_projection(
        name,
        satellite=_integer_param(params, 'lsat'),
        path=_integer_param(params, 'path'),
        ellipsoid=ellipsoid_from_params(params),
        x_0=_float_param(params, 'x_0') if 'x_0' in params else 0.0,
        y_0=_float_param(params, 'y_0') if 'y_0' in params else 0.0,
    )
