# -*- coding: utf-8 -*-
"""
Projection Module - Space Oblique Mercator transforms for LANDSAT paths.

Provides the generic ``Projection`` wrapper, the ``LandsatSOM``
implementation with its core scalar transforms, and the name registry.

Key Classes
-----------
- Projection: Abstract base class handling units and input dispatch
- LandsatSOM: Space Oblique Mercator for LANDSAT 1-5

Usage
-----
    >>> from lsatsom.projection import LandsatSOM, from_proj_string
    >>> som = LandsatSOM(satellite=5, path=33)
    >>> x, y = som.forward(-106.0, 39.5)
    >>> som = from_proj_string('+proj=lsat +lsat=5 +path=33')

Modules
-------
- base: Abstract base class
- lsat: SOM setup, forward and inverse
- registry: Name-based construction and parameter strings

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

from lsatsom.projection.base import Projection
from lsatsom.projection.lsat import (
    InverseSolution,
    LandsatSOM,
    LsatParameters,
    Projected,
    Undefined,
    configure,
    lsat_forward,
    lsat_inverse,
)
from lsatsom.projection.registry import (
    available_projections,
    from_proj_string,
    get_projection,
    parse_proj_string,
)

__all__ = [
    'Projection',
    'LandsatSOM',
    'LsatParameters',
    'Projected',
    'Undefined',
    'InverseSolution',
    'configure',
    'lsat_forward',
    'lsat_inverse',
    'available_projections',
    'from_proj_string',
    'get_projection',
    'parse_proj_string',
]
