# -*- coding: utf-8 -*-
"""
lsatsom - Space Oblique Mercator projection for LANDSAT imagery.

Bidirectional transform between geographic coordinates on a reference
ellipsoid and the planar Space Oblique Mercator grid that follows the
ground track of a LANDSAT 1-5 path.

Dependencies
------------
numpy
pyproj (optional)

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

__version__ = "0.1.0"

from lsatsom.exceptions import (
    LsatSomError,
    ValidationError,
    InvalidSatelliteError,
    InvalidPathError,
    DependencyError,
)
from lsatsom.vocabulary import SatelliteGroup, SolveStatus
from lsatsom.ellipsoid import Ellipsoid, WGS84, GRS80, get_ellipsoid
from lsatsom.projection import (
    LandsatSOM,
    Projection,
    configure,
    from_proj_string,
    get_projection,
)

__all__ = [
    'LsatSomError',
    'ValidationError',
    'InvalidSatelliteError',
    'InvalidPathError',
    'DependencyError',
    'SatelliteGroup',
    'SolveStatus',
    'Ellipsoid',
    'WGS84',
    'GRS80',
    'get_ellipsoid',
    'LandsatSOM',
    'Projection',
    'configure',
    'from_proj_string',
    'get_projection',
]
