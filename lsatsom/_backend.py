# -*- coding: utf-8 -*-
"""
Backend Detection - Detect optional geodesy libraries.

Probes for pyproj at import time. Provides a boolean flag and a helper
function that the ellipsoid lookup uses to verify pyproj is installed
before resolving names outside the built-in ellipsoid table.

Dependencies
------------
pyproj

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

from lsatsom.exceptions import DependencyError

_HAS_PYPROJ = False

try:
    import pyproj  # noqa: F401
    _HAS_PYPROJ = True
except ImportError:
    pass


def require_pyproj_backend() -> None:
    """Verify that pyproj is installed.

    Raises
    ------
    DependencyError
        If pyproj is not installed. The message includes installation
        instructions.
    """
    if not _HAS_PYPROJ:
        raise DependencyError(
            "Named ellipsoid lookup requires pyproj. "
            "Install with: pip install pyproj"
        )
