# -*- coding: utf-8 -*-
"""
Vocabulary - Canonical enums for lsatsom.

Defines the controlled vocabularies shared by the setup and transform
modules: the LANDSAT satellite groups that fix orbit geometry, and the
outcome tags of the iterative solvers.

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

from enum import Enum


class SatelliteGroup(Enum):
    """LANDSAT satellites sharing one orbit geometry.

    LANDSAT 1-3 flew a 251-path repeat cycle at 99.092 degrees
    inclination; LANDSAT 4-5 a 233-path cycle at 98.2 degrees.
    """

    LANDSAT_1_3 = "landsat_1_3"
    LANDSAT_4_5 = "landsat_4_5"

    @classmethod
    def for_satellite(cls, satellite: int) -> 'SatelliteGroup':
        """Return the group of an already validated satellite number."""
        return cls.LANDSAT_1_3 if satellite <= 3 else cls.LANDSAT_4_5


class SolveStatus(Enum):
    """Outcome of a bounded fixed-point iteration.

    ``NOT_ATTEMPTED`` marks input the iteration was never run on.
    """

    CONVERGED = "converged"
    EXHAUSTED = "exhausted"
    NOT_ATTEMPTED = "not_attempted"
