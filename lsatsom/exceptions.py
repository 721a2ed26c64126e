# -*- coding: utf-8 -*-
"""
lsatsom Exception Hierarchy - Domain-specific exceptions for projection setup.

Provides a small exception hierarchy that lets callers catch lsatsom
errors distinctly from Python built-in exceptions. All lsatsom exceptions
subclass both ``LsatSomError`` and the appropriate built-in exception for
backward compatibility.

Configuration failures carry the numeric error code used by the PROJ
family of libraries on the ``code`` attribute (-28 for an invalid LANDSAT
number, -29 for an invalid path).

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


class LsatSomError(Exception):
    """Base exception for all lsatsom errors."""


class ValidationError(LsatSomError, ValueError):
    """Invalid input data, parameters, or configuration.

    Raised for non-integer projection parameters, malformed parameter
    strings, unknown projection names, and bad array shapes.
    """


class InvalidSatelliteError(ValidationError):
    """LANDSAT number outside 1..5."""

    code = -28

    def __init__(self, satellite: object) -> None:
        super().__init__(
            f"Invalid LANDSAT number {satellite!r} "
            f"(error {self.code}): must be between 1 and 5"
        )
        self.satellite = satellite


class InvalidPathError(ValidationError):
    """Orbital path number outside the range allowed for the satellite."""

    code = -29

    def __init__(self, path: object, max_path: int) -> None:
        super().__init__(
            f"Invalid path {path!r} (error {self.code}): "
            f"must be between 1 and {max_path}"
        )
        self.path = path
        self.max_path = max_path


class DependencyError(LsatSomError, ImportError):
    """Missing optional dependency required for a specific feature.

    Raised when a named ellipsoid outside the built-in table is requested
    and pyproj is not installed.
    """
