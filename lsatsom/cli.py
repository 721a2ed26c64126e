# -*- coding: utf-8 -*-
"""
Command Line Interface - Project coordinates along a LANDSAT path.

Reads coordinate pairs from the command line or, when none are given,
from standard input (one whitespace-separated pair per line) and prints
the transformed pair for each.

Usage
-----
    lsatsom --lsat 5 --path 33 -- -106.0 39.5
    echo "-106.0 39.5" | lsatsom --lsat 5 --path 33
    lsatsom --lsat 5 --path 33 --inverse -- X Y

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
import argparse
import logging
import sys
from typing import Iterable, Iterator, List, Optional, TextIO, Tuple

# lsatsom internal
from lsatsom.exceptions import LsatSomError, ValidationError
from lsatsom.projection.lsat import LandsatSOM

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="lsatsom",
        description=(
            "Transform coordinates with the Space Oblique Mercator "
            "projection of a LANDSAT path. Forward input is lon lat in "
            "degrees; inverse input is x y in metres."
        ),
    )
    parser.add_argument(
        "coords",
        nargs="*",
        type=float,
        help="Coordinate pairs. Read from stdin when omitted.",
    )
    parser.add_argument(
        "--lsat",
        type=int,
        required=True,
        help="LANDSAT number (1-5).",
    )
    parser.add_argument(
        "--path",
        type=int,
        required=True,
        help="Path number (1-251 for LANDSAT 1-3, 1-233 for LANDSAT 4-5).",
    )
    parser.add_argument(
        "--ellps",
        type=str,
        default="WGS84",
        help="Ellipsoid name (default: WGS84).",
    )
    parser.add_argument(
        "--x_0",
        type=float,
        default=0.0,
        help="False easting in metres (default: 0).",
    )
    parser.add_argument(
        "--y_0",
        type=float,
        default=0.0,
        help="False northing in metres (default: 0).",
    )
    parser.add_argument(
        "--inverse",
        action="store_true",
        help="Transform x y to lon lat instead.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def _pairs(values: List[float]) -> Iterator[Tuple[float, float]]:
    if len(values) % 2:
        raise ValidationError(
            f"Expected coordinate pairs, got {len(values)} values"
        )
    return zip(values[0::2], values[1::2])


def _read_pairs(stream: TextIO) -> Iterator[Tuple[float, float]]:
    for lineno, line in enumerate(stream, start=1):
        fields = line.split()
        if not fields or fields[0].startswith('#'):
            continue
        if len(fields) < 2:
            raise ValidationError(f"Line {lineno}: expected two values")
        try:
            yield float(fields[0]), float(fields[1])
        except ValueError as exc:
            raise ValidationError(f"Line {lineno}: {exc}") from exc


def run(
    som: LandsatSOM,
    pairs: Iterable[Tuple[float, float]],
    inverse: bool,
    out: TextIO,
) -> None:
    """Transform each pair and write one result line per pair."""
    for a, b in pairs:
        if inverse:
            lon, lat = som.inverse(a, b)
            out.write(f"{lon:.8f} {lat:.8f}\n")
        else:
            x, y = som.forward(a, b)
            out.write(f"{x:.3f} {y:.3f}\n")


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        som = LandsatSOM(
            args.lsat, args.path, ellipsoid=args.ellps,
            x_0=args.x_0, y_0=args.y_0,
        )
        logger.debug("Using %r", som)
        pairs = _pairs(args.coords) if args.coords else _read_pairs(sys.stdin)
        run(som, pairs, args.inverse, sys.stdout)
    except LsatSomError as exc:
        print(f"lsatsom: {exc}", file=sys.stderr)
        return 2
    return 0
