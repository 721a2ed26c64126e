# -*- coding: utf-8 -*-
"""
Performance benchmarks for lsatsom setup and transforms.

Uses pytest-benchmark to track execution time for key operations.
Run with: ``pytest tests/test_benchmarks.py --benchmark-only``

Skip benchmarks during normal test runs with:
``pytest tests/ --benchmark-disable``

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

import math

import numpy as np
import pytest

from lsatsom.ellipsoid import WGS84
from lsatsom.projection.lsat import LandsatSOM, configure

# Mark all tests in this module as benchmarks so they can be skipped
# during normal test runs: pytest tests/ -m "not benchmark"
pytestmark = pytest.mark.benchmark


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def som():
    return LandsatSOM(satellite=5, path=33)


@pytest.fixture
def scene_points(som):
    """1000 points around the central meridian of the path."""
    rng = np.random.RandomState(42)
    lon0 = math.degrees(som.lam0)
    lons = lon0 + rng.uniform(-3.0, 3.0, 1000)
    lats = rng.uniform(-60.0, 60.0, 1000)
    return lons, lats


# ---------------------------------------------------------------------------
# Benchmarks
# ---------------------------------------------------------------------------

class TestSetupBenchmarks:

    def test_configure(self, benchmark):
        result = benchmark(
            configure, 5, 33, WGS84.es, WGS84.one_es, WGS84.rone_es)
        assert result.series.b > 0.0


class TestTransformBenchmarks:

    def test_forward_1000(self, benchmark, som, scene_points):
        xs, ys = benchmark(som.forward, *scene_points)
        assert xs.shape == (1000,)

    def test_inverse_1000(self, benchmark, som, scene_points):
        xs, ys = som.forward(*scene_points)
        defined = np.isfinite(xs)
        lons, lats = benchmark(som.inverse, xs[defined], ys[defined])
        assert lons.shape == (int(defined.sum()),)
