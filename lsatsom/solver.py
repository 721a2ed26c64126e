# -*- coding: utf-8 -*-
"""
Fixed-Point Solver - Bounded iteration with an explicit convergence tag.

Both SOM transforms solve an implicit equation for the ground-track
parameter by repeated substitution. ``solve_fixed_point`` runs such an
iteration for at most ``max_steps`` steps and reports whether successive
estimates came within ``tolerance`` of each other, instead of leaving the
caller to infer success from a sentinel value.

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
from dataclasses import dataclass
from typing import Callable, Optional

# lsatsom internal
from lsatsom.exceptions import ValidationError
from lsatsom.vocabulary import SolveStatus

Distance = Callable[[float, float], float]


def absolute_difference(previous: float, current: float) -> float:
    """``|current - previous|``."""
    return abs(current - previous)


def magnitude_difference(previous: float, current: float) -> float:
    """``||current| - |previous||``.

    Insensitive to a sign flip of the estimate, which happens when the
    iteration straddles a branch boundary.
    """
    return abs(abs(current) - abs(previous))


@dataclass(frozen=True)
class FixedPointResult:
    """Outcome of :func:`solve_fixed_point`.

    Attributes
    ----------
    value : float
        Last estimate produced by the step function.
    previous : float
        Input of the last step, i.e. the estimate ``value`` was computed
        from. Callers that need quantities evaluated during the final step
        recompute them from this.
    iterations : int
        Number of steps taken.
    status : SolveStatus
        ``CONVERGED`` when the tolerance was met, ``EXHAUSTED`` when the
        step budget ran out first.
    """

    value: float
    previous: float
    iterations: int
    status: SolveStatus

    @property
    def converged(self) -> bool:
        return self.status is SolveStatus.CONVERGED


def solve_fixed_point(
    step: Callable[[float], float],
    initial: float,
    tolerance: float = 1e-7,
    max_steps: int = 50,
    distance: Optional[Distance] = None,
) -> FixedPointResult:
    """Iterate ``x <- step(x)`` until two successive estimates agree.

    Parameters
    ----------
    step : Callable[[float], float]
        Update function.
    initial : float
        Starting estimate.
    tolerance : float, default=1e-7
        Convergence threshold on ``distance(previous, current)``.
    max_steps : int, default=50
        Maximum number of calls to ``step``.
    distance : Callable[[float, float], float], optional
        Metric between successive estimates. Defaults to
        :func:`absolute_difference`.

    Returns
    -------
    FixedPointResult
        The final estimate is returned in both outcomes; exhaustion is
        reported through ``status`` only.

    Raises
    ------
    ValidationError
        If ``max_steps`` is less than 1.
    """
    if max_steps < 1:
        raise ValidationError(f"max_steps must be >= 1, got {max_steps}")
    if distance is None:
        distance = absolute_difference

    previous = initial
    current = initial
    for iteration in range(1, max_steps + 1):
        previous = current
        current = step(previous)
        # NaN compares false and runs the budget out
        if distance(previous, current) < tolerance:
            return FixedPointResult(
                current, previous, iteration, SolveStatus.CONVERGED
            )
    return FixedPointResult(current, previous, max_steps, SolveStatus.EXHAUSTED)
