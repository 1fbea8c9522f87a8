"""
Sampling Grids
==============

A :class:`SamplingGrid` describes the finite window a distribution is plotted
on: its first point, last point, step and the rule used to build the
cumulative curve on it.

Grid points are generated by index (``start + i * step``) rather than by
repeatedly adding ``step`` to a running value, so the last point is neither
lost to rounding drift nor emitted twice.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, cast

import numpy as np

if TYPE_CHECKING:
    from pysatl_distview.types import NumericArray

# Relative slack when counting steps; absorbs representation error of ``step``.
GRID_EPSILON = 1e-9


class CumulativeRule(StrEnum):
    """
    How a cumulative curve is obtained on a grid.

    Attributes
    ----------
    ANALYTICAL
        Evaluate the closed-form ``cdf`` at every grid point.
    MASS_SUM
        Running sum of the ``pmf`` over an integer lattice.
    RECTANGLE
        Running sum of ``pdf * step`` clamped to 1. An approximation: the
        clamp hides quadrature overshoot instead of preventing it.
    """

    ANALYTICAL = "analytical"
    MASS_SUM = "mass_sum"
    RECTANGLE = "rectangle"


@dataclass(frozen=True, slots=True)
class SamplingGrid:
    """
    Evaluation window of a distribution.

    Parameters
    ----------
    start : float
        First grid point.
    stop : float
        Last grid point (inclusive, up to ``GRID_EPSILON`` of a step).
    step : float
        Distance between neighbouring points, ``step > 0``.
    cumulative_rule : CumulativeRule, default ANALYTICAL
        Rule used for cumulative curves on this grid.
    """

    start: float
    stop: float
    step: float
    cumulative_rule: CumulativeRule = CumulativeRule.ANALYTICAL

    def __post_init__(self) -> None:
        if not all(math.isfinite(v) for v in (self.start, self.stop, self.step)):
            raise ValueError("Grid bounds and step must be finite.")
        if self.step <= 0:
            raise ValueError("Grid step must be positive.")
        if self.stop < self.start:
            raise ValueError("Grid stop must not precede its start.")

    @property
    def size(self) -> int:
        """Number of grid points."""
        return math.floor((self.stop - self.start) / self.step + GRID_EPSILON) + 1

    def points(self) -> NumericArray:
        """Grid points as a float array of length :attr:`size`."""
        return cast("NumericArray", self.start + np.arange(self.size, dtype=float) * self.step)


__all__ = [
    "GRID_EPSILON",
    "CumulativeRule",
    "SamplingGrid",
]
