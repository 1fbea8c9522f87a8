"""
Cumulative Accumulators
=======================

Builders of cumulative values from densities and masses:

- :func:`accumulate_mass`: running sum of a PMF over consecutive integers,
  capped at 1;
- :func:`accumulate_rectangle`: rectangle-rule running integral of a PDF,
  clamped to 1;
- :func:`pmf_to_cdf_lattice`: pointwise discrete CDF from a PMF on the
  non-negative integers.

Notes
-----
The rectangle rule is first-order accurate. Accumulated quadrature error can
push the running sum above 1 (for example near the integrable singularity of a
chi-squared density with ``df < 2``); the clamp masks such overshoot rather
than preventing it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import TYPE_CHECKING, cast

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_distview.types import Number, NumericArray

log = logging.getLogger(__name__)


def accumulate_mass(mass: NumericArray) -> NumericArray:
    """Running sum of probability masses, capped at 1."""
    return cast("NumericArray", np.minimum(np.cumsum(np.asarray(mass, dtype=float)), 1.0))


def accumulate_rectangle(
    density: NumericArray, step: float, *, clamp: bool = True
) -> NumericArray:
    """
    Rectangle-rule running integral of density values on a uniform grid.

    Parameters
    ----------
    density : NumericArray
        Density values at consecutive grid points.
    step : float
        Grid step.
    clamp : bool, default True
        Cap the running sum at 1.

    Returns
    -------
    NumericArray
        Non-decreasing running sums ``sum(density[:i + 1]) * step``.
    """
    running = np.cumsum(np.asarray(density, dtype=float) * step)
    if not clamp:
        return cast("NumericArray", running)

    if running.size and running[-1] > 1.0:
        log.debug(
            "rectangle accumulation overshoots by %.3g, clamping %d points to 1",
            running[-1] - 1.0,
            int(np.count_nonzero(running > 1.0)),
        )
    return cast("NumericArray", np.minimum(running, 1.0))


def pmf_to_cdf_lattice(
    pmf: Callable[[NumericArray], NumericArray],
    x: Number | NumericArray,
    max_k: int | None = None,
) -> NumericArray:
    """
    Discrete CDF on the non-negative integers from a vectorised PMF.

    Parameters
    ----------
    pmf : Callable[[NumericArray], NumericArray]
        Probability mass function with parameters already bound.
    x : Number or NumericArray
        Evaluation point(s); ``cdf(x) = sum(pmf(k) for k <= floor(x))``.
    max_k : int or None
        Largest support point, if bounded.

    Returns
    -------
    NumericArray
        CDF values with the shape of ``x``.
    """
    arr = np.asarray(x, dtype=float)
    finite_max = float(np.max(arr[np.isfinite(arr)], initial=0.0))
    upper = max(0, math.floor(finite_max))
    if max_k is not None:
        upper = min(upper, max_k)

    running = accumulate_mass(pmf(np.arange(upper + 1, dtype=float)))

    idx = np.floor(np.where(np.isfinite(arr), arr, 0.0))
    idx = np.clip(idx, 0, upper).astype(int)
    result = np.where(arr < 0, 0.0, running[idx])
    result = np.where(arr == np.inf, 1.0, result)
    result = np.where(np.isnan(arr), np.nan, result)

    return cast("NumericArray", result)


__all__ = [
    "accumulate_mass",
    "accumulate_rectangle",
    "pmf_to_cdf_lattice",
]
