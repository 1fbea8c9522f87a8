"""
Numerical helpers shared by the built-in families.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_distview.errors import ComputationError

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_distview.distributions.support import IntegerLatticeDiscreteSupport
    from pysatl_distview.types import Number, NumericArray


def ensure_finite(values: NumericArray, what: str) -> NumericArray:
    """
    Return ``values`` unchanged if every entry is finite.

    Raises
    ------
    ComputationError
        Naming ``what`` and the number of offending entries otherwise.
    """
    arr = np.asarray(values, dtype=float)
    bad = ~np.isfinite(arr)
    if np.any(bad):
        raise ComputationError(
            f"{what} is not finite at {int(np.count_nonzero(bad))} of {arr.size} points"
        )
    return cast("NumericArray", arr)


def lattice_mass(
    x: Number | NumericArray,
    support: IntegerLatticeDiscreteSupport,
    mass: Callable[[int], float],
    what: str,
) -> NumericArray:
    """
    Evaluate a scalar mass function on the support points among ``x``.

    Points outside the support get zero mass. ``mass`` is called with plain
    integers so exact factorials can be used.

    Raises
    ------
    ComputationError
        If ``mass`` overflows or returns a non-finite value.
    """
    arr = np.asarray(x, dtype=float)
    flat = arr.ravel()
    inside = np.atleast_1d(support.contains(flat))
    out = np.zeros(flat.shape, dtype=float)

    try:
        for i in np.flatnonzero(inside):
            out[i] = mass(int(flat[i]))
    except OverflowError as exc:
        raise ComputationError(f"{what} overflows at k={int(flat[i])}") from exc

    return ensure_finite(out.reshape(arr.shape), what)
