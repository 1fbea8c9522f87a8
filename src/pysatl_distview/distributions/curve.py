"""
Curves
======

A :class:`Curve` is the ordered sequence of ``(x, y)`` sample points handed to
a plotting sink. It is built once per request and never modified afterwards.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import numpy as np

from pysatl_distview.errors import ComputationError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    import numpy.typing as npt

    from pysatl_distview.types import PlotMode


class Curve:
    """
    Array-backed, read-only sequence of sample points.

    Parameters
    ----------
    x : array_like
        Abscissae, strictly increasing.
    y : array_like
        Ordinates, finite, same length as ``x``.
    mode : PlotMode
        Whether ``y`` holds density/mass or cumulative values.

    Raises
    ------
    ValueError
        If the arrays are empty, differ in length or ``x`` is not strictly
        increasing.
    ComputationError
        If any ``y`` value is not finite.
    """

    __slots__ = ("_x", "_y", "mode")

    def __init__(self, x: npt.ArrayLike, y: npt.ArrayLike, mode: PlotMode) -> None:
        xs = np.array(x, dtype=float)
        ys = np.array(y, dtype=float)

        if xs.ndim != 1 or xs.shape != ys.shape:
            raise ValueError("Curve expects two 1D arrays of equal length.")
        if xs.size == 0:
            raise ValueError("Curve must contain at least one point.")
        if np.any(np.diff(xs) <= 0):
            raise ValueError("Curve abscissae must be strictly increasing.")

        bad = ~np.isfinite(ys)
        if np.any(bad):
            first = int(np.argmax(bad))
            raise ComputationError(
                f"Non-finite {mode} value {ys[first]} at x={xs[first]:.6g} "
                f"({int(np.count_nonzero(bad))} of {ys.size} points)."
            )

        xs.setflags(write=False)
        ys.setflags(write=False)
        self._x = xs
        self._y = ys
        self.mode = mode

    def __len__(self) -> int:
        """Return the number of points."""
        return int(self._x.size)

    def __iter__(self) -> Iterator[tuple[float, float]]:
        """Iterate over ``(x, y)`` pairs in increasing ``x``."""
        for x, y in zip(self._x, self._y, strict=True):
            yield float(x), float(y)

    def __repr__(self) -> str:
        return (
            f"Curve(mode={self.mode!s}, points={len(self)}, "
            f"x=[{self._x[0]:.6g}, {self._x[-1]:.6g}])"
        )

    @property
    def x(self) -> npt.NDArray[np.floating[Any]]:
        """Read-only abscissae."""
        return self._x

    @property
    def y(self) -> npt.NDArray[np.floating[Any]]:
        """Read-only ordinates."""
        return self._y

    @property
    def points(self) -> list[tuple[float, float]]:
        """Sample points as a list of pairs."""
        return list(self)

    def nearest(self, x: float) -> tuple[float, float]:
        """Return the sample point whose abscissa is closest to ``x``."""
        i = int(np.argmin(np.abs(self._x - x)))
        return float(self._x[i]), float(self._y[i])


__all__ = ["Curve"]
