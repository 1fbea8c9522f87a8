"""
Supports of the shipped families: real intervals for continuous kinds and
non-negative integer ranges for discrete ones.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import inf, isinf
from typing import Protocol, cast, overload, runtime_checkable

import numpy as np

from pysatl_distview.types import BoolArray, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


def _as_result(x: Number | NumericArray, mask: BoolArray) -> bool | BoolArray:
    if np.ndim(x) == 0:
        return bool(mask)
    return mask


@dataclass(frozen=True, slots=True)
class ContinuousSupport(Support):
    """
    Interval of the real line on which a density is positive.

    Parameters
    ----------
    left, right : float
        Endpoints; infinite by default.
    left_closed, right_closed : bool, default True
        Whether a finite endpoint belongs to the support. Infinite endpoints
        are always open.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if self.right < self.left:
            raise ValueError("Support right end must not precede its left end.")
        # +-inf is never a member
        if isinf(self.left):
            object.__setattr__(self, "left_closed", False)
        if isinf(self.right):
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """Membership test, elementwise for arrays."""
        xf = np.asarray(x, dtype=float)
        above = np.greater_equal if self.left_closed else np.greater
        below = np.less_equal if self.right_closed else np.less
        mask = above(xf, self.left) & below(xf, self.right)
        return _as_result(x, cast(BoolArray, mask))

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))


@dataclass(frozen=True, slots=True)
class IntegerLatticeDiscreteSupport(Support):
    """
    Consecutive integers ``min_k, min_k + 1, ...`` up to ``max_k`` (inclusive).

    Parameters
    ----------
    min_k : int, default 0
        Smallest support point.
    max_k : int or None, default None
        Largest support point; ``None`` means unbounded on the right.
    """

    min_k: int = 0
    max_k: int | None = None

    def __post_init__(self) -> None:
        if self.max_k is not None and self.max_k < self.min_k:
            raise ValueError("max_k must not be smaller than min_k.")

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        xf = np.asarray(x, dtype=float)
        mask = np.isfinite(xf) & (np.floor(xf) == xf) & (xf >= self.min_k)
        if self.max_k is not None:
            mask &= xf <= self.max_k
        return _as_result(x, cast(BoolArray, mask))

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast(Number, x)))


__all__ = [
    "Support",
    "ContinuousSupport",
    "IntegerLatticeDiscreteSupport",
]
