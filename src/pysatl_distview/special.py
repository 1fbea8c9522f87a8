"""
Special Functions
=================

Numerical primitives the distribution families are built on:

- :func:`gamma`, :func:`log_gamma`: Lanczos approximation (g = 7, nine
  coefficients, summed in log space) with the reflection formula for
  ``z < 0.5``;
- :func:`erf`: Abramowitz-Stegun 7.1.26 rational approximation
  (maximum absolute error about ``1.5e-7``);
- :class:`FactorialTable`, :func:`factorial`, :func:`combinations`: exact
  integer factorials backed by a growable table.

Notes
-----
``gamma`` is undefined at non-positive integers. This is a precondition of the
caller and is not checked; an evaluation that nevertheless overflows or divides
by zero surfaces as :class:`~pysatl_distview.errors.ComputationError`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast, overload

import numpy as np

from pysatl_distview.errors import ComputationError, ParameterDomainError

if TYPE_CHECKING:
    from pysatl_distview.types import Number, NumericArray


_LANCZOS_G = 7
_LANCZOS_COEFFICIENTS = (
    0.99999999999980993,
    676.5203681218851,
    -1259.1392167224028,
    771.32342877765313,
    -176.61502916214059,
    12.507343278686905,
    -0.13857109526572012,
    9.9843695780195716e-6,
    1.5056327351493116e-7,
)

_ERF_A1 = 0.254829592
_ERF_A2 = -0.284496736
_ERF_A3 = 1.421413741
_ERF_A4 = -1.453152027
_ERF_A5 = 1.061405429
_ERF_P = 0.3275911


def log_gamma(z: float) -> float:
    """
    Natural logarithm of Γ(z) for ``z > 0``.

    The Lanczos series is summed in log space, so the result stays finite far
    beyond the point where Γ(z) itself overflows a float.

    Raises
    ------
    ParameterDomainError
        If ``z`` is not positive.
    """
    z = float(z)
    if z <= 0.0:
        raise ParameterDomainError(f"log_gamma needs z > 0, got {z}")
    if z < 0.5:
        return math.log(math.pi / math.sin(math.pi * z)) - log_gamma(1.0 - z)

    z -= 1.0
    x = _LANCZOS_COEFFICIENTS[0]
    for i in range(1, _LANCZOS_G + 2):
        x += _LANCZOS_COEFFICIENTS[i] / (z + i)
    t = z + _LANCZOS_G + 0.5
    return 0.5 * math.log(2 * math.pi) + (z + 0.5) * math.log(t) - t + math.log(x)


def gamma(z: float) -> float:
    """
    Gamma function via the Lanczos approximation.

    Parameters
    ----------
    z : float
        Argument. Must not be a non-positive integer.

    Returns
    -------
    float
        Approximation of Γ(z).

    Raises
    ------
    ComputationError
        If the value is not representable as a finite float.
    """
    z = float(z)
    try:
        if z < 0.5:
            # 1 - z >= 0.5, so the reflection recurses exactly once
            value = math.pi / (math.sin(math.pi * z) * gamma(1.0 - z))
        else:
            value = math.exp(log_gamma(z))
    except (OverflowError, ZeroDivisionError) as exc:
        raise ComputationError(f"Gamma function is not representable at z={z}") from exc

    if not math.isfinite(value):
        raise ComputationError(f"Gamma function is not representable at z={z}")
    return value


@overload
def erf(x: Number) -> float: ...
@overload
def erf(x: NumericArray) -> NumericArray: ...


def erf(x: Number | NumericArray) -> float | NumericArray:
    """
    Error function, Abramowitz–Stegun rational approximation.

    Parameters
    ----------
    x : Number or NumericArray
        Point(s) of evaluation.

    Returns
    -------
    float or NumericArray
        erf(x) with absolute error below ``1.5e-7``.
    """
    arr = np.asarray(x, dtype=float)
    sign = np.where(arr >= 0, 1.0, -1.0)
    a = np.abs(arr)

    t = 1.0 / (1.0 + _ERF_P * a)
    poly = ((((_ERF_A5 * t + _ERF_A4) * t + _ERF_A3) * t + _ERF_A2) * t + _ERF_A1) * t
    result = sign * (1.0 - poly * np.exp(-a * a))

    if np.ndim(arr) == 0:
        return float(result)
    return cast("NumericArray", result)


def _as_index(n: Number, name: str = "n") -> int:
    """Convert an integral, non-negative number to ``int``."""
    value = float(n)
    if not value.is_integer() or value < 0:
        raise ParameterDomainError(f"{name} must be a non-negative integer, got {n}")
    return int(value)


class FactorialTable:
    """
    Growable table of exact factorials.

    The table starts with ``0! = 1! = 1`` and is extended iteratively up to the
    largest argument seen so far. Values are Python integers, so the table
    itself never overflows; conversion to ``float`` is the caller's concern.
    """

    __slots__ = ("_values",)

    def __init__(self) -> None:
        self._values: list[int] = [1, 1]

    def __len__(self) -> int:
        return len(self._values)

    def __call__(self, n: Number) -> int:
        index = _as_index(n)
        values = self._values
        while len(values) <= index:
            values.append(values[-1] * len(values))
        return values[index]


_FACTORIALS = FactorialTable()


def factorial(n: Number) -> int:
    """
    Exact factorial ``n!`` served from the shared table.

    Raises
    ------
    ParameterDomainError
        If ``n`` is negative or not integral.
    """
    return _FACTORIALS(n)


def combinations(n: Number, k: Number) -> float:
    """
    Binomial coefficient C(n, k) as a float.

    Parameters
    ----------
    n : int
        Number of trials, ``n >= 0``.
    k : int
        Number of successes, ``0 <= k <= n``.

    Raises
    ------
    ParameterDomainError
        If the arguments are not integers with ``0 <= k <= n``.
    ComputationError
        If the coefficient does not fit into a float.
    """
    n_int = _as_index(n, "n")
    k_int = _as_index(k, "k")
    if k_int > n_int:
        raise ParameterDomainError(f"k must not exceed n, got k={k_int}, n={n_int}")

    try:
        return factorial(n_int) / (factorial(k_int) * factorial(n_int - k_int))
    except OverflowError as exc:
        raise ComputationError(f"C({n_int}, {k_int}) is too large for a float") from exc


__all__ = [
    "gamma",
    "log_gamma",
    "erf",
    "FactorialTable",
    "factorial",
    "combinations",
]
