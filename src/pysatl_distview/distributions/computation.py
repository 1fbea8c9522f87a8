"""
Computation Primitives
======================

:class:`AnalyticalComputation` binds a family's characteristic function to a
concrete parameter set, producing a callable that evaluates the characteristic
(e.g. ``pdf``) on a scalar or an array of points.

Notes
-----
- Characteristic callables are vectorised: they accept numpy arrays and return
  arrays of the same shape. Moment characteristics (``mean``, ``var``) ignore
  their data argument.
- ``**options`` are forwarded to the underlying function untouched.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mypy_extensions import KwArg

from pysatl_distview.types import GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """Analytical computation provided directly by the distribution.

    Parameters
    ----------
    target : str
        Characteristic name (e.g., ``"pdf"``).
    func : Callable[[In, KwArg(Any)], Out]
        Analytical callable with the parameters already bound.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        """Evaluate the analytical function."""
        return self.func(data, **options)


__all__ = ["AnalyticalComputation"]
