"""
Summary statistics of a distribution, taken from its closed-form moments.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_distview.errors import ComputationError
from pysatl_distview.types import CharacteristicName

if TYPE_CHECKING:
    from pysatl_distview.distributions.distribution import Distribution


@dataclass(frozen=True, slots=True)
class SummaryStatistics:
    """
    Expectation, variance and standard deviation of a distribution.

    Parameters
    ----------
    expectation : float
        E[X].
    variance : float
        Var(X), non-negative.
    standard_deviation : float
        sqrt(Var(X)).
    """

    expectation: float
    variance: float
    standard_deviation: float

    def as_dict(self) -> dict[str, float]:
        """Plain mapping with the keys used by exported snapshots."""
        return {
            "expectation": self.expectation,
            "variance": self.variance,
            "standardDeviation": self.standard_deviation,
        }


def summarize(distribution: Distribution) -> SummaryStatistics:
    """
    Compute summary statistics from the ``mean`` and ``var`` characteristics.

    Raises
    ------
    ComputationError
        If a moment is not finite or the variance is negative.
    """
    expectation = float(distribution.query_method(CharacteristicName.MEAN)(None))
    variance = float(distribution.query_method(CharacteristicName.VAR)(None))

    if not (math.isfinite(expectation) and math.isfinite(variance)):
        raise ComputationError(
            f"Moments are not finite: expectation={expectation}, variance={variance}"
        )
    if variance < 0:
        raise ComputationError(f"Variance must be non-negative, got {variance}")

    return SummaryStatistics(
        expectation=expectation,
        variance=variance,
        standard_deviation=math.sqrt(variance),
    )


__all__ = ["SummaryStatistics", "summarize"]
