"""
Continuous uniform family.

Two parametrizations: ``standard`` (the bounds ``a < b``) and ``meanWidth``.
A crossed pair of bounds produced by a single-field update is repaired by
pushing the other bound away instead of being rejected.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, cast

import numpy as np

from pysatl_distview.distributions.grid import CumulativeRule, SamplingGrid
from pysatl_distview.distributions.support import ContinuousSupport
from pysatl_distview.families.builtins._numeric import ensure_finite
from pysatl_distview.families.parametric_family import ParametricFamily
from pysatl_distview.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distview.families.registry import ParametricFamilyRegister
from pysatl_distview.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any

log = logging.getLogger(__name__)

BOUND_REPAIR_GAP = 0.1
"""Distance kept between the bounds when one of them is pushed by the other."""


def configure_uniform_family() -> None:
    """Register the continuous uniform family unless it is already there."""

    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    def _bounds(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_Standard, parameters)
        return parameters.lower_bound, parameters.upper_bound

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """``1 / (b - a)`` on the closed interval ``[a, b]``, 0 outside."""
        a, b = _bounds(parameters)
        arr = np.asarray(x, dtype=float)
        inside = (arr >= a) & (arr <= b)
        return ensure_finite(np.where(inside, 1.0 / (b - a), 0.0), "Uniform pdf")

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """``(x - a) / (b - a)`` clipped to ``[0, 1]``."""
        a, b = _bounds(parameters)
        arr = np.asarray(x, dtype=float)
        return ensure_finite(np.clip((arr - a) / (b - a), 0.0, 1.0), "Uniform cdf")

    def mean_func(parameters: Parametrization, _: Any) -> float:
        a, b = _bounds(parameters)
        return (a + b) / 2

    def var_func(parameters: Parametrization, _: Any) -> float:
        a, b = _bounds(parameters)
        return (b - a) ** 2 / 12

    def _support(parameters: Parametrization) -> ContinuousSupport:
        a, b = _bounds(parameters)
        return ContinuousSupport(left=a, right=b)

    def _grid(parameters: Parametrization) -> SamplingGrid:
        """The support widened by one unit on each side."""
        a, b = _bounds(parameters)
        return SamplingGrid(
            start=a - 1, stop=b + 1, step=0.01, cumulative_rule=CumulativeRule.ANALYTICAL
        )

    Uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanWidth"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        grid_by_parametrization=_grid,
        support_by_parametrization=_support,
        title="Uniform Distribution",
        description=(
            "Every value inside an interval is equally likely. It underlies random "
            "number generation and simulation."
        ),
        expectation_tex="E[X] = (a+b)/2 = {expectation:.2f}",
        variance_tex="Var(X) = (b-a)^2/12 = {variance:.2f}",
        default_parameters={"lower_bound": 0.0, "upper_bound": 1.0},
    )
    Uniform.__doc__ = """
    Continuous uniform distribution on ``[lower_bound, upper_bound]``.

    f(x) = 1 / (upper_bound - lower_bound) inside the bounds, 0 outside.
    """

    @parametrization(family=Uniform, name="standard")
    class _Standard(Parametrization):
        """
        Bounds of the interval.

        Parameters
        ----------
        lower_bound : float
            Left end ``a``.
        upper_bound : float
            Right end ``b``, strictly greater than ``a``.
        """

        lower_bound: float
        upper_bound: float

        @constraint(description="lower_bound < upper_bound")
        def check_lower_less_than_upper(self) -> bool:
            return self.lower_bound < self.upper_bound

        def repair(self, changed: str) -> Parametrization:
            """
            Push the other bound away when the changed one crosses it.

            Raising ``lower_bound`` to or past ``upper_bound`` moves
            ``upper_bound`` to ``lower_bound + 0.1``; lowering ``upper_bound``
            to or below ``lower_bound`` moves ``lower_bound`` to
            ``upper_bound - 0.1``.
            """
            if changed == "lower_bound" and self.lower_bound >= self.upper_bound:
                upper_bound = self.lower_bound + BOUND_REPAIR_GAP
                log.debug("upper_bound %g advanced to %g", self.upper_bound, upper_bound)
                return _Standard(lower_bound=self.lower_bound, upper_bound=upper_bound)
            if changed == "upper_bound" and self.upper_bound <= self.lower_bound:
                lower_bound = self.upper_bound - BOUND_REPAIR_GAP
                log.debug("lower_bound %g retreated to %g", self.lower_bound, lower_bound)
                return _Standard(lower_bound=lower_bound, upper_bound=self.upper_bound)
            return self

    @parametrization(family=Uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        """Centre ``mean`` and length ``width > 0`` of the interval."""

        mean: float
        width: float

        @constraint(description="width > 0")
        def check_width_positive(self) -> bool:
            return self.width > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            half = self.width / 2
            return _Standard(lower_bound=self.mean - half, upper_bound=self.mean + half)

    ParametricFamilyRegister.register(Uniform)
