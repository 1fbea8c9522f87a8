"""
Exponential family: ``rate`` (base) and ``scale`` parametrizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

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


def configure_exponential_family() -> None:
    """Register the Exponential family unless it is already there."""

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    def _rate(parameters: Parametrization) -> float:
        return cast(_Rate, parameters).lambda_

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """``lambda exp(-lambda x)`` for ``x >= 0``, 0 for negative ``x``."""
        lambda_ = _rate(parameters)

        arr = np.asarray(x, dtype=float)
        values = np.where(arr < 0, 0.0, lambda_ * np.exp(-lambda_ * np.maximum(arr, 0.0)))
        return ensure_finite(values, "Exponential pdf")

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        ``1 - exp(-lambda x)`` for ``x >= 0``.

        Computed with ``expm1`` so that small ``lambda x`` keeps full precision.
        """
        lambda_ = _rate(parameters)

        arr = np.asarray(x, dtype=float)
        values = np.where(arr < 0, 0.0, -np.expm1(-lambda_ * np.maximum(arr, 0.0)))
        return ensure_finite(values, "Exponential cdf")

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return 1.0 / _rate(parameters)

    def var_func(parameters: Parametrization, _: Any) -> float:
        return 1.0 / _rate(parameters) ** 2

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport(left=0.0)

    def _grid(_: Parametrization) -> SamplingGrid:
        return SamplingGrid(
            start=0.0, stop=10.0, step=0.05, cumulative_rule=CumulativeRule.ANALYTICAL
        )

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["rate", "scale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        grid_by_parametrization=_grid,
        support_by_parametrization=_support,
        title="Exponential Distribution",
        description=(
            "Distribution of the waiting time from one event until the next one of "
            "the same kind. It is applied, for example, to predicting product "
            "lifetimes."
        ),
        expectation_tex=r"E[X] = 1/\lambda = {expectation:.2f}",
        variance_tex=r"Var(X) = 1/\lambda^2 = {variance:.2f}",
        default_parameters={"lambda_": 1.0},
    )
    Exponential.__doc__ = """
    Exponential distribution with rate lambda: waiting time between events
    of a Poisson process.

    f(x) = lambda exp(-lambda x), F(x) = 1 - exp(-lambda x) for x >= 0.
    """

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """Rate ``lambda_ > 0``, the expected number of events per unit time."""

        lambda_: float

        @constraint(description="lambda_ > 0")
        def check_lambda_positive(self) -> bool:
            return self.lambda_ > 0

    @parametrization(family=Exponential, name="scale")
    class _Scale(Parametrization):
        """Scale ``beta = 1 / lambda_``, the mean waiting time."""

        beta: float

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return self.beta > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Rate(lambda_=1.0 / self.beta)

    ParametricFamilyRegister.register(Exponential)
