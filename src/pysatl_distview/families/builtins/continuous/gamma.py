"""
Gamma distribution family implementation.

Contains the Gamma family with shape-rate and shape-scale parametrizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import gammainc

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
from pysatl_distview.special import log_gamma
from pysatl_distview.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    Generalisation of the exponential distribution: the sum of alpha
    independent exponential waiting times with rate beta.

    Probability density function (rate form):
        f(x) = beta^alpha * x^(alpha - 1) * exp(-beta x) / Γ(alpha) for x > 0, 0 otherwise

    Cumulative distribution function:
        F(x) = P(alpha, beta x), the regularized lower incomplete gamma function
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for gamma distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - alpha: float (shape)
            - beta: float (rate)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x (0 for x ≤ 0)

        Raises
        ------
        ComputationError
            If any density value overflows.
        """
        parameters = cast(_ShapeRate, parameters)
        alpha = parameters.alpha
        beta = parameters.beta
        log_coefficient = alpha * math.log(beta) - log_gamma(alpha)

        arr = np.asarray(x, dtype=float)
        values = np.zeros_like(arr)
        positive = arr > 0
        x_pos = arr[positive]
        with np.errstate(over="ignore"):
            values[positive] = np.exp(
                log_coefficient + (alpha - 1) * np.log(x_pos) - beta * x_pos
            )
        return ensure_finite(values, "Gamma pdf")

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for gamma distribution.

        Exact evaluation through the regularized lower incomplete gamma
        function.
        """
        parameters = cast(_ShapeRate, parameters)

        arr = np.asarray(x, dtype=float)
        values = np.where(
            arr > 0, gammainc(parameters.alpha, parameters.beta * np.maximum(arr, 0.0)), 0.0
        )
        return ensure_finite(values, "Gamma cdf")

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of gamma distribution."""
        parameters = cast(_ShapeRate, parameters)
        return parameters.alpha / parameters.beta

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of gamma distribution."""
        parameters = cast(_ShapeRate, parameters)
        return parameters.alpha / parameters.beta**2

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of gamma distribution"""
        return ContinuousSupport(left=0.0, left_closed=False)

    def _grid(_: Parametrization) -> SamplingGrid:
        return SamplingGrid(
            start=0.01, stop=20.0, step=0.1, cumulative_rule=CumulativeRule.RECTANGLE
        )

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeRate", "shapeScale"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        grid_by_parametrization=_grid,
        support_by_parametrization=_support,
        title="Gamma Distribution",
        description=(
            "A generalisation of the exponential distribution, followed by a sum of "
            "independent exponential waiting times. Used to model waiting times and "
            "in reliability engineering."
        ),
        expectation_tex=r"E[X] = \alpha/\beta = {expectation:.2f}",
        variance_tex=r"Var(X) = \alpha/\beta^2 = {variance:.2f}",
        default_parameters={"alpha": 2.0, "beta": 1.0},
    )
    Gamma.__doc__ = GAMMA_DOC

    @parametrization(family=Gamma, name="shapeRate")
    class _ShapeRate(Parametrization):
        """
        Shape-rate parametrization of gamma distribution.

        Parameters
        ----------
        alpha : float
            Shape parameter (α)
        beta : float
            Rate parameter (β)
        """

        alpha: float
        beta: float

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            """Check that shape parameter is positive."""
            return self.alpha > 0

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            """Check that rate parameter is positive."""
            return self.beta > 0

    @parametrization(family=Gamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of gamma distribution.

        Parameters
        ----------
        alpha : float
            Shape parameter (α)
        theta : float
            Scale parameter (θ = 1/β)
        """

        alpha: float
        theta: float

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            """Check that shape parameter is positive."""
            return self.alpha > 0

        @constraint(description="theta > 0")
        def check_theta_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return self.theta > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """Transform to shape-rate parametrization."""
            return _ShapeRate(alpha=self.alpha, beta=1.0 / self.theta)

    ParametricFamilyRegister.register(Gamma)
