"""
Chi-squared distribution family implementation.
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


def configure_chi_squared_family() -> None:
    """
    Configure and register the Chi-squared distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CHI_SQUARED):
        return

    CHI_SQUARED_DOC = """
    Chi-squared distribution.

    Distribution of a sum of df squared independent standard normal
    variables; df need not be an integer.

    Probability density function:
        f(x) = x^(df/2 - 1) * exp(-x/2) / (2^(df/2) * Γ(df/2)) for x > 0, 0 otherwise

    Cumulative distribution function:
        F(x) = P(df/2, x/2), the regularized lower incomplete gamma function
    """

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for chi-squared distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with field:
            - df: float (degrees of freedom)
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
        parameters = cast(_Standard, parameters)
        half_df = parameters.df / 2
        log_norm = half_df * math.log(2.0) + log_gamma(half_df)

        arr = np.asarray(x, dtype=float)
        values = np.zeros_like(arr)
        positive = arr > 0
        x_pos = arr[positive]
        with np.errstate(over="ignore"):
            values[positive] = np.exp((half_df - 1) * np.log(x_pos) - x_pos / 2 - log_norm)
        return ensure_finite(values, "Chi-squared pdf")

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for chi-squared distribution.

        Exact evaluation through the regularized lower incomplete gamma
        function.
        """
        parameters = cast(_Standard, parameters)

        arr = np.asarray(x, dtype=float)
        values = np.where(arr > 0, gammainc(parameters.df / 2, np.maximum(arr, 0.0) / 2), 0.0)
        return ensure_finite(values, "Chi-squared cdf")

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of chi-squared distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.df

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of chi-squared distribution."""
        parameters = cast(_Standard, parameters)
        return 2 * parameters.df

    def _support(_: Parametrization) -> ContinuousSupport:
        """Support of chi-squared distribution"""
        return ContinuousSupport(left=0.0, left_closed=False)

    def _grid(parameters: Parametrization) -> SamplingGrid:
        """Starts just right of the origin, where the density may be singular."""
        parameters = cast(_Standard, parameters)
        return SamplingGrid(
            start=0.01,
            stop=max(60.0, 3 * parameters.df),
            step=0.1,
            cumulative_rule=CumulativeRule.RECTANGLE,
        )

    ChiSquared = ParametricFamily(
        name=FamilyName.CHI_SQUARED,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        grid_by_parametrization=_grid,
        support_by_parametrization=_support,
        title="Chi-squared Distribution",
        description=(
            "The distribution of a sum of squares of independent standard normal "
            "variables. A key continuous distribution of hypothesis testing, used "
            "in goodness-of-fit and independence tests."
        ),
        expectation_tex="E[X] = k = {df:g}",
        variance_tex="Var(X) = 2k = {variance:g}",
        default_parameters={"df": 5.0},
    )
    ChiSquared.__doc__ = CHI_SQUARED_DOC

    @parametrization(family=ChiSquared, name="standard")
    class _Standard(Parametrization):
        """
        Degrees-of-freedom parametrization of chi-squared distribution.

        Parameters
        ----------
        df : float
            Degrees of freedom (k)
        """

        df: float

        @constraint(description="df > 0")
        def check_df_positive(self) -> bool:
            """Check that the degrees of freedom are positive."""
            return self.df > 0

    ParametricFamilyRegister.register(ChiSquared)
