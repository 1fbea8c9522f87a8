"""
Normal family: ``meanStd`` (base) and ``meanPrec`` parametrizations, with a
CDF built on :func:`~pysatl_distview.special.erf`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
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
from pysatl_distview.special import erf
from pysatl_distview.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_normal_family() -> None:
    """Register the Normal family unless it is already there."""

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    def _loc_scale(parameters: Parametrization) -> tuple[float, float]:
        parameters = cast(_MeanStd, parameters)
        return parameters.mu, parameters.sigma

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Gaussian density evaluated pointwise.

        Parameters
        ----------
        parameters : Parametrization
            Base parameters ``mu`` and ``sigma``.
        x : NumericArray
            Evaluation points.

        Returns
        -------
        NumericArray
            Density values, same shape as ``x``.
        """
        mu, sigma = _loc_scale(parameters)
        coefficient = 1.0 / (sigma * math.sqrt(2 * math.pi))
        exponent = -0.5 * ((np.asarray(x, dtype=float) - mu) / sigma) ** 2

        return ensure_finite(coefficient * np.exp(exponent), "Normal pdf")

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """``(1 + erf((x - mu) / (sigma sqrt 2))) / 2``; absolute error below 1e-7."""
        mu, sigma = _loc_scale(parameters)
        z = (np.asarray(x, dtype=float) - mu) / (sigma * math.sqrt(2))
        return ensure_finite(0.5 * (1 + erf(z)), "Normal cdf")

    def mean_func(parameters: Parametrization, _: Any) -> float:
        return _loc_scale(parameters)[0]

    def var_func(parameters: Parametrization, _: Any) -> float:
        return _loc_scale(parameters)[1] ** 2

    def _support(_: Parametrization) -> ContinuousSupport:
        return ContinuousSupport()

    def _grid(parameters: Parametrization) -> SamplingGrid:
        """Four standard deviations on either side of the mean."""
        mu, sigma = _loc_scale(parameters)
        return SamplingGrid(
            start=mu - 4 * sigma,
            stop=mu + 4 * sigma,
            step=0.1,
            cumulative_rule=CumulativeRule.ANALYTICAL,
        )

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd", "meanPrec"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        grid_by_parametrization=_grid,
        support_by_parametrization=_support,
        title="Normal Distribution",
        description=(
            "The most representative continuous distribution, followed by many "
            "everyday quantities such as heights and measurement errors. Its graph "
            "is a bell curve, symmetric about the mean."
        ),
        expectation_tex=r"E[X] = \mu = {mu:.2f}",
        variance_tex=r"Var(X) = \sigma^2 = {variance:.2f}",
        default_parameters={"mu": 0.0, "sigma": 1.0},
    )
    Normal.__doc__ = """
    Normal (Gaussian) distribution with mean mu and standard deviation sigma.

    f(x) = exp(-(x - mu)**2 / (2 sigma**2)) / (sigma sqrt(2 pi))
    F(x) = (1 + erf((x - mu) / (sigma sqrt 2))) / 2
    """

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """Mean ``mu`` and standard deviation ``sigma > 0``."""

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean and precision.

        Parameters
        ----------
        mu : float
            Mean.
        tau : float
            Precision ``1 / sigma**2``, positive.
        """

        mu: float
        tau: float

        @constraint(description="tau > 0")
        def check_tau_positive(self) -> bool:
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _MeanStd(mu=self.mu, sigma=math.sqrt(1 / self.tau))

    ParametricFamilyRegister.register(Normal)
