"""
Poisson distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from functools import partial
from typing import TYPE_CHECKING, cast

from pysatl_distview.distributions.fitters import pmf_to_cdf_lattice
from pysatl_distview.distributions.grid import CumulativeRule, SamplingGrid
from pysatl_distview.distributions.support import IntegerLatticeDiscreteSupport
from pysatl_distview.families.builtins._numeric import lattice_mass
from pysatl_distview.families.parametric_family import ParametricFamily
from pysatl_distview.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_distview.families.registry import ParametricFamilyRegister
from pysatl_distview.special import factorial
from pysatl_distview.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def configure_poisson_family() -> None:
    """
    Configure and register the Poisson distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.POISSON):
        return

    POISSON_DOC = """
    Poisson distribution.

    Number of events in a unit of time when events occur independently at
    an average rate λ.

    Probability mass function:
        P(X = k) = λ^k * exp(-λ) / k! for k = 0, 1, 2, ...
    """

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function for Poisson distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with field:
            - lambda_: float (rate)
        x : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probability masses at points x (0 outside the non-negative integers)

        Raises
        ------
        ComputationError
            If k! or λ^k does not fit into a float (k above 170).
        """
        parameters = cast(_Rate, parameters)
        lambda_ = parameters.lambda_
        tail = math.exp(-lambda_)

        def mass(k: int) -> float:
            return lambda_**k * tail / factorial(k)

        return lattice_mass(x, IntegerLatticeDiscreteSupport(0), mass, "Poisson pmf")

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for Poisson distribution."""
        return pmf_to_cdf_lattice(partial(pmf, parameters), x)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of Poisson distribution."""
        parameters = cast(_Rate, parameters)
        return parameters.lambda_

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of Poisson distribution."""
        parameters = cast(_Rate, parameters)
        return parameters.lambda_

    def _support(_: Parametrization) -> IntegerLatticeDiscreteSupport:
        """Support of Poisson distribution"""
        return IntegerLatticeDiscreteSupport(min_k=0)

    def _grid(parameters: Parametrization) -> SamplingGrid:
        """At least thirty units, and ten past twice the rate."""
        parameters = cast(_Rate, parameters)
        return SamplingGrid(
            start=0.0,
            stop=max(30.0, 2 * parameters.lambda_ + 10),
            step=1.0,
            cumulative_rule=CumulativeRule.MASS_SUM,
        )

    Poisson = ParametricFamily(
        name=FamilyName.POISSON,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["rate"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        grid_by_parametrization=_grid,
        support_by_parametrization=_support,
        title="Poisson Distribution",
        description=(
            "The probability that an event happening on average λ times per unit of "
            "time actually happens k times. Often used to model rare events."
        ),
        expectation_tex=r"E[X] = \lambda = {lambda_:.2f}",
        variance_tex=r"Var(X) = \lambda = {variance:.2f}",
        default_parameters={"lambda_": 4.0},
    )
    Poisson.__doc__ = POISSON_DOC

    @parametrization(family=Poisson, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of Poisson distribution.

        Parameters
        ----------
        lambda_ : float
            Average number of events per unit of time (λ)
        """

        lambda_: float

        @constraint(description="lambda_ > 0")
        def check_lambda_positive(self) -> bool:
            """Check that rate parameter is positive."""
            return self.lambda_ > 0

    ParametricFamilyRegister.register(Poisson)
