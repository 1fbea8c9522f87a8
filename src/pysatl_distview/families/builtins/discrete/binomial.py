"""
Binomial distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

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
from pysatl_distview.special import combinations
from pysatl_distview.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateDiscrete,
)

if TYPE_CHECKING:
    from typing import Any


def configure_binomial_family() -> None:
    """
    Configure and register the Binomial distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BINOMIAL):
        return

    BINOMIAL_DOC = """
    Binomial distribution.

    Number of successes in n independent trials, each succeeding with
    probability p.

    Probability mass function:
        P(X = k) = C(n, k) * p^k * (1-p)^(n-k) for k = 0, 1, ..., n

    Cumulative distribution function:
        F(x) = sum of P(X = k) over k = 0, ..., floor(x)
    """

    def pmf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability mass function for binomial distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - n: int (number of trials)
            - p: float (success probability)
        x : NumericArray
            Points at which to evaluate the probability mass function

        Returns
        -------
        NumericArray
            Probability masses at points x (0 outside {0, ..., n})

        Raises
        ------
        ComputationError
            If the binomial coefficient does not fit into a float.
        """
        parameters = cast(_Standard, parameters)
        n = int(parameters.n)
        p = parameters.p

        def mass(k: int) -> float:
            return combinations(n, k) * p**k * (1 - p) ** (n - k)

        return lattice_mass(x, IntegerLatticeDiscreteSupport(0, n), mass, "Binomial pmf")

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Cumulative distribution function for binomial distribution."""
        parameters = cast(_Standard, parameters)
        return pmf_to_cdf_lattice(partial(pmf, parameters), x, max_k=int(parameters.n))

    def mean_func(parameters: Parametrization, _: Any) -> float:
        """Mean of binomial distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.n * parameters.p

    def var_func(parameters: Parametrization, _: Any) -> float:
        """Variance of binomial distribution."""
        parameters = cast(_Standard, parameters)
        return parameters.n * parameters.p * (1 - parameters.p)

    def _support(parameters: Parametrization) -> IntegerLatticeDiscreteSupport:
        """Support of binomial distribution"""
        parameters = cast(_Standard, parameters)
        return IntegerLatticeDiscreteSupport(min_k=0, max_k=int(parameters.n))

    def _grid(parameters: Parametrization) -> SamplingGrid:
        parameters = cast(_Standard, parameters)
        return SamplingGrid(
            start=0.0,
            stop=float(parameters.n),
            step=1.0,
            cumulative_rule=CumulativeRule.MASS_SUM,
        )

    Binomial = ParametricFamily(
        name=FamilyName.BINOMIAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["standard"],
        distr_characteristics={
            CharacteristicName.PMF: pmf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
        },
        grid_by_parametrization=_grid,
        support_by_parametrization=_support,
        title="Binomial Distribution",
        description=(
            "Repeating a trial with only two outcomes, such as a coin toss, n times, "
            "this discrete distribution gives the probability that one of the "
            "outcomes occurs k times."
        ),
        expectation_tex="E[X] = np = {expectation:.2f}",
        variance_tex="Var(X) = np(1-p) = {variance:.2f}",
        default_parameters={"n": 20, "p": 0.5},
    )
    Binomial.__doc__ = BINOMIAL_DOC

    @parametrization(family=Binomial, name="standard")
    class _Standard(Parametrization):
        """
        Standard parametrization of binomial distribution.

        Parameters
        ----------
        n : int
            Number of trials
        p : float
            Success probability of a single trial
        """

        n: int
        p: float

        @constraint(description="n is a non-negative integer")
        def check_n_non_negative_integer(self) -> bool:
            """Check that the number of trials is a non-negative integer."""
            return float(self.n).is_integer() and self.n >= 0

        @constraint(description="0 <= p <= 1")
        def check_p_in_unit_interval(self) -> bool:
            """Check that success probability lies in [0, 1]."""
            return 0 <= self.p <= 1

    ParametricFamilyRegister.register(Binomial)
