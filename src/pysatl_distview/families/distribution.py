"""
Concrete distribution instances with specific parameter values.

This module provides the implementation for individual distribution instances
created from parametric families, together with the descriptive record shown
next to a plot.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_distview.distributions.distribution import Distribution
from pysatl_distview.distributions.sampler import sample_curve
from pysatl_distview.distributions.statistics import summarize
from pysatl_distview.families.registry import ParametricFamilyRegister
from pysatl_distview.types import PlotMode

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_distview.distributions.computation import AnalyticalComputation
    from pysatl_distview.distributions.curve import Curve
    from pysatl_distview.distributions.grid import SamplingGrid
    from pysatl_distview.distributions.statistics import SummaryStatistics
    from pysatl_distview.distributions.support import Support
    from pysatl_distview.families.parametric_family import ParametricFamily
    from pysatl_distview.families.parametrizations import Parametrization
    from pysatl_distview.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@dataclass(frozen=True, slots=True)
class DistributionInfo:
    """
    Static description of a family plus its moment formulas.

    Parameters
    ----------
    title : str
        Display title.
    description : str
        One-paragraph description.
    expectation_tex : str
        LaTeX formula of E[X] with the current value substituted.
    variance_tex : str
        LaTeX formula of Var(X) with the current value substituted.
    """

    title: str
    description: str
    expectation_tex: str
    variance_tex: str


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    A specific distribution instance from a parametric family.

    Parameters
    ----------
    family_name : str
        Name of the distribution family.
    _distribution_type : DistributionType
        Type of this distribution.
    parameters : Parametrization
        Parameter values for this distribution.
    _support : Support or None
        Support of this distribution.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    _support: Support | None

    @property
    def distribution_type(self) -> DistributionType:
        """Get the distribution type."""
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        """The parametric family of this distribution."""
        return ParametricFamilyRegister.get(self.family_name)

    @property
    def parametrization_name(self) -> str:
        """Name of the parametrization the distribution was created with."""
        return self.parameters.name

    @property
    def base_parameters(self) -> Parametrization:
        """Parameters converted to the family's base parametrization."""
        return self.family.to_base(self.parameters)

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """Characteristics of the family bound to this distribution's parameters."""
        return self.family._build_analytical_computations(self.parameters)

    @property
    def support(self) -> Support | None:
        """Get the support of this distribution."""
        return self._support

    @property
    def sampling_grid(self) -> SamplingGrid:
        """Plotting grid of this distribution."""
        return self.family.grid_for(self.parameters)

    def curve(self, mode: PlotMode | str = PlotMode.DENSITY, **options: Any) -> Curve:
        """
        Sample a density or cumulative curve.

        See :func:`~pysatl_distview.distributions.sampler.sample_curve` for
        the accepted options.
        """
        return sample_curve(self, mode, **options)

    def summary(self) -> SummaryStatistics:
        """Expectation, variance and standard deviation."""
        return summarize(self)

    def describe(self) -> DistributionInfo:
        """Title, description and moment formulas with current values."""
        family = self.family
        stats = self.summary()
        fields = {
            **self.base_parameters.parameters,
            "expectation": stats.expectation,
            "variance": stats.variance,
        }
        return DistributionInfo(
            title=family.title,
            description=family.description,
            expectation_tex=family.expectation_tex.format(**fields),
            variance_tex=family.variance_tex.format(**fields),
        )
