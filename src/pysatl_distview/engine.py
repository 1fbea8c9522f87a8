"""
Engine
======

Stateless entry points used by a rendering front end. Every call takes the
distribution kind and an explicit parameter set; nothing about the current
selection is remembered between calls.

- :func:`get_family`, :func:`default_parameters`, :func:`make_parameters`
- :func:`compute_curve`: density or cumulative curve on the kind's grid;
- :func:`summarize`: expectation, variance and standard deviation;
- :func:`describe`: title, description and moment formulas;
- :func:`update_parameter`: change one parameter with bound repair.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

from pysatl_distview.errors import ParameterDomainError
from pysatl_distview.families.configuration import configure_families_register
from pysatl_distview.types import FamilyName, PlotMode

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distview.distributions.curve import Curve
    from pysatl_distview.distributions.statistics import SummaryStatistics
    from pysatl_distview.families.distribution import (
        DistributionInfo,
        ParametricFamilyDistribution,
    )
    from pysatl_distview.families.parametric_family import ParametricFamily
    from pysatl_distview.families.parametrizations import Parametrization

log = logging.getLogger(__name__)


def get_family(kind: FamilyName | str) -> ParametricFamily:
    """
    Family object of a distribution kind.

    Raises
    ------
    ValueError
        If ``kind`` is not one of :class:`~pysatl_distview.types.FamilyName`.
    """
    return configure_families_register().get(FamilyName(kind))


def default_parameters(kind: FamilyName | str) -> Parametrization:
    """Parameters a kind starts with, in its base parametrization."""
    family = get_family(kind)
    parameters = family.base(**family.default_parameters)
    parameters.validate()
    return parameters


def make_parameters(
    kind: FamilyName | str, parametrization_name: str | None = None, **values: Any
) -> Parametrization:
    """
    Build and validate a parameter set of a kind.

    Parameters
    ----------
    kind : FamilyName or str
        Distribution kind.
    parametrization_name : str, optional
        Parametrization to use (defaults to the base one).
    **values
        Parameter values.

    Raises
    ------
    KeyError
        If the parametrization name is unknown.
    ParameterDomainError
        If the values violate a constraint.
    """
    family = get_family(kind)
    if parametrization_name is None:
        parametrization_class = family.base
    else:
        parametrization_class = family.get_parametrization(parametrization_name)

    parameters = parametrization_class(**values)
    parameters.validate()
    return parameters


def _distribution(
    kind: FamilyName | str, parameters: Parametrization
) -> ParametricFamilyDistribution:
    family = get_family(kind)
    if parameters.family_name != family.name:
        raise ParameterDomainError(
            f"Parameters of family {parameters.family_name} cannot describe {family.name}"
        )
    return family.from_parameters(parameters)


def compute_curve(
    kind: FamilyName | str,
    parameters: Parametrization,
    mode: PlotMode | str = PlotMode.DENSITY,
    **options: Any,
) -> Curve:
    """
    Sample the density or cumulative curve of a distribution.

    Parameters
    ----------
    kind : FamilyName or str
        Distribution kind.
    parameters : Parametrization
        Parameter set of that kind.
    mode : PlotMode or str, default PlotMode.DENSITY
        ``density`` (PDF or PMF) or ``cumulative`` (CDF).
    **options
        Passed to :func:`~pysatl_distview.distributions.sampler.sample_curve`,
        e.g. ``exact_cumulative=True``.

    Raises
    ------
    ParameterDomainError
        If the parameters are invalid or belong to another kind.
    ComputationError
        If any point of the curve is not finite.
    """
    return _distribution(kind, parameters).curve(mode, **options)


def summarize(kind: FamilyName | str, parameters: Parametrization) -> SummaryStatistics:
    """Expectation, variance and standard deviation of a distribution."""
    return _distribution(kind, parameters).summary()


def describe(kind: FamilyName | str, parameters: Parametrization) -> DistributionInfo:
    """Title, description and moment formulas with current values substituted."""
    return _distribution(kind, parameters).describe()


def update_parameter(parameters: Parametrization, name: str, value: Any) -> Parametrization:
    """
    Replace one parameter, repairing dependent ones where the family allows it.

    Uniform bounds that would cross are pushed apart; every other family
    rejects an invalid value.

    Raises
    ------
    KeyError
        If ``parameters`` has no field ``name``.
    ParameterDomainError
        If the updated parameters are invalid after repair.
    """
    updated = parameters.with_parameter(name, value)
    log.debug("%s.%s: %r -> %r", parameters.family_name, name, parameters, updated)
    return updated


__all__ = [
    "get_family",
    "default_parameters",
    "make_parameters",
    "compute_curve",
    "summarize",
    "describe",
    "update_parameter",
]
