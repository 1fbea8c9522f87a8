"""
Core Type Definitions
=====================

Enumerations and aliases shared by the special functions, the distribution
families and the curve sampler.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Whether a family is evaluated on an integer lattice or on a real grid.

    Attributes
    ----------
    DISCRETE : str
        Probability mass on consecutive integers; plotted as bars.
    CONTINUOUS : str
        Probability density on the real line; plotted as a line.
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """Marker base of distribution type descriptors."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution on ``R**dimension``.

    Parameters
    ----------
    kind : Kind
        Discrete or continuous.
    dimension : int
        Spatial dimension; every family shipped here is univariate.
    """

    kind: Kind
    dimension: int

    @property
    def is_discrete(self) -> bool:
        return self.kind is Kind.DISCRETE


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)

NumPyNumber = np.floating[Any] | np.integer[Any]
Number = NumPyNumber | int | float
NumericArray = NDArray[NumPyNumber]
BoolArray = NDArray[np.bool_]

type GenericCharacteristicName = str
"""Characteristic key, normally a :class:`CharacteristicName` member."""

type ParametrizationName = str
"""Name under which a parametrization is registered with its family."""


class CharacteristicName(StrEnum):
    """
    Characteristics a family can provide.

    Continuous families provide ``PDF``, discrete ones ``PMF``; both provide
    ``CDF``, ``MEAN`` and ``VAR``.
    """

    PDF = "pdf"
    PMF = "pmf"
    CDF = "cdf"
    MEAN = "mean"
    VAR = "var"


class FamilyName(StrEnum):
    """Closed set of distribution kinds the viewer can render."""

    NORMAL = "Normal"
    BINOMIAL = "Binomial"
    CHI_SQUARED = "ChiSquared"
    POISSON = "Poisson"
    EXPONENTIAL = "Exponential"
    CONTINUOUS_UNIFORM = "ContinuousUniform"
    GAMMA = "Gamma"


class PlotMode(StrEnum):
    """
    What a sampled curve shows.

    Attributes
    ----------
    DENSITY : str
        Probability density (continuous) or mass (discrete) function.
    CUMULATIVE : str
        Cumulative distribution function.
    """

    DENSITY = "density"
    CUMULATIVE = "cumulative"


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "BoolArray",
    "GenericCharacteristicName",
    "ParametrizationName",
    "CharacteristicName",
    "FamilyName",
    "PlotMode",
]
