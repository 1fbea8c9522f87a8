"""
Distributions subpackage

Interfaces and numerical machinery shared by all families:

- distribution protocol (:mod:`.distribution`);
- analytical computation primitive (:mod:`.computation`);
- supports (:mod:`.support`);
- sampling grids and cumulative accumulators (:mod:`.grid`, :mod:`.fitters`);
- curves and the curve sampler (:mod:`.curve`, :mod:`.sampler`);
- summary statistics (:mod:`.statistics`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .computation import AnalyticalComputation
from .curve import Curve
from .distribution import Distribution
from .grid import CumulativeRule, SamplingGrid
from .sampler import sample_curve
from .statistics import SummaryStatistics
from .support import ContinuousSupport, IntegerLatticeDiscreteSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    # distribution
    "Distribution",
    # supports
    "Support",
    "ContinuousSupport",
    "IntegerLatticeDiscreteSupport",
    # grids and curves
    "CumulativeRule",
    "SamplingGrid",
    "Curve",
    "sample_curve",
    # statistics
    "SummaryStatistics",
]
