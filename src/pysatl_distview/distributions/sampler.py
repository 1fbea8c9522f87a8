"""
Curve Sampler
=============

Turns a distribution and a :class:`~pysatl_distview.types.PlotMode` into a
:class:`~pysatl_distview.distributions.curve.Curve` on the distribution's
:class:`~pysatl_distview.distributions.grid.SamplingGrid`.

Cumulative curves follow the grid's
:class:`~pysatl_distview.distributions.grid.CumulativeRule`; families whose
rule is ``RECTANGLE`` can be switched to their analytical CDF with
``exact_cumulative=True``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

from pysatl_distview.distributions.curve import Curve
from pysatl_distview.distributions.fitters import accumulate_mass, accumulate_rectangle
from pysatl_distview.distributions.grid import CumulativeRule
from pysatl_distview.types import CharacteristicName, PlotMode

if TYPE_CHECKING:
    from pysatl_distview.distributions.distribution import Distribution

log = logging.getLogger(__name__)


def density_characteristic(distribution: Distribution) -> CharacteristicName:
    """Return ``pmf`` for discrete distributions and ``pdf`` otherwise."""
    discrete = getattr(distribution.distribution_type, "is_discrete", False)
    return CharacteristicName.PMF if discrete else CharacteristicName.PDF


def sample_curve(
    distribution: Distribution,
    mode: PlotMode | str = PlotMode.DENSITY,
    *,
    exact_cumulative: bool = False,
) -> Curve:
    """
    Sample a density or cumulative curve of a distribution.

    Parameters
    ----------
    distribution : Distribution
        Distribution providing analytical characteristics and a sampling grid.
    mode : PlotMode or str, default PlotMode.DENSITY
        Which function to sample.
    exact_cumulative : bool, default False
        Replace rectangle-rule accumulation by the analytical ``cdf``.

    Returns
    -------
    Curve
        Freshly built curve; one point per grid point.

    Raises
    ------
    ComputationError
        If any sampled value is not finite. No partial curve is returned.
    RuntimeError
        If the distribution lacks a characteristic the chosen rule needs.
    """
    mode = PlotMode(mode)
    grid = distribution.sampling_grid
    x = grid.points()
    density = density_characteristic(distribution)

    if mode is PlotMode.DENSITY:
        rule = None
        y = distribution.query_method(density)(x)
    else:
        rule = grid.cumulative_rule
        if exact_cumulative and rule is CumulativeRule.RECTANGLE:
            rule = CumulativeRule.ANALYTICAL

        if rule is CumulativeRule.ANALYTICAL:
            y = distribution.query_method(CharacteristicName.CDF)(x)
        elif rule is CumulativeRule.MASS_SUM:
            y = accumulate_mass(distribution.query_method(density)(x))
        else:
            y = accumulate_rectangle(distribution.query_method(density)(x), grid.step)

    log.debug(
        "sampled %s curve: %d points on [%g, %g], step %g, rule %s",
        mode,
        x.size,
        grid.start,
        grid.stop,
        grid.step,
        rule,
    )
    return Curve(x, y, mode)


__all__ = ["density_characteristic", "sample_curve"]
