"""
Distribution Families Configuration
====================================

This module registers the parametric families the viewer can render:

- Normal, Binomial, Chi-squared, Poisson, Exponential, Uniform and Gamma.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Registration order follows :class:`~pysatl_distview.types.FamilyName`.
- The register is built once and is read-only afterwards.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from pysatl_distview.families.builtins import (
    configure_binomial_family,
    configure_chi_squared_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_normal_family,
    configure_poisson_family,
    configure_uniform_family,
)
from pysatl_distview.families.registry import ParametricFamilyRegister

log = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_normal_family()
    configure_binomial_family()
    configure_chi_squared_family()
    configure_poisson_family()
    configure_exponential_family()
    configure_uniform_family()
    configure_gamma_family()
    register = ParametricFamilyRegister()
    log.debug("families register configured: %s", ", ".join(register.names()))
    return register


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
