"""
Built-in distribution families for PySATL DistView.

This package contains the seven families the viewer can render.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_distview.families.builtins.continuous import (
    configure_chi_squared_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_normal_family,
    configure_uniform_family,
)
from pysatl_distview.families.builtins.discrete import (
    configure_binomial_family,
    configure_poisson_family,
)

__all__ = [
    "configure_normal_family",
    "configure_binomial_family",
    "configure_chi_squared_family",
    "configure_poisson_family",
    "configure_exponential_family",
    "configure_uniform_family",
    "configure_gamma_family",
]
