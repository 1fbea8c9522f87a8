"""
PySATL DistView
===============

Numerical core of an interactive probability distribution viewer: special
functions, seven parametric families, curve sampling on per-family grids,
summary statistics and descriptive formulas.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .engine import (
    compute_curve,
    default_parameters,
    describe,
    get_family,
    make_parameters,
    summarize,
    update_parameter,
)
from .errors import ComputationError, ParameterDomainError
from .families import *
from .families import __all__ as _family_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("pysatl-distview")
__all__ = [
    "__version__",
    "ComputationError",
    "ParameterDomainError",
    "compute_curve",
    "default_parameters",
    "describe",
    "get_family",
    "make_parameters",
    "summarize",
    "update_parameter",
    *_distr_all,
    *_family_all,
    *_types_all,
]

del _distr_all
del _family_all
del _types_all
