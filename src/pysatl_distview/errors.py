"""
Error types raised by the distribution engine.

Both classes derive from built-in exceptions so callers that already catch
``ValueError`` or ``ArithmeticError`` keep working.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class ParameterDomainError(ValueError):
    """Parameters violate the constraints of their family."""


class ComputationError(ArithmeticError):
    """A numerical evaluation overflowed, hit a pole or produced a non-finite value."""


__all__ = ["ParameterDomainError", "ComputationError"]
