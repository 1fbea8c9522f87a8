"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol used by the
curve sampler and the statistics reporter.

Notes
-----
- Characteristics are resolved from the distribution's analytical
  computations only; there is no numerical fallback between characteristics.
- The sampling grid is part of the interface: each distribution knows the
  window and step on which it should be plotted.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_distview.distributions.computation import AnalyticalComputation
    from pysatl_distview.distributions.grid import SamplingGrid
    from pysatl_distview.distributions.support import Support
    from pysatl_distview.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by the sampler and the reporter."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def support(self) -> Support | None: ...

    @property
    def sampling_grid(self) -> SamplingGrid: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName
    ) -> AnalyticalComputation[Any, Any]:
        """
        Resolve the analytical computation of a characteristic.

        Raises
        ------
        RuntimeError
            If the distribution does not provide the characteristic.
        """
        try:
            return self.analytical_computations[characteristic_name]
        except KeyError as exc:
            raise RuntimeError(
                f"Distribution provides no analytical '{characteristic_name}' characteristic."
            ) from exc
