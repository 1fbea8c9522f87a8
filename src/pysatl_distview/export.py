"""
Snapshot export of the current selection as JSON.

A snapshot holds the distribution kind, its base parameters, the moment of
export and the summary statistics, e.g.::

    {
      "distribution": "Normal",
      "parameters": {"mu": 0.0, "sigma": 1.0},
      "timestamp": "2025-04-01T12:00:00+00:00",
      "statistics": {"expectation": 0.0, "variance": 1.0, "standardDeviation": 1.0}
    }
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import json
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from pysatl_distview import engine
from pysatl_distview.types import FamilyName

if TYPE_CHECKING:
    from typing import Any

    from pysatl_distview.families.parametrizations import Parametrization


def snapshot(
    kind: FamilyName | str,
    parameters: Parametrization,
    timestamp: datetime | None = None,
) -> dict[str, Any]:
    """
    JSON-ready description of a distribution.

    Parameters
    ----------
    kind : FamilyName or str
        Distribution kind.
    parameters : Parametrization
        Parameter set of that kind, in any of its parametrizations.
    timestamp : datetime, optional
        Moment of export; the current UTC time if omitted.

    Raises
    ------
    ParameterDomainError
        If the parameters are invalid or belong to another kind.
    """
    family = engine.get_family(kind)
    statistics = engine.summarize(kind, parameters)
    if timestamp is None:
        timestamp = datetime.now(UTC)

    return {
        "distribution": str(FamilyName(kind)),
        "parameters": family.to_base(parameters).parameters,
        "timestamp": timestamp.isoformat(),
        "statistics": statistics.as_dict(),
    }


def dumps(
    kind: FamilyName | str,
    parameters: Parametrization,
    timestamp: datetime | None = None,
) -> str:
    """Serialize :func:`snapshot` with two-space indentation."""
    return json.dumps(snapshot(kind, parameters, timestamp), indent=2, ensure_ascii=False)


def snapshot_filename(kind: FamilyName | str, timestamp: datetime | None = None) -> str:
    """File name ``distribution_<kind>_<YYYY-MM-DD>.json`` for a snapshot."""
    if timestamp is None:
        timestamp = datetime.now(UTC)
    return f"distribution_{FamilyName(kind)}_{timestamp:%Y-%m-%d}.json"


__all__ = [
    "snapshot",
    "dumps",
    "snapshot_filename",
]
