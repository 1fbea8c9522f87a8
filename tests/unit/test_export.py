"""
Tests for JSON snapshot export
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import json
from datetime import UTC, datetime

import pytest

from pysatl_distview import engine, export
from pysatl_distview.errors import ParameterDomainError
from pysatl_distview.types import FamilyName

MOMENT = datetime(2025, 4, 1, 12, 0, tzinfo=UTC)


class TestSnapshot:
    def test_normal_snapshot(self):
        parameters = engine.default_parameters(FamilyName.NORMAL)

        assert export.snapshot(FamilyName.NORMAL, parameters, MOMENT) == {
            "distribution": "Normal",
            "parameters": {"mu": 0.0, "sigma": 1.0},
            "timestamp": "2025-04-01T12:00:00+00:00",
            "statistics": {"expectation": 0.0, "variance": 1.0, "standardDeviation": 1.0},
        }

    def test_snapshot_uses_base_parameters(self):
        parameters = engine.make_parameters(
            FamilyName.NORMAL, parametrization_name="meanPrec", mu=0.0, tau=4.0
        )
        snapshot = export.snapshot(FamilyName.NORMAL, parameters, MOMENT)

        assert snapshot["parameters"] == {"mu": 0.0, "sigma": pytest.approx(0.5)}
        assert snapshot["statistics"]["variance"] == pytest.approx(0.25)

    def test_default_timestamp_is_current(self):
        parameters = engine.default_parameters(FamilyName.POISSON)

        before = datetime.now(UTC)
        stamp = datetime.fromisoformat(export.snapshot("Poisson", parameters)["timestamp"])

        assert before <= stamp <= datetime.now(UTC)

    def test_dumps_is_valid_json(self):
        parameters = engine.make_parameters(FamilyName.BINOMIAL, n=10, p=0.3)
        text = export.dumps(FamilyName.BINOMIAL, parameters, MOMENT)

        assert text.startswith("{\n  ")
        loaded = json.loads(text)
        assert loaded["distribution"] == "Binomial"
        assert loaded["parameters"] == {"n": 10, "p": 0.3}
        assert loaded["statistics"]["expectation"] == pytest.approx(3.0)

    def test_foreign_parameters(self):
        parameters = engine.default_parameters(FamilyName.GAMMA)
        with pytest.raises(ParameterDomainError):
            export.snapshot(FamilyName.CHI_SQUARED, parameters, MOMENT)

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (FamilyName.NORMAL, "distribution_Normal_2025-04-01.json"),
            ("ContinuousUniform", "distribution_ContinuousUniform_2025-04-01.json"),
        ],
    )
    def test_snapshot_filename(self, kind, expected):
        assert export.snapshot_filename(kind, MOMENT) == expected
