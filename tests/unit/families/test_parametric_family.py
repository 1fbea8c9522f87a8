from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import numpy as np
import pytest

from pysatl_distview.distributions.grid import SamplingGrid
from pysatl_distview.errors import ParameterDomainError
from pysatl_distview.families import (
    ParametricFamily,
    ParametricFamilyRegister,
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from pysatl_distview.families.distribution import DistributionInfo
from pysatl_distview.types import CharacteristicName, PlotMode, UnivariateContinuous


class TestBaseFamily:
    """Builds a small two-parametrization family on the unit scale."""

    @staticmethod
    def make_default_family(name: str = "Scaled") -> ParametricFamily:
        def pdf(parameters: Any, x: Any) -> Any:
            x = np.asarray(x, dtype=float)
            return np.where((x >= 0) & (x <= parameters.value), 1.0 / parameters.value, 0.0)

        def alt_cdf(parameters: Any, x: Any) -> Any:
            return np.clip(np.asarray(x, dtype=float) * parameters.rate, 0.0, 1.0)

        def cdf(parameters: Any, x: Any) -> Any:
            return np.clip(np.asarray(x, dtype=float) / parameters.value, 0.0, 1.0)

        family = ParametricFamily(
            name=name,
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base", "alt"],
            distr_characteristics={
                CharacteristicName.PDF: pdf,
                CharacteristicName.CDF: {"base": cdf, "alt": alt_cdf},
                CharacteristicName.MEAN: lambda parameters, _: parameters.value / 2,
                CharacteristicName.VAR: lambda parameters, _: parameters.value**2 / 12,
            },
            grid_by_parametrization=lambda parameters: SamplingGrid(
                0.0, parameters.value, parameters.value / 4
            ),
            title="Scaled",
            description="Flat density on [0, value].",
            expectation_tex="E = {expectation:.1f}",
            variance_tex="V = {variance:.3f} for {value:g}",
            default_parameters={"value": 2.0},
        )

        @parametrization(family=family, name="base")
        class Base(Parametrization):
            value: float

            @constraint(description="value > 0")
            def check_value_positive(self) -> bool:
                return self.value > 0

        @parametrization(family=family, name="alt")
        class Alt(Parametrization):
            rate: float

            @constraint(description="rate > 0")
            def check_rate_positive(self) -> bool:
                return self.rate > 0

            def transform_to_base_parametrization(self) -> Parametrization:
                return Base(value=1.0 / self.rate)  # type: ignore[call-arg]

        ParametricFamilyRegister.register(family)
        return family


class TestParametricFamily(TestBaseFamily):
    def test_analytical_plan_picks_provider(self) -> None:
        plan = self.make_default_family()._analytical_plan

        assert plan["alt"][CharacteristicName.CDF] == "alt"
        assert plan["alt"][CharacteristicName.PDF] == "base"
        assert plan["base"][CharacteristicName.CDF] == "base"

    def test_characteristics_follow_plan(self) -> None:
        family = self.make_default_family()
        dist = family(parametrization_name="alt", rate=0.5)

        x = np.array([0.0, 1.0, 2.0])
        np.testing.assert_allclose(dist.query_method(CharacteristicName.CDF)(x), [0.0, 0.5, 1.0])
        np.testing.assert_allclose(dist.query_method(CharacteristicName.PDF)(x), 0.5)

    def test_grid_and_curve_use_base_parameters(self) -> None:
        dist = self.make_default_family()(parametrization_name="alt", rate=0.25)

        assert dist.sampling_grid == SamplingGrid(0.0, 4.0, 1.0)
        curve = dist.curve(PlotMode.CUMULATIVE)
        np.testing.assert_allclose(curve.y, [0.0, 0.25, 0.5, 0.75, 1.0])

    def test_members_share_the_family_type(self) -> None:
        family = self.make_default_family()

        assert family(value=1.0).distribution_type is UnivariateContinuous
        assert family(parametrization_name="alt", rate=2.0).distribution_type is (
            UnivariateContinuous
        )

    def test_describe(self) -> None:
        info = self.make_default_family().default_distribution().describe()
        assert info == DistributionInfo(
            title="Scaled",
            description="Flat density on [0, value].",
            expectation_tex="E = 1.0",
            variance_tex="V = 0.333 for 2",
        )

    def test_from_parameters_rejects_foreign_parameters(self) -> None:
        first = self.make_default_family("First")
        second = self.make_default_family("Second")

        foreign = first.base(value=1.0)  # type: ignore[call-arg]
        with pytest.raises(ParameterDomainError, match="do not belong"):
            second.from_parameters(foreign)

    def test_from_parameters_validates(self) -> None:
        family = self.make_default_family()
        with pytest.raises(ParameterDomainError, match="value > 0"):
            family.from_parameters(family.base(value=-1.0))  # type: ignore[call-arg]

    def test_undeclared_parametrization(self) -> None:
        family = self.make_default_family()

        with pytest.raises(ValueError, match="not declared"):

            @parametrization(family=family, name="other")
            class Other(Parametrization):
                value: float

    def test_duplicate_parametrization(self) -> None:
        family = self.make_default_family()

        with pytest.raises(ValueError, match="already registered"):

            @parametrization(family=family, name="base")
            class Again(Parametrization):
                value: float

    def test_family_needs_a_parametrization(self) -> None:
        with pytest.raises(ValueError, match="no parametrization"):
            ParametricFamily(
                name="Nameless",
                distr_type=UnivariateContinuous,
                distr_parametrizations=[],
                distr_characteristics={},
            )

    def test_base_not_registered(self) -> None:
        family = ParametricFamily(
            name="Empty",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )
        with pytest.raises(ValueError, match="is not registered"):
            _ = family.base

    def test_grid_is_required_for_curves(self) -> None:
        family = ParametricFamily(
            name="Gridless",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )

        @parametrization(family=family, name="base")
        class Base(Parametrization):
            value: float

        ParametricFamilyRegister.register(family)
        with pytest.raises(RuntimeError, match="no sampling grid"):
            _ = family(value=1.0).sampling_grid


class TestParametrizationAPI(TestBaseFamily):
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", None) is True
        assert getattr(check_positive, "__constraint_description", None) == (
            "Value must be positive"
        )

    def test_static_constraint_is_rejected(self) -> None:
        family = ParametricFamily(
            name="Static",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            distr_characteristics={},
        )

        with pytest.raises(TypeError, match="instance method"):

            @parametrization(family=family, name="base")
            class Base(Parametrization):
                value: float

                @staticmethod
                @constraint(description="always")
                def check() -> bool:
                    return True

    def test_parametrization_is_frozen_dataclass(self) -> None:
        family = self.make_default_family()
        params = family.base(value=1.25)  # type: ignore[call-arg]

        assert params.name == "base"
        assert params.family_name == "Scaled"
        assert params.parameters == {"value": 1.25}
        with pytest.raises(AttributeError):
            params.value = 2.0  # type: ignore[misc]

    def test_to_base(self) -> None:
        family = self.make_default_family()

        base_params = family.base(value=5.0)  # type: ignore[call-arg]
        assert family.to_base(base_params) is base_params

        alt_params = family.get_parametrization("alt")(rate=4.0)  # type: ignore[call-arg]
        assert family.to_base(alt_params).parameters == {"value": 0.25}

    def test_with_parameter_returns_new_instance(self) -> None:
        family = self.make_default_family()
        params = family.base(value=1.0)  # type: ignore[call-arg]

        updated = params.with_parameter("value", 3.0)

        assert updated.parameters == {"value": 3.0}
        assert params.parameters == {"value": 1.0}

    def test_with_parameter_rejects_invalid_value(self) -> None:
        params = self.make_default_family().base(value=1.0)  # type: ignore[call-arg]
        with pytest.raises(ParameterDomainError, match="value > 0"):
            params.with_parameter("value", 0.0)

    def test_with_parameter_unknown_name(self) -> None:
        params = self.make_default_family().base(value=1.0)  # type: ignore[call-arg]
        with pytest.raises(KeyError):
            params.with_parameter("scale", 2.0)
