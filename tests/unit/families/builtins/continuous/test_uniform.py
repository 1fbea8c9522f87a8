"""
Tests for Uniform Distribution Family

This module tests the functionality of the uniform distribution family,
including parameterizations, bound repair and curves.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging

import numpy as np
import pytest
from scipy.integrate import trapezoid
from scipy.stats import uniform

from pysatl_distview.distributions.support import ContinuousSupport
from pysatl_distview.errors import ParameterDomainError
from pysatl_distview.families.configuration import configure_families_register
from pysatl_distview.types import CharacteristicName, FamilyName, PlotMode

from ..base import BaseDistributionTest


class TestUniformFamily(BaseDistributionTest):
    """Test suite for Uniform distribution family."""

    def setup_method(self):
        """Setup before each test method."""
        registry = configure_families_register()
        self.uniform_family = registry.get(FamilyName.CONTINUOUS_UNIFORM)
        self.uniform_dist_example = self.uniform_family(lower_bound=2.0, upper_bound=5.0)

    def test_family_properties(self):
        """Test basic properties of uniform family."""
        assert self.uniform_family.name == FamilyName.CONTINUOUS_UNIFORM
        assert set(self.uniform_family.parametrization_names) == {"standard", "meanWidth"}
        assert self.uniform_family.base_parametrization_name == "standard"

    def test_mean_width_parametrization_creation(self):
        """Test creation of distribution with mean-width parametrization."""
        dist = self.uniform_family(mean=3.5, width=3.0, parametrization_name="meanWidth")

        assert dist.parameters.parameters == {"mean": 3.5, "width": 3.0}
        assert dist.base_parameters.parameters == {"lower_bound": 2.0, "upper_bound": 5.0}

    def test_parametrization_constraints(self):
        """Test parameter constraints validation."""
        with pytest.raises(ParameterDomainError, match="lower_bound < upper_bound"):
            self.uniform_family(lower_bound=5.0, upper_bound=2.0)

        with pytest.raises(ParameterDomainError, match="lower_bound < upper_bound"):
            self.uniform_family(lower_bound=2.0, upper_bound=2.0)

        with pytest.raises(ParameterDomainError, match="width > 0"):
            self.uniform_family(mean=3.5, width=0.0, parametrization_name="meanWidth")

    def test_moments(self):
        """Test moment calculations."""
        mean_func = self.uniform_dist_example.query_method(CharacteristicName.MEAN)
        assert abs(mean_func(None) - 3.5) < self.CALCULATION_PRECISION

        var_func = self.uniform_dist_example.query_method(CharacteristicName.VAR)
        assert abs(var_func(None) - 0.75) < self.CALCULATION_PRECISION

    @pytest.mark.parametrize(
        "char_name, scipy_func",
        [(CharacteristicName.PDF, uniform.pdf), (CharacteristicName.CDF, uniform.cdf)],
    )
    def test_array_input_for_characteristics(self, char_name, scipy_func):
        """Test that characteristics support array inputs."""
        char_func = self.uniform_dist_example.query_method(char_name)

        input_array = np.array([1.0, 2.0, 2.5, 3.0, 4.0, 5.0, 6.0])
        result_array = char_func(input_array)

        assert result_array.shape == input_array.shape
        expected_array = scipy_func(input_array, loc=2.0, scale=3.0)
        self.assert_arrays_almost_equal(result_array, expected_array)

    def test_uniform_support(self):
        """Test that uniform distribution has correct support [lower_bound, upper_bound]."""
        support = self.uniform_dist_example.support

        assert isinstance(support, ContinuousSupport)
        assert support.left == 2.0
        assert support.right == 5.0
        assert support.contains(2.0) is True
        assert support.contains(5.1) is False

    def test_invalid_parameterization(self):
        """Test error for invalid parameterization name."""
        with pytest.raises(KeyError):
            self.uniform_family.distribution(
                parametrization_name="invalid_name", lower_bound=0.0, upper_bound=1.0
            )

    def test_missing_parameters(self):
        """Test error for missing required parameters."""
        with pytest.raises(TypeError):
            self.uniform_family.distribution(lower_bound=0.0)


class TestUniformBoundRepair:
    """Changing one bound across the other pushes the other one away."""

    def setup_method(self):
        registry = configure_families_register()
        self.uniform_family = registry.get(FamilyName.CONTINUOUS_UNIFORM)

    def test_raising_lower_bound_moves_upper_bound(self):
        parameters = self.uniform_family(lower_bound=0.0, upper_bound=1.0).parameters

        updated = parameters.with_parameter("lower_bound", 2.0)

        assert updated.lower_bound == 2.0
        assert updated.upper_bound == pytest.approx(2.1)

    def test_lowering_upper_bound_moves_lower_bound(self):
        parameters = self.uniform_family(lower_bound=1.0, upper_bound=2.0).parameters

        updated = parameters.with_parameter("upper_bound", 0.0)

        assert updated.lower_bound == pytest.approx(-0.1)
        assert updated.upper_bound == 0.0

    def test_equal_bounds_are_repaired(self):
        parameters = self.uniform_family(lower_bound=0.0, upper_bound=1.0).parameters
        updated = parameters.with_parameter("lower_bound", 1.0)
        assert updated.upper_bound == pytest.approx(1.1)

    def test_valid_change_is_kept(self):
        parameters = self.uniform_family(lower_bound=0.0, upper_bound=1.0).parameters
        updated = parameters.with_parameter("upper_bound", 3.0)

        assert updated.parameters == {"lower_bound": 0.0, "upper_bound": 3.0}

    def test_original_is_untouched(self):
        parameters = self.uniform_family(lower_bound=0.0, upper_bound=1.0).parameters
        parameters.with_parameter("lower_bound", 2.0)
        assert parameters.parameters == {"lower_bound": 0.0, "upper_bound": 1.0}

    def test_repair_is_logged(self, caplog):
        parameters = self.uniform_family(lower_bound=0.0, upper_bound=1.0).parameters

        with caplog.at_level(
            logging.DEBUG, logger="pysatl_distview.families.builtins.continuous.uniform"
        ):
            parameters.with_parameter("lower_bound", 2.0)

        assert "upper_bound" in caplog.text

    def test_mean_width_is_not_repaired(self):
        parameters = self.uniform_family(
            mean=0.0, width=1.0, parametrization_name="meanWidth"
        ).parameters
        with pytest.raises(ParameterDomainError, match="width > 0"):
            parameters.with_parameter("width", -1.0)


class TestUniformCurves(BaseDistributionTest):
    def setup_method(self):
        registry = configure_families_register()
        self.unit_uniform = registry.get(FamilyName.CONTINUOUS_UNIFORM).default_distribution()

    def test_grid_widened_by_one(self):
        curve = self.unit_uniform.curve()

        assert curve.x[0] == -1.0
        assert curve.x[-1] == pytest.approx(2.0)
        assert len(curve) == 301

    def test_density_is_flat_inside(self):
        curve = self.unit_uniform.curve()
        inside = (curve.x > 0.005) & (curve.x < 0.995)
        outside = (curve.x < -0.005) | (curve.x > 1.005)

        np.testing.assert_allclose(curve.y[inside], 1.0)
        np.testing.assert_allclose(curve.y[outside], 0.0)

    def test_density_integrates_to_one(self):
        curve = self.unit_uniform.curve(PlotMode.DENSITY)
        # the jumps at the bounds cost half a step on each side
        assert trapezoid(curve.y, curve.x) == pytest.approx(1.0, abs=2e-2)
        assert trapezoid(curve.x * curve.y, curve.x) == pytest.approx(0.5, abs=1e-2)

    def test_cumulative_curve(self):
        curve = self.unit_uniform.curve(PlotMode.CUMULATIVE)

        self.assert_cumulative_curve(curve)
        assert curve.y[-1] == 1.0

    def test_describe(self):
        info = self.unit_uniform.describe()

        assert info.title == "Uniform Distribution"
        assert info.expectation_tex == "E[X] = (a+b)/2 = 0.50"
        assert info.variance_tex == "Var(X) = (b-a)^2/12 = 0.08"
