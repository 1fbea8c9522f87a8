"""
Tests for Chi-squared Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest
from scipy.integrate import trapezoid
from scipy.stats import chi2

from pysatl_distview.distributions.grid import CumulativeRule
from pysatl_distview.errors import ParameterDomainError
from pysatl_distview.families.configuration import configure_families_register
from pysatl_distview.types import CharacteristicName, FamilyName, PlotMode

from ..base import BaseDistributionTest


class TestChiSquaredFamily(BaseDistributionTest):
    """Test suite for Chi-squared distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.chi_squared_family = registry.get(FamilyName.CHI_SQUARED)
        self.chi_squared_dist_example = self.chi_squared_family(df=5.0)

    def test_family_properties(self):
        assert self.chi_squared_family.name == FamilyName.CHI_SQUARED
        assert self.chi_squared_family.parametrization_names == ["standard"]

    @pytest.mark.parametrize("df", [0.0, -3.0])
    def test_parametrization_constraints(self, df):
        with pytest.raises(ParameterDomainError, match="df > 0"):
            self.chi_squared_family(df=df)

    def test_non_integer_degrees_of_freedom(self):
        dist = self.chi_squared_family(df=2.5)
        pdf = dist.query_method(CharacteristicName.PDF)
        assert float(pdf(1.0)) == pytest.approx(chi2.pdf(1.0, 2.5), rel=1e-9)

    def test_moments(self):
        mean_func = self.chi_squared_dist_example.query_method(CharacteristicName.MEAN)
        var_func = self.chi_squared_dist_example.query_method(CharacteristicName.VAR)

        assert abs(mean_func(None) - 5.0) < self.CALCULATION_PRECISION
        assert abs(var_func(None) - 10.0) < self.CALCULATION_PRECISION

    @pytest.mark.parametrize(
        "char_name, scipy_func, precision",
        [
            (CharacteristicName.PDF, chi2.pdf, 1e-9),
            (CharacteristicName.CDF, chi2.cdf, 1e-10),
        ],
    )
    def test_array_input_for_characteristics(self, char_name, scipy_func, precision):
        char_func = self.chi_squared_dist_example.query_method(char_name)

        input_array = np.array([-1.0, 0.0, 0.5, 1.0, 5.0, 10.0, 30.0])
        result_array = char_func(input_array)

        assert result_array.shape == input_array.shape
        self.assert_arrays_almost_equal(result_array, scipy_func(input_array, 5.0), precision)

    def test_support_excludes_origin(self):
        support = self.chi_squared_dist_example.support

        assert 0.0 not in support
        assert 0.01 in support

    def test_large_degrees_of_freedom(self):
        dist = self.chi_squared_family(df=400.0)
        x = np.array([300.0, 400.0, 500.0])

        result = dist.query_method(CharacteristicName.PDF)(x)
        np.testing.assert_allclose(result, chi2.pdf(x, 400.0), rtol=1e-9)


class TestChiSquaredCurves(BaseDistributionTest):
    def setup_method(self):
        registry = configure_families_register()
        self.family = registry.get(FamilyName.CHI_SQUARED)
        self.default = self.family.default_distribution()

    def test_grid(self):
        grid = self.default.sampling_grid

        assert grid.start == 0.01
        assert grid.stop == 60.0
        assert grid.step == 0.1
        assert grid.cumulative_rule is CumulativeRule.RECTANGLE

    def test_grid_widens_with_degrees_of_freedom(self):
        assert self.family(df=30.0).sampling_grid.stop == 90.0

    def test_density_integrates_to_one(self):
        curve = self.default.curve(PlotMode.DENSITY)
        assert trapezoid(curve.y, curve.x) == pytest.approx(1.0, abs=1e-3)
        assert trapezoid(curve.x * curve.y, curve.x) == pytest.approx(5.0, abs=1e-2)

    def test_rectangle_cumulative_curve(self):
        curve = self.default.curve(PlotMode.CUMULATIVE)

        self.assert_cumulative_curve(curve)
        np.testing.assert_allclose(curve.y, chi2.cdf(curve.x, 5.0), atol=3e-2)

    def test_exact_cumulative_curve(self):
        curve = self.default.curve(PlotMode.CUMULATIVE, exact_cumulative=True)

        self.assert_cumulative_curve(curve)
        self.assert_arrays_almost_equal(curve.y, chi2.cdf(curve.x, 5.0))

    def test_rectangle_is_clamped_near_singular_density(self):
        curve = self.family(df=1.0).curve(PlotMode.CUMULATIVE)

        assert curve.y.max() <= 1.0
        assert np.all(np.diff(curve.y) >= 0.0)

    def test_describe(self):
        info = self.default.describe()

        assert info.title == "Chi-squared Distribution"
        assert info.expectation_tex == "E[X] = k = 5"
        assert info.variance_tex == "Var(X) = 2k = 10"
