from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf, nan

import numpy as np
import pytest

from pysatl_distview.distributions.curve import Curve
from pysatl_distview.errors import ComputationError
from pysatl_distview.types import PlotMode


class TestCurve:
    def setup_method(self):
        self.curve = Curve([0.0, 0.5, 1.0], [0.1, 0.2, 0.3], PlotMode.DENSITY)

    def test_sequence_protocol(self):
        assert len(self.curve) == 3
        assert list(self.curve) == [(0.0, 0.1), (0.5, 0.2), (1.0, 0.3)]
        assert self.curve.points == list(self.curve)

    def test_arrays_are_read_only(self):
        with pytest.raises(ValueError):
            self.curve.y[0] = 1.0
        with pytest.raises(ValueError):
            self.curve.x[0] = 1.0

    def test_input_is_copied(self):
        y = np.array([0.1, 0.2, 0.3])
        curve = Curve([0.0, 1.0, 2.0], y, PlotMode.CUMULATIVE)
        y[0] = 5.0
        assert curve.y[0] == 0.1

    def test_nearest(self):
        assert self.curve.nearest(0.4) == (0.5, 0.2)
        assert self.curve.nearest(-3.0) == (0.0, 0.1)

    def test_repr(self):
        assert "points=3" in repr(self.curve)

    def test_mode(self):
        assert self.curve.mode is PlotMode.DENSITY

    @pytest.mark.parametrize(
        "x, y",
        [
            ([], []),
            ([0.0, 1.0], [0.1]),
            ([0.0, 0.0], [0.1, 0.2]),
            ([1.0, 0.0], [0.1, 0.2]),
        ],
        ids=["empty", "length-mismatch", "repeated-x", "decreasing-x"],
    )
    def test_invalid_shape(self, x, y):
        with pytest.raises(ValueError):
            Curve(x, y, PlotMode.DENSITY)

    @pytest.mark.parametrize("bad", [inf, -inf, nan])
    def test_non_finite_y(self, bad):
        with pytest.raises(ComputationError, match="Non-finite"):
            Curve([0.0, 1.0, 2.0], [0.1, bad, 0.3], PlotMode.DENSITY)
