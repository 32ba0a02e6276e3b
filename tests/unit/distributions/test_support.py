from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from math import inf, nan

import numpy as np
import pytest

from pysatl_logistic.distributions.support import RealLineSupport, Support


class TestRealLineSupport:
    support = RealLineSupport()

    @pytest.mark.parametrize("point", [0, -1, 2.5, -1e308, 1e308, 5e-324, np.float32(3.0)])
    def test_finite_points_are_contained(self, point):
        assert point in self.support
        assert self.support.contains(point) is True

    @pytest.mark.parametrize("point", [-inf, inf, nan], ids=["-inf", "+inf", "nan"])
    def test_non_finite_points_are_not_contained(self, point):
        # infinity is a limit of the line, not a point of it
        assert point not in self.support
        assert self.support.contains(point) is False

    def test_contains_array(self):
        points = np.array([-inf, -1.0, 0.0, 1e300, inf, nan])
        result = self.support.contains(points)

        assert isinstance(result, np.ndarray)
        assert result.tolist() == [False, True, True, True, False, False]

    def test_contains_empty_array(self):
        result = self.support.contains(np.array([]))
        assert result.shape == (0,)

    def test_bounds(self):
        assert self.support.left == -inf
        assert self.support.right == inf

    def test_satisfies_support_protocol(self):
        assert isinstance(self.support, Support)

    def test_supports_are_equal(self):
        assert RealLineSupport() == RealLineSupport()
