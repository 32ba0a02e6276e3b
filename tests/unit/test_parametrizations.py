from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
import math

import pytest

from pysatl_logistic.errors import InvalidParameterError
from pysatl_logistic.logistic import LocScale, MeanStd


class TestLocScale:
    def test_fields_and_name(self) -> None:
        params = LocScale(mu=1.0, theta=2.0)

        assert (params.mu, params.theta) == (1.0, 2.0)
        assert params.name == "locScale"
        assert dataclasses.asdict(params) == {"mu": 1.0, "theta": 2.0}
        assert params.to_loc_scale() is params

    @pytest.mark.parametrize("theta", [0.0, -1.0, -math.inf, math.nan])
    def test_non_positive_scale_raises(self, theta: float) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            LocScale(mu=0.0, theta=theta)

        assert exc_info.value.parametrization == "locScale"
        assert exc_info.value.constraint == "theta > 0"
        assert 'Constraint "theta > 0"' in str(exc_info.value)

    def test_is_frozen(self) -> None:
        params = LocScale(mu=0.0, theta=1.0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            params.theta = -1.0  # type: ignore[misc]


class TestMeanStd:
    def test_converts_to_loc_scale(self) -> None:
        base = MeanStd(mean=-3.0, std=math.pi * 2.0 / math.sqrt(3)).to_loc_scale()

        assert isinstance(base, LocScale)
        assert base.mu == -3.0
        assert base.theta == pytest.approx(2.0, rel=1e-14)

    @pytest.mark.parametrize("std", [0.0, -2.0, math.nan])
    def test_non_positive_std_raises(self, std: float) -> None:
        with pytest.raises(InvalidParameterError, match="std > 0") as exc_info:
            MeanStd(mean=0.0, std=std)

        assert exc_info.value.parametrization == "meanStd"

    def test_helper_methods_are_allowed(self) -> None:
        @dataclasses.dataclass(frozen=True, slots=True)
        class Scaled(MeanStd):
            @staticmethod
            def unit() -> float:
                return 1.0

            @classmethod
            def standard(cls) -> Scaled:
                return cls(mean=0.0, std=cls.unit())

        assert Scaled.standard().to_loc_scale().theta == pytest.approx(math.sqrt(3) / math.pi)
