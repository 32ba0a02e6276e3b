from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np

from pysatl_logistic.configuration import (
    default_uniform_source,
    reset_default_uniform_source,
    seed_default_uniform_source,
)
from pysatl_logistic.distributions import NumpyUniformSource


class TestDefaultUniformSource:
    def test_source_is_cached(self) -> None:
        source = default_uniform_source()

        assert isinstance(source, NumpyUniformSource)
        assert default_uniform_source() is source

    def test_seeding_replaces_source(self) -> None:
        before = default_uniform_source()
        seeded = seed_default_uniform_source(123)

        assert seeded is not before
        assert seeded.seed == 123
        assert default_uniform_source() is seeded

    def test_seeding_is_reproducible(self) -> None:
        first = seed_default_uniform_source(7).random(5)
        second = seed_default_uniform_source(7).random(5)

        np.testing.assert_array_equal(first, second)

    def test_reset_forgets_seed(self) -> None:
        seeded = seed_default_uniform_source(11)
        reset_default_uniform_source()
        fresh = default_uniform_source()

        assert fresh is not seeded
        assert fresh.seed is None
