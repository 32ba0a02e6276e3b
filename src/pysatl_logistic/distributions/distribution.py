"""
Distribution Interface
======================

This module defines the public :class:`Distribution` protocol: the capability
set every distribution exposes to strategies and users.

Notes
-----
- Characteristics are resolved from ``analytical_computations`` by name.
- Log-likelihood is computed element-wise from ``logpdf`` when available,
  otherwise from ``log(pdf)``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol, runtime_checkable

import numpy as np

from pysatl_logistic.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from pysatl_logistic.distributions.computation import AnalyticalComputation
    from pysatl_logistic.distributions.sampling import ArraySample
    from pysatl_logistic.distributions.strategies import SamplingStrategy
    from pysatl_logistic.distributions.support import Support
    from pysatl_logistic.types import (
        DistributionType,
        GenericCharacteristicName,
    )


@runtime_checkable
class Distribution(Protocol):
    """Public distribution interface used by strategies."""

    @property
    def distribution_type(self) -> DistributionType: ...

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]: ...

    @property
    def sampling_strategy(self) -> SamplingStrategy: ...

    @property
    def support(self) -> Support | None: ...

    def query_method(
        self, characteristic_name: GenericCharacteristicName, **options: Any
    ) -> AnalyticalComputation[Any, Any]:
        """
        Resolve the computation for ``characteristic_name``.

        Raises
        ------
        KeyError
            If the distribution provides no such characteristic.
        """
        computations = self.analytical_computations
        if characteristic_name not in computations:
            raise KeyError(
                f"Characteristic '{characteristic_name}' is not provided by "
                f"{type(self).__name__}; available: {sorted(computations)}"
            )
        return computations[characteristic_name]

    def calculate_characteristic(
        self, characteristic_name: GenericCharacteristicName, value: Any, **options: Any
    ) -> Any:
        return self.query_method(characteristic_name)(value, **options)

    def sample(self, n: int, **options: Any) -> ArraySample:
        return self.sampling_strategy.sample(n, distr=self, **options)

    def log_likelihood(self, sample: ArraySample) -> float:
        """
        Log-likelihood of a univariate sample.

        Parameters
        ----------
        sample : ArraySample
            Sample of shape ``(n, 1)``.

        Returns
        -------
        float
            Sum of the log-densities; ``-inf`` if any point has zero density.
        """
        points = sample.array[:, 0]
        if CharacteristicName.LOGPDF in self.analytical_computations:
            values = self.query_method(CharacteristicName.LOGPDF)(points)
        else:
            with np.errstate(divide="ignore"):
                values = np.log(self.query_method(CharacteristicName.PDF)(points))
        return float(np.sum(values))
