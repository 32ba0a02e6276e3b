"""
Sampling Strategies
===================

This module defines the pluggable sampling interface and its default
implementation:

- :class:`SamplingStrategy` — draws samples from a distribution.
- :class:`DefaultSamplingUnivariateStrategy` — draws ``(n, 1)`` samples using
  ``ppf`` and i.i.d. uniform variates.

Notes
-----
- Strategies are stateless; the randomness comes from a
  :class:`~pysatl_logistic.distributions.sampling.UniformSource`.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from pysatl_logistic.types import CharacteristicName

from .sampling import ArraySample, UniformSource

if TYPE_CHECKING:
    from .distribution import Distribution

logger = logging.getLogger(__name__)


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return an :class:`ArraySample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> ArraySample: ...


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Default univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to i.i.d.
    uniforms ``U ~ U(0, 1)`` drawn from ``source`` (the configured default
    source when omitted).

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(
        self,
        n: int,
        distr: "Distribution",
        source: UniformSource | None = None,
        **options: Any,
    ) -> ArraySample:
        if n < 0:
            raise ValueError(f"Sample size must be non-negative, got {n}")

        ppf = distr.query_method(CharacteristicName.PPF, **options)
        if source is None:
            from pysatl_logistic.configuration import default_uniform_source

            source = default_uniform_source()

        logger.debug("Drawing %d variates by inverse transform", n)
        U = np.asarray(source.random(n), dtype=np.float64)
        vals = np.asarray(ppf(U), dtype=np.float64).reshape(n, 1)
        return ArraySample(vals)
