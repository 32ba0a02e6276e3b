"""
Sampling Configuration
======================

Process-wide default source of uniform variates used when sampling without
an explicit ``source``.

Notes
-----
- The default source is created lazily and cached.
- Seed it with :func:`seed_default_uniform_source` for reproducible draws.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from functools import lru_cache

from pysatl_logistic.distributions.sampling import NumpyUniformSource

logger = logging.getLogger(__name__)

_seed: int | None = None


@lru_cache(maxsize=1)
def default_uniform_source() -> NumpyUniformSource:
    """
    Get the default uniform source.

    Returns
    -------
    NumpyUniformSource
        Cached source, seeded with the last value passed to
        :func:`seed_default_uniform_source` (unseeded otherwise).
    """
    logger.debug("Creating default uniform source (seed=%s)", _seed)
    return NumpyUniformSource(_seed)


def seed_default_uniform_source(seed: int | None) -> NumpyUniformSource:
    """
    Replace the default uniform source with a freshly seeded one.

    Parameters
    ----------
    seed : int or None
        Seed for the new source.

    Returns
    -------
    NumpyUniformSource
        The new default source.
    """
    global _seed
    _seed = seed
    default_uniform_source.cache_clear()
    return default_uniform_source()


def reset_default_uniform_source() -> None:
    """
    Reset the cached default source and forget any seed.
    """
    global _seed
    _seed = None
    logger.debug("Resetting default uniform source")
    default_uniform_source.cache_clear()


__all__ = [
    "default_uniform_source",
    "seed_default_uniform_source",
    "reset_default_uniform_source",
]
