"""
Distributions subpackage

Interfaces and default implementations for probability distributions used by
PySATL Logistic:

- named analytical computations (:mod:`.computation`);
- distribution protocol (:mod:`.distribution`);
- array-backed samples and uniform sources (:mod:`.sampling`);
- pluggable sampling strategies (:mod:`.strategies`);
- the real-line support (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation
from .distribution import Distribution
from .sampling import ArraySample, NumpyUniformSource, UniformSource
from .strategies import DefaultSamplingUnivariateStrategy, SamplingStrategy
from .support import RealLineSupport, Support

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    # distribution
    "Distribution",
    # sampling
    "ArraySample",
    "UniformSource",
    "NumpyUniformSource",
    # strategies
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    # support
    "Support",
    "RealLineSupport",
]
