"""
Core Type Definitions
=====================

Names and aliases shared by the distribution interfaces and the Logistic
distribution.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True, slots=True)
class DistributionType:
    """
    Kind and dimension of the space a distribution is defined on.

    Parameters
    ----------
    kind : str
        ``"continuous"`` for distributions with a density.
    dimension : int
        Number of coordinates of one draw.
    """

    kind: str
    dimension: int


UnivariateContinuous = DistributionType(kind="continuous", dimension=1)
"""Type for univariate continuous distributions."""

Number = np.floating[Any] | np.integer[Any] | int | float
NumericArray = NDArray[np.floating[Any]]
ComplexArray = NDArray[np.complexfloating[Any]]
BoolArray = NDArray[np.bool_]

type GenericCharacteristicName = str
"""Characteristic names are plain strings; see :class:`CharacteristicName`."""


class CharacteristicName(StrEnum):
    """
    Names under which a distribution exposes its analytical computations.

    ``SF``, ``LOGSF``, ``ISF`` and ``INVLOGSF`` are the survival-side
    counterparts (``ccdf``, ``logccdf``, ``cquantile``, ``invlogccdf``).
    """

    PDF = "pdf"
    LOGPDF = "logpdf"
    GRAD_LOGPDF = "gradlogpdf"
    CDF = "cdf"
    SF = "sf"
    LOGCDF = "logcdf"
    LOGSF = "logsf"
    PPF = "ppf"
    ISF = "isf"
    INVLOGCDF = "invlogcdf"
    INVLOGSF = "invlogsf"
    CF = "cf"
    MGF = "mgf"
    MEAN = "mean"
    MEDIAN = "median"
    MODE = "mode"
    STD = "std"
    VAR = "var"
    SKEW = "skewness"
    KURT = "kurtosis"
    ENTROPY = "entropy"


class FamilyName(StrEnum):
    LOGISTIC = "Logistic"


__all__ = [
    "BoolArray",
    "CharacteristicName",
    "ComplexArray",
    "DistributionType",
    "FamilyName",
    "GenericCharacteristicName",
    "Number",
    "NumericArray",
    "UnivariateContinuous",
]
