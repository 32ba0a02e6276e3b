"""
Supports
========

A support answers whether a point can be drawn from a distribution.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import inf
from typing import TYPE_CHECKING, ClassVar, Protocol, overload, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from pysatl_logistic.types import BoolArray, Number, NumericArray


@runtime_checkable
class Support(Protocol):
    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...


@dataclass(frozen=True, slots=True)
class RealLineSupport:
    """
    The open real line ``(-inf, inf)``.

    Infinities are limits of the line, not points of it, so they are not
    contained; neither is NaN.
    """

    left: ClassVar[float] = -inf
    right: ClassVar[float] = inf

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """Element-wise membership; a scalar input gives a plain ``bool``."""
        result = np.isfinite(np.asarray(x))
        if np.ndim(result) == 0:
            return bool(result)
        return result

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(x))  # type: ignore[call-overload]
