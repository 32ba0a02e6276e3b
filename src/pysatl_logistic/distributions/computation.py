"""
Analytical Computations
=======================

A distribution publishes each closed-form characteristic as an
:class:`AnalyticalComputation`: the callable together with the
:class:`~pysatl_logistic.types.CharacteristicName` it evaluates, so that
strategies can look characteristics up by name.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mypy_extensions import KwArg

from pysatl_logistic.types import GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """
    Closed-form characteristic bound to its name.

    Parameters
    ----------
    target : str
        Characteristic the callable evaluates, e.g. ``"logpdf"``.
    func : Callable[[In, KwArg(Any)], Out]
        Vectorised callable. Keyword options select a variant of the
        characteristic, such as ``excess=False`` for raw kurtosis.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)
