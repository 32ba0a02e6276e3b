"""
Samples and Uniform Sources
===========================

Inverse transform sampling turns ``U(0, 1)`` variates into draws of a
distribution. This module holds both ends of that pipeline: the sources
the variates come from and the container the draws end up in.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, overload, runtime_checkable

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator

    import numpy.typing as npt


@dataclass(frozen=True, slots=True, eq=False)
class ArraySample:
    """
    Draws stored row-wise in an ``(n, d)`` array.

    Univariate distributions produce ``d == 1``.

    Raises
    ------
    ValueError
        If ``array`` is not two-dimensional.
    """

    array: npt.NDArray[np.float64]

    def __post_init__(self) -> None:
        if self.array.ndim != 2:
            raise ValueError(f"Sample array must have shape (n, d), got {self.array.shape}")

    def __len__(self) -> int:
        return int(self.array.shape[0])

    def __iter__(self) -> Iterator[npt.NDArray[np.float64]]:
        return iter(self.array)

    @property
    def shape(self) -> tuple[int, int]:
        n, d = self.array.shape
        return int(n), int(d)

    @property
    def dimension(self) -> int:
        return int(self.array.shape[1])


@runtime_checkable
class UniformSource(Protocol):
    """
    Anything that yields ``U(0, 1)`` variates through ``random(size)``.

    ``numpy.random.Generator`` satisfies it directly.
    """

    @overload
    def random(self, size: None = None) -> float: ...
    @overload
    def random(self, size: int) -> npt.NDArray[np.float64]: ...


class NumpyUniformSource:
    """
    Uniform source backed by :func:`numpy.random.default_rng`.

    Parameters
    ----------
    seed : int or None, optional
        Seed for the underlying generator. ``None`` draws fresh entropy.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    @overload
    def random(self, size: None = None) -> float: ...
    @overload
    def random(self, size: int) -> npt.NDArray[np.float64]: ...

    def random(self, size: int | None = None) -> float | npt.NDArray[np.float64]:
        """Draw one variate (``size=None``) or an array of ``size`` variates in ``[0, 1)``."""
        if size is None:
            return float(self._rng.random())
        return self._rng.random(size)
