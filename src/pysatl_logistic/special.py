"""
Numerically Stable Primitives
=============================

Scalar/array transcendental helpers used by the Logistic distribution:

- :func:`log1pexp`: ``log(1 + exp(x))``;
- :func:`logexpm1`: ``log(exp(x) - 1)``;
- :func:`logistic`: ``1 / (1 + exp(-x))``;
- :func:`logit`: ``log(p / (1 - p))``.

Notes
-----
- All functions are numpy ufunc compositions: scalars map to numpy scalars,
  arrays map to arrays of the same shape, and the floating dtype of the
  input is preserved.
- Out-of-domain inputs produce IEEE-754 special values, never exceptions:
  ``logit(0) = -inf``, ``logit(1) = inf``, ``logit(p) = nan`` for
  ``p`` outside ``[0, 1]`` and ``logexpm1(x) = nan`` for ``x < 0``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import numpy as np
from scipy.special import expit
from scipy.special import logit as _logit


def log1pexp(x: Any) -> Any:
    """
    Compute ``log(1 + exp(x))`` without overflow.

    Parameters
    ----------
    x : Number or NumericArray
        Argument(s).

    Returns
    -------
    Number or NumericArray
        ``log(1 + exp(x))``. For large positive ``x`` the result tends to
        ``x``; for large negative ``x`` it tends to ``exp(x)``.
    """
    return np.logaddexp(0, x)


def logexpm1(x: Any) -> Any:
    """
    Compute ``log(exp(x) - 1)`` for ``x > 0`` without overflow.

    Evaluated as ``x + log(-expm1(-x))``, which never forms ``exp(x)``.

    Parameters
    ----------
    x : Number or NumericArray
        Positive argument(s).

    Returns
    -------
    Number or NumericArray
        ``log(exp(x) - 1)``; ``-inf`` at ``x = 0`` and ``nan`` for ``x < 0``.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return x + np.log(-np.expm1(-x))


def logistic(x: Any) -> Any:
    """Standard logistic sigmoid ``1 / (1 + exp(-x))``."""
    return expit(x)


def logit(p: Any) -> Any:
    """
    Log-odds ``log(p / (1 - p))``, the inverse of :func:`logistic`.

    Returns ``-inf`` at ``p = 0``, ``inf`` at ``p = 1`` and ``nan`` outside
    ``[0, 1]``.
    """
    return _logit(p)


__all__ = ["log1pexp", "logexpm1", "logistic", "logit"]
