"""
Logistic distribution implementation.

Contains the Logistic distribution with location-scale and mean-std
parameterizations.

The logistic distribution with location μ and scale θ > 0 has probability
density function

    f(x; μ, θ) = 1/(4θ) * sech²((x - μ) / (2θ))

and cumulative distribution function

    F(x; μ, θ) = 1 / (1 + exp(-(x - μ) / θ)).

Every characteristic is evaluated on the standardized variable
``z = (x - μ) / θ`` and mapped back through ``x = μ + z·θ``. Densities and
probabilities are also available in log-space, evaluated with overflow-free
primitives from :mod:`pysatl_logistic.special`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from dataclasses import KW_ONLY, InitVar, dataclass
from typing import TYPE_CHECKING, ClassVar, cast

import numpy as np

from pysatl_logistic.distributions.computation import AnalyticalComputation
from pysatl_logistic.distributions.distribution import Distribution
from pysatl_logistic.distributions.strategies import DefaultSamplingUnivariateStrategy
from pysatl_logistic.distributions.support import RealLineSupport
from pysatl_logistic.errors import InvalidParameterError
from pysatl_logistic.special import log1pexp, logexpm1, logistic, logit
from pysatl_logistic.types import (
    CharacteristicName,
    FamilyName,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from typing import Any

    from numpy.typing import DTypeLike

    from pysatl_logistic.distributions.sampling import ArraySample, UniformSource
    from pysatl_logistic.distributions.strategies import SamplingStrategy
    from pysatl_logistic.types import (
        ComplexArray,
        DistributionType,
        GenericCharacteristicName,
        NumericArray,
    )

logger = logging.getLogger(__name__)

_SQRT3 = math.sqrt(3)


@dataclass(frozen=True, slots=True)
class LocScale:
    """
    Standard parametrization of logistic distribution.

    Parameters
    ----------
    mu : float
        Location of the distribution
    theta : float
        Scale of the distribution, must be positive

    Raises
    ------
    InvalidParameterError
        If ``theta > 0`` does not hold, NaN included.
    """

    name: ClassVar[str] = "locScale"

    mu: Any
    theta: Any

    def __post_init__(self) -> None:
        if not self.theta > 0:
            raise InvalidParameterError(self.name, "theta > 0")

    def to_loc_scale(self) -> LocScale:
        return self


@dataclass(frozen=True, slots=True)
class MeanStd:
    """
    Mean-standard deviation parametrization of logistic distribution.

    Parameters
    ----------
    mean : float
        Mean of the distribution
    std : float
        Standard deviation of the distribution, std = π·θ/√3

    Raises
    ------
    InvalidParameterError
        If ``std > 0`` does not hold, NaN included.
    """

    name: ClassVar[str] = "meanStd"

    mean: Any
    std: Any

    def __post_init__(self) -> None:
        if not self.std > 0:
            raise InvalidParameterError(self.name, "std > 0")

    def to_loc_scale(self) -> LocScale:
        """Equivalent ``locScale`` parameters, ``theta = std·√3/π``."""
        return LocScale(self.mean, self.std * _SQRT3 / math.pi)


type Parametrization = LocScale | MeanStd


def _resolve_partype(mu: Any, theta: Any, dtype: DTypeLike | None) -> np.dtype[Any]:
    """
    Pick the floating dtype both parameters are stored in.

    Raises
    ------
    TypeError
        If the resulting dtype is not a real floating type.
    """
    if dtype is not None:
        partype = np.dtype(dtype)
    else:
        partype = np.result_type(mu, theta)
        # whole numbers are stored as double precision
        if partype.kind in "biu":
            partype = np.dtype(np.float64)

    if partype.kind != "f":
        raise TypeError(f"Logistic parameters must be real floating numbers, got dtype {partype}")
    return partype


@dataclass(frozen=True, slots=True, repr=False)
class Logistic(Distribution):
    """
    Logistic distribution.

    Parameters
    ----------
    mu : float, default=0.0
        Location of the distribution (mean, median and mode).
    theta : float, default=1.0
        Scale of the distribution, must be positive.
    dtype : numpy dtype, optional
        Floating representation of both parameters. When omitted, ``mu``
        and ``theta`` are promoted to their common type and integers are
        promoted to ``float64``.

    Raises
    ------
    InvalidParameterError
        If ``theta > 0`` does not hold (zero, negative or NaN scale).
    TypeError
        If the parameters cannot be represented as real floating numbers.

    Examples
    --------
    >>> Logistic()            # location 0, scale 1
    Logistic(mu=0.0, theta=1.0)
    >>> Logistic(2.0)         # location 2, scale 1
    Logistic(mu=2.0, theta=1.0)
    >>> Logistic(2, 3).params
    (np.float64(2.0), np.float64(3.0))
    """

    mu: Any = 0.0
    theta: Any = 1.0
    _: KW_ONLY
    dtype: InitVar[DTypeLike | None] = None

    def __post_init__(self, dtype: DTypeLike | None) -> None:
        partype = _resolve_partype(self.mu, self.theta, dtype)
        object.__setattr__(self, "mu", partype.type(self.mu))
        object.__setattr__(self, "theta", partype.type(self.theta))
        # raises InvalidParameterError unless theta > 0
        LocScale(self.mu, self.theta)
        logger.debug("Constructed %r with dtype %s", self, partype)

    def __repr__(self) -> str:
        return f"Logistic(mu={self.mu}, theta={self.theta})"

    @classmethod
    def from_parametrization(cls, parameters: Parametrization) -> Logistic:
        """
        Create a distribution from any logistic parametrization.

        Parameters
        ----------
        parameters : Parametrization
            ``LocScale`` or ``MeanStd`` parameters.

        Returns
        -------
        Logistic
            Distribution with the equivalent location and scale.

        Raises
        ------
        TypeError
            If ``parameters`` is neither ``LocScale`` nor ``MeanStd``.
        """
        if not isinstance(parameters, LocScale | MeanStd):
            raise TypeError(f"{type(parameters).__name__} is not a logistic parametrization")
        base = parameters.to_loc_scale()
        return cls(base.mu, base.theta)

    def convert_to(self, dtype: DTypeLike) -> Logistic:
        """
        Re-express this distribution with parameters of another floating type.

        Raises
        ------
        TypeError
            If ``dtype`` is not a real floating type.
        """
        logger.debug("Converting %r to dtype %s", self, dtype)
        return Logistic(self.mu, self.theta, dtype=dtype)

    # Parameters

    @property
    def location(self) -> Any:
        """Location parameter μ."""
        return self.mu

    @property
    def scale(self) -> Any:
        """Scale parameter θ."""
        return self.theta

    @property
    def params(self) -> tuple[Any, Any]:
        """Parameters as ``(mu, theta)``."""
        return self.mu, self.theta

    @property
    def partype(self) -> np.dtype[Any]:
        """Floating dtype the parameters are stored in."""
        return cast("np.dtype[Any]", self.mu.dtype)

    @property
    def parametrization(self) -> LocScale:
        """Parameters in the base ``locScale`` parametrization."""
        return LocScale(self.mu, self.theta)

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameters as a dictionary."""
        return {"mu": self.mu, "theta": self.theta}

    # Distribution protocol

    @property
    def family_name(self) -> str:
        return FamilyName.LOGISTIC

    @property
    def distribution_type(self) -> DistributionType:
        return UnivariateContinuous

    @property
    def support(self) -> RealLineSupport:
        """The whole real line."""
        return RealLineSupport()

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return DefaultSamplingUnivariateStrategy()

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        """
        Analytical computations keyed by characteristic name.

        Statistics ignore their data argument, e.g.
        ``distr.query_method(CharacteristicName.MEAN)(None)``.
        """

        def _statistic(method: Callable[..., Any]) -> Callable[..., Any]:
            return lambda _=None, **options: method(**options)

        evaluations: dict[GenericCharacteristicName, Callable[..., Any]] = {
            CharacteristicName.PDF: self.pdf,
            CharacteristicName.LOGPDF: self.logpdf,
            CharacteristicName.GRAD_LOGPDF: self.gradlogpdf,
            CharacteristicName.CDF: self.cdf,
            CharacteristicName.SF: self.ccdf,
            CharacteristicName.LOGCDF: self.logcdf,
            CharacteristicName.LOGSF: self.logccdf,
            CharacteristicName.PPF: self.quantile,
            CharacteristicName.ISF: self.cquantile,
            CharacteristicName.INVLOGCDF: self.invlogcdf,
            CharacteristicName.INVLOGSF: self.invlogccdf,
            CharacteristicName.MGF: self.mgf,
            CharacteristicName.CF: self.cf,
            CharacteristicName.MEAN: _statistic(self.mean),
            CharacteristicName.MEDIAN: _statistic(self.median),
            CharacteristicName.MODE: _statistic(self.mode),
            CharacteristicName.STD: _statistic(self.std),
            CharacteristicName.VAR: _statistic(self.var),
            CharacteristicName.SKEW: _statistic(self.skewness),
            CharacteristicName.KURT: _statistic(self.kurtosis),
            CharacteristicName.ENTROPY: _statistic(self.entropy),
        }
        return {
            name: AnalyticalComputation(target=name, func=func)
            for name, func in evaluations.items()
        }

    # Statistics

    def mean(self) -> Any:
        return self.mu

    def median(self) -> Any:
        return self.mu

    def mode(self) -> Any:
        return self.mu

    def std(self) -> Any:
        return np.pi * self.theta / _SQRT3

    def var(self) -> Any:
        return (np.pi * self.theta) ** 2 / 3

    def skewness(self) -> Any:
        """Skewness of logistic distribution (always 0)."""
        return self.partype.type(0)

    def kurtosis(self, excess: bool = True) -> Any:
        """Excess or raw kurtosis of logistic distribution.

        Parameters
        ----------
        excess : bool
            A value defines if there will be excess (6/5) or raw (21/5)
            kurtosis, default is True
        """
        T = self.partype.type
        kurt = T(6) / T(5)
        return kurt if excess else kurt + 3

    def entropy(self) -> Any:
        """Differential entropy in nats, ``ln θ + 2``."""
        return np.log(self.theta) + 2

    # Evaluation

    def _zval(self, x: Any) -> Any:
        return (x - self.mu) / self.theta

    def _xval(self, z: Any) -> Any:
        return self.mu + z * self.theta

    def pdf(self, x: NumericArray) -> NumericArray:
        """
        Probability density function for logistic distribution.

        Parameters
        ----------
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x
        """
        # the density is symmetric in z, so exp(-|z|) never overflows
        e = np.exp(-np.abs(self._zval(x)))
        return cast("NumericArray", e / (self.theta * (1 + e) ** 2))

    def logpdf(self, x: NumericArray) -> NumericArray:
        """
        Logarithm of the probability density function.

        Finite for every finite ``x``, far beyond the point where
        ``pdf`` underflows to zero.
        """
        u = -np.abs(self._zval(x))
        return cast("NumericArray", u - 2 * log1pexp(u) - np.log(self.theta))

    def gradlogpdf(self, x: NumericArray) -> NumericArray:
        """
        Derivative of ``logpdf`` with respect to ``x``.

        Positive left of μ, negative right of μ and zero at μ.
        """
        # ((2e)/(1+e) - 1)/θ with e = exp(-z) equals -tanh(z/2)/θ
        return cast("NumericArray", -np.tanh(self._zval(x) / 2) / self.theta)

    def cdf(self, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for logistic distribution.

        Parameters
        ----------
        x : NumericArray
            Points at which to evaluate the cumulative distribution function

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x) for each point x
        """
        return cast("NumericArray", logistic(self._zval(x)))

    def ccdf(self, x: NumericArray) -> NumericArray:
        """Complementary CDF, P(X > x), evaluated directly to keep tail precision."""
        return cast("NumericArray", logistic(-self._zval(x)))

    def logcdf(self, x: NumericArray) -> NumericArray:
        return cast("NumericArray", -log1pexp(-self._zval(x)))

    def logccdf(self, x: NumericArray) -> NumericArray:
        return cast("NumericArray", -log1pexp(self._zval(x)))

    def quantile(self, p: NumericArray) -> NumericArray:
        """
        Percent point function (inverse CDF) for logistic distribution.

        Parameters
        ----------
        p : NumericArray
            Probability from [0, 1]

        Returns
        -------
        NumericArray
            Quantiles corresponding to probabilities p
            If p[i] is 0 or 1, then the result[i] is -inf and inf correspondingly,
            if p[i] is outside [0, 1] the result[i] is nan
        """
        return cast("NumericArray", self._xval(logit(p)))

    def cquantile(self, p: NumericArray) -> NumericArray:
        """Inverse of ``ccdf``: the point exceeded with probability ``p``."""
        return cast("NumericArray", self._xval(-logit(p)))

    def invlogcdf(self, lp: NumericArray) -> NumericArray:
        """
        Inverse of ``logcdf``.

        Parameters
        ----------
        lp : NumericArray
            Log-probabilities, ``lp <= 0``

        Returns
        -------
        NumericArray
            Points x with ``logcdf(x) == lp``
        """
        return cast("NumericArray", self._xval(-logexpm1(-lp)))

    def invlogccdf(self, lp: NumericArray) -> NumericArray:
        """Inverse of ``logccdf``."""
        return cast("NumericArray", self._xval(logexpm1(-lp)))

    sf = ccdf
    logsf = logccdf
    ppf = quantile
    isf = cquantile
    invlogsf = invlogccdf

    # Transforms

    def mgf(self, t: NumericArray) -> NumericArray:
        """
        Moment generating function, ``exp(tμ) / sinc(θt)``.

        Defined for ``|t| < 1/θ``; at multiples of ``1/θ`` the result
        is not finite.
        """
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return cast("NumericArray", np.exp(t * self.mu) / np.sinc(self.theta * t))

    def cf(self, t: NumericArray) -> ComplexArray:
        """
        Characteristic function of logistic distribution.

        Parameters
        ----------
        t : NumericArray
            Points at which to evaluate the characteristic function

        Returns
        -------
        ComplexArray
            Characteristic function values at points t
        """
        a = np.pi * t * self.theta
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            ratio = np.where(a == 0, 1, a / np.sinh(a))
        return cast("ComplexArray", (np.exp(1j * t * self.mu) * ratio)[()])

    # Sampling

    def rand(self, source: UniformSource | None = None) -> Any:
        """
        Draw one variate by inverse transform sampling.

        Parameters
        ----------
        source : UniformSource, optional
            Source of ``U(0, 1)`` variates; the configured default source
            when omitted.

        Returns
        -------
        float
            ``quantile(u)`` for a single uniform ``u``.
        """
        if source is None:
            from pysatl_logistic.configuration import default_uniform_source

            source = default_uniform_source()
        return self.quantile(source.random())

    def sample(
        self, n: int, source: UniformSource | None = None, **options: Any
    ) -> ArraySample:
        """
        Generate ``n`` samples from this distribution.

        Returns
        -------
        ArraySample
            Samples of shape ``(n, 1)``.
        """
        return self.sampling_strategy.sample(n, distr=self, source=source, **options)


def location(distr: Logistic) -> Any:
    """Location parameter μ of ``distr``."""
    return distr.location


def scale(distr: Logistic) -> Any:
    """Scale parameter θ of ``distr``."""
    return distr.scale


def params(distr: Logistic) -> tuple[Any, Any]:
    """Parameters of ``distr`` as ``(mu, theta)``."""
    return distr.params


__all__ = ["Logistic", "LocScale", "MeanStd", "Parametrization", "location", "params", "scale"]
