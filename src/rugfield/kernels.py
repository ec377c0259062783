"""
Stationary covariance kernels for one-dimensional Gaussian random fields.

Each kernel maps a lag distance ``dx`` to the covariance between two points
separated by ``dx``. All kernels are even in ``dx`` and accept either a float
or a NumPy array of lags.

Available kernels:

- Squared exponential (RBF)
- Matérn
- Locally periodic (periodic × squared exponential)
- Rational quadratic

**Caution**: inside the circulant embedding, lags are normalized by the number
of requested points, so length scales refer to the unit interval (0, 1) and
not to the physical domain.

Reference:
    Rasmussen, C.E. and Williams, C.K.I., 2006. Gaussian Processes for Machine Learning.
    MIT Press. Chapter 4.

License: BSD-3-Clause
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, fields

import numpy as np
from scipy.special import gamma, kv

from .exceptions import InvalidInputError

# Substitute for a zero Bessel argument in the Matérn kernel (K_nu diverges at 0)
MATERN_ZERO_LAG = 1e-6


def squared_exponential(dx: np.ndarray | float, l: float) -> np.ndarray | float:
    """Squared exponential kernel exp(-dx² / (2 l²))."""
    return np.exp(-np.square(dx) / (2.0 * l**2))


def matern(dx: np.ndarray | float, nu: float, rho: float) -> np.ndarray | float:
    """
    Matérn kernel.

        k(dx) = 2^(1-ν) / Γ(ν) · x^ν · K_ν(x),   x = √(2ν) |dx| / ρ

    where K_ν is the modified Bessel function of the second kind.

    Parameters
    ----------
    dx : array_like or float
        Lag distance(s).
    nu : float
        Smoothness parameter (ν > 0).
    rho : float
        Length scale.

    Returns
    -------
    k : array_like or float
        Covariance at the given lag(s).

    Notes
    -----
    At ``dx = 0`` the argument x is replaced by ``MATERN_ZERO_LAG`` instead of
    taking the analytic limit (which is 1). The zero-lag value is therefore
    slightly below 1, e.g. exp(-1e-6) for ν = 0.5.
    """
    x = math.sqrt(2.0 * nu) * np.abs(dx) / rho
    x = np.where(x == 0.0, MATERN_ZERO_LAG, x)
    return 2.0 ** (1.0 - nu) / gamma(nu) * x**nu * kv(nu, x)


def periodic(dx: np.ndarray | float, p: float, l: float) -> np.ndarray | float:
    """Periodic kernel exp(-2 sin²(π |dx| / p) / l²)."""
    return np.exp(-2.0 * np.sin(math.pi * np.abs(dx) / p) ** 2 / l**2)


def rational_quadratic(dx: np.ndarray | float, alpha: float, l: float) -> np.ndarray | float:
    """Rational quadratic kernel (1 + dx² / (2 α l²))^(-α)."""
    return (1.0 + np.square(dx) / (2.0 * alpha * l**2)) ** (-alpha)


class Kernel(ABC):
    """
    Covariance kernel of a stationary Gaussian random field.

    The set of kernels is closed: ``SquaredExponential``, ``Matern``,
    ``LocalPeriodic`` and ``RationalQuadratic``. Instances are immutable and
    callable; ``kernel(dx)`` is the same as ``kernel.eval(dx)``.
    """

    @abstractmethod
    def _eval(self, dx: np.ndarray) -> np.ndarray:
        ...

    def eval(self, dx: np.ndarray | float) -> np.ndarray | float:
        """
        Evaluate the covariance at lag ``dx``.

        Parameters
        ----------
        dx : array_like or float
            Lag distance(s). Negative lags are allowed.

        Returns
        -------
        k : ndarray or float
            A float for scalar input, otherwise an array with the shape of ``dx``.
        """
        dx = np.asarray(dx, dtype=float)
        k = self._eval(dx)
        if k.ndim == 0:
            return float(k)
        return k

    __call__ = eval

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
                raise InvalidInputError(
                    f"{type(self).__name__}.{f.name} must be a real number, "
                    f"got {type(value).__name__}"
                )
            if not (np.isfinite(value) and value > 0):
                raise InvalidInputError(
                    f"{type(self).__name__}.{f.name} must be finite and > 0, got {value}"
                )


@dataclass(frozen=True)
class SquaredExponential(Kernel):
    """
    Squared exponential kernel.

    Parameters
    ----------
    length_scale : float
        Length scale, relative to the unit interval.
    """

    length_scale: float

    def _eval(self, dx):
        return squared_exponential(dx, self.length_scale)


@dataclass(frozen=True)
class Matern(Kernel):
    """
    Matérn kernel.

    Parameters
    ----------
    nu : float
        Smoothness parameter. Common values: 0.5 (exponential), 1.5, 2.5.
    rho : float
        Length scale, relative to the unit interval.
    """

    nu: float
    rho: float

    def _eval(self, dx):
        return matern(dx, self.nu, self.rho)


@dataclass(frozen=True)
class LocalPeriodic(Kernel):
    """
    Locally periodic kernel: a periodic kernel under a squared exponential envelope.

    Parameters
    ----------
    period : float
        Period of the periodic factor.
    length_scale : float
        Length scale, shared by both factors.
    """

    period: float
    length_scale: float

    def _eval(self, dx):
        return periodic(dx, self.period, self.length_scale) * squared_exponential(
            dx, self.length_scale
        )


@dataclass(frozen=True)
class RationalQuadratic(Kernel):
    """
    Rational quadratic kernel.

    Parameters
    ----------
    alpha : float
        Scale mixture parameter. As α → ∞, approaches the squared exponential.
    length_scale : float
        Length scale.
    """

    alpha: float
    length_scale: float

    def _eval(self, dx):
        return rational_quadratic(dx, self.alpha, self.length_scale)
