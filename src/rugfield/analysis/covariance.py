"""
Empirical covariance of sampled random fields.

Tools to compare realizations produced by the sampler with the covariance
kernel they were drawn from: ensemble variance and lag covariance over many
realizations, and the FFT-based autocorrelation of a single realization.

License: BSD-3-Clause
"""

import numpy as np
from numpy.fft import fft, ifft

from ..exceptions import InvalidInputError
from ..kernels import Kernel


def _as_samples(samples: np.ndarray) -> np.ndarray:
    samples = np.asarray(samples, dtype=float)
    if samples.ndim != 2:
        raise InvalidInputError(
            f"Expected 2D array of shape (n_samples, n), got shape {samples.shape}"
        )
    if samples.shape[0] < 2:
        raise InvalidInputError("At least two realizations are required")
    return samples


def empirical_variance(samples: np.ndarray) -> np.ndarray:
    """
    Variance at each grid point over an ensemble of realizations.

    Parameters
    ----------
    samples : ndarray
        Realizations stacked row-wise, shape (n_samples, n).

    Returns
    -------
    var : ndarray
        Unbiased variance estimate, shape (n,).
    """
    samples = _as_samples(samples)
    return np.var(samples, axis=0, ddof=1)


def empirical_covariance(samples: np.ndarray, max_lag: int) -> np.ndarray:
    """
    Ensemble covariance as a function of the lag in grid points.

    For each lag h, the covariance between points i and i + h is estimated
    over the realizations and averaged over all i (stationarity).

    Parameters
    ----------
    samples : ndarray
        Realizations stacked row-wise, shape (n_samples, n).
    max_lag : int
        Largest lag (0 ≤ max_lag < n).

    Returns
    -------
    cov : ndarray
        Covariance at lags 0, 1, ..., max_lag.

    Examples
    --------
    >>> import numpy as np
    >>> from rugfield import SquaredExponential, sample_field, empirical_covariance
    >>> rng = np.random.default_rng(0)
    >>> samples = np.array([sample_field(64, SquaredExponential(0.1), rng=rng) for _ in range(500)])
    >>> cov = empirical_covariance(samples, max_lag=8)
    """
    samples = _as_samples(samples)
    n_samples, n = samples.shape
    if not 0 <= max_lag < n:
        raise InvalidInputError(f"Require 0 <= max_lag < n, got max_lag = {max_lag}, n = {n}")

    centered = samples - samples.mean(axis=0)
    cov = np.empty(max_lag + 1)
    for h in range(max_lag + 1):
        products = centered[:, : n - h] * centered[:, h:]
        cov[h] = products.sum(axis=0).mean() / (n_samples - 1)

    return cov


def kernel_covariance(kernel: Kernel, n: int, max_lag: int) -> np.ndarray:
    """Theoretical covariance ``kernel(h / n)`` at lags h = 0, ..., max_lag."""
    return np.asarray(kernel(np.arange(max_lag + 1) / n), dtype=float)


def autocorrelation_1d(signal: np.ndarray, normalize: bool = True) -> np.ndarray:
    """
    Compute the autocorrelation function of a single realization using FFT.

    Uses the Wiener-Khinchin theorem: the autocorrelation is the inverse
    Fourier transform of the power spectral density. The signal is treated
    as periodic.

    Parameters
    ----------
    signal : ndarray
        1D input signal.
    normalize : bool, optional
        If True, normalize so R(0) = 1. Default is True.

    Returns
    -------
    R : ndarray
        Autocorrelation function. Same length as input.
    """
    signal = np.asarray(signal, dtype=float)
    if signal.ndim != 1:
        raise InvalidInputError(f"Expected 1D array, got shape {signal.shape}")

    N = len(signal)
    zhat = fft(signal - signal.mean())
    R = np.real(ifft(zhat * np.conj(zhat))) / N

    if normalize and R[0] != 0:
        R = R / R[0]

    return R


def correlation_length(
    R: np.ndarray,
    threshold: float = 0.0,
    spacing: float = 1.0,
) -> float:
    """
    Estimate the correlation length from an autocorrelation function.

    The correlation length is the distance at which the autocorrelation first
    drops below ``threshold``, refined by linear interpolation.

    Parameters
    ----------
    R : ndarray
        1D autocorrelation function (assumed normalized, R[0] = 1).
    threshold : float, optional
        Default is 0.0 (first zero crossing).
    spacing : float, optional
        Grid spacing. Default is 1.0.

    Returns
    -------
    l_corr : float
        Estimated correlation length. Half the domain if R never crosses.
    """
    R = np.asarray(R, dtype=float).ravel()

    below = np.flatnonzero(R < threshold)
    if below.size == 0:
        return len(R) * spacing / 2

    i = int(below[0])
    if i == 0:
        return 0.0

    r_prev, r = R[i - 1], R[i]
    frac = (r_prev - threshold) / (r_prev - r)
    return float((i - 1 + frac) * spacing)
