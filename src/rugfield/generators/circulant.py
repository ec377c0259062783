"""
Circulant embedding of a stationary covariance.

The covariance matrix of n equispaced points of a stationary field is a
symmetric Toeplitz matrix. It is embedded in a symmetric circulant matrix of
size m ≥ 2(n-1), whose eigenvalues are the FFT of its first row. When all
eigenvalues are non-negative the embedding is valid and its square-root
spectrum can be used to sample the field; otherwise m is doubled and the
embedding is rebuilt.

Reference:
    Chan, G. and Wood, A.T.A., 1999. Simulation of stationary Gaussian vector
    fields. Statistics and Computing, 9(4), pp.265-268.

License: BSD-3-Clause
"""

from collections.abc import Callable

import numpy as np
from numpy.fft import fft

from ..exceptions import EmbeddingDivergenceError, InvalidInputError, NumericDegeneracyError

# Negative eigenvalues smaller than this in magnitude are treated as round-off
NEGATIVE_EIGENVALUE_TOLERANCE = 1e-6

# Cap on the doubling loop (2**22 points ≈ 64 MB per complex work array)
DEFAULT_MAX_EMBEDDING_SIZE = 2**22


def _check_n(n) -> int:
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidInputError(f"n must be an integer, got {type(n).__name__}")
    if n < 2:
        raise InvalidInputError(f"n must be >= 2, got {n}")
    return int(n)


def initial_embedding_size(n: int) -> int:
    """
    Smallest power of two greater than or equal to 2(n-1).

    Raises
    ------
    InvalidInputError
        If ``n < 2``; for n = 1 the size 2(n-1) = 0 has no power of two.
    """
    n = _check_n(n)
    return 1 << (2 * (n - 1) - 1).bit_length()


def circulant_embedding(
    m: int,
    n: int,
    kernel: Callable[[np.ndarray], np.ndarray],
) -> np.ndarray:
    """
    First row of the circulant embedding of a covariance kernel.

    Parameters
    ----------
    m : int
        Embedding size.
    n : int
        Number of requested field points. Lags are ``i / n``, so kernel
        length scales stay relative to the requested domain whatever ``m``.
    kernel : callable
        Covariance function accepting an array of lags.

    Returns
    -------
    c : ndarray
        Array of shape (m,) with ``c[i] = kernel(i / n)`` for ``i <= m // 2``
        and ``c[i] = c[m - i]`` above.
    """
    if m < 1:
        raise InvalidInputError(f"Embedding size must be >= 1, got {m}")
    if n < 1:
        raise InvalidInputError(f"n must be >= 1, got {n}")

    mid = m // 2
    c = np.empty(m, dtype=float)
    c[: mid + 1] = kernel(np.arange(mid + 1, dtype=float) / n)

    # Mirror the first half
    upper = np.arange(mid + 1, m)
    c[upper] = c[m - upper]

    return c


def trunc(x: np.ndarray | float) -> np.ndarray | float:
    """Clamp negative values to zero."""
    return np.maximum(x, 0.0)


def circulant_sqrt_spectrum(
    n: int,
    kernel: Callable[[np.ndarray], np.ndarray],
    max_embedding_size: int = DEFAULT_MAX_EMBEDDING_SIZE,
    tolerance: float = NEGATIVE_EIGENVALUE_TOLERANCE,
    verbose: bool = False,
) -> tuple[np.ndarray, int]:
    """
    Find a valid circulant embedding and return its square-root spectrum.

    Starting from ``m = initial_embedding_size(n)``, the eigenvalues of the
    circulant matrix are computed by a forward FFT. If the smallest one is
    non-negative, or negative but smaller than ``tolerance`` in magnitude
    (negative values are then truncated to zero), the embedding is accepted.
    Otherwise ``m`` is doubled.

    Parameters
    ----------
    n : int
        Number of requested field points (n ≥ 2).
    kernel : callable
        Covariance function accepting an array of lags.
    max_embedding_size : int, optional
        Largest embedding size the doubling loop may reach.
        Default is ``DEFAULT_MAX_EMBEDDING_SIZE``.
    tolerance : float, optional
        Magnitude below which negative eigenvalues are considered round-off.
        Default is ``NEGATIVE_EIGENVALUE_TOLERANCE``.
    verbose : bool, optional
        If True, print one line per embedding attempt. Default is False.

    Returns
    -------
    sqrt_spectrum : ndarray
        Non-negative array of shape (m,).
    m : int
        Accepted embedding size.

    Raises
    ------
    InvalidInputError
        If ``n < 2``.
    EmbeddingDivergenceError
        If doubling ``m`` would exceed ``max_embedding_size``.
    NumericDegeneracyError
        If the kernel or the FFT produces NaN or Inf.
    """
    m = initial_embedding_size(n)

    while True:
        c = circulant_embedding(m, n, kernel)
        eigenvalues = np.real(fft(c))

        if not np.all(np.isfinite(eigenvalues)):
            raise NumericDegeneracyError(
                f"Non-finite eigenvalues in circulant embedding of size m = {m}"
            )

        c_min = float(np.min(eigenvalues))

        if c_min >= 0:
            if verbose:
                print(f"Circulant embedding m = {m}: min eigenvalue = {c_min:.3e}, valid")
            return np.sqrt(eigenvalues), m
        elif abs(c_min) < tolerance:
            if verbose:
                print(f"Circulant embedding m = {m}: min eigenvalue = {c_min:.3e}, truncated")
            return np.sqrt(trunc(eigenvalues)), m

        if verbose:
            print(f"Circulant embedding m = {m}: min eigenvalue = {c_min:.3e}, doubling")
        if 2 * m > max_embedding_size:
            raise EmbeddingDivergenceError(m, c_min, max_embedding_size)
        m *= 2
