"""
Exceptions raised by the Gaussian random field sampler.

License: BSD-3-Clause
"""


class RugfieldError(Exception):
    """Base class for all errors raised by rugfield."""


class InvalidInputError(RugfieldError, ValueError):
    """Parameters outside the domain of the sampler (e.g. ``n < 2``)."""


class EmbeddingDivergenceError(RugfieldError, RuntimeError):
    """
    No valid circulant embedding was found below the maximum embedding size.

    Attributes
    ----------
    embedding_size : int
        Last embedding size that was tried.
    min_eigenvalue : float
        Smallest eigenvalue of the circulant matrix at that size.
    """

    def __init__(self, embedding_size: int, min_eigenvalue: float, max_embedding_size: int):
        self.embedding_size = embedding_size
        self.min_eigenvalue = min_eigenvalue
        self.max_embedding_size = max_embedding_size
        super().__init__(
            f"Circulant embedding is not non-negative definite at m = {embedding_size} "
            f"(min eigenvalue = {min_eigenvalue:.3e}) and doubling would exceed "
            f"max_embedding_size = {max_embedding_size}"
        )


class NumericDegeneracyError(RugfieldError, FloatingPointError):
    """Non-finite values (NaN or Inf) appeared in the FFT pipeline."""
