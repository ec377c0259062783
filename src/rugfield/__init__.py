"""
rugfield - 1D Gaussian Random Fields by Circulant Embedding.

A Python package for sampling stationary one-dimensional Gaussian random
fields with a prescribed covariance kernel, using the circulant embedding
method and the FFT.

Features
--------
- Squared exponential, Matérn, locally periodic and rational quadratic kernels
- Exact (in distribution) sampling in O(m log m)
- Automatic doubling of the embedding until it is non-negative definite
- Reproducible sampling from an explicit NumPy generator
- Empirical variance and covariance checks

Quick Start
-----------
>>> import numpy as np
>>> from rugfield import sample_field, SquaredExponential
>>> rng = np.random.default_rng(42)
>>> field = sample_field(100, SquaredExponential(0.1), rng=rng)

References
----------
Chan, G. and Wood, A.T.A., 1999. Simulation of stationary Gaussian vector
fields. Statistics and Computing, 9(4), pp.265-268.

License
-------
BSD-3-Clause
"""

__version__ = "0.1.0"

# Kernels
from .kernels import (
    MATERN_ZERO_LAG,
    Kernel,
    SquaredExponential,
    Matern,
    LocalPeriodic,
    RationalQuadratic,
    squared_exponential,
    matern,
    periodic,
    rational_quadratic,
)

# Random sources
from .sources import default_source, seeded_source, standard_normal

# Generators
from .generators import (
    NEGATIVE_EIGENVALUE_TOLERANCE,
    DEFAULT_MAX_EMBEDDING_SIZE,
    initial_embedding_size,
    circulant_embedding,
    circulant_sqrt_spectrum,
    trunc,
    synthesize_field,
    sample_field,
    sample_field_with_source,
    sample_field_simple,
)

# Analysis tools
from .analysis import (
    empirical_variance,
    empirical_covariance,
    kernel_covariance,
    autocorrelation_1d,
    correlation_length,
)

# Errors
from .exceptions import (
    RugfieldError,
    InvalidInputError,
    EmbeddingDivergenceError,
    NumericDegeneracyError,
)

__all__ = [
    # Version
    "__version__",
    # Kernels
    "MATERN_ZERO_LAG",
    "Kernel",
    "SquaredExponential",
    "Matern",
    "LocalPeriodic",
    "RationalQuadratic",
    "squared_exponential",
    "matern",
    "periodic",
    "rational_quadratic",
    # Random sources
    "default_source",
    "seeded_source",
    "standard_normal",
    # Generators
    "NEGATIVE_EIGENVALUE_TOLERANCE",
    "DEFAULT_MAX_EMBEDDING_SIZE",
    "initial_embedding_size",
    "circulant_embedding",
    "circulant_sqrt_spectrum",
    "trunc",
    "synthesize_field",
    "sample_field",
    "sample_field_with_source",
    "sample_field_simple",
    # Analysis
    "empirical_variance",
    "empirical_covariance",
    "kernel_covariance",
    "autocorrelation_1d",
    "correlation_length",
    # Errors
    "RugfieldError",
    "InvalidInputError",
    "EmbeddingDivergenceError",
    "NumericDegeneracyError",
]
