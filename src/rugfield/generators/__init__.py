"""
Random field generators.

This module provides the circulant-embedding sampler for stationary 1D
Gaussian random fields:

- Circulant embedding of a covariance kernel and its validity check
- FFT-based synthesis of a field from the square-root spectrum
- Public sampling entry points (default, seeded and domain-based)
"""

from .circulant import (
    NEGATIVE_EIGENVALUE_TOLERANCE,
    DEFAULT_MAX_EMBEDDING_SIZE,
    initial_embedding_size,
    circulant_embedding,
    circulant_sqrt_spectrum,
    trunc,
)
from .sampler import (
    synthesize_field,
    sample_field,
    sample_field_with_source,
    sample_field_simple,
)

__all__ = [
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
]
