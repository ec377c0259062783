"""
Analysis tools for sampled fields.

- Ensemble variance and lag covariance over many realizations
- Theoretical covariance on the same lag grid
- Autocorrelation and correlation length of a single realization
"""

from .covariance import (
    empirical_variance,
    empirical_covariance,
    kernel_covariance,
    autocorrelation_1d,
    correlation_length,
)

__all__ = [
    "empirical_variance",
    "empirical_covariance",
    "kernel_covariance",
    "autocorrelation_1d",
    "correlation_length",
]
