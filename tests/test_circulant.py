"""Tests for circulant embedding and its validity check."""

import numpy as np
import pytest

from rugfield import (
    EmbeddingDivergenceError,
    InvalidInputError,
    LocalPeriodic,
    Matern,
    NumericDegeneracyError,
    SquaredExponential,
    circulant_embedding,
    circulant_sqrt_spectrum,
    initial_embedding_size,
    trunc,
)


def negative_kernel(dx):
    return -np.ones_like(dx)


def nan_kernel(dx):
    return np.full_like(dx, np.nan)


def short_range_invalid_kernel(dx):
    # Not embeddable until the lags reach 2, then a narrow Gaussian
    return np.where(dx.max() < 2, -1.0, np.exp(-(dx**2) / 0.02))


class TestEmbeddingSize:
    """Tests for the initial embedding size."""

    @pytest.mark.parametrize(
        "n, m",
        [(2, 2), (3, 4), (5, 8), (100, 256), (129, 256), (130, 512), (1000, 2048)],
    )
    def test_power_of_two(self, n, m):
        """Test that m is the smallest power of two >= 2(n-1)."""
        assert initial_embedding_size(n) == m

    def test_numpy_integer(self):
        """Test that numpy integers are accepted."""
        assert initial_embedding_size(np.int64(100)) == 256

    @pytest.mark.parametrize("n", [1, 0, -5])
    def test_degenerate_n(self, n):
        """Test that n < 2 raises InvalidInputError."""
        with pytest.raises(InvalidInputError):
            initial_embedding_size(n)

    @pytest.mark.parametrize("n", [2.5, "100", True])
    def test_non_integer_n(self, n):
        """Test that non-integer n raises InvalidInputError."""
        with pytest.raises(InvalidInputError):
            initial_embedding_size(n)


class TestCirculantEmbedding:
    """Tests for the circulant vector."""

    @pytest.mark.parametrize("m, n", [(256, 100), (2, 2), (7, 4), (1024, 100)])
    def test_mirror_symmetry(self, m, n):
        """Test that c[i] == c[m - i] for 0 < i < m."""
        c = circulant_embedding(m, n, SquaredExponential(0.1))
        assert c.shape == (m,)
        np.testing.assert_array_equal(c[1:], c[1:][::-1])

    def test_lags_normalized_by_n(self):
        """Test that the first half is the kernel at lags i / n, not i / m."""
        kernel = Matern(1.5, 0.1)
        m, n = 256, 100
        c = circulant_embedding(m, n, kernel)
        np.testing.assert_allclose(c[: m // 2 + 1], kernel(np.arange(m // 2 + 1) / n))

    def test_zero_lag_first(self):
        """Test that c[0] is the zero-lag covariance."""
        c = circulant_embedding(64, 20, SquaredExponential(0.2))
        assert c[0] == 1.0

    def test_invalid_size(self):
        """Test that a non-positive embedding size raises an error."""
        with pytest.raises(InvalidInputError):
            circulant_embedding(0, 10, SquaredExponential(0.1))


class TestSqrtSpectrum:
    """Tests for the embedding validity loop."""

    def test_valid_spectrum(self):
        """Test that a valid spectrum is non-negative with length m."""
        sqrt_spectrum, m = circulant_sqrt_spectrum(100, SquaredExponential(0.1))
        assert m == 256
        assert sqrt_spectrum.shape == (m,)
        assert np.all(sqrt_spectrum >= 0)
        assert np.all(np.isfinite(sqrt_spectrum))

    def test_spectrum_squares_to_eigenvalues(self):
        """Test that the squared spectrum matches the FFT of the circulant vector."""
        kernel = Matern(0.5, 0.1)
        sqrt_spectrum, m = circulant_sqrt_spectrum(50, kernel)
        eigenvalues = np.real(np.fft.fft(circulant_embedding(m, 50, kernel)))
        np.testing.assert_allclose(sqrt_spectrum**2, np.maximum(eigenvalues, 0), atol=1e-12)

    def test_doubling(self, capsys):
        """Test that an invalid embedding is doubled until valid."""
        sqrt_spectrum, m = circulant_sqrt_spectrum(8, short_range_invalid_kernel, verbose=True)
        assert m == 32
        assert sqrt_spectrum.shape == (32,)
        out = capsys.readouterr().out
        assert "m = 16" in out
        assert "doubling" in out

    def test_wide_kernel_grows_embedding(self):
        """Test that a wide locally periodic kernel needs a larger embedding."""
        n = 200
        sqrt_spectrum, m = circulant_sqrt_spectrum(n, LocalPeriodic(1.0, 0.8))
        assert m >= initial_embedding_size(n)
        assert m & (m - 1) == 0
        assert np.all(sqrt_spectrum >= 0)

    def test_negative_noise_truncated(self):
        """Test that slightly negative eigenvalues are truncated to zero."""

        def kernel(dx):
            return np.where(dx == 0, 1.0, 1.0 + 1e-8)

        sqrt_spectrum, m = circulant_sqrt_spectrum(2, kernel)
        assert m == 2
        assert sqrt_spectrum[1] == 0.0
        assert sqrt_spectrum[0] == pytest.approx(np.sqrt(2.0))

    def test_divergence(self):
        """Test that the doubling loop stops at the maximum embedding size."""
        with pytest.raises(EmbeddingDivergenceError) as excinfo:
            circulant_sqrt_spectrum(8, negative_kernel, max_embedding_size=64)
        err = excinfo.value
        assert err.embedding_size == 64
        assert err.max_embedding_size == 64
        assert err.min_eigenvalue < 0

    def test_divergence_is_runtime_error(self):
        """Test that divergence is a RuntimeError."""
        with pytest.raises(RuntimeError):
            circulant_sqrt_spectrum(8, negative_kernel, max_embedding_size=16)

    def test_non_finite(self):
        """Test that NaN in the embedding raises NumericDegeneracyError."""
        with pytest.raises(NumericDegeneracyError):
            circulant_sqrt_spectrum(16, nan_kernel)

    @pytest.mark.parametrize("n", [0, 1])
    def test_degenerate_n(self, n):
        """Test that n < 2 is rejected before building the embedding."""
        with pytest.raises(InvalidInputError):
            circulant_sqrt_spectrum(n, SquaredExponential(0.1))


def test_trunc():
    """Test that trunc clamps negative values to zero."""
    np.testing.assert_array_equal(trunc(np.array([-1.0, 0.0, 2.0])), [0.0, 0.0, 2.0])
    assert trunc(-1e-9) == 0.0
