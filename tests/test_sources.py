"""Tests for random sources."""

import numpy as np
import pytest

from rugfield import InvalidInputError, default_source, seeded_source, standard_normal


class TestSources:
    """Tests for default and seeded generators."""

    def test_default_source(self):
        """Test that the default source is a numpy Generator."""
        assert isinstance(default_source(), np.random.Generator)

    def test_default_sources_independent(self):
        """Test that two default sources give different draws."""
        assert not np.allclose(default_source().standard_normal(16), default_source().standard_normal(16))

    def test_seeded_source(self):
        """Test that equal seeds give equal streams."""
        np.testing.assert_array_equal(
            seeded_source(42).standard_normal(100), seeded_source(42).standard_normal(100)
        )

    def test_seed_sequence(self):
        """Test that a SeedSequence is accepted."""
        rng = seeded_source(np.random.SeedSequence(7))
        assert isinstance(rng, np.random.Generator)


class TestStandardNormal:
    """Tests for standard_normal."""

    def test_shape(self):
        """Test that the requested number of variates is drawn."""
        z = standard_normal(seeded_source(0), 128)
        assert z.shape == (128,)
        assert z.dtype == np.float64

    def test_matches_generator(self):
        """Test that the draw is the generator's standard normal stream."""
        z = standard_normal(seeded_source(5), 32)
        np.testing.assert_array_equal(z, np.random.default_rng(5).standard_normal(32))

    def test_none_uses_default(self):
        """Test that None falls back to a default source."""
        assert standard_normal(None, 10).shape == (10,)

    def test_moments(self):
        """Test that the draws are roughly standard normal."""
        z = standard_normal(seeded_source(1), 100_000)
        assert abs(z.mean()) < 0.02
        assert abs(z.std() - 1.0) < 0.02

    def test_invalid_source(self):
        """Test that an object without standard_normal raises an error."""
        with pytest.raises(InvalidInputError):
            standard_normal("not a generator", 10)
