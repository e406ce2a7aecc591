"""Tests for Gamma / Beta samplers."""
import numpy as np
import pytest

from src.ab_testing.stats.sampling import random_normal, sample_beta, sample_gamma


def test_random_normal_moments(rng):
    x = random_normal(rng, 50000)
    assert abs(x.mean()) < 0.02
    assert x.std() == pytest.approx(1.0, abs=0.02)


@pytest.mark.parametrize("shape", [1.0, 2.5, 51.0, 851.0])
def test_gamma_mean_matches_shape(rng, shape):
    """Gamma(k, 1) has mean k and variance k."""
    x = sample_gamma(shape, 20000, rng)
    assert x.shape == (20000,)
    assert np.all(x > 0)
    assert x.mean() == pytest.approx(shape, rel=0.03)
    assert x.var() == pytest.approx(shape, rel=0.1)


def test_gamma_small_shape_uses_boost(rng):
    """Shape < 1 still yields positive draws with mean ~= shape."""
    x = sample_gamma(0.5, 20000, rng)
    assert np.all(x >= 0)
    assert x.mean() == pytest.approx(0.5, rel=0.05)


def test_gamma_rejects_non_positive_shape(rng):
    with pytest.raises(ValueError):
        sample_gamma(0.0, 10, rng)


def test_beta_mean(rng):
    """Beta(151, 851) posterior mean ~= 0.1507."""
    x = sample_beta(151, 851, 20000, rng)
    assert np.all((x > 0) & (x < 1))
    assert x.mean() == pytest.approx(151 / 1002, abs=0.002)


def test_seeded_draws_reproducible():
    a = sample_beta(3, 7, 100, np.random.default_rng(1))
    b = sample_beta(3, 7, 100, np.random.default_rng(1))
    np.testing.assert_array_equal(a, b)
