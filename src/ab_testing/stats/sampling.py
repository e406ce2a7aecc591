"""
Random variate generation for posterior simulation.

Box-Muller normals, Marsaglia-Tsang Gamma and Gamma-ratio Beta samplers
drawn from an injectable numpy Generator. Samplers work on whole arrays so
the Monte Carlo loop allocates a handful of buffers rather than one object
per draw.
"""

from typing import Optional

import numpy as np


def make_rng(rng=None) -> np.random.Generator:
    """Accept a Generator, an int seed or None (fresh OS entropy)."""
    return np.random.default_rng(rng)


def _open_uniform(rng: np.random.Generator, size: int) -> np.ndarray:
    # (0, 1], safe for log() and 1/shape powers
    return 1.0 - rng.random(size)


def random_normal(rng: np.random.Generator, size: int) -> np.ndarray:
    """Standard normal draws via the Box-Muller transform."""
    u1 = _open_uniform(rng, size)
    u2 = rng.random(size)
    return np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)


def sample_gamma(
    shape: float,
    size: int,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """
    Gamma(shape, 1) draws using Marsaglia and Tsang's squeeze method.

    For shape < 1 draws Gamma(shape + 1) and scales by U^(1/shape).

    Args:
        shape: Shape parameter (> 0)
        size: Number of draws
        rng: numpy Generator

    Returns:
        Array of `size` Gamma variates
    """
    if shape <= 0:
        raise ValueError(f"Gamma shape must be positive, got {shape}")
    rng = make_rng(rng)

    if shape < 1:
        boost = _open_uniform(rng, size) ** (1.0 / shape)
        return sample_gamma(shape + 1.0, size, rng) * boost

    d = shape - 1.0 / 3.0
    c = 1.0 / np.sqrt(9.0 * d)

    out = np.empty(size)
    pending = np.arange(size)
    while pending.size:
        x = random_normal(rng, pending.size)
        v = 1.0 + c * x
        positive = v > 0

        candidates = pending[positive]
        x = x[positive]
        v = v[positive] ** 3
        u = _open_uniform(rng, candidates.size)
        x2 = x * x

        accept = (u < 1.0 - 0.0331 * x2 * x2) | (
            np.log(u) < 0.5 * x2 + d * (1.0 - v + np.log(v))
        )
        out[candidates[accept]] = d * v[accept]

        done = np.zeros(pending.size, dtype=bool)
        done[np.flatnonzero(positive)[accept]] = True
        pending = pending[~done]

    return out


def sample_beta(
    alpha: float,
    beta: float,
    size: int,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Beta(alpha, beta) = Gamma(alpha) / (Gamma(alpha) + Gamma(beta))."""
    rng = make_rng(rng)
    x = sample_gamma(alpha, size, rng)
    y = sample_gamma(beta, size, rng)
    return x / (x + y)
