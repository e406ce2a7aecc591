"""Pytest configuration - add project root to path and shared fixtures."""
import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))


@pytest.fixture
def rng():
    """Seeded generator for reproducible Monte Carlo assertions."""
    return np.random.default_rng(12345)


@pytest.fixture
def config():
    from src.ab_testing.schema import StatisticalConfig
    return StatisticalConfig(
        confidence_threshold=0.95,
        minimum_sample_size=30,
        minimum_detectable_effect=5,
    )
