"""A/B test statistics module."""

from .normal import normal_cdf, normal_tail, two_tailed_p_value, get_z_score
from .sampling import make_rng, random_normal, sample_gamma, sample_beta
from .bayesian import (
    MONTE_CARLO_ITERATIONS,
    calculate_bayesian_probability,
    compare_variants,
    credible_interval,
    exact_credible_interval,
    expected_lift,
    monte_carlo_probability,
)
from .sequential import should_stop_early
from .power import calculate_required_sample_size, calculate_power
from .hypothesis_tests import get_confidence, get_improvement

__all__ = [
    "normal_cdf",
    "normal_tail",
    "two_tailed_p_value",
    "get_z_score",
    "make_rng",
    "random_normal",
    "sample_gamma",
    "sample_beta",
    "MONTE_CARLO_ITERATIONS",
    "calculate_bayesian_probability",
    "compare_variants",
    "credible_interval",
    "exact_credible_interval",
    "expected_lift",
    "monte_carlo_probability",
    "should_stop_early",
    "calculate_required_sample_size",
    "calculate_power",
    "get_confidence",
    "get_improvement",
]
