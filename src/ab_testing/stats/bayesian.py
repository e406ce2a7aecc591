"""
Bayesian comparison of two conversion rates.

Each arm's true rate is modelled as Beta(successes + 1, failures + 1), the
posterior under a uniform prior and Binomial likelihood. The probability
that the challenger beats the control is estimated by Monte Carlo.
"""

import logging
import math
from typing import Optional, Tuple

import numpy as np
from scipy import stats

from ..schema import (
    BayesianTestResult,
    CredibleInterval,
    StatisticalConfig,
    VariantObservation,
)
from .sampling import make_rng, sample_beta

logger = logging.getLogger(__name__)

MONTE_CARLO_ITERATIONS = 10000
CREDIBLE_Z = 1.96


def posterior_parameters(observation: VariantObservation) -> Tuple[int, int]:
    """Beta posterior (alpha, beta) from a uniform Beta(1, 1) prior."""
    return observation.successes + 1, observation.trials - observation.successes + 1


def monte_carlo_probability(
    control: VariantObservation,
    challenger: VariantObservation,
    iterations: int = MONTE_CARLO_ITERATIONS,
    rng: Optional[np.random.Generator] = None,
) -> float:
    """Fraction of posterior draws where the challenger rate exceeds control."""
    rng = make_rng(rng)
    control_samples = sample_beta(*posterior_parameters(control), iterations, rng)
    challenger_samples = sample_beta(*posterior_parameters(challenger), iterations, rng)
    wins = int(np.count_nonzero(challenger_samples > control_samples))
    return wins / iterations


def expected_lift(control: VariantObservation, challenger: VariantObservation) -> float:
    """Relative lift of challenger over control in percent; 0 when control rate is 0."""
    control_rate = control.rate
    if control_rate <= 0:
        return 0.0
    return (challenger.rate - control_rate) / control_rate * 100


def credible_interval(successes: int, trials: int) -> CredibleInterval:
    """
    95% credible interval for a rate, normal approximation to its Beta posterior.

    Clamped to [0, 1].
    """
    alpha = successes + 1
    beta = trials - successes + 1
    total = alpha + beta

    mean = alpha / total
    variance = (alpha * beta) / (total ** 2 * (total + 1))
    std = math.sqrt(variance)

    return CredibleInterval(
        lower=max(0.0, mean - CREDIBLE_Z * std),
        upper=min(1.0, mean + CREDIBLE_Z * std),
    )


def exact_credible_interval(
    successes: int,
    trials: int,
    confidence: float = 0.95,
) -> CredibleInterval:
    """Equal-tailed credible interval from exact Beta quantiles."""
    tail = (1 - confidence) / 2
    alpha = successes + 1
    beta = trials - successes + 1
    lower, upper = stats.beta.ppf([tail, 1 - tail], alpha, beta)
    return CredibleInterval(lower=float(lower), upper=float(upper))


def calculate_bayesian_probability(
    control: VariantObservation,
    challenger: VariantObservation,
    config: StatisticalConfig,
    rng=None,
    iterations: int = MONTE_CARLO_ITERATIONS,
    control_id: str = "control",
    challenger_id: str = "challenger",
) -> BayesianTestResult:
    """
    Probability that the challenger's true conversion rate beats the control's.

    Args:
        control: Control arm counts
        challenger: Challenger arm counts
        config: Confidence threshold, minimum sample size and minimum effect
        rng: numpy Generator or int seed; fresh entropy when None
        iterations: Monte Carlo draws per arm
        control_id: Identifier reported for the control arm
        challenger_id: Identifier reported for the challenger arm

    Returns:
        BayesianTestResult. Under-sampled arms yield probability 0, lift 0
        and a zero-width interval.
    """
    if control.trials < config.minimum_sample_size or challenger.trials < config.minimum_sample_size:
        logger.debug(
            f"Sample below minimum {config.minimum_sample_size}: "
            f"control={control.trials}, challenger={challenger.trials}"
        )
        return BayesianTestResult(
            control_variant_id=control_id,
            challenger_variant_id=challenger_id,
            probability_beat_control=0.0,
            is_significant=False,
            confidence_threshold=config.confidence_threshold,
            expected_lift=0.0,
            credible_interval=CredibleInterval(lower=0.0, upper=0.0),
        )

    probability = monte_carlo_probability(control, challenger, iterations, rng)
    lift = expected_lift(control, challenger)
    interval = credible_interval(challenger.successes, challenger.trials)

    is_significant = (
        probability >= config.confidence_threshold
        and abs(lift) >= config.minimum_detectable_effect
    )

    logger.debug(
        f"P(challenger > control)={probability:.4f}, lift={lift:.2f}%, "
        f"significant={is_significant}"
    )
    return BayesianTestResult(
        control_variant_id=control_id,
        challenger_variant_id=challenger_id,
        probability_beat_control=probability,
        is_significant=is_significant,
        confidence_threshold=config.confidence_threshold,
        expected_lift=lift,
        credible_interval=interval,
    )


def compare_variants(
    control_conversions: int,
    control_trials: int,
    challenger_conversions: int,
    challenger_trials: int,
    config: StatisticalConfig,
    rng=None,
    iterations: int = MONTE_CARLO_ITERATIONS,
) -> BayesianTestResult:
    """
    Compare two variants from raw conversion counts.

    Inputs must be Bernoulli counts (e.g. clicks / views). Weighted or
    composite engagement scores are rejected with ValueError; they belong
    to a separate metric-weighting evaluation, not the Beta-Binomial model.

    Example:
        compare_variants(150, 1000, 180, 1000, config)  # CTA clicks / views
    """
    control = VariantObservation(successes=control_conversions, trials=control_trials)
    challenger = VariantObservation(successes=challenger_conversions, trials=challenger_trials)
    return calculate_bayesian_probability(
        control, challenger, config, rng=rng, iterations=iterations
    )
