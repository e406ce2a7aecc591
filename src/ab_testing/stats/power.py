"""
Power analysis for two-proportion tests.

Computes required sample size per arm for a relative minimum detectable
effect, and the achieved power for a given sample size.
"""

import math

from .normal import get_z_score, normal_cdf


def _two_tailed_z(confidence_threshold: float) -> float:
    return get_z_score(1 - (1 - confidence_threshold) / 2)


def calculate_required_sample_size(
    baseline_rate: float,
    minimum_detectable_effect: float,
    confidence_threshold: float = 0.95,
    power: float = 0.8,
) -> int:
    """
    Sample size per arm for a two-proportion test.

    Args:
        baseline_rate: Control conversion rate (e.g. 0.10)
        minimum_detectable_effect: Relative effect in percent (e.g. 20 = +20%)
        confidence_threshold: Two-tailed confidence level
        power: Statistical power (1 - Type II)

    Returns:
        Required sample size per arm
    """
    z_alpha = _two_tailed_z(confidence_threshold)
    z_beta = get_z_score(power)

    expected_rate = baseline_rate * (1 + minimum_detectable_effect / 100)
    p = (baseline_rate + expected_rate) / 2

    numerator = 2 * (z_alpha + z_beta) ** 2 * p * (1 - p)
    denominator = (expected_rate - baseline_rate) ** 2

    if denominator == 0:
        raise ValueError(
            "Sample size is undefined when the detectable effect is zero "
            f"(baseline_rate={baseline_rate}, effect={minimum_detectable_effect})"
        )

    return int(math.ceil(numerator / denominator))


def calculate_power(
    sample_size: int,
    baseline_rate: float,
    effect: float,
    confidence_threshold: float = 0.95,
) -> float:
    """
    Achieved power for a given sample size per arm.

    Returns:
        Probability (0-1) of detecting the relative `effect` (percent)
    """
    if sample_size <= 0:
        return 0.0

    z_alpha = _two_tailed_z(confidence_threshold)
    expected_rate = baseline_rate * (1 + effect / 100)
    p = (baseline_rate + expected_rate) / 2

    variance = 2 * p * (1 - p) / sample_size
    if variance <= 0:
        return 0.0
    standard_error = math.sqrt(variance)

    delta = expected_rate - baseline_rate
    z_beta = delta / standard_error - z_alpha
    return normal_cdf(z_beta)
