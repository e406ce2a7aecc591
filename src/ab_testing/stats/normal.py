"""
Normal distribution approximations shared by the Bayesian and z-test paths.

Rational polynomial approximations from Abramowitz & Stegun: 26.2.17 for
the CDF and 26.2.23 for its inverse. Absolute error is below 1e-7 and
4.5e-4 respectively, which is enough for UI-facing percentages.
"""

import math

Z_SCORE_CLAMP = 10.0

# A&S 26.2.17
_CDF_P = 0.2316419
_CDF_DENSITY = 0.3989423
_CDF_B = (0.3193815, -0.3565638, 1.781478, -1.821256, 1.330274)

# A&S 26.2.23
_PPF_C = (2.515517, 0.802853, 0.010328)
_PPF_D = (1.432788, 0.189269, 0.001308)


def normal_tail(z: float) -> float:
    """Upper-tail probability P(Z > |z|)."""
    t = 1 / (1 + _CDF_P * abs(z))
    d = _CDF_DENSITY * math.exp(-z * z / 2)
    b1, b2, b3, b4, b5 = _CDF_B
    return d * t * (b1 + t * (b2 + t * (b3 + t * (b4 + t * b5))))


def normal_cdf(z: float) -> float:
    """Standard normal CDF."""
    p = normal_tail(z)
    return 1 - p if z > 0 else p


def two_tailed_p_value(z: float) -> float:
    return 2 * normal_tail(z)


def get_z_score(p: float) -> float:
    """
    Inverse standard normal CDF.

    Args:
        p: Cumulative probability

    Returns:
        z such that normal_cdf(z) ~= p, clamped to +/-10 outside (0, 1)
    """
    if p >= 1:
        return Z_SCORE_CLAMP
    if p <= 0:
        return -Z_SCORE_CLAMP

    c0, c1, c2 = _PPF_C
    d1, d2, d3 = _PPF_D

    t = math.sqrt(-2 * math.log(min(p, 1 - p)))
    numerator = c0 + c1 * t + c2 * t * t
    denominator = 1 + d1 * t + d2 * t * t + d3 * t * t * t
    z = t - numerator / denominator

    return -z if p < 0.5 else z
