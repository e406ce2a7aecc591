"""
Early-stopping rules for running Bayesian tests.

A test stops when a winner is found or when the challenger is very
unlikely to ever beat control (futility).
"""

from typing import Optional

from ..schema import BayesianTestResult, EarlyStopDecision, StopReason

FUTILITY_THRESHOLD = 0.1


def _was_simulated(result: BayesianTestResult) -> bool:
    # The minimum-sample guard is the only path that yields a zero-width interval.
    interval = result.credible_interval
    return result.probability_beat_control > 0 or interval.upper > interval.lower


def should_stop_early(
    result: BayesianTestResult,
    max_sample_size: Optional[int] = None,
) -> EarlyStopDecision:
    """
    Decide whether a test can stop before its planned sample size.

    Args:
        result: Latest Bayesian comparison
        max_sample_size: Planned cap; accepted for callers that track it,
            not used in the decision

    Returns:
        EarlyStopDecision with reason winner_found, futility_stopped or
        continue_testing
    """
    probability = result.probability_beat_control

    if result.is_significant and probability >= result.confidence_threshold:
        return EarlyStopDecision(should_stop=True, reason=StopReason.WINNER_FOUND)

    if probability < FUTILITY_THRESHOLD and _was_simulated(result):
        return EarlyStopDecision(should_stop=True, reason=StopReason.FUTILITY_STOPPED)

    return EarlyStopDecision(should_stop=False, reason=StopReason.CONTINUE_TESTING)
