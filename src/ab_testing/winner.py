"""
Winner evaluation for automated A/B tests.

Picks the control and the best challenger from per-variant analytics, runs
the Bayesian comparison and early-stopping rules, and decides whether the
automation should promote, stop or keep running a test. Nothing here
touches storage; callers apply the returned decision.
"""

import logging
from typing import Dict, List, Optional, Sequence

from .calculator import StatisticalCalculatorService
from .schema import (
    PromotionAction,
    PromotionResult,
    StatisticalConfig,
    StopReason,
    VariantAnalytics,
    WinnerEvaluationResult,
)

logger = logging.getLogger(__name__)

CONTROL_NAME_MARKERS = ("control", "original")


def find_control(analytics: Sequence[VariantAnalytics]) -> VariantAnalytics:
    """Flagged control, else first variant named like a control, else the first."""
    for variant in analytics:
        if variant.is_control:
            return variant
    for variant in analytics:
        name = variant.variant_name.lower()
        if any(marker in name for marker in CONTROL_NAME_MARKERS):
            return variant
    return analytics[0]


def pick_best_challenger(
    analytics: Sequence[VariantAnalytics],
    control: VariantAnalytics,
) -> Optional[VariantAnalytics]:
    """Highest conversion rate among non-control variants (first wins ties)."""
    best = None
    for variant in analytics:
        if variant.variant_id == control.variant_id:
            continue
        if best is None or variant.conversion_rate > best.conversion_rate:
            best = variant
    return best


def evaluate_test(
    test_id: str,
    analytics: Sequence[VariantAnalytics],
    config: Optional[StatisticalConfig] = None,
    calculator: Optional[StatisticalCalculatorService] = None,
) -> WinnerEvaluationResult:
    """
    Evaluate a single running test for a winner.

    Args:
        test_id: Test identifier
        analytics: Per-variant analytics for the test
        config: Statistical policy (automation defaults when None)
        calculator: Calculator service (fresh, unseeded when None)

    Returns:
        WinnerEvaluationResult
    """
    config = config or StatisticalConfig()
    calculator = calculator or StatisticalCalculatorService()

    if len(analytics) < 2:
        return WinnerEvaluationResult(
            test_id=test_id,
            has_winner=False,
            should_stop=False,
            stop_reason="Insufficient variants",
        )

    control = find_control(analytics)
    challenger = pick_best_challenger(analytics, control)
    if challenger is None:
        return WinnerEvaluationResult(
            test_id=test_id,
            has_winner=False,
            should_stop=False,
            stop_reason="No challengers",
        )

    sample_size = min(control.unique_views, challenger.unique_views)
    if sample_size < config.minimum_sample_size:
        logger.warning(
            f"Test {test_id}: sample size {sample_size} below minimum {config.minimum_sample_size}"
        )
        return WinnerEvaluationResult(
            test_id=test_id,
            has_winner=False,
            control_id=control.variant_id,
            should_stop=False,
            stop_reason=(
                f"Insufficient sample size (need {config.minimum_sample_size}, have {sample_size})"
            ),
            sample_size=sample_size,
        )

    result = calculator.calculate_bayesian_probability(
        control.to_observation(),
        challenger.to_observation(),
        config,
        control_id=control.variant_id,
        challenger_id=challenger.variant_id,
    )
    early_stop = calculator.should_stop_early(result)

    has_winner = result.is_significant and result.probability_beat_control >= config.confidence_threshold

    logger.info(
        f"Test {test_id}: challenger={challenger.variant_id}, "
        f"P={result.probability_beat_control:.3f}, lift={result.expected_lift:.1f}%, "
        f"winner={has_winner}, stop={early_stop.reason.value}"
    )
    return WinnerEvaluationResult(
        test_id=test_id,
        has_winner=has_winner,
        winner_id=challenger.variant_id if has_winner else None,
        winner_name=challenger.variant_name if has_winner else None,
        control_id=control.variant_id,
        probability_beat_control=result.probability_beat_control,
        expected_lift=result.expected_lift,
        is_significant=result.is_significant,
        should_stop=early_stop.should_stop,
        stop_reason=early_stop.reason.value,
        sample_size=sample_size,
    )


def evaluate_all_tests(
    tests: Dict[str, Sequence[VariantAnalytics]],
    config: Optional[StatisticalConfig] = None,
    calculator: Optional[StatisticalCalculatorService] = None,
) -> List[WinnerEvaluationResult]:
    """
    Evaluate every running test; a failing test is reported as no winner.

    Args:
        tests: Mapping test_id -> per-variant analytics
    """
    calculator = calculator or StatisticalCalculatorService()
    results = []
    for test_id, analytics in tests.items():
        try:
            results.append(evaluate_test(test_id, analytics, config, calculator))
        except ValueError as e:
            logger.error(f"Failed to evaluate test {test_id}: {e}")
            results.append(
                WinnerEvaluationResult(test_id=test_id, has_winner=False, should_stop=False)
            )
    return results


def decide_promotion(evaluation: WinnerEvaluationResult) -> PromotionResult:
    """Promote a clear winner, stop a futile test, otherwise keep testing."""
    if evaluation.has_winner and evaluation.winner_id:
        return PromotionResult(
            test_id=evaluation.test_id,
            promoted=True,
            action=PromotionAction.PROMOTED,
            reason=(
                f"Winner found with {evaluation.probability_beat_control * 100:.1f}% probability, "
                f"{evaluation.expected_lift:.1f}% lift"
            ),
            winner_id=evaluation.winner_id,
            winner_name=evaluation.winner_name,
        )

    if evaluation.should_stop and evaluation.stop_reason == StopReason.FUTILITY_STOPPED.value:
        return PromotionResult(
            test_id=evaluation.test_id,
            promoted=False,
            action=PromotionAction.STOPPED,
            reason="Stopped due to futility (no meaningful difference detected)",
        )

    return PromotionResult(
        test_id=evaluation.test_id,
        promoted=False,
        action=PromotionAction.CONTINUE,
        reason=evaluation.stop_reason or "Test continues - no winner yet",
    )
