"""A/B testing statistics engine: Bayesian winner detection and z-test reporting."""

from .schema import (
    VariantObservation,
    StatisticalConfig,
    CredibleInterval,
    BayesianTestResult,
    StopReason,
    EarlyStopDecision,
    ConfidenceResult,
    VariantAnalytics,
    WinnerEvaluationResult,
    PromotionAction,
    PromotionResult,
)
from .calculator import StatisticalCalculatorService
from .stats import (
    calculate_bayesian_probability,
    compare_variants,
    should_stop_early,
    calculate_required_sample_size,
    calculate_power,
    get_confidence,
    get_improvement,
)
from .analytics import build_variant_analytics
from .winner import evaluate_test, evaluate_all_tests, decide_promotion

__all__ = [
    "VariantObservation",
    "StatisticalConfig",
    "CredibleInterval",
    "BayesianTestResult",
    "StopReason",
    "EarlyStopDecision",
    "ConfidenceResult",
    "VariantAnalytics",
    "WinnerEvaluationResult",
    "PromotionAction",
    "PromotionResult",
    "StatisticalCalculatorService",
    "calculate_bayesian_probability",
    "compare_variants",
    "should_stop_early",
    "calculate_required_sample_size",
    "calculate_power",
    "get_confidence",
    "get_improvement",
    "build_variant_analytics",
    "evaluate_test",
    "evaluate_all_tests",
    "decide_promotion",
]
