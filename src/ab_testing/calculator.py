"""
Statistical calculator service used by A/B test automation and reporting.

Wraps the stats functions around one seeded random source so a caller (or
a test) can reproduce Monte Carlo outcomes.
"""

import logging
from typing import Optional

from .schema import (
    BayesianTestResult,
    CredibleInterval,
    EarlyStopDecision,
    StatisticalConfig,
    VariantObservation,
)
from .stats import bayesian, sequential
from .stats import power as power_analysis
from .stats.sampling import make_rng

logger = logging.getLogger(__name__)


class StatisticalCalculatorService:
    """
    Bayesian A/B comparison, early stopping and power analysis.

    Holds a numpy Generator; use one instance per thread.
    """

    def __init__(self, rng=None, iterations: int = bayesian.MONTE_CARLO_ITERATIONS):
        if iterations <= 0:
            raise ValueError(f"iterations must be positive, got {iterations}")
        self.rng = make_rng(rng)
        self.iterations = iterations

    def calculate_bayesian_probability(
        self,
        control: VariantObservation,
        challenger: VariantObservation,
        config: StatisticalConfig,
        control_id: str = "control",
        challenger_id: str = "challenger",
    ) -> BayesianTestResult:
        return bayesian.calculate_bayesian_probability(
            control,
            challenger,
            config,
            rng=self.rng,
            iterations=self.iterations,
            control_id=control_id,
            challenger_id=challenger_id,
        )

    def compare_variants(
        self,
        control_conversions: int,
        control_trials: int,
        challenger_conversions: int,
        challenger_trials: int,
        config: StatisticalConfig,
    ) -> BayesianTestResult:
        """Compare raw conversion counts (never composite scores)."""
        return bayesian.compare_variants(
            control_conversions,
            control_trials,
            challenger_conversions,
            challenger_trials,
            config,
            rng=self.rng,
            iterations=self.iterations,
        )

    def should_stop_early(
        self,
        result: BayesianTestResult,
        max_sample_size: Optional[int] = None,
    ) -> EarlyStopDecision:
        decision = sequential.should_stop_early(result, max_sample_size)
        if decision.should_stop:
            logger.info(
                f"Early stop ({decision.reason.value}): "
                f"{result.challenger_variant_id} vs {result.control_variant_id}, "
                f"P={result.probability_beat_control:.3f}"
            )
        return decision

    def calculate_required_sample_size(
        self,
        baseline_rate: float,
        minimum_detectable_effect: float,
        confidence_threshold: float = 0.95,
        power: float = 0.8,
    ) -> int:
        return power_analysis.calculate_required_sample_size(
            baseline_rate, minimum_detectable_effect, confidence_threshold, power
        )

    def calculate_power(
        self,
        sample_size: int,
        baseline_rate: float,
        effect: float,
        confidence_threshold: float = 0.95,
    ) -> float:
        return power_analysis.calculate_power(sample_size, baseline_rate, effect, confidence_threshold)

    def credible_interval(self, observation: VariantObservation) -> CredibleInterval:
        return bayesian.credible_interval(observation.successes, observation.trials)
