"""
Value types for the A/B statistics engine.

Dataclass schemas for per-variant observations, statistical policy,
Bayesian and frequentist results, and winner evaluation outcomes.
"""

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union

DEFAULT_CONFIDENCE_THRESHOLD = 0.95
DEFAULT_MINIMUM_SAMPLE_SIZE = 100
DEFAULT_MINIMUM_DETECTABLE_EFFECT = 5.0  # percent


class StopReason(str, Enum):
    """Early-stopping verdict for a running test."""
    WINNER_FOUND = "winner_found"
    FUTILITY_STOPPED = "futility_stopped"
    CONTINUE_TESTING = "continue_testing"


class PromotionAction(str, Enum):
    """Action taken for a test after winner evaluation."""
    PROMOTED = "promoted"
    STOPPED = "stopped"
    CONTINUE = "continue"


@dataclass(frozen=True)
class VariantObservation:
    """
    Raw Bernoulli counts for one test arm (e.g. clicks / views).

    Only integral counts are accepted. Weighted or composite engagement
    scores are not Binomial outcomes and are rejected here so they cannot
    reach the Beta-Binomial model.
    """
    successes: int
    trials: int

    def __post_init__(self):
        for name in ("successes", "trials"):
            value = getattr(self, name)
            if not isinstance(value, numbers.Integral):
                raise ValueError(
                    f"{name} must be an integer count, got {value!r}. "
                    "Composite scores cannot be used as conversion counts."
                )
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        if self.successes > self.trials:
            raise ValueError(
                f"successes ({self.successes}) cannot exceed trials ({self.trials})"
            )

    @property
    def rate(self) -> float:
        if self.trials == 0:
            return 0.0
        return self.successes / self.trials


@dataclass(frozen=True)
class StatisticalConfig:
    """Caller-supplied policy for a Bayesian comparison."""
    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD
    minimum_sample_size: int = DEFAULT_MINIMUM_SAMPLE_SIZE
    minimum_detectable_effect: float = DEFAULT_MINIMUM_DETECTABLE_EFFECT

    def __post_init__(self):
        if not 0 < self.confidence_threshold < 1:
            raise ValueError(
                f"confidence_threshold must be in (0, 1), got {self.confidence_threshold}"
            )
        if self.minimum_sample_size < 0:
            raise ValueError(
                f"minimum_sample_size must be non-negative, got {self.minimum_sample_size}"
            )
        if self.minimum_detectable_effect < 0:
            raise ValueError(
                f"minimum_detectable_effect must be non-negative, got {self.minimum_detectable_effect}"
            )

    @classmethod
    def from_automation_rule(
        cls,
        confidence_threshold: Optional[Union[str, float]] = None,
        minimum_sample: Optional[int] = None,
    ) -> "StatisticalConfig":
        """
        Build a config from an automation rule.

        Rules store the threshold as a decimal string (e.g. "0.95"); empty
        values fall back to the defaults.
        """
        threshold = float(confidence_threshold) if confidence_threshold else DEFAULT_CONFIDENCE_THRESHOLD
        return cls(
            confidence_threshold=threshold,
            minimum_sample_size=minimum_sample or DEFAULT_MINIMUM_SAMPLE_SIZE,
            minimum_detectable_effect=DEFAULT_MINIMUM_DETECTABLE_EFFECT,
        )


@dataclass(frozen=True)
class CredibleInterval:
    lower: float
    upper: float

    def to_dict(self) -> Dict[str, float]:
        return {"lower": self.lower, "upper": self.upper}


@dataclass(frozen=True)
class BayesianTestResult:
    """Outcome of one control vs challenger Bayesian comparison."""
    control_variant_id: str
    challenger_variant_id: str
    probability_beat_control: float  # 0-1
    is_significant: bool
    confidence_threshold: float
    expected_lift: float  # percent, signed
    credible_interval: CredibleInterval

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape consumed by reporting and automation."""
        return {
            "controlVariantId": self.control_variant_id,
            "challengerVariantId": self.challenger_variant_id,
            "probabilityBeatControl": self.probability_beat_control,
            "isSignificant": self.is_significant,
            "confidenceThreshold": self.confidence_threshold,
            "expectedLift": self.expected_lift,
            "credibleInterval": self.credible_interval.to_dict(),
        }


@dataclass(frozen=True)
class EarlyStopDecision:
    should_stop: bool
    reason: StopReason

    def to_dict(self) -> Dict[str, Any]:
        return {"shouldStop": self.should_stop, "reason": self.reason.value}


@dataclass(frozen=True)
class ConfidenceResult:
    """Frequentist z-test verdict shown on the analytics screen."""
    is_significant: bool
    confidence: float  # percent, 0-99.9

    def to_dict(self) -> Dict[str, Any]:
        return {"isSignificant": self.is_significant, "confidence": self.confidence}


@dataclass(frozen=True)
class VariantAnalytics:
    """Aggregated tracking counts for one variant of a test."""
    variant_id: str
    variant_name: str
    unique_views: int
    total_events: int
    total_views: int = 0
    conversions: Optional[int] = None  # distinct converting sessions
    is_control: bool = False

    @property
    def conversion_rate(self) -> float:
        """Events per unique view, in percent."""
        if self.unique_views <= 0:
            return 0.0
        return self.total_events / self.unique_views * 100

    def to_observation(self) -> VariantObservation:
        successes = self.conversions if self.conversions is not None else self.total_events
        if successes > self.unique_views:
            raise ValueError(
                f"Variant {self.variant_id} has {successes} conversions for "
                f"{self.unique_views} unique views; not a Bernoulli count"
            )
        return VariantObservation(successes=int(successes), trials=int(self.unique_views))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "variantId": self.variant_id,
            "variantName": self.variant_name,
            "totalViews": self.total_views,
            "uniqueViews": self.unique_views,
            "totalEvents": self.total_events,
            "conversions": self.conversions,
            "conversionRate": self.conversion_rate,
        }


@dataclass
class WinnerEvaluationResult:
    """Winner evaluation for a single running test."""
    test_id: str
    has_winner: bool
    winner_id: Optional[str] = None
    winner_name: Optional[str] = None
    control_id: Optional[str] = None
    probability_beat_control: Optional[float] = None
    expected_lift: Optional[float] = None
    is_significant: Optional[bool] = None
    should_stop: bool = False
    stop_reason: Optional[str] = None
    sample_size: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "testId": self.test_id,
            "hasWinner": self.has_winner,
            "winnerId": self.winner_id,
            "winnerName": self.winner_name,
            "controlId": self.control_id,
            "probabilityBeatControl": self.probability_beat_control,
            "expectedLift": self.expected_lift,
            "isSignificant": self.is_significant,
            "shouldStop": self.should_stop,
            "stopReason": self.stop_reason,
            "sampleSize": self.sample_size,
        }


@dataclass
class PromotionResult:
    test_id: str
    promoted: bool
    action: PromotionAction
    reason: str
    winner_id: Optional[str] = None
    winner_name: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "testId": self.test_id,
            "promoted": self.promoted,
            "winnerId": self.winner_id,
            "winnerName": self.winner_name,
            "action": self.action.value,
            "reason": self.reason,
        }
