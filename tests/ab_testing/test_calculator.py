"""Tests for StatisticalCalculatorService."""
import pytest

from src.ab_testing.calculator import StatisticalCalculatorService
from src.ab_testing.schema import StatisticalConfig, StopReason, VariantObservation


def test_seeded_service_reproducible(config):
    a = StatisticalCalculatorService(rng=5).compare_variants(150, 1000, 165, 1000, config)
    b = StatisticalCalculatorService(rng=5).compare_variants(150, 1000, 165, 1000, config)
    assert a == b


def test_end_to_end_winner_and_stop(config):
    service = StatisticalCalculatorService(rng=1)
    result = service.calculate_bayesian_probability(
        VariantObservation(150, 1000),
        VariantObservation(200, 1000),
        config,
        control_id="v_control",
        challenger_id="v_bold",
    )
    assert result.control_variant_id == "v_control"
    assert result.challenger_variant_id == "v_bold"
    assert result.is_significant is True

    decision = service.should_stop_early(result)
    assert decision.should_stop is True
    assert decision.reason == StopReason.WINNER_FOUND


def test_power_helpers_delegate():
    service = StatisticalCalculatorService(rng=0)
    n = service.calculate_required_sample_size(0.10, 20)
    assert 3000 < n < 5000
    assert service.calculate_power(n, 0.10, 20) == pytest.approx(0.8, abs=0.01)


def test_credible_interval():
    interval = StatisticalCalculatorService().credible_interval(VariantObservation(50, 100))
    assert interval.lower < 0.5 < interval.upper


def test_custom_iterations(config):
    service = StatisticalCalculatorService(rng=2, iterations=500)
    result = service.compare_variants(100, 1000, 100, 1000, config)
    # Probability is a multiple of 1/500
    assert (result.probability_beat_control * 500) == pytest.approx(round(result.probability_beat_control * 500))


def test_invalid_iterations():
    with pytest.raises(ValueError):
        StatisticalCalculatorService(iterations=0)


def test_config_validation():
    with pytest.raises(ValueError):
        StatisticalConfig(confidence_threshold=1.0)
    with pytest.raises(ValueError):
        StatisticalConfig(minimum_sample_size=-1)
    with pytest.raises(ValueError):
        StatisticalConfig(minimum_detectable_effect=-5)
