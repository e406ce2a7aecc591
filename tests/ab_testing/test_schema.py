"""Tests for value types."""
import numpy as np
import pytest

from src.ab_testing.schema import StatisticalConfig, VariantAnalytics, VariantObservation


def test_observation_rate():
    assert VariantObservation(25, 100).rate == pytest.approx(0.25)
    assert VariantObservation(0, 0).rate == 0.0


def test_observation_accepts_numpy_ints():
    o = VariantObservation(np.int64(3), np.int64(10))
    assert o.rate == pytest.approx(0.3)


@pytest.mark.parametrize("successes,trials", [(-1, 10), (5, -1), (11, 10), (2.5, 10), (1, 10.0)])
def test_observation_rejects_invalid(successes, trials):
    with pytest.raises(ValueError):
        VariantObservation(successes, trials)


def test_config_from_automation_rule():
    cfg = StatisticalConfig.from_automation_rule("0.90", 250)
    assert cfg.confidence_threshold == pytest.approx(0.90)
    assert cfg.minimum_sample_size == 250
    assert cfg.minimum_detectable_effect == 5

    default = StatisticalConfig.from_automation_rule(None, None)
    assert default == StatisticalConfig(0.95, 100, 5.0)


def test_variant_analytics_rate_and_observation():
    a = VariantAnalytics("v1", "Bold", unique_views=200, total_events=50, conversions=40)
    assert a.conversion_rate == pytest.approx(25.0)
    assert a.to_observation() == VariantObservation(40, 200)


def test_variant_analytics_falls_back_to_total_events():
    a = VariantAnalytics("v1", "Bold", unique_views=200, total_events=50)
    assert a.to_observation() == VariantObservation(50, 200)


def test_variant_analytics_rejects_non_bernoulli_counts():
    a = VariantAnalytics("v1", "Bold", unique_views=10, total_events=25)
    with pytest.raises(ValueError):
        a.to_observation()


def test_variant_analytics_zero_views():
    assert VariantAnalytics("v1", "Empty", unique_views=0, total_events=0).conversion_rate == 0.0
