#!/usr/bin/env python3
"""
Run A/B statistics demo: simulate events -> aggregate -> report -> evaluate winner.

Prints the z-test report per variant, the Bayesian verdict and the
automation decision for a simulated CTA test.
"""

import logging
import sys
from pathlib import Path

import numpy as np
import pandas as pd

ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))


def simulate_events(rng: np.random.Generator, n_sessions: int = 2000) -> pd.DataFrame:
    """Page views per session, plus a click for converting sessions."""
    true_rates = {"v_control": 0.15, "v_bold": 0.19, "v_subtle": 0.14}
    variant_ids = list(true_rates)
    rows = []
    event_id = 0
    for session in range(n_sessions):
        variant_id = variant_ids[rng.integers(len(variant_ids))]
        for _ in range(rng.integers(1, 3)):
            event_id += 1
            rows.append((variant_id, f"e{event_id}", f"s{session}", "page_view"))
        if rng.random() < true_rates[variant_id]:
            event_id += 1
            rows.append((variant_id, f"e{event_id}", f"s{session}", "cta_click"))
    return pd.DataFrame(rows, columns=["variant_id", "event_id", "session_id", "event_type"])


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    from src.ab_testing.analytics import build_variant_analytics
    from src.ab_testing.calculator import StatisticalCalculatorService
    from src.ab_testing.schema import StatisticalConfig
    from src.ab_testing.stats import calculate_required_sample_size, get_confidence
    from src.ab_testing.winner import decide_promotion, evaluate_test

    rng = np.random.default_rng(7)
    variants = pd.DataFrame({
        "variant_id": ["v_control", "v_bold", "v_subtle"],
        "variant_name": ["Control", "Bold CTA", "Subtle CTA"],
        "is_control": [True, False, False],
    })

    print("1. Simulating tracking events...")
    events = simulate_events(rng)
    print(f"   {len(events)} events")

    print("2. Aggregating analytics...")
    analytics = build_variant_analytics(variants, events)
    control = next(a for a in analytics if a.is_control)
    for a in analytics:
        confidence = get_confidence(a, control)
        print(
            f"   {a.variant_name:<12} views={a.unique_views:<5} rate={a.conversion_rate:5.2f}% "
            f"z-test confidence={confidence.confidence}% significant={confidence.is_significant}"
        )

    print("3. Evaluating winner...")
    config = StatisticalConfig(confidence_threshold=0.95, minimum_sample_size=100, minimum_detectable_effect=5)
    calculator = StatisticalCalculatorService(rng=42)
    evaluation = evaluate_test("demo_cta_test", analytics, config, calculator)
    decision = decide_promotion(evaluation)

    needed = calculate_required_sample_size(control.conversion_rate / 100, 20)
    print(f"\n[OK] {decision.action.value}: {decision.reason}")
    print(f"   Sample size per arm for a +20% effect: {needed}")


if __name__ == "__main__":
    main()
