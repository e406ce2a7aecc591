"""Tests for event aggregation."""
import pandas as pd
import pytest

from src.ab_testing.analytics import build_variant_analytics

VARIANTS = pd.DataFrame({
    "variant_id": ["a", "b", "c"],
    "variant_name": ["Control", "Bold", "Unused"],
    "is_control": [True, False, False],
})

EVENTS = pd.DataFrame(
    [
        ("a", "e1", "s1", "page_view"),
        ("a", "e2", "s1", "page_view"),  # repeat view, same session
        ("a", "e3", "s2", "page_view"),
        ("a", "e4", "s1", "cta_click"),
        ("a", "e4", "s1", "cta_click"),  # duplicate row
        ("b", "e5", "s3", "page_view"),
        ("b", "e6", "s3", "cta_click"),
        ("b", "e7", "s3", "form_submit"),
        ("b", "e8", "s9", "cta_click"),  # click without a view
    ],
    columns=["variant_id", "event_id", "session_id", "event_type"],
)


def by_id(analytics):
    return {a.variant_id: a for a in analytics}


def test_counts_distinct_views_and_events():
    result = by_id(build_variant_analytics(VARIANTS, EVENTS))

    a = result["a"]
    assert a.total_views == 2 + 1
    assert a.unique_views == 2
    assert a.total_events == 1
    assert a.conversions == 1
    assert a.is_control is True
    assert a.conversion_rate == pytest.approx(50.0)

    b = result["b"]
    assert b.unique_views == 1
    assert b.total_events == 3
    assert b.conversions == 1  # s9 never viewed


def test_variant_without_events_gets_zeros():
    c = by_id(build_variant_analytics(VARIANTS, EVENTS))["c"]
    assert (c.total_views, c.unique_views, c.total_events, c.conversions) == (0, 0, 0, 0)
    assert c.variant_name == "Unused"


def test_is_control_defaults_false():
    analytics = build_variant_analytics(VARIANTS[["variant_id", "variant_name"]], EVENTS)
    assert not any(a.is_control for a in analytics)


def test_missing_columns():
    with pytest.raises(ValueError):
        build_variant_analytics(VARIANTS, EVENTS.drop(columns=["session_id"]))
    with pytest.raises(ValueError):
        build_variant_analytics(VARIANTS.drop(columns=["variant_name"]), EVENTS)
