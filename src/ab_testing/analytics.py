"""
Per-variant analytics from raw A/B tracking events.

Input: a variants table (variant_id, variant_name, optional is_control) and an
events table (variant_id, event_id, session_id, event_type).
Output: one VariantAnalytics per variant, ready for the z-test report or
the Bayesian winner evaluation.
"""

import logging
from typing import List

import pandas as pd

from .schema import VariantAnalytics

logger = logging.getLogger(__name__)

PAGE_VIEW = "page_view"

VARIANT_COLUMNS = ["variant_id", "variant_name"]
EVENT_COLUMNS = ["variant_id", "event_id", "session_id", "event_type"]


def _require_columns(df: pd.DataFrame, columns: List[str], table: str) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise ValueError(f"{table} table is missing columns: {missing}")


def build_variant_analytics(
    variants: pd.DataFrame,
    events: pd.DataFrame,
) -> List[VariantAnalytics]:
    """
    Aggregate tracking events into per-variant counts.

    Per variant:
        total_views: distinct page_view event ids
        unique_views: distinct sessions with a page_view
        total_events: distinct non-view event ids
        conversions: distinct viewing sessions that also produced a non-view event

    Variants without events are reported with zero counts.
    """
    _require_columns(variants, VARIANT_COLUMNS, "Variants")
    _require_columns(events, EVENT_COLUMNS, "Events")

    is_view = events["event_type"] == PAGE_VIEW
    views = events[is_view]
    actions = events[~is_view]

    viewed_sessions = views[["variant_id", "session_id"]].drop_duplicates()
    converted = actions.merge(viewed_sessions, on=["variant_id", "session_id"], how="inner")

    counts = pd.DataFrame({
        "total_views": views.groupby("variant_id")["event_id"].nunique(),
        "unique_views": views.groupby("variant_id")["session_id"].nunique(),
        "total_events": actions.groupby("variant_id")["event_id"].nunique(),
        "conversions": converted.groupby("variant_id")["session_id"].nunique(),
    })

    table = variants.drop_duplicates(subset=["variant_id"]).merge(
        counts, left_on="variant_id", right_index=True, how="left"
    )
    count_cols = ["total_views", "unique_views", "total_events", "conversions"]
    table[count_cols] = table[count_cols].fillna(0).astype(int)
    if "is_control" in table.columns:
        table["is_control"] = table["is_control"].fillna(False).astype(bool)
    else:
        table["is_control"] = False

    analytics = [
        VariantAnalytics(
            variant_id=str(row.variant_id),
            variant_name=str(row.variant_name),
            unique_views=int(row.unique_views),
            total_events=int(row.total_events),
            total_views=int(row.total_views),
            conversions=int(row.conversions),
            is_control=bool(row.is_control),
        )
        for row in table.itertuples(index=False)
    ]

    logger.info(
        f"Aggregated {len(events)} events into analytics for {len(analytics)} variants"
    )
    return analytics
