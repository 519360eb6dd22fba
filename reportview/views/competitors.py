"""Competitor resolver."""

from __future__ import annotations

from reportview.models.report import LegacyReport, Report


def competitors_for(report: Report, category_index: int, selected_market: str | None) -> list:
    """Competitors for one category in one market.

    Legacy reports keep a single flat list for every category and market.
    Any missing link in the multi-market lookup gives an empty list.
    """
    if isinstance(report, LegacyReport):
        return list(report.competitors)

    if not selected_market or not 0 <= category_index < len(report.category_families):
        return []

    family = report.category_families[category_index]
    return list(report.competitors.get(family.id, {}).get(selected_market) or [])
