"""Market data resolver: picks the analysis slice for the selected market."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from reportview.models.report import (
    CategorySlice,
    LegacyReport,
    MultiMarketReport,
    Report,
)

logger = logging.getLogger(__name__)


@dataclass
class MarketData:
    """Reputation, category associations and categories for one market."""

    reputation: dict | None = None
    categories_associated: dict | None = None
    categories: list[CategorySlice] = field(default_factory=list)


def resolve(report: Report, selected_market: str | None) -> MarketData:
    """Resolve the data shown for ``selected_market``.

    Legacy reports have a single market, so the selection is ignored. An
    unknown market on a multi-market report gives an empty ``MarketData``.
    """
    if isinstance(report, LegacyReport):
        return MarketData(
            reputation=report.reputation,
            categories_associated=report.categories_associated,
            categories=list(report.categories),
        )

    result = report.market_results.get(selected_market) if selected_market else None
    if result is None:
        logger.debug("No results for market %r on report %s", selected_market, report.id)
        return MarketData()

    categories = []
    for family in report.category_families:
        data = result.categories.get(family.id) or {}
        categories.append(
            CategorySlice(
                id=family.id,
                name=family.name_for(selected_market),
                visibility=data.get("visibility") or None,
                competitive=data.get("competitive") or None,
            )
        )

    return MarketData(
        reputation=result.reputation,
        categories_associated=result.categories_associated,
        categories=categories,
    )


def default_market(report: Report) -> str | None:
    """The primary market's code, else the first market's, else ``None``."""
    if not isinstance(report, MultiMarketReport) or not report.markets:
        return None
    for market in report.markets:
        if market.is_primary:
            return market.code
    return report.markets[0].code


def market_label(report: Report, code: str | None) -> str | None:
    """``France (French)`` for a market code on a multi-market report."""
    if not isinstance(report, MultiMarketReport):
        return None
    for market in report.markets:
        if market.code == code:
            return f"{market.country} ({market.language})"
    return None
