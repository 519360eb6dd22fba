"""View-model assembly: everything the renderer needs for the current state."""

from __future__ import annotations

from dataclasses import dataclass, field

from reportview.config import ChartTheme, settings
from reportview.models.report import CategorySlice, MultiMarketReport, Report, ReportStatus
from reportview.models.source import LLMSource
from reportview.models.topics import SentimentTopics
from reportview.models.view import CategoryView, SessionState, ViewState
from reportview.views.associations import build_associations, reputation_rows
from reportview.views.competitors import competitors_for
from reportview.views.market_data import MarketData, market_label, resolve
from reportview.views.source_filter import filter_topics


@dataclass
class ReportViewModel:
    entity: str
    status: ReportStatus
    view: ViewState
    headline: str
    market_label: str | None
    data: MarketData
    associations: dict
    reputation_rows: list[dict] = field(default_factory=list)
    sentiment_topics: SentimentTopics | None = None
    active_category: CategorySlice | None = None
    competitors: list = field(default_factory=list)
    theme: ChartTheme | None = None
    source_toggles: list[dict] = field(default_factory=list)


def build_view_model(
    report: Report, state: SessionState, theme: ChartTheme | None = None
) -> ReportViewModel:
    data = resolve(report, state.selected_market)
    associations = build_associations(data.categories, data.categories_associated)

    topics = None
    if data.reputation and data.reputation.get("sentiment_topics") is not None:
        topics = filter_topics(
            SentimentTopics.from_dict(data.reputation["sentiment_topics"]),
            state.selected_sources,
        )

    active_category = None
    competitors: list = []
    view = state.view
    if isinstance(view, CategoryView) and view.category_index < len(data.categories):
        active_category = data.categories[view.category_index]
        competitors = competitors_for(report, view.category_index, state.selected_market)

    return ReportViewModel(
        entity=report.entity,
        status=report.status,
        view=view,
        headline=headline(report),
        market_label=market_label(report, state.selected_market),
        data=data,
        associations=associations,
        reputation_rows=reputation_rows(associations),
        sentiment_topics=topics,
        active_category=active_category,
        competitors=competitors,
        theme=theme if theme is not None else settings.chart_theme,
        source_toggles=source_toggles(state),
    )


def headline(report: Report) -> str:
    """``2 categories across 3 markets`` or ``Category: Running Shoes``."""
    if isinstance(report, MultiMarketReport):
        n_cat = len(report.category_families)
        n_mkt = len(report.markets)
        categories = "category" if n_cat == 1 else "categories"
        markets = "market" if n_mkt == 1 else "markets"
        return f"{n_cat} {categories} across {n_mkt} {markets}"
    if report.category:
        return f"Category: {report.category}"
    return ""


def source_toggles(state: SessionState) -> list[dict]:
    """One entry per source filter toggle, in enum order."""
    return [
        {"source": s.value, "label": s.label, "selected": s in state.selected_sources}
        for s in LLMSource
    ]
