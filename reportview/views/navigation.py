"""Navigation state machine.

``initial_state`` picks the first view for a freshly loaded report and
``apply`` folds user events into a new ``SessionState``. States are frozen;
every event produces a replacement, never an in-place edit.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from reportview.config import settings
from reportview.models.report import MultiMarketReport, Report
from reportview.models.source import LLMSource
from reportview.models.view import (
    CategoryView,
    Event,
    Insights,
    Overview,
    Reputation,
    SelectMarket,
    SessionState,
    SetView,
    SubTab,
    ToggleSource,
    ViewState,
)
from reportview.views.market_data import default_market, resolve

logger = logging.getLogger(__name__)


def initial_state(report: Report) -> ViewState:
    """First view to show for ``report``.

    Reports spanning several markets or categories open on the overview.
    Otherwise the reputation view, then the first category, then insights,
    depending on what the default market actually has.
    """
    if isinstance(report, MultiMarketReport):
        is_broad = len(report.markets) > 1 or len(report.category_families) > 1
    else:
        is_broad = len(report.categories) > 1

    if is_broad:
        view: ViewState = Overview()
    else:
        data = resolve(report, default_market(report))
        if data.reputation:
            view = Reputation()
        elif any(c.has_data for c in data.categories):
            view = CategoryView(category_index=0, sub_tab=SubTab.VISIBILITY)
        else:
            view = Insights()

    logger.debug("Initial view for report %s: %s", report.id, type(view).__name__)
    return view


def start_session(
    report: Report, sources: Iterable[LLMSource | str] | None = None
) -> SessionState:
    """Session state for a newly loaded report."""
    if sources is None:
        sources = settings.default_sources
    selected = frozenset(LLMSource.parse(s) for s in sources)
    if not selected:
        raise ValueError("At least one source must be selected")

    codes = tuple(m.code for m in report.markets) if isinstance(report, MultiMarketReport) else ()
    return SessionState(
        view=initial_state(report),
        selected_market=default_market(report),
        selected_sources=selected,
        market_codes=codes,
    )


def apply(state: SessionState, event: Event) -> SessionState:
    """Return the state that results from ``event``."""
    if isinstance(event, SetView):
        return set_view(state, event.view)
    if isinstance(event, SelectMarket):
        return select_market(state, event.code)
    if isinstance(event, ToggleSource):
        return toggle_source(state, event.source)
    raise TypeError(f"Unknown event: {event!r}")


def set_view(state: SessionState, view: ViewState) -> SessionState:
    # Bounds of CategoryView.category_index are the renderer's concern.
    return replace(state, view=view)


def select_market(state: SessionState, code: str) -> SessionState:
    if code not in state.market_codes:
        logger.warning("Ignoring unknown market %r", code)
        return replace(state)
    return replace(state, selected_market=code)


def toggle_source(state: SessionState, source: LLMSource | str) -> SessionState:
    """Add ``source`` if absent, remove it if present.

    Removing the last selected source is a no-op: the selection never
    becomes empty.
    """
    source = LLMSource.parse(source)
    selected = state.selected_sources
    if source not in selected:
        return replace(state, selected_sources=selected | {source})
    if len(selected) == 1:
        return replace(state)
    return replace(state, selected_sources=selected - {source})
