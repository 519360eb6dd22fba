"""Report session: one report plus the user's navigation state."""

from __future__ import annotations

import logging

from reportview.config import ChartTheme, settings
from reportview.models.report import Report
from reportview.models.view import Event, SessionState
from reportview.views.navigation import apply, start_session
from reportview.views.view_model import ReportViewModel, build_view_model

logger = logging.getLogger(__name__)


class ReportSession:
    """Holds the current report and state; every event replaces the state."""

    def __init__(self, report: Report, theme: ChartTheme | None = None) -> None:
        self.theme = theme if theme is not None else settings.chart_theme
        self.report = report
        self.state: SessionState = start_session(report)

    def load(self, report: Report) -> SessionState:
        """Swap in a refreshed report and re-derive the initial state.

        The current source selection is kept.
        """
        self.report = report
        self.state = start_session(report, self.state.selected_sources)
        logger.info("Session reloaded report %s (%s)", report.id, report.status.value)
        return self.state

    def dispatch(self, event: Event) -> SessionState:
        self.state = apply(self.state, event)
        return self.state

    def view_model(self) -> ReportViewModel:
        return build_view_model(self.report, self.state, self.theme)
