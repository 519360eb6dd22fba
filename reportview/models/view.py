"""Navigation state data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from reportview.models.source import LLMSource


class SubTab(Enum):
    VISIBILITY = "visibility"
    COMPETITIVE = "competitive"


@dataclass(frozen=True)
class Overview:
    """Aggregated view across every market and category."""


@dataclass(frozen=True)
class Reputation:
    """Report-level reputation view."""


@dataclass(frozen=True)
class CategoryView:
    """One category, one sub-tab.

    ``category_index`` is not bounds-checked here; whoever renders the view
    must handle an index past the end of the current category list.
    """

    category_index: int = 0
    sub_tab: SubTab = SubTab.VISIBILITY

    def __post_init__(self) -> None:
        if self.category_index < 0:
            raise ValueError("category_index must be >= 0")


@dataclass(frozen=True)
class Insights:
    """PR insights view."""


ViewState = Union[Overview, Reputation, CategoryView, Insights]


@dataclass(frozen=True)
class SessionState:
    """Everything the user can change while looking at one report."""

    view: ViewState
    selected_market: str | None
    selected_sources: frozenset[LLMSource]
    market_codes: tuple[str, ...] = ()


# -- Events --


@dataclass(frozen=True)
class SetView:
    view: ViewState


@dataclass(frozen=True)
class SelectMarket:
    code: str


@dataclass(frozen=True)
class ToggleSource:
    source: LLMSource | str


Event = Union[SetView, SelectMarket, ToggleSource]
