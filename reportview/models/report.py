"""Report data models.

Upstream report documents come in two shapes: single-market "legacy"
reports and multi-market reports. ``parse_report`` is the only place that
looks at the ``isMultiMarket`` flag; everything downstream dispatches on
the returned type.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

from reportview.models.market import CategoryFamily, Market

logger = logging.getLogger(__name__)


class ReportStatus(Enum):
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Any) -> ReportStatus:
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.UNKNOWN


@dataclass
class CategorySlice:
    """Visibility and competitive analysis for one category in one market."""

    name: str
    id: str | None = None
    visibility: dict | None = None
    competitive: dict | None = None

    @property
    def has_data(self) -> bool:
        return bool(self.visibility) or bool(self.competitive)


@dataclass
class MarketResult:
    """Analysis output for a single market."""

    reputation: dict | None = None
    categories_associated: dict | None = None
    categories: dict[str, dict] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> MarketResult:
        categories = _as_dict(data.get("categories"))
        return cls(
            reputation=_as_dict(data.get("reputation")) or None,
            categories_associated=_as_dict(data.get("categories_associated")) or None,
            categories={k: v for k, v in categories.items() if isinstance(v, dict)},
        )


@dataclass
class ReportHeader:
    """Fields shared by both report shapes."""

    id: str = ""
    entity: str = ""
    status: ReportStatus = ReportStatus.UNKNOWN
    progress: int = 0
    created_at: str | None = None
    execution_time: float | None = None
    error_message: str | None = None
    sources: list = field(default_factory=list)


@dataclass
class LegacyReport(ReportHeader):
    """A single-market report."""

    category: str | None = None
    countries: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    reputation: dict | None = None
    categories_associated: dict | None = None
    categories: list[CategorySlice] = field(default_factory=list)
    competitors: list = field(default_factory=list)


@dataclass
class MultiMarketReport(ReportHeader):
    """A report run across several markets and category families."""

    markets: list[Market] = field(default_factory=list)
    category_families: list[CategoryFamily] = field(default_factory=list)
    market_results: dict[str, MarketResult] = field(default_factory=dict)
    competitors: dict[str, dict[str, list]] = field(default_factory=dict)


Report = Union[LegacyReport, MultiMarketReport]


def parse_report(document: dict | None) -> Report:
    """Build a typed report from a raw API document.

    Absent or wrong-typed fields fall back to empty defaults; a partial
    document (still processing) parses the same way as a finished one.
    """
    document = _as_dict(document)
    header = _parse_header(document)

    if document.get("isMultiMarket"):
        return MultiMarketReport(
            **header,
            markets=[Market.from_dict(m) for m in _as_list(document.get("markets")) if isinstance(m, dict)],
            category_families=[
                CategoryFamily.from_dict(f)
                for f in _as_list(document.get("categoryFamilies"))
                if isinstance(f, dict)
            ],
            market_results={
                code: MarketResult.from_dict(result)
                for code, result in _as_dict(document.get("marketResults")).items()
                if isinstance(result, dict)
            },
            competitors=_parse_competitor_map(document.get("competitors")),
        )

    results = _as_dict(document.get("analysisResults"))
    return LegacyReport(
        **header,
        category=document.get("category"),
        countries=_as_list(document.get("countries")),
        languages=_as_list(document.get("languages")),
        reputation=_as_dict(results.get("reputation")) or None,
        categories_associated=_as_dict(results.get("categories_associated")) or None,
        categories=[
            _parse_legacy_category(c, document.get("category"))
            for c in _as_list(results.get("categories"))
            if isinstance(c, dict)
        ],
        competitors=_as_list(document.get("competitors")),
    )


def _parse_header(document: dict) -> dict:
    try:
        progress = int(document.get("progress") or 0)
    except (TypeError, ValueError):
        progress = 0
    return {
        "id": str(document.get("id") or ""),
        "entity": document.get("entity") or "",
        "status": ReportStatus.parse(document.get("status")),
        "progress": progress,
        "created_at": document.get("created_at"),
        "execution_time": document.get("execution_time"),
        "error_message": document.get("error_message"),
        "sources": _as_list(document.get("sources")),
    }


def _parse_legacy_category(data: dict, default_name: str | None) -> CategorySlice:
    return CategorySlice(
        name=data.get("name") or default_name or "Default",
        id=data.get("id"),
        visibility=_as_dict(data.get("visibility")) or None,
        competitive=_as_dict(data.get("competitive")) or None,
    )


def _parse_competitor_map(raw: Any) -> dict[str, dict[str, list]]:
    if isinstance(raw, list):
        # A legacy flat list on a multi-market document carries no market keys.
        logger.warning("Multi-market report has a flat competitor list; ignoring it")
        return {}
    parsed: dict[str, dict[str, list]] = {}
    for category_id, by_market in _as_dict(raw).items():
        if isinstance(by_market, dict):
            parsed[category_id] = {
                code: competitors
                for code, competitors in by_market.items()
                if isinstance(competitors, list)
            }
    return parsed


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []
