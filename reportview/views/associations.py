"""Category association builder.

Reports produced by the category-detection step carry a
``categories_associated`` summary. When a market has none, one is built
from each category's visibility slice instead.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

from reportview.models.report import CategorySlice
from reportview.utils.formatting import format_category_name, format_number, format_percent

MAX_SUMMARY_COMPETITORS = 5
MAX_DISPLAY_COMPETITORS = 3


@dataclass
class CompetitorSummary:
    name: str
    average_rank: float | None = None
    sov: float | None = None


@dataclass
class CategorySummary:
    name: str
    category_visibility: float = 0
    category_sov: float = 0
    average_position: float | None = None
    mentions: int = 0
    comment: str = ""
    top_competitors: list[CompetitorSummary] = field(default_factory=list)


def build_associations(
    categories: list[CategorySlice], existing: dict | None
) -> dict:
    """Return ``existing`` unchanged, or a summary built from visibility data."""
    if existing is not None:
        return existing

    summaries = [
        asdict(summarize_category(c)) for c in categories if c.visibility
    ]
    return {"categories": summaries}


def summarize_category(category: CategorySlice) -> CategorySummary:
    visibility = _as_dict(category.visibility)
    metrics = _as_dict(visibility.get("visibility"))

    ranking = visibility.get("brand_family_ranking")
    if ranking is None:
        ranking = visibility.get("entities_ranking")

    # Upstream ranking order is kept as-is.
    competitors = [
        CompetitorSummary(
            name=entry.get("name", ""),
            average_rank=entry.get("average_rank"),
            sov=entry.get("sov"),
        )
        for entry in ranking or []
        if isinstance(entry, dict) and not entry.get("is_target_brand")
    ][:MAX_SUMMARY_COMPETITORS]

    return CategorySummary(
        name=category.name,
        category_visibility=_or_default(metrics.get("visibility"), 0),
        category_sov=_or_default(metrics.get("sov"), 0),
        average_position=metrics.get("averagePosition"),
        mentions=_or_default(metrics.get("mentions"), 0),
        comment=_or_default(visibility.get("summary"), ""),
        top_competitors=competitors,
    )


def reputation_rows(associations: dict | None) -> list[dict]:
    """Table rows for the "categories associated" panel of the reputation view."""
    rows = []
    categories = (associations or {}).get("categories")
    for cat in categories if isinstance(categories, list) else []:
        if not isinstance(cat, dict):
            continue
        top = cat.get("top_competitors")
        competitors = [
            c.get("name") for c in (top if isinstance(top, list) else [])[:MAX_DISPLAY_COMPETITORS]
            if isinstance(c, dict)
        ]
        rows.append(
            {
                "name": format_category_name(cat.get("name")),
                "appearance": format_percent(cat.get("category_visibility"), 0),
                "sov": format_percent(cat.get("category_sov"), 1),
                "avg_position": format_number(cat.get("average_position"), 1),
                "mentions": cat.get("mentions") or 0,
                "comment": cat.get("comment") or "",
                "competitors": competitors,
            }
        )
    return rows


def _or_default(value, default):
    return default if value is None else value


def _as_dict(value) -> dict:
    return value if isinstance(value, dict) else {}
