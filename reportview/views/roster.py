"""Market roster editor: the market list built before a report is submitted.

Rosters are plain lists of frozen ``Market`` objects. Every operation
returns a new list; whenever the result is non-empty exactly one market is
primary.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from reportview.models.market import Market

logger = logging.getLogger(__name__)

MARKET_PRESETS: dict[str, list[tuple[str, str]]] = {
    "US & UK": [
        ("United States", "English"),
        ("United Kingdom", "English"),
    ],
    "Major EU": [
        ("France", "French"),
        ("Germany", "German"),
        ("Spain", "Spanish"),
        ("Italy", "Italian"),
    ],
    "APAC": [
        ("Japan", "Japanese"),
        ("South Korea", "Korean"),
        ("Singapore", "English"),
        ("Australia", "English"),
    ],
    "LATAM": [
        ("Brazil", "Portuguese"),
        ("Mexico", "Spanish"),
    ],
}


class DuplicateMarketError(ValueError):
    """Raised when a market with the same code is already in the roster."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Market {code} already exists")
        self.code = code


def default_roster() -> list[Market]:
    return [Market(country="Global", language="All Languages", code="all-GL", is_primary=True)]


def add_market(roster: list[Market], country: str, language: str) -> list[Market]:
    """Append a market; the first market added becomes primary.

    Blank country/language values are expected to be rejected by the caller.
    """
    market = Market.create(country, language, is_primary=not roster)
    if any(m.code == market.code for m in roster):
        logger.warning("Rejected duplicate market %s", market.code)
        raise DuplicateMarketError(market.code)
    return [*roster, market]


def remove_market(roster: list[Market], index: int) -> list[Market]:
    """Drop the market at ``index``, promoting the new first market if needed."""
    if not 0 <= index < len(roster):
        logger.warning("remove_market: index %d out of range (%d markets)", index, len(roster))
        return list(roster)
    remaining = roster[:index] + roster[index + 1:]
    return _ensure_primary(remaining)


def set_primary(roster: list[Market], index: int) -> list[Market]:
    """Make the market at ``index`` the only primary one."""
    if not 0 <= index < len(roster):
        logger.warning("set_primary: index %d out of range (%d markets)", index, len(roster))
        return list(roster)
    return [replace(m, is_primary=(i == index)) for i, m in enumerate(roster)]


def apply_preset(name: str) -> list[Market]:
    """A fresh roster from one of ``MARKET_PRESETS``; the first market is primary."""
    try:
        pairs = MARKET_PRESETS[name]
    except KeyError:
        raise ValueError(f"Unknown market preset: {name}") from None
    return [
        Market.create(country, language, is_primary=(i == 0))
        for i, (country, language) in enumerate(pairs)
    ]


def primary_market(roster: list[Market]) -> Market | None:
    for market in roster:
        if market.is_primary:
            return market
    return None


def _ensure_primary(roster: list[Market]) -> list[Market]:
    primaries = [i for i, m in enumerate(roster) if m.is_primary]
    if not roster or len(primaries) == 1:
        return list(roster)
    keep = primaries[0] if primaries else 0
    return [replace(m, is_primary=(i == keep)) for i, m in enumerate(roster)]
