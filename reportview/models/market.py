"""Market and category family data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from reportview.utils.formatting import generate_market_code


@dataclass(frozen=True)
class Market:
    """A country/language pair a report is run against."""

    country: str
    language: str
    code: str
    is_primary: bool = False

    @classmethod
    def create(cls, country: str, language: str, is_primary: bool = False) -> Market:
        return cls(
            country=country,
            language=language,
            code=generate_market_code(country, language),
            is_primary=is_primary,
        )

    @classmethod
    def from_dict(cls, data: dict) -> Market:
        country = data.get("country") or ""
        language = data.get("language") or ""
        code = data.get("code") or generate_market_code(country, language)
        return cls(
            country=country,
            language=language,
            code=code,
            is_primary=bool(data.get("isPrimary", False)),
        )

    def to_dict(self) -> dict:
        return {
            "country": self.country,
            "language": self.language,
            "code": self.code,
            "isPrimary": self.is_primary,
        }


@dataclass(frozen=True)
class CategoryFamily:
    """A category shared across markets, with per-market translated names."""

    id: str
    canonical_name: str
    translations: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> CategoryFamily:
        translations: dict[str, str] = {}
        raw = data.get("translations")
        if isinstance(raw, dict):
            for code, entry in raw.items():
                if isinstance(entry, dict) and entry.get("name"):
                    translations[code] = entry["name"]
        return cls(
            id=str(data.get("id") or ""),
            canonical_name=data.get("canonical_name") or "",
            translations=translations,
        )

    def name_for(self, market_code: str | None) -> str:
        """Translated name for ``market_code``, falling back to the canonical name."""
        if market_code and self.translations.get(market_code):
            return self.translations[market_code]
        return self.canonical_name
