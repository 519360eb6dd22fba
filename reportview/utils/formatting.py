"""Formatting and normalization helpers shared by the view layer."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from reportview.models.source import LLMSource

_WHITESPACE = re.compile(r"\s+")


def format_category_name(name: str | None) -> str:
    """Turn ``running_shoes`` / ``RUNNING shoes`` into ``Running Shoes``."""
    if not name:
        return ""
    words = str(name).replace("_", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def generate_market_code(country: str, language: str) -> str:
    """Derive the ``lang-CC`` market code from a country and a language.

    >>> generate_market_code("United States", "English")
    'en-UN'
    """
    lang_code = language.lower()[:2]
    country_code = _WHITESPACE.sub("", country)[:2].upper()
    return f"{lang_code}-{country_code}"


def extract_domain(url: str | None) -> str:
    """Hostname of a URL without its ``www.`` prefix.

    Returns the input unchanged when it is not an absolute URL.
    """
    if not url:
        return ""
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.hostname:
        return url
    return parsed.hostname.replace("www.", "", 1)


def clean_domain(domain: str | None) -> str:
    """Strip scheme, ``www.`` and any path from a domain-ish string."""
    if not domain:
        return ""
    text = re.sub(r"^https?://", "", domain.strip())
    text = re.sub(r"^www\.", "", text)
    return re.sub(r"/.*$", "", text)


def youtube_channel(source: dict) -> str | None:
    """Channel name for a YouTube-hosted source, else ``None``.

    An empty string means the source is on YouTube but the channel is unknown.
    """
    if source.get("youtube_channel"):
        return source["youtube_channel"]

    domain = source.get("domain") or ""
    if source.get("isYouTube"):
        return source.get("youtubeChannel") or domain.replace("youtube.com/", "") or ""

    url = source.get("url") or ""
    if "youtube.com" in url or "youtu.be" in url or "youtube.com" in domain:
        return ""
    return None


def source_display_name(source_id: LLMSource | str) -> str:
    """``gemini`` -> ``Gemini``; unknown ids are returned as given."""
    try:
        return LLMSource.parse(source_id).display_name
    except ValueError:
        return str(source_id)


def format_percent(value: float | None, decimals: int = 0, default: str = "N/A") -> str:
    """Format a 0-1 fraction as a percentage string."""
    if value is None:
        return default
    try:
        return f"{float(value) * 100:.{decimals}f}%"
    except (TypeError, ValueError):
        return default


def format_number(value: float | None, decimals: int = 1, default: str = "N/A") -> str:
    if value is None:
        return default
    try:
        return f"{float(value):.{decimals}f}"
    except (TypeError, ValueError):
        return default
