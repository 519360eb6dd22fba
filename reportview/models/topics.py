"""Sentiment topic data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Topic:
    """A concept extracted from model answers, with its attribution."""

    topic: str
    frequency: float = 0.0
    quotes: tuple = ()
    sources: tuple = ()
    cited_by: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> Topic:
        try:
            frequency = float(data.get("frequency") or 0.0)
        except (TypeError, ValueError):
            frequency = 0.0
        return cls(
            topic=str(data.get("topic") or ""),
            frequency=frequency,
            quotes=tuple(_as_list(data.get("quotes"))),
            sources=tuple(_as_list(data.get("sources"))),
            cited_by=tuple(str(c) for c in _as_list(data.get("cited_by")) if c),
        )


@dataclass(frozen=True)
class SentimentTopics:
    """Topics grouped by sentiment.

    Older reports put neutral topics under ``mixed_topics``; ``neutral``
    returns whichever bucket is populated.
    """

    positive_topics: tuple[Topic, ...] = ()
    negative_topics: tuple[Topic, ...] = ()
    neutral_topics: tuple[Topic, ...] = ()
    mixed_topics: tuple[Topic, ...] = ()

    @classmethod
    def from_dict(cls, data: dict | None) -> SentimentTopics:
        data = data if isinstance(data, dict) else {}
        return cls(**{name: _parse_bucket(data.get(name)) for name in BUCKETS})

    @property
    def neutral(self) -> tuple[Topic, ...]:
        return self.neutral_topics if self.neutral_topics else self.mixed_topics


BUCKETS = ("positive_topics", "negative_topics", "neutral_topics", "mixed_topics")


def _parse_bucket(value: Any) -> tuple[Topic, ...]:
    return tuple(Topic.from_dict(t) for t in _as_list(value) if isinstance(t, dict))


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []
