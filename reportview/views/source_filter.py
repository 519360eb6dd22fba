"""Source filter: narrows report data to the selected LLM sources."""

from __future__ import annotations

from collections.abc import Iterable

from reportview.models.source import LLMSource
from reportview.models.topics import SentimentTopics, Topic


def source_matcher(selected: Iterable[LLMSource]) -> set[str]:
    """Lower-cased names a ``cited_by`` entry may carry for the selected sources.

    Both the display name (``OpenAI``) and the raw id (``openai``) count.
    """
    names: set[str] = set()
    for source in selected:
        names.add(source.value.lower())
        names.add(source.display_name.lower())
    return names


def topic_is_visible(topic: Topic, names: set[str]) -> bool:
    # Topics without attribution are always shown.
    if not topic.cited_by:
        return True
    return any(cited.lower() in names for cited in topic.cited_by)


def filter_topics(
    topics: SentimentTopics | None, selected: Iterable[LLMSource]
) -> SentimentTopics | None:
    """Keep topics cited by a selected source, most frequent first.

    Returns a new ``SentimentTopics``; the input is left untouched.
    """
    if topics is None:
        return None
    names = source_matcher(selected)

    def _filter(bucket: tuple[Topic, ...]) -> tuple[Topic, ...]:
        kept = [t for t in bucket if topic_is_visible(t, names)]
        return tuple(sorted(kept, key=lambda t: t.frequency, reverse=True))

    return SentimentTopics(
        positive_topics=_filter(topics.positive_topics),
        negative_topics=_filter(topics.negative_topics),
        neutral_topics=_filter(topics.neutral_topics),
        mixed_topics=_filter(topics.mixed_topics),
    )


def filter_llm_performance(rows: list | None, selected: Iterable[LLMSource]) -> list[dict]:
    """Per-LLM performance rows whose ``llm`` is selected."""
    ids = {s.value for s in selected}
    return [r for r in rows or [] if isinstance(r, dict) and r.get("llm") in ids]


def select_llm_metrics(visibility_slice: dict | None, selected: Iterable[LLMSource]) -> dict:
    """Visibility, SOV and average position for the selected sources.

    Averages the matching ``llm_performance`` rows. When none match, the
    combined ``visibility`` block of the slice is used instead.
    """
    visibility_slice = _as_dict(visibility_slice)
    rows = filter_llm_performance(visibility_slice.get("llm_performance"), selected)

    if not rows:
        combined = _as_dict(visibility_slice.get("visibility"))
        return {
            "visibility": combined.get("visibility") or 0,
            "sov": combined.get("sov") or 0,
            "avgPosition": combined.get("averagePosition") or 0,
        }

    count = len(rows)
    return {
        "visibility": sum(r.get("visibility") or 0 for r in rows) / count,
        "sov": sum(r.get("sov") or 0 for r in rows) / count,
        "avgPosition": sum(r.get("avgPosition") or 0 for r in rows) / count,
    }


def filter_questions(questions: list | None, selected: Iterable[LLMSource]) -> list[dict]:
    """Question records answered by at least one selected source."""
    ids = [s.value for s in selected]
    kept = []
    for item in questions or []:
        if not isinstance(item, dict):
            continue
        responses = _as_dict(item.get("llm_responses"))
        if any(responses.get(source_id) for source_id in ids):
            kept.append(item)
    return kept


def _as_dict(value) -> dict:
    return value if isinstance(value, dict) else {}
