"""LLM source data model."""

from __future__ import annotations

from enum import Enum


class LLMSource(Enum):
    """An upstream model provider whose answers feed a report."""

    GEMINI = "gemini"
    OPENAI = "openai"

    @property
    def display_name(self) -> str:
        """Name used in topic attribution (``cited_by``)."""
        return DISPLAY_NAMES[self]

    @property
    def label(self) -> str:
        """Name shown on the filter toggle."""
        return LABELS[self]

    @classmethod
    def parse(cls, value: LLMSource | str) -> LLMSource:
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


DISPLAY_NAMES = {
    LLMSource.GEMINI: "Gemini",
    LLMSource.OPENAI: "OpenAI",
}

LABELS = {
    LLMSource.GEMINI: "Gemini",
    LLMSource.OPENAI: "ChatGPT",
}

ALL_SOURCES: frozenset[LLMSource] = frozenset(LLMSource)
