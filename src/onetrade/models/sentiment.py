"""Sentiment verdict model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Decision(Enum):
    """Closed set of trading opinions."""

    BUY = "Buy"
    WAIT = "Wait"
    SELL = "Sell"

    @classmethod
    def parse(cls, text: str) -> Decision | None:
        """Case-insensitive match against the canonical values."""
        key = text.strip().lower()
        for member in cls:
            if member.value.lower() == key:
                return member
        return None


@dataclass(frozen=True)
class SentimentVerdict:
    """Decision parsed from generated text, plus its explanation."""

    decision: Decision | None
    explanation: str
