"""Company news models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone


@dataclass(frozen=True)
class NewsArticle:
    """Single news item.

    Attributes:
        headline: Article title.
        summary: Short summary, absent for some sources.
        datetime: Publication time as unix seconds.
    """

    headline: str
    summary: str | None
    datetime: int

    @property
    def published_at(self) -> datetime:
        return datetime.fromtimestamp(self.datetime, tz=timezone.utc)


@dataclass(frozen=True)
class NewsWindow:
    """Most recent articles for a ticker over a date range, newest first."""

    symbol: str
    start: date
    end: date
    articles: tuple[NewsArticle, ...] = field(default_factory=tuple)

    @classmethod
    def build(
        cls,
        symbol: str,
        start: date,
        end: date,
        articles: list[NewsArticle],
        limit: int,
    ) -> NewsWindow:
        newest = sorted(articles, key=lambda a: a.datetime, reverse=True)
        return cls(symbol=symbol, start=start, end=end, articles=tuple(newest[:limit]))

    def __len__(self) -> int:
        return len(self.articles)
