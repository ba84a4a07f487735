"""Finnhub provider: company news."""

from __future__ import annotations

from datetime import date

from onetrade.models.news import NewsArticle
from onetrade.providers.base import BaseHTTPClient, clean_text, iso_date, parse_int


class FinnhubClient(BaseHTTPClient):
    """Fetch company news from Finnhub.io.

    Capabilities: news.
    """

    name = "finnhub"
    base_url = "https://finnhub.io/api/v1"

    def capabilities(self) -> set[str]:
        return {"news"}

    def get_company_news(
        self, symbol: str, start: date | str, end: date | str,
    ) -> list[NewsArticle]:
        ticker = self._symbol(symbol)
        data = self._get_json(
            "/company-news",
            {
                "symbol": ticker,
                "from": iso_date(start),
                "to": iso_date(end),
                "token": self.api_key,
            },
        )
        if not isinstance(data, list):
            raise self._malformed("expected a list of articles")

        articles: list[NewsArticle] = []
        for item in data:
            if not isinstance(item, dict):
                continue
            headline = clean_text(item.get("headline"))
            if not headline:
                continue
            articles.append(NewsArticle(
                headline=headline,
                summary=clean_text(item.get("summary")) or None,
                datetime=parse_int(item.get("datetime")) or 0,
            ))
        return articles
