"""Buy/Wait/Sell opinion generated from recent company news."""

from __future__ import annotations

import asyncio
import logging
from datetime import date, timedelta
from typing import Callable

from onetrade.errors import ProviderError, SentimentError
from onetrade.models.news import NewsArticle, NewsWindow
from onetrade.models.sentiment import Decision, SentimentVerdict
from onetrade.prompts import NO_NEWS, NO_SUMMARY, SENTIMENT_PROMPT
from onetrade.providers.base import BaseProvider

logger = logging.getLogger(__name__)

DEFAULT_MAX_ARTICLES = 30
DEFAULT_LOOKBACK_DAYS = 90


def render_articles(articles: tuple[NewsArticle, ...] | list[NewsArticle]) -> str:
    if not articles:
        return NO_NEWS
    blocks = [
        f"{i}. Title: {a.headline}\n   Summary: {a.summary or NO_SUMMARY}"
        for i, a in enumerate(articles, start=1)
    ]
    return "\n\n".join(blocks)


def build_prompt(window: NewsWindow) -> str:
    return SENTIMENT_PROMPT.format(
        symbol=window.symbol,
        articles=render_articles(window.articles),
    )


def parse_verdict(text: str) -> SentimentVerdict:
    """Split generated text into a decision line and an explanation.

    The first line counts as a decision only if it is one of Buy, Wait or
    Sell (any case, ignoring markdown emphasis and trailing punctuation).
    Otherwise the whole text is the explanation.
    """
    body = text.strip()
    head, _, rest = body.partition("\n")
    decision = Decision.parse(head.strip().strip("*_#:.!"))
    if decision is None:
        return SentimentVerdict(decision=None, explanation=text)
    return SentimentVerdict(decision=decision, explanation=rest.strip())


class SentimentSynthesizer:
    """Summarize the last ``lookback_days`` of news into a SentimentVerdict."""

    def __init__(
        self,
        news_provider: BaseProvider,
        text_generator: BaseProvider,
        max_articles: int = DEFAULT_MAX_ARTICLES,
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self.news_provider = news_provider
        self.text_generator = text_generator
        self.max_articles = max_articles
        self.lookback_days = lookback_days
        self._clock = clock

    async def fetch_window(self, ticker: str) -> NewsWindow:
        end = self._clock()
        start = end - timedelta(days=self.lookback_days)
        try:
            articles = await asyncio.to_thread(
                self.news_provider.get_company_news, ticker, start, end,
            )
        except ProviderError as e:
            raise SentimentError(SentimentError.NEWS, e) from e
        window = NewsWindow.build(ticker.upper(), start, end, articles, self.max_articles)
        logger.debug("%d of %d articles kept for %s", len(window), len(articles), ticker)
        return window

    async def synthesize(self, ticker: str) -> SentimentVerdict:
        window = await self.fetch_window(ticker)
        try:
            text = await asyncio.to_thread(self.text_generator.generate, build_prompt(window))
        except ProviderError as e:
            raise SentimentError(SentimentError.GENERATION, e) from e
        verdict = parse_verdict(text)
        if verdict.decision is None:
            logger.info("Unstructured sentiment response for %s", ticker)
        return verdict
