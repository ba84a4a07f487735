"""DetailLoader: concurrent assembly of the stock-detail panels."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable

from onetrade.config import OneTradeConfig, ProviderType
from onetrade.credentials import EnvKeyProvider, KeyProvider
from onetrade.models.price import CurrentPrice
from onetrade.providers import create_provider
from onetrade.providers.base import BaseHTTPClient, BaseProvider
from onetrade.resolver import FallbackResolver
from onetrade.sentiment import SentimentSynthesizer
from onetrade.trends import TrendCalculator

logger = logging.getLogger(__name__)

PANELS = ("info", "trends", "price", "sentiment")


class PanelStatus(Enum):
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"
    CANCELLED = "cancelled"


@dataclass
class PanelState:
    """One independently loaded section of the detail screen."""

    status: PanelStatus = PanelStatus.LOADING
    value: Any = None
    error: str | None = None


@dataclass
class DetailState:
    """Displayed state for one detail-screen activation.

    Each panel is written by exactly one task. Once ``dismissed`` is set
    nothing writes to the state again.
    """

    ticker: str
    info: PanelState = field(default_factory=PanelState)
    trends: PanelState = field(default_factory=PanelState)
    price: PanelState = field(default_factory=PanelState)
    sentiment: PanelState = field(default_factory=PanelState)
    dismissed: bool = False

    def panel(self, name: str) -> PanelState:
        if name not in PANELS:
            raise KeyError(name)
        return getattr(self, name)

    @property
    def done(self) -> bool:
        return all(self.panel(n).status is not PanelStatus.LOADING for n in PANELS)


class DetailSession:
    """Tasks for one activation; ``dismiss()`` cancels whatever is pending."""

    def __init__(self, state: DetailState, jobs: dict[str, Awaitable[Any]]) -> None:
        self.state = state
        self.tasks: dict[str, asyncio.Task[None]] = {
            name: asyncio.create_task(self._run(name, job), name=f"{state.ticker}:{name}")
            for name, job in jobs.items()
        }

    async def wait(self) -> DetailState:
        await asyncio.gather(*self.tasks.values(), return_exceptions=True)
        return self.state

    def dismiss(self) -> None:
        self.state.dismissed = True
        for name, task in self.tasks.items():
            if not task.done():
                task.cancel()
            # Tasks cancelled from outside are already done but never wrote.
            panel = self.state.panel(name)
            if panel.status is PanelStatus.LOADING:
                panel.status = PanelStatus.CANCELLED
        logger.debug("Detail session for %s dismissed", self.state.ticker)

    async def _run(self, name: str, job: Awaitable[Any]) -> None:
        try:
            value = await job
        except Exception as exc:  # noqa: BLE001
            logger.warning("%s panel failed for %s: %s", name, self.state.ticker, exc)
            if not self.state.dismissed:
                panel = self.state.panel(name)
                panel.status = PanelStatus.FAILED
                panel.error = str(exc)
            return
        if not self.state.dismissed:
            panel = self.state.panel(name)
            panel.value = value
            panel.status = PanelStatus.READY


class DetailLoader:
    """Load company info, trends, current price and sentiment concurrently.

    Usage::

        from onetrade import create_loader_from_env
        loader = create_loader_from_env()
        state = await loader.load_detail("AAPL")
        state.info.value.profile, state.trends.value, state.price.value

    A failing panel records a labeled error and leaves the others alone.
    """

    def __init__(
        self,
        resolver: FallbackResolver,
        trend_calculator: TrendCalculator,
        price_provider: BaseProvider,
        sentiment: SentimentSynthesizer,
    ) -> None:
        self.resolver = resolver
        self.trend_calculator = trend_calculator
        self.price_provider = price_provider
        self.sentiment = sentiment

    @classmethod
    def from_config(
        cls,
        config: OneTradeConfig,
        keys: KeyProvider | None = None,
    ) -> DetailLoader:
        keys = keys or EnvKeyProvider()
        built: dict[ProviderType, BaseProvider] = {}

        def provider(pt: ProviderType, capability: str) -> BaseProvider:
            if pt not in built:
                built[pt] = _build_provider(pt, config, keys)
            return built[pt].require(capability)

        text_gen = provider(config.text_provider, "text")
        return cls(
            resolver=FallbackResolver(
                [provider(pt, "company_info") for pt in config.company_info_providers],
                text_gen,
            ),
            trend_calculator=TrendCalculator(provider(config.time_series_provider, "time_series")),
            price_provider=provider(config.price_provider, "current_price"),
            sentiment=SentimentSynthesizer(
                provider(config.news_provider, "news"),
                text_gen,
                max_articles=config.news_max_articles,
                lookback_days=config.news_lookback_days,
            ),
        )

    def open(self, ticker: str) -> DetailSession:
        """Start all panels for ``ticker``; must be called inside a running loop."""
        symbol = ticker.strip().upper()
        state = DetailState(ticker=symbol)
        jobs: dict[str, Awaitable[Any]] = {
            "info": self.resolver.resolve(symbol),
            "trends": self.trend_calculator.load(symbol),
            "price": self.load_price(symbol),
            "sentiment": self.sentiment.synthesize(symbol),
        }
        return DetailSession(state, jobs)

    async def load_detail(self, ticker: str) -> DetailState:
        session = self.open(ticker)
        try:
            return await session.wait()
        except asyncio.CancelledError:
            session.dismiss()
            raise

    async def load_price(self, ticker: str) -> CurrentPrice:
        price = await asyncio.to_thread(self.price_provider.get_current_price, ticker)
        return CurrentPrice(symbol=ticker, price=price, source=self.price_provider.name)


def _build_provider(
    pt: ProviderType,
    config: OneTradeConfig,
    keys: KeyProvider,
) -> BaseProvider:
    kwargs: dict[str, Any] = {}
    if pt is not ProviderType.MOCK:
        kwargs["api_key"] = config.api_key_for(pt) or keys.get(pt)
        kwargs["timeout"] = config.request_timeout
    if pt is ProviderType.GEMINI:
        kwargs["model"] = config.gemini_model
    provider = create_provider(pt, **kwargs)
    if isinstance(provider, BaseHTTPClient) and not provider.api_key:
        logger.warning("No API key configured for %s", provider.name)
    return provider
