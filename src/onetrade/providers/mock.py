"""Mock provider for testing and offline demos. No API keys required."""

from __future__ import annotations

import threading
from datetime import date, timedelta

from onetrade.errors import ProviderError, ProviderErrorCode
from onetrade.models.company_profile import CompanyProfile
from onetrade.models.news import NewsArticle
from onetrade.models.price import PriceBar, PriceSeries
from onetrade.providers.base import BaseProvider


class MockProvider(BaseProvider):
    """In-memory provider that returns configurable static data.

    Use ``set_company_info``, ``set_series`` etc. to pre-load data and
    ``set_error`` to make an operation fail. Unconfigured operations raise
    ``EMPTY_RESULT``, except ``get_time_series`` which generates a synthetic
    series. Every call is recorded in ``calls`` as ``(method, argument)``.
    ``block(method)`` makes a method wait until ``release(method)``.
    """

    def __init__(self, name: str = "mock") -> None:
        self.name = name
        self.calls: list[tuple[str, str]] = []
        self._profiles: dict[str, CompanyProfile] = {}
        self._series: dict[str, PriceSeries] = {}
        self._prices: dict[str, float] = {}
        self._news: dict[str, list[NewsArticle]] = {}
        self._text: str | None = None
        self._errors: dict[str, ProviderError] = {}
        self._gates: dict[str, threading.Event] = {}

    # --- Pre-load helpers ---

    def set_company_info(self, symbol: str, profile: CompanyProfile) -> None:
        self._profiles[symbol.upper()] = profile

    def set_series(self, symbol: str, series: PriceSeries) -> None:
        self._series[symbol.upper()] = series

    def set_price(self, symbol: str, price: float) -> None:
        self._prices[symbol.upper()] = price

    def set_news(self, symbol: str, articles: list[NewsArticle]) -> None:
        self._news[symbol.upper()] = articles

    def set_text(self, text: str) -> None:
        self._text = text

    def set_error(self, method: str, error: ProviderError) -> None:
        self._errors[method] = error

    def block(self, method: str) -> None:
        self._gates[method] = threading.Event()

    def release(self, method: str) -> None:
        gate = self._gates.pop(method, None)
        if gate is not None:
            gate.set()

    # --- Provider implementation ---

    def capabilities(self) -> set[str]:
        return {"company_info", "time_series", "current_price", "news", "text"}

    def get_company_info(self, symbol: str) -> CompanyProfile:
        self._enter("get_company_info", symbol)
        if symbol.upper() not in self._profiles:
            raise self._empty(f"no profile for {symbol}")
        return self._profiles[symbol.upper()]

    def get_time_series(self, symbol: str) -> PriceSeries:
        self._enter("get_time_series", symbol)
        key = symbol.upper()
        if key in self._series:
            return self._series[key]
        return self._generate_series(key)

    def get_current_price(self, symbol: str) -> float:
        self._enter("get_current_price", symbol)
        if symbol.upper() not in self._prices:
            raise self._empty(f"no price for {symbol}")
        return self._prices[symbol.upper()]

    def get_company_news(
        self, symbol: str, start: date | str, end: date | str,
    ) -> list[NewsArticle]:
        self._enter("get_company_news", symbol)
        return list(self._news.get(symbol.upper(), []))

    def generate(self, prompt: str) -> str:
        self._enter("generate", prompt)
        if self._text is None:
            raise self._empty("no text configured")
        return self._text

    # --- Internals ---

    def _enter(self, method: str, arg: str) -> None:
        self.calls.append((method, arg))
        gate = self._gates.get(method)
        if gate is not None:
            gate.wait()
        if method in self._errors:
            raise self._errors[method]

    def _empty(self, message: str) -> ProviderError:
        return ProviderError(message, code=ProviderErrorCode.EMPTY_RESULT, provider=self.name)

    @staticmethod
    def _generate_series(symbol: str, days: int = 70) -> PriceSeries:
        """Synthetic weekday series drifting up from 100, oldest first."""
        bars: list[PriceBar] = []
        d = date(2024, 1, 2)
        price = 100.0
        while len(bars) < days:
            if d.weekday() < 5:
                bars.append(PriceBar(
                    date=d,
                    open=round(price, 2),
                    high=round(price + 1.0, 2),
                    low=round(price - 1.0, 2),
                    close=round(price + 0.5, 2),
                    volume=1_000_000,
                ))
                price += 0.5
            d += timedelta(days=1)
        return PriceSeries(symbol=symbol, bars=tuple(bars))
