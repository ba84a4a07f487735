"""Aggregator configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ProviderType(Enum):
    """Supported data provider backends."""

    POLYGON = "polygon"
    TWELVEDATA = "twelvedata"
    ALPHAVANTAGE = "alphavantage"
    FINNHUB = "finnhub"
    GEMINI = "gemini"
    MOCK = "mock"


@dataclass
class OneTradeConfig:
    """Configuration for DetailLoader.

    Attributes:
        company_info_providers: Company-info providers ordered by priority.
            The last entry is the last resort before text synthesis.
        time_series_provider: Provider used for the daily price series.
        price_provider: Provider used for the current price.
        news_provider: Provider used for company news.
        text_provider: Generative-text provider.
        news_max_articles: Most recent articles fed to the sentiment prompt.
        news_lookback_days: Calendar days of news to fetch.
        gemini_model: Gemini model name.
        request_timeout: Per-request HTTP timeout in seconds.
        polygon_api_key: Polygon.io API key.
        twelvedata_api_key: Twelve Data API key.
        alphavantage_api_key: Alpha Vantage API key.
        finnhub_api_key: Finnhub API key.
        gemini_api_key: Google Gemini API key.
    """

    company_info_providers: list[ProviderType] = field(
        default_factory=lambda: [
            ProviderType.POLYGON,
            ProviderType.TWELVEDATA,
            ProviderType.ALPHAVANTAGE,
        ]
    )
    time_series_provider: ProviderType = ProviderType.TWELVEDATA
    price_provider: ProviderType = ProviderType.TWELVEDATA
    news_provider: ProviderType = ProviderType.FINNHUB
    text_provider: ProviderType = ProviderType.GEMINI
    news_max_articles: int = 30
    news_lookback_days: int = 90
    gemini_model: str = "gemini-2.0-flash-lite"
    request_timeout: float = 10.0

    polygon_api_key: str = ""
    twelvedata_api_key: str = ""
    alphavantage_api_key: str = ""
    finnhub_api_key: str = ""
    gemini_api_key: str = ""

    def api_key_for(self, provider: ProviderType) -> str:
        return getattr(self, f"{provider.value}_api_key", "") or ""
