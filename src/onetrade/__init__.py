"""onetrade: stock detail aggregation over unreliable data providers.

Company profile with provider fallback and generated descriptions, price
trends, current price, and a news-based Buy/Wait/Sell opinion.

Quick start::

    import asyncio
    from onetrade import create_loader_from_env

    loader = create_loader_from_env()
    state = asyncio.run(loader.load_detail("AAPL"))
"""

from __future__ import annotations

import os

from onetrade.config import OneTradeConfig, ProviderType
from onetrade.credentials import EnvKeyProvider, KeyProvider
from onetrade.detail import DetailLoader, DetailSession, DetailState, PanelState, PanelStatus
from onetrade.errors import (
    ExhaustedFallbackError,
    ProviderError,
    ProviderErrorCode,
    SentimentError,
)
from onetrade.models import (
    Address,
    CompanyProfile,
    CurrentPrice,
    Decision,
    NewsArticle,
    NewsWindow,
    PriceBar,
    PriceSeries,
    ProfileOrigin,
    ResolvedProfile,
    SentimentVerdict,
    TickerListing,
    TrendSet,
)
from onetrade.quality import is_usable
from onetrade.resolver import FallbackResolver
from onetrade.sentiment import SentimentSynthesizer, parse_verdict
from onetrade.tickers import filter_tickers
from onetrade.trends import TrendCalculator, compute_trends

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "DetailLoader",
    "DetailSession",
    "DetailState",
    "PanelState",
    "PanelStatus",
    "create_loader_from_env",
    # Core
    "FallbackResolver",
    "TrendCalculator",
    "SentimentSynthesizer",
    "compute_trends",
    "parse_verdict",
    "is_usable",
    "filter_tickers",
    # Config
    "OneTradeConfig",
    "ProviderType",
    "EnvKeyProvider",
    "KeyProvider",
    # Errors
    "ProviderError",
    "ProviderErrorCode",
    "ExhaustedFallbackError",
    "SentimentError",
    # Models
    "Address",
    "CompanyProfile",
    "ProfileOrigin",
    "ResolvedProfile",
    "PriceBar",
    "PriceSeries",
    "CurrentPrice",
    "TrendSet",
    "NewsArticle",
    "NewsWindow",
    "Decision",
    "SentimentVerdict",
    "TickerListing",
]


def create_loader_from_env() -> DetailLoader:
    """Zero-config factory: reads provider order and API keys from env vars.

    Environment variables:
        ONETRADE_COMPANY_PROVIDERS: Comma-separated company-info chain
            (default: "polygon,twelvedata,alphavantage").
        ONETRADE_TIMESERIES_PROVIDER: Daily series provider (default: "twelvedata").
        ONETRADE_PRICE_PROVIDER: Current price provider (default: "twelvedata").
        ONETRADE_NEWS_MAX_ARTICLES: Articles fed to the sentiment prompt (default: 30).
        ONETRADE_NEWS_LOOKBACK_DAYS: Days of news to fetch (default: 90).
        GEMINI_MODEL: Gemini model name (default: "gemini-2.0-flash-lite").
        POLYGON_API_KEY, TWELVEDATA_API_KEY, ALPHAVANTAGE_API_KEY,
        FINNHUB_API_KEY, GEMINI_API_KEY: Provider credentials. A ``.env`` file
            in the working directory is read as well.
    """
    provider_str = os.getenv("ONETRADE_COMPANY_PROVIDERS", "polygon,twelvedata,alphavantage")
    chain = [
        ProviderType(name.strip().lower())
        for name in provider_str.split(",")
        if name.strip()
    ]

    config = OneTradeConfig(
        company_info_providers=chain,
        time_series_provider=ProviderType(
            os.getenv("ONETRADE_TIMESERIES_PROVIDER", "twelvedata").strip().lower()
        ),
        price_provider=ProviderType(
            os.getenv("ONETRADE_PRICE_PROVIDER", "twelvedata").strip().lower()
        ),
        news_max_articles=int(os.getenv("ONETRADE_NEWS_MAX_ARTICLES", "30")),
        news_lookback_days=int(os.getenv("ONETRADE_NEWS_LOOKBACK_DAYS", "90")),
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.0-flash-lite"),
    )

    return DetailLoader.from_config(config, EnvKeyProvider())
