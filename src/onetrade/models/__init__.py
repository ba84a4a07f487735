"""Aggregator data models."""

from onetrade.models.company_profile import (
    Address,
    CompanyProfile,
    ProfileOrigin,
    ResolvedProfile,
)
from onetrade.models.listing import TickerListing
from onetrade.models.news import NewsArticle, NewsWindow
from onetrade.models.price import CurrentPrice, PriceBar, PriceSeries
from onetrade.models.sentiment import Decision, SentimentVerdict
from onetrade.models.trend import TREND_OFFSETS, TrendSet

__all__ = [
    "Address",
    "CompanyProfile",
    "ProfileOrigin",
    "ResolvedProfile",
    "TickerListing",
    "NewsArticle",
    "NewsWindow",
    "CurrentPrice",
    "PriceBar",
    "PriceSeries",
    "Decision",
    "SentimentVerdict",
    "TREND_OFFSETS",
    "TrendSet",
]
