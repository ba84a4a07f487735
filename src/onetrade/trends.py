"""Percent-change trends over a daily price series."""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Sequence

import pandas as pd

from onetrade.models.price import PriceSeries
from onetrade.models.trend import TREND_OFFSETS, TrendSet
from onetrade.providers.base import BaseProvider
from onetrade.quality import validate_price_series

logger = logging.getLogger(__name__)


def compute_trends(
    series: PriceSeries,
    offsets: Sequence[int] = TREND_OFFSETS,
) -> TrendSet:
    """Percent change between the latest close and the close ``offset`` bars back.

    Offsets count data points, not calendar days. A trend is None when the
    series is too short or either close is not numeric.
    """
    bars = series.sorted_desc()
    if len(bars) <= 1:
        return TrendSet()

    closes = pd.to_numeric(pd.Series([b.close for b in bars], dtype="object"), errors="coerce")
    latest = closes.iloc[0]

    values: dict[int, float | None] = {}
    for offset in offsets:
        if len(closes) > offset:
            values[offset] = percent_change(latest, closes.iloc[offset])
        else:
            values[offset] = None
    return TrendSet.from_offsets(values)


def percent_change(latest: float, previous: float) -> float | None:
    if pd.isna(latest) or pd.isna(previous) or previous == 0:
        return None
    change = (float(latest) - float(previous)) / float(previous) * 100
    return change if math.isfinite(change) else None


class TrendCalculator:
    """Fetch a daily series from one provider and compute its trends."""

    def __init__(self, provider: BaseProvider) -> None:
        self.provider = provider

    async def load(self, ticker: str) -> TrendSet:
        series = await asyncio.to_thread(self.provider.get_time_series, ticker)
        result = validate_price_series(series)
        if not result.passed:
            msgs = "; ".join(c.message for c in result.failed_checks)
            logger.warning("%s series for %s: %s", self.provider.name, ticker, msgs)
        return compute_trends(series)
