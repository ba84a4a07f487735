"""Ticker list entry model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TickerListing:
    """One row of the bundled exchange ticker list.

    Only ``symbol`` and ``name`` are guaranteed; the rest mirror the
    exchange screener export and are often blank.
    """

    symbol: str
    name: str
    last_sale: str | None = None
    net_change: str | None = None
    pct_change: str | None = None
    volume: str | None = None
    market_cap: str | None = None
    country: str | None = None
    ipo_year: str | None = None
    industry: str | None = None
    sector: str | None = None
    url: str | None = None
