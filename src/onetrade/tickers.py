"""Ticker list filtering."""

from __future__ import annotations

from typing import Iterable

from onetrade.models.listing import TickerListing


def filter_tickers(listings: Iterable[TickerListing], query: str) -> list[TickerListing]:
    """Listings whose symbol or name contains ``query``, case-insensitively.

    A blank query returns every listing in its original order.
    """
    items = list(listings)
    needle = query.strip().lower()
    if not needle:
        return items
    return [
        t for t in items
        if needle in t.symbol.lower() or needle in t.name.lower()
    ]
