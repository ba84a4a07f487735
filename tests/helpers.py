"""Builders shared by the test modules."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any
from unittest.mock import MagicMock

from onetrade.models.price import PriceBar, PriceSeries


def make_response(status_code: int = 200, payload: Any = None, invalid_json: bool = False) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    if invalid_json:
        resp.json.side_effect = ValueError("Expecting value: line 1 column 1")
    else:
        resp.json.return_value = payload
    return resp


def make_session(status_code: int = 200, payload: Any = None, invalid_json: bool = False) -> MagicMock:
    session = MagicMock()
    resp = make_response(status_code, payload, invalid_json)
    session.get.return_value = resp
    session.post.return_value = resp
    return session


def make_series(closes: list[Any], symbol: str = "AAPL", latest: date = date(2024, 4, 1)) -> PriceSeries:
    """Series where ``closes[0]`` is the latest bar, one bar per day going back."""
    bars = [
        PriceBar(date=latest - timedelta(days=i), open=c, high=c, low=c, close=c, volume=1000)
        for i, c in enumerate(closes)
    ]
    return PriceSeries(symbol=symbol, bars=tuple(bars))
