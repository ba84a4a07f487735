"""Twelve Data provider: company profile, daily series and latest price."""

from __future__ import annotations

from datetime import date
from typing import Any

from onetrade.errors import ProviderError, ProviderErrorCode
from onetrade.models.company_profile import Address, CompanyProfile
from onetrade.models.price import PriceBar, PriceSeries
from onetrade.providers.base import BaseHTTPClient, clean_text, parse_float, parse_int


class TwelveDataClient(BaseHTTPClient):
    """Fetch company and price data from Twelve Data.

    Capabilities: company_info, time_series, current_price.

    Twelve Data reports most failures with HTTP 200 and a body of the form
    ``{"status": "error", "code": 4xx, "message": ...}``; those are mapped
    to the same error codes as real HTTP failures.
    """

    name = "twelvedata"
    base_url = "https://api.twelvedata.com"

    def __init__(self, *args: Any, outputsize: int = 100, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.outputsize = outputsize

    def capabilities(self) -> set[str]:
        return {"company_info", "time_series", "current_price"}

    # ---------------------------------------------------------- company info

    def get_company_info(self, symbol: str) -> CompanyProfile:
        ticker = self._symbol(symbol)
        data = self._query("/profile", {"symbol": ticker})
        profile = CompanyProfile(
            ticker=clean_text(data.get("symbol")) or ticker,
            name=clean_text(data.get("name")),
            exchange=clean_text(data.get("exchange")),
            market=clean_text(data.get("type")) or "Equity",
            currency=clean_text(data.get("currency")),
            locale=clean_text(data.get("country")),
            description=clean_text(data.get("description")),
            industry=clean_text(data.get("industry")),
            sector=clean_text(data.get("sector")),
            address=Address(
                street=clean_text(data.get("address")) or None,
                city=clean_text(data.get("city")) or None,
                state=clean_text(data.get("state")) or None,
                postal_code=clean_text(data.get("zip") or data.get("postal_code")) or None,
            ),
            homepage_url=clean_text(data.get("website")),
            market_cap=parse_float(data.get("market_cap")),
            total_employees=parse_int(data.get("employees")),
        )
        if not profile.name:
            raise self._empty(f"no company name for {ticker}")
        return profile

    # ----------------------------------------------------------- time series

    def get_time_series(self, symbol: str) -> PriceSeries:
        ticker = self._symbol(symbol)
        data = self._query(
            "/time_series",
            {"symbol": ticker, "interval": "1day", "outputsize": self.outputsize},
        )
        values = data.get("values")
        if values is None:
            raise self._empty(f"no time series for {ticker}")
        if not isinstance(values, list):
            raise self._malformed("'values' is not a list")
        try:
            bars = tuple(
                PriceBar(
                    date=date.fromisoformat(str(v["datetime"])[:10]),
                    open=v.get("open"),
                    high=v.get("high"),
                    low=v.get("low"),
                    close=v.get("close"),
                    volume=v.get("volume"),
                )
                for v in values
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise self._malformed(f"bad time series record: {exc}") from exc
        return PriceSeries(symbol=ticker, bars=bars)

    # -------------------------------------------------------- current price

    def get_current_price(self, symbol: str) -> float:
        ticker = self._symbol(symbol)
        data = self._query("/price", {"symbol": ticker})
        if "price" not in data:
            raise self._empty(f"no price for {ticker}")
        price = parse_float(data["price"])
        if price is None:
            raise ProviderError(
                f"twelvedata: price for {ticker} is not numeric: {data['price']!r}",
                code=ProviderErrorCode.MALFORMED_RESPONSE,
                provider=self.name,
            )
        return price

    # ------------------------------------------------------------ internals

    def _query(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        data = self._get_json(path, {**params, "apikey": self.api_key})
        if not isinstance(data, dict):
            raise self._malformed("expected an object")
        if data.get("status") == "error":
            code = parse_int(data.get("code"))
            message = data.get("message", "unknown error")
            if code == 429:
                raise ProviderError(
                    f"twelvedata rate limited: {message}",
                    code=ProviderErrorCode.RATE_LIMITED,
                    provider=self.name,
                    status_code=code,
                )
            raise self._empty(message)
        return data
