"""Alpha Vantage provider: company overview and daily series."""

from __future__ import annotations

from datetime import date
from typing import Any

from onetrade.errors import ProviderError, ProviderErrorCode
from onetrade.models.company_profile import Address, CompanyProfile
from onetrade.models.price import PriceBar, PriceSeries
from onetrade.providers.base import BaseHTTPClient, clean_text, parse_float, parse_int

_SERIES_KEY = "Time Series (Daily)"


class AlphaVantageClient(BaseHTTPClient):
    """Fetch fundamentals and daily bars from Alpha Vantage.

    Capabilities: company_info, time_series.

    Every endpoint is ``/query?function=...``. Errors come back as HTTP 200:
    an empty object for unknown symbols, ``Error Message`` for bad requests,
    and ``Note``/``Information`` when the free-tier quota is exhausted.
    """

    name = "alphavantage"
    base_url = "https://www.alphavantage.co"

    def capabilities(self) -> set[str]:
        return {"company_info", "time_series"}

    def get_company_info(self, symbol: str) -> CompanyProfile:
        ticker = self._symbol(symbol)
        data = self._query("OVERVIEW", ticker)
        profile = CompanyProfile(
            ticker=clean_text(data.get("Symbol")) or ticker,
            name=clean_text(data.get("Name")),
            exchange=clean_text(data.get("Exchange")),
            market=clean_text(data.get("AssetType")),
            currency=clean_text(data.get("Currency")),
            locale=clean_text(data.get("Country")),
            description=clean_text(data.get("Description")),
            industry=clean_text(data.get("Industry")),
            sector=clean_text(data.get("Sector")),
            address=Address(street=clean_text(data.get("Address")) or None),
            homepage_url=clean_text(data.get("OfficialSite") or data.get("Website")),
            market_cap=parse_float(data.get("MarketCapitalization")),
            total_employees=parse_int(data.get("FullTimeEmployees")),
            cik=clean_text(data.get("CIK")) or None,
        )
        if not profile.name:
            raise self._empty(f"no company name for {ticker}")
        return profile

    def get_time_series(self, symbol: str) -> PriceSeries:
        ticker = self._symbol(symbol)
        data = self._query("TIME_SERIES_DAILY", ticker)
        series = data.get(_SERIES_KEY)
        if series is None:
            raise self._empty(f"no daily series for {ticker}")
        if not isinstance(series, dict):
            raise self._malformed(f"'{_SERIES_KEY}' is not an object")
        try:
            bars = tuple(
                PriceBar(
                    date=date.fromisoformat(day),
                    open=rec.get("1. open"),
                    high=rec.get("2. high"),
                    low=rec.get("3. low"),
                    close=rec.get("4. close"),
                    volume=rec.get("5. volume"),
                )
                for day, rec in series.items()
            )
        except (TypeError, ValueError, AttributeError) as exc:
            raise self._malformed(f"bad daily record: {exc}") from exc
        return PriceSeries(symbol=ticker, bars=bars)

    # ------------------------------------------------------------ internals

    def _query(self, function: str, ticker: str) -> dict[str, Any]:
        data = self._get_json(
            "/query",
            {"function": function, "symbol": ticker, "apikey": self.api_key},
        )
        if not isinstance(data, dict):
            raise self._malformed("expected an object")
        throttle = data.get("Note") or data.get("Information")
        if throttle:
            raise ProviderError(
                f"alphavantage rate limited: {throttle}",
                code=ProviderErrorCode.RATE_LIMITED,
                provider=self.name,
            )
        if "Error Message" in data:
            raise self._empty(str(data["Error Message"]))
        if not data:
            raise self._empty(f"no data for {ticker}")
        return data
