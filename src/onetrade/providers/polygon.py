"""Polygon.io provider.

Company reference data (``/v3/reference/tickers``) and last trade price.
"""

from __future__ import annotations

from typing import Any

from onetrade.errors import ProviderError, ProviderErrorCode
from onetrade.models.company_profile import Address, CompanyProfile
from onetrade.providers.base import BaseHTTPClient, clean_text, parse_float, parse_int


class PolygonClient(BaseHTTPClient):
    """Fetch reference data from Polygon.io.

    Capabilities: company_info, current_price.
    """

    name = "polygon"
    base_url = "https://api.polygon.io"

    def capabilities(self) -> set[str]:
        return {"company_info", "current_price"}

    # ---------------------------------------------------------- company info

    def get_company_info(self, symbol: str) -> CompanyProfile:
        ticker = self._symbol(symbol)
        data = self._get_json(f"/v3/reference/tickers/{ticker}", {"apiKey": self.api_key})
        if not isinstance(data, dict):
            raise self._malformed("expected an object")
        results = data.get("results")
        if data.get("status") != "OK" or not results:
            raise self._empty(f"no reference data for {ticker}")
        if not isinstance(results, dict):
            raise self._malformed("'results' is not an object")

        profile = self._to_profile(results, ticker)
        if not profile.name:
            raise self._empty(f"no company name for {ticker}")
        return profile

    @staticmethod
    def _to_profile(r: dict[str, Any], ticker: str) -> CompanyProfile:
        addr = r.get("address")
        address = None
        if isinstance(addr, dict):
            address = Address(
                street=addr.get("address1"),
                city=addr.get("city"),
                state=addr.get("state"),
                postal_code=addr.get("postal_code"),
            )
        return CompanyProfile(
            ticker=clean_text(r.get("ticker")) or ticker,
            name=clean_text(r.get("name")),
            exchange=clean_text(r.get("primary_exchange")),
            market=clean_text(r.get("market")),
            currency=clean_text(r.get("currency_name")).upper(),
            locale=clean_text(r.get("locale")),
            description=clean_text(r.get("description")),
            industry=clean_text(r.get("sic_description")),
            sector=clean_text(r.get("sic_code")),
            address=address,
            homepage_url=clean_text(r.get("homepage_url")),
            market_cap=parse_float(r.get("market_cap")),
            total_employees=parse_int(r.get("total_employees")),
            cik=clean_text(r.get("cik")) or None,
        )

    # -------------------------------------------------------- current price

    def get_current_price(self, symbol: str) -> float:
        ticker = self._symbol(symbol)
        data = self._get_json(f"/v2/last/trade/{ticker}", {"apiKey": self.api_key})
        if not isinstance(data, dict):
            raise self._malformed("expected an object")
        trade = data.get("results")
        if data.get("status") != "OK" or not trade:
            raise self._empty(f"no last trade for {ticker}")
        price = parse_float(trade.get("p")) if isinstance(trade, dict) else None
        if price is None:
            raise ProviderError(
                f"polygon: last trade price for {ticker} is not numeric",
                code=ProviderErrorCode.MALFORMED_RESPONSE,
                provider=self.name,
            )
        return price
