"""Tests for the HTTP provider clients, using a mocked requests session."""

from __future__ import annotations

from datetime import date

import pytest
import requests

from helpers import make_session
from onetrade.errors import ProviderError, ProviderErrorCode
from onetrade.providers.alphavantage import AlphaVantageClient
from onetrade.providers.finnhub import FinnhubClient
from onetrade.providers.gemini import GeminiClient
from onetrade.providers.polygon import PolygonClient
from onetrade.providers.twelvedata import TwelveDataClient

POLYGON_TICKER = {
    "status": "OK",
    "request_id": "abc",
    "results": {
        "ticker": "AAPL",
        "name": "Apple Inc.",
        "market": "stocks",
        "locale": "us",
        "primary_exchange": "XNAS",
        "currency_name": "usd",
        "cik": "0000320193",
        "market_cap": 2.95e12,
        "address": {"address1": "ONE APPLE PARK WAY", "city": "CUPERTINO", "state": "CA", "postal_code": "95014"},
        "description": "Apple designs smartphones.",
        "sic_code": "3571",
        "sic_description": "ELECTRONIC COMPUTERS",
        "homepage_url": "https://www.apple.com",
        "total_employees": 161000,
    },
}

TWELVE_PROFILE = {
    "symbol": "AAPL",
    "name": "Apple Inc",
    "exchange": "NASDAQ",
    "sector": "Technology",
    "industry": "Consumer Electronics",
    "employees": 161000,
    "website": "http://www.apple.com",
    "description": "",
    "type": "Common Stock",
    "address": "One Apple Park Way",
    "city": "Cupertino",
    "zip": "95014",
    "state": "CA",
    "country": "United States",
}

AV_OVERVIEW = {
    "Symbol": "IBM",
    "AssetType": "Common Stock",
    "Name": "International Business Machines",
    "Description": "IBM provides hybrid cloud and AI.",
    "CIK": "51143",
    "Exchange": "NYSE",
    "Currency": "USD",
    "Country": "USA",
    "Sector": "TECHNOLOGY",
    "Industry": "COMPUTER & OFFICE EQUIPMENT",
    "Address": "1 NEW ORCHARD ROAD, ARMONK, NY, US",
    "OfficialSite": "https://www.ibm.com",
    "MarketCapitalization": "180000000000",
    "FullTimeEmployees": "None",
}


class TestSharedContract:
    @pytest.mark.parametrize("client_cls", [PolygonClient, TwelveDataClient, AlphaVantageClient])
    def test_missing_credential_before_network(self, client_cls):
        session = make_session(payload={})
        client = client_cls(api_key="", session=session)
        with pytest.raises(ProviderError) as exc_info:
            client.get_company_info("AAPL")
        assert exc_info.value.code is ProviderErrorCode.MISSING_CREDENTIAL
        session.get.assert_not_called()

    def test_rate_limited(self):
        client = PolygonClient(api_key="k", session=make_session(429, {}))
        with pytest.raises(ProviderError) as exc_info:
            client.get_company_info("AAPL")
        assert exc_info.value.code is ProviderErrorCode.RATE_LIMITED
        assert exc_info.value.retryable

    def test_http_error_carries_status(self):
        client = PolygonClient(api_key="k", session=make_session(500, {}))
        with pytest.raises(ProviderError) as exc_info:
            client.get_company_info("AAPL")
        assert exc_info.value.code is ProviderErrorCode.TRANSPORT_FAILURE
        assert exc_info.value.status_code == 500

    def test_connection_error(self):
        session = make_session()
        session.get.side_effect = requests.ConnectionError("unreachable")
        client = TwelveDataClient(api_key="k", session=session)
        with pytest.raises(ProviderError) as exc_info:
            client.get_current_price("AAPL")
        assert exc_info.value.code is ProviderErrorCode.TRANSPORT_FAILURE
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_invalid_url(self):
        client = PolygonClient(api_key="k", base_url="not a url")
        with pytest.raises(ProviderError) as exc_info:
            client.get_company_info("AAPL")
        assert exc_info.value.code is ProviderErrorCode.INVALID_REQUEST

    def test_blank_symbol(self):
        session = make_session(payload={})
        client = PolygonClient(api_key="k", session=session)
        with pytest.raises(ProviderError) as exc_info:
            client.get_company_info("  ")
        assert exc_info.value.code is ProviderErrorCode.INVALID_REQUEST
        session.get.assert_not_called()

    def test_invalid_json(self):
        client = AlphaVantageClient(api_key="k", session=make_session(invalid_json=True))
        with pytest.raises(ProviderError) as exc_info:
            client.get_company_info("IBM")
        assert exc_info.value.code is ProviderErrorCode.MALFORMED_RESPONSE
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestPolygon:
    def test_company_info_mapping(self):
        session = make_session(payload=POLYGON_TICKER)
        profile = PolygonClient(api_key="pk", session=session).get_company_info("aapl")

        assert profile.ticker == "AAPL"
        assert profile.name == "Apple Inc."
        assert profile.exchange == "XNAS"
        assert profile.currency == "USD"
        assert profile.industry == "ELECTRONIC COMPUTERS"
        assert profile.address.city == "CUPERTINO"
        assert profile.market_cap == 2.95e12
        assert profile.total_employees == 161000
        assert profile.usable

        url = session.get.call_args.args[0]
        assert url == "https://api.polygon.io/v3/reference/tickers/AAPL"
        assert session.get.call_args.kwargs["params"] == {"apiKey": "pk"}

    def test_non_ok_status_is_empty(self):
        session = make_session(payload={"status": "NOT_FOUND", "request_id": "x"})
        with pytest.raises(ProviderError) as exc_info:
            PolygonClient(api_key="k", session=session).get_company_info("ZZZZ")
        assert exc_info.value.code is ProviderErrorCode.EMPTY_RESULT

    def test_empty_name_is_empty(self):
        payload = {"status": "OK", "results": {**POLYGON_TICKER["results"], "name": ""}}
        with pytest.raises(ProviderError) as exc_info:
            PolygonClient(api_key="k", session=make_session(payload=payload)).get_company_info("AAPL")
        assert exc_info.value.code is ProviderErrorCode.EMPTY_RESULT

    def test_last_trade_price(self):
        payload = {"status": "OK", "results": {"T": "AAPL", "p": 189.5, "s": 100}}
        session = make_session(payload=payload)
        price = PolygonClient(api_key="k", session=session).get_current_price("AAPL")
        assert price == 189.5
        assert session.get.call_args.args[0] == "https://api.polygon.io/v2/last/trade/AAPL"


class TestTwelveData:
    def test_profile_without_description_still_returned(self):
        session = make_session(payload=TWELVE_PROFILE)
        profile = TwelveDataClient(api_key="k", session=session).get_company_info("AAPL")
        assert session.get.call_args.args[0] == "https://api.twelvedata.com/profile"
        assert profile.name == "Apple Inc"
        assert profile.address.postal_code == "95014"
        assert profile.total_employees == 161000
        assert not profile.usable

    def test_address_parts_normalized(self):
        payload = {**TWELVE_PROFILE, "address": "  One Apple Park Way ", "city": "None", "state": None, "zip": 95014}
        profile = TwelveDataClient(api_key="k", session=make_session(payload=payload)).get_company_info("AAPL")
        assert profile.address.street == "One Apple Park Way"
        assert profile.address.city is None
        assert profile.address.state is None
        assert profile.address.postal_code == "95014"

    def test_error_body(self):
        payload = {"code": 404, "message": "symbol not found", "status": "error"}
        with pytest.raises(ProviderError) as exc_info:
            TwelveDataClient(api_key="k", session=make_session(payload=payload)).get_company_info("ZZZZ")
        assert exc_info.value.code is ProviderErrorCode.EMPTY_RESULT

    def test_error_body_rate_limit(self):
        payload = {"code": 429, "message": "run out of API credits", "status": "error"}
        with pytest.raises(ProviderError) as exc_info:
            TwelveDataClient(api_key="k", session=make_session(payload=payload)).get_time_series("AAPL")
        assert exc_info.value.code is ProviderErrorCode.RATE_LIMITED

    def test_time_series(self):
        payload = {
            "meta": {"symbol": "AAPL", "interval": "1day"},
            "values": [
                {"datetime": "2024-01-03", "open": "184.2", "high": "185.8", "low": "183.4", "close": "184.25", "volume": "58414500"},
                {"datetime": "2024-01-02", "open": "187.1", "high": "188.4", "low": "183.8", "close": "185.64", "volume": "82488700"},
            ],
            "status": "ok",
        }
        session = make_session(payload=payload)
        series = TwelveDataClient(api_key="k", session=session).get_time_series("AAPL")

        assert [b.date for b in series.bars] == [date(2024, 1, 3), date(2024, 1, 2)]
        assert series.bars[0].close == "184.25"
        params = session.get.call_args.kwargs["params"]
        assert params["interval"] == "1day"
        assert params["outputsize"] == 100

    def test_current_price(self):
        price = TwelveDataClient(api_key="k", session=make_session(payload={"price": "187.12"})).get_current_price("AAPL")
        assert price == pytest.approx(187.12)

    def test_current_price_not_numeric(self):
        with pytest.raises(ProviderError) as exc_info:
            TwelveDataClient(api_key="k", session=make_session(payload={"price": "N/A"})).get_current_price("AAPL")
        assert exc_info.value.code is ProviderErrorCode.MALFORMED_RESPONSE


class TestAlphaVantage:
    def test_overview_mapping(self):
        profile = AlphaVantageClient(api_key="k", session=make_session(payload=AV_OVERVIEW)).get_company_info("IBM")
        assert profile.name == "International Business Machines"
        assert profile.market == "Common Stock"
        assert profile.locale == "USA"
        assert profile.homepage_url == "https://www.ibm.com"
        assert profile.market_cap == 180_000_000_000
        assert profile.total_employees is None
        assert profile.cik == "51143"

    def test_empty_object(self):
        with pytest.raises(ProviderError) as exc_info:
            AlphaVantageClient(api_key="k", session=make_session(payload={})).get_company_info("ZZZZ")
        assert exc_info.value.code is ProviderErrorCode.EMPTY_RESULT

    def test_throttle_note(self):
        payload = {"Note": "Thank you for using Alpha Vantage! Our standard API call frequency is 5 calls per minute."}
        with pytest.raises(ProviderError) as exc_info:
            AlphaVantageClient(api_key="k", session=make_session(payload=payload)).get_company_info("IBM")
        assert exc_info.value.code is ProviderErrorCode.RATE_LIMITED

    def test_mapping_series_matches_array_series(self):
        av_payload = {
            "Meta Data": {"2. Symbol": "AAPL"},
            "Time Series (Daily)": {
                "2024-01-03": {"1. open": "184.2", "2. high": "185.8", "3. low": "183.4", "4. close": "184.25", "5. volume": "58414500"},
                "2024-01-02": {"1. open": "187.1", "2. high": "188.4", "3. low": "183.8", "4. close": "185.64", "5. volume": "82488700"},
            },
        }
        td_payload = {
            "values": [
                {"datetime": "2024-01-03", "open": "184.2", "high": "185.8", "low": "183.4", "close": "184.25", "volume": "58414500"},
                {"datetime": "2024-01-02", "open": "187.1", "high": "188.4", "low": "183.8", "close": "185.64", "volume": "82488700"},
            ],
            "status": "ok",
        }
        av = AlphaVantageClient(api_key="k", session=make_session(payload=av_payload)).get_time_series("AAPL")
        td = TwelveDataClient(api_key="k", session=make_session(payload=td_payload)).get_time_series("AAPL")
        assert av.sorted_desc() == td.sorted_desc()


class TestFinnhub:
    def test_company_news(self):
        payload = [
            {"category": "company", "datetime": 1704300000, "headline": "Apple rallies", "summary": "Shares rose."},
            {"category": "company", "datetime": 1704200000, "headline": "Apple supplier news", "summary": ""},
            {"category": "company", "datetime": 1704100000, "headline": ""},
        ]
        session = make_session(payload=payload)
        articles = FinnhubClient(api_key="fk", session=session).get_company_news(
            "AAPL", date(2024, 1, 1), date(2024, 3, 31),
        )

        assert [a.headline for a in articles] == ["Apple rallies", "Apple supplier news"]
        assert articles[1].summary is None
        params = session.get.call_args.kwargs["params"]
        assert params["from"] == "2024-01-01"
        assert params["to"] == "2024-03-31"
        assert params["token"] == "fk"

    def test_not_a_list(self):
        session = make_session(payload={"error": "You don't have access to this resource."})
        with pytest.raises(ProviderError) as exc_info:
            FinnhubClient(api_key="k", session=session).get_company_news("AAPL", "2024-01-01", "2024-03-31")
        assert exc_info.value.code is ProviderErrorCode.MALFORMED_RESPONSE


class TestGemini:
    def test_generate(self):
        payload = {"candidates": [{"content": {"parts": [{"text": "Buy\nGood news."}], "role": "model"}}]}
        session = make_session(payload=payload)
        client = GeminiClient(api_key="gk", session=session, model="gemini-test")

        assert client.generate("hello") == "Buy\nGood news."
        call = session.post.call_args
        assert call.args[0].endswith("/models/gemini-test:generateContent")
        assert call.kwargs["json"] == {"contents": [{"parts": [{"text": "hello"}]}]}
        assert call.kwargs["params"] == {"key": "gk"}

    def test_no_candidates(self):
        with pytest.raises(ProviderError) as exc_info:
            GeminiClient(api_key="k", session=make_session(payload={"candidates": []})).generate("hi")
        assert exc_info.value.code is ProviderErrorCode.EMPTY_RESULT

    @pytest.mark.parametrize(
        "payload",
        [
            {"candidates": {"oops": 1}},
            {"candidates": [{"content": {"parts": {"text": "x"}}}]},
            {"candidates": [{"content": {"parts": [{"text": 42}]}}]},
        ],
    )
    def test_wrong_shapes_are_malformed(self, payload):
        with pytest.raises(ProviderError) as exc_info:
            GeminiClient(api_key="k", session=make_session(payload=payload)).generate("hi")
        assert exc_info.value.code is ProviderErrorCode.MALFORMED_RESPONSE

    def test_rate_limited(self):
        with pytest.raises(ProviderError) as exc_info:
            GeminiClient(api_key="k", session=make_session(429, {})).generate("hi")
        assert exc_info.value.code is ProviderErrorCode.RATE_LIMITED

    def test_other_http_error(self):
        with pytest.raises(ProviderError) as exc_info:
            GeminiClient(api_key="k", session=make_session(400, {})).generate("hi")
        assert exc_info.value.code is ProviderErrorCode.TRANSPORT_FAILURE
        assert exc_info.value.status_code == 400

    def test_stock_content_prompt(self):
        payload = {"candidates": [{"content": {"parts": [{"text": "Symbol: AAPL"}]}}]}
        session = make_session(payload=payload)
        GeminiClient(api_key="k", session=session).generate_stock_content("aapl")
        prompt = session.post.call_args.kwargs["json"]["contents"][0]["parts"][0]["text"]
        assert prompt.endswith("AAPL")
        assert "Market Cap:" in prompt
