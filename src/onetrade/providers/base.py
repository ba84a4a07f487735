"""Base classes for data providers."""

from __future__ import annotations

import logging
import math
from abc import ABC
from datetime import date
from typing import Any
from urllib.parse import quote

import certifi
import requests

from onetrade.errors import ProviderError, ProviderErrorCode
from onetrade.models.company_profile import CompanyProfile
from onetrade.models.news import NewsArticle
from onetrade.models.price import PriceSeries
from onetrade.prompts import stock_content_prompt

logger = logging.getLogger(__name__)


class BaseProvider(ABC):
    """Abstract base for all providers.

    Every operation defaults to ``NotImplementedError``. Providers implement
    only the endpoints they support and advertise them via ``capabilities()``.
    """

    name = "base"

    # --- Company fundamentals ---

    def get_company_info(self, symbol: str) -> CompanyProfile:
        """Fetch the company profile for a ticker."""
        raise NotImplementedError

    # --- Prices ---

    def get_time_series(self, symbol: str) -> PriceSeries:
        """Fetch recent daily bars."""
        raise NotImplementedError

    def get_current_price(self, symbol: str) -> float:
        """Fetch the latest traded price."""
        raise NotImplementedError

    # --- News ---

    def get_company_news(
        self, symbol: str, start: date | str, end: date | str,
    ) -> list[NewsArticle]:
        """Fetch articles about a ticker published between two dates."""
        raise NotImplementedError

    # --- Text generation ---

    def generate(self, prompt: str) -> str:
        """Generate free text from a prompt."""
        raise NotImplementedError

    def generate_stock_content(self, symbol: str) -> str:
        """Generate a company overview for a ticker."""
        return self.generate(stock_content_prompt(symbol))

    # --- Capabilities ---

    def capabilities(self) -> set[str]:
        """Return the set of supported features.

        Possible values: ``company_info``, ``time_series``,
        ``current_price``, ``news``, ``text``.
        """
        return set()

    def require(self, capability: str) -> BaseProvider:
        """Return self, or raise ``ValueError`` if ``capability`` is unsupported."""
        if capability not in self.capabilities():
            raise ValueError(f"Provider {self.name!r} does not support {capability}")
        return self


class BaseHTTPClient(BaseProvider):
    """Provider backed by a JSON-over-HTTP API.

    Holds only a credential, a base URL and a ``requests`` session. A blank
    credential is reported at call time as ``MISSING_CREDENTIAL`` so callers
    can fall back instead of failing at construction.
    """

    base_url = ""

    def __init__(
        self,
        api_key: str | None = "",
        base_url: str | None = None,
        session: Any = None,
        timeout: float = 10.0,
    ) -> None:
        self.api_key = api_key or ""
        if base_url:
            self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            session.verify = certifi.where()
        self.session = session

    # ------------------------------------------------------------ requests

    def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        self._require_key()
        url = f"{self.base_url}{path}"
        logger.debug("%s GET %s", self.name, url)
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise self._request_error(exc) from exc
        return self._decode(resp)

    def _post_json(self, path: str, params: dict[str, Any], payload: Any) -> Any:
        self._require_key()
        url = f"{self.base_url}{path}"
        logger.debug("%s POST %s", self.name, url)
        try:
            resp = self.session.post(
                url,
                params=params,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise self._request_error(exc) from exc
        return self._decode(resp)

    def _request_error(self, exc: requests.RequestException) -> ProviderError:
        if isinstance(
            exc,
            (
                requests.exceptions.InvalidURL,
                requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema,
            ),
        ):
            return ProviderError(
                f"{self.name} request could not be built: {exc}",
                code=ProviderErrorCode.INVALID_REQUEST,
                provider=self.name,
            )
        return ProviderError(
            f"{self.name} request failed: {exc}",
            code=ProviderErrorCode.TRANSPORT_FAILURE,
            provider=self.name,
        )

    def _decode(self, resp: Any) -> Any:
        self._check_response(resp)
        try:
            return resp.json()
        except ValueError as exc:
            raise ProviderError(
                f"{self.name} returned invalid JSON: {exc}",
                code=ProviderErrorCode.MALFORMED_RESPONSE,
                provider=self.name,
            ) from exc

    def _check_response(self, resp: Any) -> None:
        status = resp.status_code
        if status == 429:
            raise ProviderError(
                f"{self.name} rate limited",
                code=ProviderErrorCode.RATE_LIMITED,
                provider=self.name,
                status_code=status,
            )
        if not 200 <= status < 300:
            raise ProviderError(
                f"{self.name} returned HTTP {status}",
                code=ProviderErrorCode.TRANSPORT_FAILURE,
                provider=self.name,
                status_code=status,
            )

    # ------------------------------------------------------------- helpers

    def _require_key(self) -> None:
        if not self.api_key:
            raise ProviderError(
                f"{self.name} API key is missing",
                code=ProviderErrorCode.MISSING_CREDENTIAL,
                provider=self.name,
            )

    def _symbol(self, symbol: str) -> str:
        """Uppercased, URL-safe ticker."""
        cleaned = (symbol or "").strip().upper()
        if not cleaned:
            raise ProviderError(
                "Ticker symbol is empty",
                code=ProviderErrorCode.INVALID_REQUEST,
                provider=self.name,
            )
        return quote(cleaned, safe=".-")

    def _empty(self, message: str) -> ProviderError:
        return ProviderError(
            f"{self.name}: {message}",
            code=ProviderErrorCode.EMPTY_RESULT,
            provider=self.name,
        )

    def _malformed(self, message: str) -> ProviderError:
        return ProviderError(
            f"{self.name}: {message}",
            code=ProviderErrorCode.MALFORMED_RESPONSE,
            provider=self.name,
        )


# ------------------------------------------------------------------ parsing


def parse_float(value: Any) -> float | None:
    """Lenient numeric parse; providers send numbers, strings, or "None"."""
    if value is None or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    return result if math.isfinite(result) else None


def parse_int(value: Any) -> int | None:
    result = parse_float(value)
    return int(result) if result is not None else None


def clean_text(value: Any) -> str:
    """String field with ``None`` and placeholder "None" mapped to ""."""
    if value is None:
        return ""
    value = str(value).strip()
    return "" if value == "None" else value


def iso_date(value: date | str) -> str:
    return value.isoformat() if isinstance(value, date) else str(value)
