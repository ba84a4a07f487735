"""Company profile data model."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


@dataclass(frozen=True)
class Address:
    """Postal address; every part is optional."""

    street: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None


@dataclass(frozen=True)
class CompanyProfile:
    """Normalized company fundamentals from a single provider.

    Attributes:
        ticker: Ticker symbol.
        name: Display name.
        exchange: Primary exchange.
        market: Market or asset type.
        currency: Trading currency.
        locale: Country or locale.
        description: Free-text business description.
        industry: Industry classification.
        sector: Sector classification.
        address: Headquarters address.
        homepage_url: Company website.
        market_cap: Market capitalization.
        total_employees: Employee count.
        cik: SEC CIK number (Polygon/Alpha Vantage).
    """

    ticker: str
    name: str
    exchange: str = ""
    market: str = ""
    currency: str = ""
    locale: str = ""
    description: str = ""
    industry: str = ""
    sector: str = ""
    address: Address | None = None
    homepage_url: str = ""
    market_cap: float | None = None
    total_employees: int | None = None
    cik: str | None = None

    @property
    def usable(self) -> bool:
        """A profile is usable only when it carries a description."""
        return bool(self.description)

    def with_description(self, description: str) -> CompanyProfile:
        """Copy of this profile with only the description replaced."""
        return replace(self, description=description)


class ProfileOrigin(Enum):
    """Where the profile's descriptive text came from."""

    PROVIDER = "provider"
    SYNTHESIZED = "synthesized"
    RAW_TEXT = "raw_text"


@dataclass(frozen=True)
class ResolvedProfile:
    """Outcome of a fallback resolution.

    ``profile`` is None when origin is ``RAW_TEXT``; the caller then renders
    ``raw_text`` instead of structured fields.
    """

    profile: CompanyProfile | None
    origin: ProfileOrigin
    provider: str | None = None
    raw_text: str | None = None

    @property
    def text(self) -> str:
        if self.profile is not None:
            return self.profile.description
        return self.raw_text or ""
