"""Shared fixtures for onetrade tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src/ is on the path for editable-style imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from onetrade.models.company_profile import Address, CompanyProfile
from onetrade.models.news import NewsArticle
from onetrade.providers.mock import MockProvider


@pytest.fixture
def full_profile() -> CompanyProfile:
    return CompanyProfile(
        ticker="AAPL",
        name="Apple Inc.",
        exchange="XNAS",
        market="stocks",
        currency="USD",
        locale="us",
        description="Apple designs consumer electronics.",
        industry="Electronic Computers",
        sector="3571",
        address=Address(street="One Apple Park Way", city="Cupertino", state="CA", postal_code="95014"),
        homepage_url="https://www.apple.com",
        market_cap=3.0e12,
        total_employees=161000,
    )


@pytest.fixture
def bare_profile() -> CompanyProfile:
    """Structurally present profile with no description."""
    return CompanyProfile(
        ticker="AAPL",
        name="Apple Inc",
        exchange="NASDAQ",
        currency="USD",
        locale="United States",
        industry="Consumer Electronics",
        sector="Technology",
        market_cap=2.9e12,
        total_employees=150000,
    )


@pytest.fixture
def text_gen() -> MockProvider:
    return MockProvider(name="textgen")


@pytest.fixture
def sample_articles() -> list[NewsArticle]:
    return [
        NewsArticle(headline="Older story", summary="Old.", datetime=1_700_000_000),
        NewsArticle(headline="Newest story", summary=None, datetime=1_700_100_000),
        NewsArticle(headline="Middle story", summary="Mid.", datetime=1_700_050_000),
    ]
