"""FallbackResolver: company profile from a priority chain of providers."""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from onetrade.errors import ExhaustedFallbackError, ProviderError
from onetrade.models.company_profile import CompanyProfile, ProfileOrigin, ResolvedProfile
from onetrade.providers.base import BaseProvider
from onetrade.quality import is_usable

logger = logging.getLogger(__name__)


class FallbackResolver:
    """Try company-info providers in order, then fall back to text generation.

    The first usable profile (non-empty description) wins and no further
    provider is called. When the chain is exhausted the outcome depends on
    the last provider only:

    * it returned a profile without a description: that profile is returned
      with its description replaced by generated text (``SYNTHESIZED``);
    * it failed outright: the generated text is returned on its own with no
      structured profile (``RAW_TEXT``).

    If generation fails as well, ``ExhaustedFallbackError`` is raised.
    Provider calls are never retried.

    Usage::

        resolver = FallbackResolver([polygon, twelvedata], gemini)
        resolved = await resolver.resolve("AAPL")
    """

    def __init__(
        self,
        providers: Sequence[BaseProvider],
        text_generator: BaseProvider,
    ) -> None:
        if not providers:
            raise ValueError("FallbackResolver needs at least one company-info provider")
        self.providers = [p.require("company_info") for p in providers]
        self.text_generator = text_generator.require("text")

    async def resolve(self, ticker: str) -> ResolvedProfile:
        last_profile: CompanyProfile | None = None
        last_provider: str | None = None
        last_error: ProviderError | None = None

        for provider in self.providers:
            try:
                profile = await asyncio.to_thread(provider.get_company_info, ticker)
            except ProviderError as e:
                logger.info("%s: company info failed for %s (%s)", provider.name, ticker, e)
                last_profile, last_provider, last_error = None, provider.name, e
                continue

            if is_usable(profile):
                logger.info("%s: usable profile for %s", provider.name, ticker)
                return ResolvedProfile(
                    profile=profile,
                    origin=ProfileOrigin.PROVIDER,
                    provider=provider.name,
                )

            logger.info("%s: profile for %s has no description", provider.name, ticker)
            last_profile, last_provider, last_error = profile, provider.name, None

        return await self._synthesize(ticker, last_profile, last_provider, last_error)

    async def _synthesize(
        self,
        ticker: str,
        profile: CompanyProfile | None,
        provider: str | None,
        provider_error: ProviderError | None,
    ) -> ResolvedProfile:
        logger.warning(
            "Company-info providers exhausted for %s (last: %s, %s), generating with %s",
            ticker,
            provider,
            provider_error or "no description",
            self.text_generator.name,
        )
        try:
            text = await asyncio.to_thread(self.text_generator.generate_stock_content, ticker)
        except ProviderError as e:
            raise ExhaustedFallbackError(
                f"Content generation failed for {ticker}: {e}",
                last_cause=e,
            ) from e

        if profile is not None:
            return ResolvedProfile(
                profile=profile.with_description(text),
                origin=ProfileOrigin.SYNTHESIZED,
                provider=provider,
            )
        return ResolvedProfile(
            profile=None,
            origin=ProfileOrigin.RAW_TEXT,
            provider=self.text_generator.name,
            raw_text=text,
        )
