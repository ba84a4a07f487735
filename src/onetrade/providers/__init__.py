"""Provider registry."""

from __future__ import annotations

from typing import Any

from onetrade.config import ProviderType
from onetrade.providers.base import BaseHTTPClient, BaseProvider

# Lazy registry, resolved on first use.
PROVIDER_CLASSES: dict[ProviderType, str] = {
    ProviderType.POLYGON: "onetrade.providers.polygon.PolygonClient",
    ProviderType.TWELVEDATA: "onetrade.providers.twelvedata.TwelveDataClient",
    ProviderType.ALPHAVANTAGE: "onetrade.providers.alphavantage.AlphaVantageClient",
    ProviderType.FINNHUB: "onetrade.providers.finnhub.FinnhubClient",
    ProviderType.GEMINI: "onetrade.providers.gemini.GeminiClient",
    ProviderType.MOCK: "onetrade.providers.mock.MockProvider",
}


def create_provider(provider_type: ProviderType, **kwargs: Any) -> BaseProvider:
    """Instantiate a provider by type, forwarding kwargs to its constructor."""
    import importlib

    dotted = PROVIDER_CLASSES[provider_type]
    module_path, cls_name = dotted.rsplit(".", 1)
    module = importlib.import_module(module_path)
    cls = getattr(module, cls_name)
    return cls(**kwargs)


__all__ = ["BaseProvider", "BaseHTTPClient", "PROVIDER_CLASSES", "create_provider"]
