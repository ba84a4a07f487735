"""API key provisioning.

Keys are looked up per provider from environment variables, falling back to
a ``.env`` file. A missing key resolves to ``""``; the client reports it as
``MISSING_CREDENTIAL`` at call time instead of failing at startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from dotenv import dotenv_values

from onetrade.config import ProviderType


@dataclass(frozen=True)
class ProviderKeySpec:
    """Where a provider's credential lives."""

    provider: ProviderType
    env_var: str


PROVIDER_KEYS: dict[ProviderType, ProviderKeySpec] = {
    ProviderType.POLYGON: ProviderKeySpec(ProviderType.POLYGON, "POLYGON_API_KEY"),
    ProviderType.TWELVEDATA: ProviderKeySpec(ProviderType.TWELVEDATA, "TWELVEDATA_API_KEY"),
    ProviderType.ALPHAVANTAGE: ProviderKeySpec(ProviderType.ALPHAVANTAGE, "ALPHAVANTAGE_API_KEY"),
    ProviderType.FINNHUB: ProviderKeySpec(ProviderType.FINNHUB, "FINNHUB_API_KEY"),
    ProviderType.GEMINI: ProviderKeySpec(ProviderType.GEMINI, "GEMINI_API_KEY"),
}


class KeyProvider(Protocol):
    def get(self, provider: ProviderType) -> str: ...


class EnvKeyProvider:
    """Read provider keys from ``os.environ``, then an optional ``.env`` file."""

    def __init__(self, env_path: Path | str | None = None) -> None:
        self._env_path = Path(env_path) if env_path else Path.cwd() / ".env"

    def get(self, provider: ProviderType) -> str:
        spec = PROVIDER_KEYS.get(provider)
        if spec is None:
            return ""
        value = os.environ.get(spec.env_var) or self._file_values().get(spec.env_var)
        return (value or "").strip()

    def _file_values(self) -> dict[str, str | None]:
        if not self._env_path.exists():
            return {}
        return dotenv_values(self._env_path)


__all__ = [
    "EnvKeyProvider",
    "KeyProvider",
    "PROVIDER_KEYS",
    "ProviderKeySpec",
]
