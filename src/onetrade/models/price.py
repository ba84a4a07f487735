"""Daily price series and current price models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Union

Numeric = Union[str, float, int, None]


@dataclass(frozen=True)
class PriceBar:
    """Single daily OHLCV record.

    Numeric fields are kept as the provider sent them (several providers
    send numbers as strings); they are coerced when trends are computed.
    """

    date: date
    open: Numeric
    high: Numeric
    low: Numeric
    close: Numeric
    volume: Numeric = None


@dataclass(frozen=True)
class PriceSeries:
    """Daily bars for one ticker, in the order the provider returned them."""

    symbol: str
    bars: tuple[PriceBar, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.bars)

    def sorted_desc(self) -> list[PriceBar]:
        """Bars ordered newest first."""
        return sorted(self.bars, key=lambda b: b.date, reverse=True)


@dataclass(frozen=True)
class CurrentPrice:
    """Latest price and the provider it came from."""

    symbol: str
    price: float
    source: str
