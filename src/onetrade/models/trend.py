"""Price trend model."""

from __future__ import annotations

from dataclasses import dataclass

TREND_OFFSETS: tuple[int, ...] = (1, 5, 21, 63)


@dataclass(frozen=True)
class TrendSet:
    """Percent change over fixed look-back offsets, counted in trading days.

    Attributes:
        daily: Change vs. 1 data point back.
        weekly: Change vs. 5 data points back.
        monthly: Change vs. 21 data points back.
        three_month: Change vs. 63 data points back.
    """

    daily: float | None = None
    weekly: float | None = None
    monthly: float | None = None
    three_month: float | None = None

    @classmethod
    def from_offsets(cls, values: dict[int, float | None]) -> TrendSet:
        return cls(
            daily=values.get(1),
            weekly=values.get(5),
            monthly=values.get(21),
            three_month=values.get(63),
        )

    def as_dict(self) -> dict[int, float | None]:
        return {
            1: self.daily,
            5: self.weekly,
            21: self.monthly,
            63: self.three_month,
        }

    @property
    def empty(self) -> bool:
        return all(v is None for v in self.as_dict().values())
