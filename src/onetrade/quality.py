"""Data quality checks for company profiles and price series."""

from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd

from onetrade.models.company_profile import CompanyProfile
from onetrade.models.price import PriceSeries


def is_usable(profile: CompanyProfile | None) -> bool:
    """True when the profile carries a non-empty description.

    This is the only criterion that drives company-info fallback; other
    fields are not inspected.
    """
    return profile is not None and bool(profile.description)


@dataclass
class ValidationCheck:
    """Single validation check result."""

    name: str
    passed: bool
    message: str = ""


@dataclass
class ValidationResult:
    """Aggregate validation result."""

    checks: list[ValidationCheck] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(c.passed for c in self.checks)

    @property
    def failed_checks(self) -> list[ValidationCheck]:
        return [c for c in self.checks if not c.passed]


def validate_price_series(series: PriceSeries) -> ValidationResult:
    """Run quality checks on a daily series.

    Checks:
        1. Not empty
        2. Numeric closes
        3. Unique dates
        4. OHLC consistency (high >= low, high >= open/close), numeric rows only
    """
    result = ValidationResult()

    # 1. Not empty
    if not series.bars:
        result.checks.append(ValidationCheck("not_empty", False, "No bars provided"))
        return result
    result.checks.append(ValidationCheck("not_empty", True, f"{len(series)} bars"))

    df = pd.DataFrame(
        {
            "date": [b.date for b in series.bars],
            "open": [b.open for b in series.bars],
            "high": [b.high for b in series.bars],
            "low": [b.low for b in series.bars],
            "close": [b.close for b in series.bars],
        }
    )
    for col in ("open", "high", "low", "close"):
        df[col] = pd.to_numeric(df[col], errors="coerce")

    # 2. Numeric closes
    bad_close = int(df["close"].isna().sum())
    if bad_close:
        result.checks.append(
            ValidationCheck("numeric_close", False, f"{bad_close} non-numeric closes")
        )
    else:
        result.checks.append(ValidationCheck("numeric_close", True))

    # 3. Unique dates
    dupes = int(df["date"].duplicated().sum())
    if dupes:
        result.checks.append(ValidationCheck("unique_dates", False, f"{dupes} duplicate dates"))
    else:
        result.checks.append(ValidationCheck("unique_dates", True))

    # 4. OHLC consistency
    ohlc = df.dropna(subset=["open", "high", "low", "close"])
    inconsistent = int(
        (
            (ohlc["high"] < ohlc["low"])
            | (ohlc["high"] < ohlc[["open", "close"]].max(axis=1))
            | (ohlc["low"] > ohlc[["open", "close"]].min(axis=1))
        ).sum()
    )
    if inconsistent:
        result.checks.append(
            ValidationCheck("ohlc_consistency", False, f"{inconsistent} bars with H<L or H<O/C")
        )
    else:
        result.checks.append(ValidationCheck("ohlc_consistency", True))

    return result
