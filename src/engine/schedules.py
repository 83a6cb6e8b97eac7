"""Per-year schedules: travel inflation and share vesting.

Helpers a caller uses to fill EngineInput's per-year sequences. Values are
rounded to whole units independently per year with half-up rounding
(``floor(x + 0.5)``), not Python's round-half-to-even. Non-finite values
(NaN, infinity, an overflowing compound series) pass through unrounded as
floats.
"""

import math
from collections.abc import Sequence

import numpy as np


def _round_half_up(values: np.ndarray) -> list[int | float]:
    """Round a vector half-up; finite entries become ints, the rest stay floats."""
    rounded = np.floor(values + 0.5)
    return [int(v) if math.isfinite(v) else float(v) for v in rounded]


def project_travel_with_inflation(
    base_travel: float,
    inflation_rate_percent: float,
    years: int,
) -> list[int | float]:
    """Travel[i] = round(base × (1 + rate/100)^i) for i in [0, years).

    Each year is rounded on its own, so small drift against an unrounded
    compounding series is expected.
    """
    if years <= 0:
        return []
    exponents = np.arange(years, dtype=np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        growth = np.power(1.0 + inflation_rate_percent / 100.0, exponents)
        travel = base_travel * growth
    return _round_half_up(travel)


def shares_from_vesting_schedule(
    total_shares: float,
    percents: Sequence[float | None],
) -> list[int | float]:
    """Shares[i] = round(total × percents[i] / 100).

    Any schedule is computed as given, including one that does not sum
    to 100. Use ``is_vesting_schedule_complete`` before calling if that
    matters to the caller. An unset percent yields NaN for that year.
    """
    if len(percents) == 0:
        return []
    pct = np.asarray(percents, dtype=np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        shares = total_shares * pct / 100.0
    return _round_half_up(shares)


def vesting_total(percents: Sequence[float | None]) -> float:
    """Sum of a vesting schedule, unset entries counted as 0."""
    return float(sum(p for p in percents if p is not None))


def is_vesting_schedule_complete(
    percents: Sequence[float | None],
    tolerance: float = 0.01,
) -> bool:
    """True when the schedule sums to 100% within ``tolerance``."""
    return abs(vesting_total(percents) - 100.0) < tolerance
