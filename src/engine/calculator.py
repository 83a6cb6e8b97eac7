"""Core calculation engine: Go/No-Go ratio, zones, and break-even points.

Pure deterministic functions: each call is a function of its EngineInput
alone and builds a fresh CalculationResult. Nothing here raises for
numeric input; division guards degrade to 0 or None instead.

Given the same inputs, ALWAYS produces the same outputs.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from src.engine.zones import ZONE_TARGETS, classify_zone
from src.models.calculation import (
    BreakingPoints,
    CalculationResult,
    EngineInput,
    EscapeRouteComparison,
    StockThresholds,
    YearResult,
)
from src.models.common import ExitRoute, Zone

logger = logging.getLogger(__name__)


def _value_at(values: Sequence[float | None], index: int) -> float | None:
    """Return ``values[index]``, or None when unset or past the end."""
    if 0 <= index < len(values):
        return values[index]
    return None


def _first_set(*candidates: float | None) -> float:
    """Return the first candidate that is not None, else 0."""
    for candidate in candidates:
        if candidate is not None:
            return candidate
    return 0.0


@dataclass(frozen=True)
class YearValues:
    """Per-year inputs after the fallback chain has been applied."""

    sign_on: float
    shares: float
    local: float
    travel: float
    tax: float


def resolve_year_values(index: int, engine_input: EngineInput) -> YearValues:
    """Resolve year ``index`` (0-based) of every per-year sequence.

    Sign-on, shares and tax default to 0. Local and travel fall back to
    their year-0 value, then to 0.
    """
    return YearValues(
        sign_on=_first_set(_value_at(engine_input.sign_on, index)),
        shares=_first_set(_value_at(engine_input.shares, index)),
        local=_first_set(
            _value_at(engine_input.local, index),
            _value_at(engine_input.local, 0),
        ),
        travel=_first_set(
            _value_at(engine_input.travel, index),
            _value_at(engine_input.travel, 0),
        ),
        tax=_first_set(_value_at(engine_input.tax, index)),
    )


def calculate_total_compensation(
    base: float,
    bonus_percent: float,
    sign_on: float,
    shares: float,
    stock_price: float,
) -> float:
    """TC = base + base × bonus% + sign-on + shares × stock price."""
    bonus = base * (bonus_percent / 100)
    rsu_value = shares * stock_price
    return base + bonus + sign_on + rsu_value


def compute_stock_threshold(
    *,
    target_ratio: float,
    local: float,
    travel: float,
    tax: float,
    base: float,
    bonus_percent: float,
    sign_on: float,
    shares: float,
) -> float | None:
    """Stock price at which the Go/No-Go ratio equals ``target_ratio``.

    Solves ``target = (cash + shares × price - travel - tax) / local`` for
    price, everything else held fixed.

    Returns:
        The threshold price, or None when ``shares`` is zero or the price
        would be negative (the target is met at any price).
    """
    if shares == 0:
        return None

    cash = base + (base * bonus_percent / 100) + sign_on
    required = (target_ratio * local) + travel + tax - cash
    threshold = required / shares

    # NaN fails the comparison as well and is reported as None.
    return threshold if threshold >= 0 else None


def run_year(index: int, engine_input: EngineInput) -> YearResult:
    """Compute the result for year ``index`` (0-based)."""
    values = resolve_year_values(index, engine_input)
    shares = values.shares
    local = values.local
    travel = values.travel
    tax = values.tax

    tc = calculate_total_compensation(
        engine_input.base,
        engine_input.bonus_percent,
        values.sign_on,
        shares,
        engine_input.stock_price,
    )

    salary_gap = tc - local

    # Cheaper of accepting the gap and relocating; just the gap when
    # relocation is blocked.
    if engine_input.relocation_cost is not None:
        escape_penalty = min(salary_gap, engine_input.relocation_cost)
    else:
        escape_penalty = salary_gap

    distance_premium = salary_gap - travel

    corridor_net = tc - travel - tax
    go_no_go = corridor_net / local if local > 0 else 0.0

    sky_rate = (
        distance_premium / engine_input.flight_hours
        if engine_input.flight_hours > 0
        else None
    )

    rsu_percent = 0.0 if tc == 0 else (shares * engine_input.stock_price) / tc * 100

    return YearResult(
        year=index + 1,
        tc=tc,
        local=local,
        travel=travel,
        tax=tax,
        salary_gap=salary_gap,
        distance_premium=distance_premium,
        go_no_go=go_no_go,
        zone=classify_zone(go_no_go),
        sky_rate=sky_rate,
        rsu_percent=rsu_percent,
        escape_penalty=escape_penalty,
    )


def stock_thresholds_for_year(index: int, engine_input: EngineInput) -> StockThresholds:
    """Stock price needed to reach Strong, Go and Caution in year ``index``."""
    values = resolve_year_values(index, engine_input)

    prices: dict[Zone, float | None] = {
        zone: compute_stock_threshold(
            target_ratio=target,
            local=values.local,
            travel=values.travel,
            tax=values.tax,
            base=engine_input.base,
            bonus_percent=engine_input.bonus_percent,
            sign_on=values.sign_on,
            shares=values.shares,
        )
        for zone, target in ZONE_TARGETS
    }
    return StockThresholds(
        strong=prices[Zone.STRONG],
        go=prices[Zone.GO],
        caution=prices[Zone.CAUTION],
    )


def compute_breaking_points(first_year: YearResult) -> BreakingPoints:
    """Break-even levels from year-1 figures.

    Buffers are the signed distance left before each point is crossed;
    negative means it already has been.
    """
    corridor_floor = first_year.local + first_year.travel
    local_ceiling = first_year.tc - first_year.travel
    travel_ceiling = first_year.salary_gap

    return BreakingPoints(
        corridor_floor=corridor_floor,
        local_ceiling=local_ceiling,
        travel_ceiling=travel_ceiling,
        corridor_buffer=first_year.tc - corridor_floor,
        local_buffer=local_ceiling - first_year.local,
        travel_buffer=travel_ceiling - first_year.travel,
    )


def compare_escape_routes(
    first_year: YearResult,
    relocation_cost: float | None,
) -> EscapeRouteComparison | None:
    """Staying local versus relocating, when relocation is an option.

    Only meaningful with a positive year-1 salary gap; ties go to local.
    """
    if relocation_cost is None or not first_year.salary_gap > 0:
        return None

    lower_cost_exit = (
        ExitRoute.LOCAL
        if first_year.salary_gap <= relocation_cost
        else ExitRoute.RELOCATE
    )
    return EscapeRouteComparison(
        salary_gap=first_year.salary_gap,
        relocation_cost=relocation_cost,
        lower_cost_exit=lower_cost_exit,
    )


def run_all(engine_input: EngineInput) -> CalculationResult:
    """Run every modeled year and derive cross-year figures.

    Break-even points and the escape-route comparison always use year 1,
    regardless of how many years are modeled.
    """
    years = [run_year(i, engine_input) for i in range(engine_input.years)]
    stock_thresholds = [
        stock_thresholds_for_year(i, engine_input)
        for i in range(engine_input.years)
    ]

    first_year = years[0]
    result = CalculationResult(
        years=years,
        breaking_points=compute_breaking_points(first_year),
        stock_thresholds=stock_thresholds,
        escape_route_comparison=compare_escape_routes(
            first_year, engine_input.relocation_cost,
        ),
    )

    logger.debug(
        "calculated %d year(s): year-1 ratio=%.4f zone=%s",
        engine_input.years,
        first_year.go_no_go,
        first_year.zone,
    )
    return result


# The browser application calls this entry point ``calculate``.
calculate = run_all
