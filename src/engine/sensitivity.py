"""Stock-price sensitivity: re-runs and threshold gaps.

Stock price is the only input a caller sweeps. Each variant is a fresh
engine run on a copy of the input; the original input is never touched.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from src.engine.calculator import run_all
from src.models.calculation import CalculationResult, EngineInput, StockThresholds
from src.models.common import Zone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PricePoint:
    """Engine result at one candidate stock price."""

    stock_price: float
    result: CalculationResult


@dataclass(frozen=True)
class ThresholdGap:
    """How far a price sits above the best zone threshold it clears."""

    zone: Zone
    threshold_price: float
    gap_amount: float
    gap_percent: float


def recalculate_with_stock_price(
    engine_input: EngineInput,
    stock_price: float,
) -> CalculationResult:
    """Run the engine with only the stock price replaced."""
    return run_all(engine_input.model_copy(update={"stock_price": stock_price}))


def sweep_stock_prices(
    engine_input: EngineInput,
    prices: Iterable[float],
) -> list[PricePoint]:
    """One engine run per candidate price, in the order given."""
    points = [
        PricePoint(stock_price=price, result=recalculate_with_stock_price(engine_input, price))
        for price in prices
    ]
    logger.debug("swept %d stock price(s)", len(points))
    return points


def stock_price_change_percent(
    current_price: float | None,
    candidate_price: float | None,
) -> float | None:
    """Percent move from the current price to a candidate price.

    None when either price is missing or the current price is zero.
    """
    if current_price is None or candidate_price is None or current_price == 0:
        return None
    return (candidate_price - current_price) / current_price * 100


def nearest_threshold_gap(
    price: float,
    thresholds: StockThresholds,
) -> ThresholdGap | None:
    """Best zone threshold strictly below ``price`` and the margin above it.

    Checks Strong, then Go, then Caution. Unset and zero thresholds are
    skipped. Returns None when the price clears none of them.
    """
    candidates = (
        (Zone.STRONG, thresholds.strong),
        (Zone.GO, thresholds.go),
        (Zone.CAUTION, thresholds.caution),
    )
    for zone, threshold in candidates:
        if threshold and price > threshold:
            gap_amount = price - threshold
            return ThresholdGap(
                zone=zone,
                threshold_price=threshold,
                gap_amount=gap_amount,
                gap_percent=gap_amount / price * 100,
            )
    return None
