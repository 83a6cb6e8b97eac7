"""Calculation models: EngineInput, YearResult, BreakingPoints, StockThresholds.

Input records are plain validated containers assembled by a caller. Output
records are frozen: every engine call builds new ones, nothing is mutated.
"""

from datetime import datetime, timezone

from pydantic import Field

from src.models.common import (
    AdvisoryCode,
    AdvisorySeverity,
    ExitRoute,
    Money,
    Percent,
    PremiumBase,
    Zone,
)


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class EngineInput(PremiumBase):
    """One invocation's worth of compensation, travel, and tax data.

    Per-year sequences may be shorter than ``years`` or contain ``None``;
    unset entries resolve through the engine's fallback chain.
    """

    years: int = Field(..., ge=1, description="Number of projection years.")
    base: Money = 0.0
    bonus_percent: Percent = 0.0
    sign_on: list[float | None] = Field(default_factory=list)
    shares: list[float | None] = Field(default_factory=list)
    stock_price: Money = 0.0
    local: list[float | None] = Field(default_factory=list)
    travel: list[float | None] = Field(default_factory=list)
    tax: list[float | None] = Field(
        default_factory=list,
        description="Signed tax adjustment; positive means the corridor is taxed more.",
    )
    flight_hours: float = 0.0
    relocation_cost: Money | None = Field(
        default=None,
        description="Annual relocation cost; None means relocation is blocked.",
    )


class BasicInputs(PremiumBase):
    """Single-year inputs of the basic calculator form."""

    corridor_comp: Money
    local_alt: Money
    flights: Money = 0.0
    housing: Money = 0.0
    ground: Money = 0.0
    flight_hours: float = 0.0
    relocation_blocked: bool = True
    relocation_cost: Money | None = None


class YearByYearInputs(PremiumBase):
    """Multi-year inputs of the year-by-year calculator form.

    ``*_per_year`` lists are overrides; leaving one as ``None`` means the
    single value applies to every year.
    """

    years: int = Field(default=4, ge=1)
    starting_year: int = Field(default_factory=lambda: datetime.now(tz=timezone.utc).year)
    base: Money
    bonus_percent: Percent = 0.0
    sign_on: list[float | None] = Field(default_factory=list)
    shares: list[float | None] = Field(default_factory=list)
    stock_price: Money = 0.0
    local_alt: Money
    local_per_year: list[float | None] | None = None
    base_travel: Money | None = None
    travel_inflation_percent: Percent | None = Field(
        default=None,
        description="Annual travel inflation; None defers to the caller default.",
    )
    travel_per_year: list[float | None] | None = None
    tax_amount: Money = 0.0
    tax_per_year: list[float | None] | None = None
    flight_hours: float = 0.0
    relocation_cost: Money | None = None


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------


class YearResult(PremiumBase, frozen=True):
    """Derived figures for one modeled year."""

    year: int = Field(..., ge=1, description="1-based year index.")
    tc: float
    local: float
    travel: float
    tax: float
    salary_gap: float
    distance_premium: float
    go_no_go: float
    zone: Zone
    sky_rate: float | None = Field(
        default=None,
        description="Distance premium per flight hour; None when not applicable.",
    )
    rsu_percent: float
    escape_penalty: float


class BreakingPoints(PremiumBase, frozen=True):
    """Year-1 break-even levels and the signed buffer left before each."""

    corridor_floor: float
    local_ceiling: float
    travel_ceiling: float
    corridor_buffer: float
    local_buffer: float
    travel_buffer: float


class StockThresholds(PremiumBase, frozen=True):
    """Minimum stock price reaching each zone boundary, or None if unreachable."""

    strong: float | None = None
    go: float | None = None
    caution: float | None = None


class EscapeRouteComparison(PremiumBase, frozen=True):
    """Accept-the-gap versus relocate, on year-1 figures."""

    salary_gap: float
    relocation_cost: float
    lower_cost_exit: ExitRoute


class CalculationResult(PremiumBase, frozen=True):
    """Complete engine output for one invocation."""

    years: list[YearResult]
    breaking_points: BreakingPoints
    stock_thresholds: list[StockThresholds]
    escape_route_comparison: EscapeRouteComparison | None = None


class Advisory(PremiumBase, frozen=True):
    """Annotation derived from a result's year-1 figures."""

    code: AdvisoryCode
    severity: AdvisorySeverity
    message: str = Field(..., min_length=1)


class CalculationReport(PremiumBase, frozen=True):
    """A result together with its advisories."""

    result: CalculationResult
    advisories: list[Advisory] = Field(default_factory=list)
