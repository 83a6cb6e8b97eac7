"""Input assembly: map calculator forms onto EngineInput.

The basic form describes one year with travel split into flights, housing
and ground costs. The year-by-year form carries a single value per field
plus optional per-year overrides. Both end up as one EngineInput whose
per-year sequences all have length ``years``.
"""

from collections.abc import Sequence

from src.engine.schedules import project_travel_with_inflation
from src.models.calculation import BasicInputs, EngineInput, YearByYearInputs


def map_basic_to_engine(inputs: BasicInputs) -> EngineInput:
    """Single-year EngineInput for the basic calculator.

    Relocation cost is only passed through when relocation is not blocked.
    """
    travel_expense = inputs.flights + inputs.housing + inputs.ground

    return EngineInput(
        years=1,
        base=inputs.corridor_comp,
        bonus_percent=0.0,
        sign_on=[0.0],
        shares=[0.0],
        stock_price=0.0,
        local=[inputs.local_alt],
        travel=[travel_expense],
        tax=[0.0],
        flight_hours=inputs.flight_hours,
        relocation_cost=None if inputs.relocation_blocked else inputs.relocation_cost,
    )


def _per_year(
    overrides: Sequence[float | None],
    years: int,
    fallback: float,
) -> list[float]:
    """Pad or truncate ``overrides`` to ``years``, unset entries -> fallback."""
    resolved: list[float] = []
    for i in range(years):
        value = overrides[i] if i < len(overrides) else None
        resolved.append(fallback if value is None else value)
    return resolved


def build_year_by_year_input(
    inputs: YearByYearInputs,
    *,
    default_inflation_percent: float = 0.0,
) -> EngineInput:
    """EngineInput for the year-by-year calculator.

    Args:
        inputs: Form values with optional per-year overrides.
        default_inflation_percent: Travel inflation used when the form
            leaves it unset.

    Returns:
        EngineInput with every per-year sequence of length ``inputs.years``.
    """
    years = inputs.years

    if inputs.local_per_year is not None:
        local = _per_year(inputs.local_per_year, years, inputs.local_alt)
    else:
        local = [inputs.local_alt] * years

    if inputs.travel_per_year is not None:
        travel = _per_year(inputs.travel_per_year, years, 0.0)
    elif inputs.base_travel is None:
        travel = [0.0] * years
    else:
        inflation = inputs.travel_inflation_percent
        if inflation is None:
            inflation = default_inflation_percent
        projected = project_travel_with_inflation(inputs.base_travel, inflation, years)
        travel = [float(t) for t in projected]

    if inputs.tax_per_year is not None:
        tax = _per_year(inputs.tax_per_year, years, inputs.tax_amount)
    else:
        tax = [inputs.tax_amount] * years

    return EngineInput(
        years=years,
        base=inputs.base,
        bonus_percent=inputs.bonus_percent,
        sign_on=_per_year(inputs.sign_on, years, 0.0),
        shares=_per_year(inputs.shares, years, 0.0),
        stock_price=inputs.stock_price,
        local=local,
        travel=travel,
        tax=tax,
        flight_hours=inputs.flight_hours,
        relocation_cost=inputs.relocation_cost,
    )


def calendar_years(starting_year: int, years: int) -> list[int]:
    """Calendar year labels for each modeled year."""
    return [starting_year + i for i in range(years)]
