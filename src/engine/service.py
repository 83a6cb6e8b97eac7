"""Calculator service: form inputs in, result plus advisories out.

Stateless facade over the engine: assembles the EngineInput, runs it,
attaches advisories, and logs one line per run. Keeps no memory between
calls, so a caller recomputing on every input change simply keeps the
latest report.
"""

import structlog

from src.config.logging import configure_logging
from src.config.settings import Settings, get_settings
from src.engine.advisories import assess_advisories
from src.engine.calculator import run_all
from src.engine.inputs import build_year_by_year_input, map_basic_to_engine
from src.engine.schedules import is_vesting_schedule_complete
from src.models.calculation import (
    BasicInputs,
    CalculationReport,
    EngineInput,
    YearByYearInputs,
)

logger = structlog.get_logger(__name__)


class CalculatorService:
    """Runs the basic and year-by-year calculators."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        if not structlog.is_configured():
            configure_logging(self._settings)

    def run(self, engine_input: EngineInput) -> CalculationReport:
        """Run the engine on an already assembled input."""
        result = run_all(engine_input)
        advisories = assess_advisories(result)
        first_year = result.years[0]

        logger.info(
            "calculation_complete",
            years=engine_input.years,
            go_no_go=round(first_year.go_no_go, 4),
            zone=first_year.zone.value,
            advisories=[a.code.value for a in advisories],
        )
        return CalculationReport(result=result, advisories=advisories)

    def run_basic(self, inputs: BasicInputs) -> CalculationReport:
        """Run the single-year basic calculator."""
        return self.run(map_basic_to_engine(inputs))

    def run_year_by_year(self, inputs: YearByYearInputs) -> CalculationReport:
        """Run the multi-year calculator with the configured inflation default."""
        engine_input = build_year_by_year_input(
            inputs,
            default_inflation_percent=self._settings.DEFAULT_TRAVEL_INFLATION_PCT,
        )
        return self.run(engine_input)

    def vesting_schedule_complete(self, percents: list[float | None]) -> bool:
        """Whether a vesting schedule sums to 100% within the configured tolerance."""
        return is_vesting_schedule_complete(
            percents, tolerance=self._settings.VESTING_TOLERANCE_PCT,
        )
