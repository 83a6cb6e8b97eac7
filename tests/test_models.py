"""Tests for calculator Pydantic models.

Covers: validation at the input boundary, camelCase aliases, immutability
of outputs, and enum tokens.
"""

import pytest
from pydantic import ValidationError

from src.engine.calculator import run_all
from src.models.calculation import (
    Advisory,
    CalculationResult,
    EngineInput,
    StockThresholds,
    YearByYearInputs,
)
from src.models.common import AdvisoryCode, AdvisorySeverity, ExitRoute, Zone


class TestEngineInput:
    """Structural validation only; numeric values are not range-checked."""

    def test_years_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            EngineInput(years=0)

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EngineInput(years=1, base="lots")  # type: ignore[arg-type]

    def test_negative_values_accepted(self) -> None:
        engine_input = EngineInput(years=1, base=-1, tax=[-5_000])
        assert engine_input.base == -1

    def test_none_entries_allowed(self) -> None:
        engine_input = EngineInput(years=2, local=[100, None])
        assert engine_input.local == [100, None]

    def test_defaults(self) -> None:
        engine_input = EngineInput(years=1)
        assert engine_input.sign_on == []
        assert engine_input.relocation_cost is None
        assert engine_input.flight_hours == 0

    def test_camel_case_record(self) -> None:
        engine_input = EngineInput.model_validate(
            {
                "years": 1,
                "base": 400_000,
                "bonusPercent": 10,
                "signOn": [5_000],
                "stockPrice": 12,
                "flightHours": 260,
                "relocationCost": 60_000,
            }
        )
        assert engine_input.bonus_percent == 10
        assert engine_input.sign_on == [5_000]
        assert engine_input.stock_price == 12
        assert engine_input.flight_hours == 260
        assert engine_input.relocation_cost == 60_000


class TestYearByYearInputs:
    """Form model validation."""

    def test_requires_base_and_local(self) -> None:
        with pytest.raises(ValidationError):
            YearByYearInputs(years=2)  # type: ignore[call-arg]

    def test_years_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            YearByYearInputs(years=0, base=1, local_alt=1)


class TestOutputs:
    """Outputs are frozen and serialize with camelCase aliases."""

    def test_year_result_frozen(self, scenario_a: EngineInput) -> None:
        year = run_all(scenario_a).years[0]
        with pytest.raises(ValidationError):
            year.tc = 0  # type: ignore[misc]

    def test_result_serializes_by_alias(self, scenario_a: EngineInput) -> None:
        dumped = run_all(scenario_a).model_dump(by_alias=True)
        first = dumped["years"][0]
        assert first["goNoGo"] == pytest.approx(356_000 / 300_000)
        assert first["zone"] == "Go"
        assert first["skyRate"] == pytest.approx(56_000 / 260)
        assert "breakingPoints" in dumped
        assert dumped["escapeRouteComparison"] is None

    def test_result_json_round_trip(self, equity_input: EngineInput) -> None:
        result = run_all(equity_input)
        restored = CalculationResult.model_validate_json(result.model_dump_json())
        assert restored == result

    def test_stock_thresholds_default_none(self) -> None:
        thresholds = StockThresholds()
        assert (thresholds.strong, thresholds.go, thresholds.caution) == (None, None, None)

    def test_advisory_requires_message(self) -> None:
        with pytest.raises(ValidationError):
            Advisory(
                code=AdvisoryCode.NO_SALARY_GAP,
                severity=AdvisorySeverity.WARNING,
                message="",
            )


class TestEnums:
    """Fixed string tokens."""

    def test_zone_tokens(self) -> None:
        assert Zone("Strong") == Zone.STRONG
        assert str(Zone.CAUTION) == "Caution"

    def test_exit_route_tokens(self) -> None:
        assert {e.value for e in ExitRoute} == {"local", "relocate"}
