"""Shared pytest fixtures for the calculator test suite.

Provides:
- scenario_a: one-year corridor offer with no equity, landing in Go
- equity_input: four-year offer with vesting shares, bonus, sign-on and tax
"""

import pytest

from src.models.calculation import EngineInput


@pytest.fixture
def scenario_a() -> EngineInput:
    """400k corridor offer vs 300k local, 44k travel, 260 flight hours."""
    return EngineInput(
        years=1,
        base=400_000,
        bonus_percent=0,
        sign_on=[0],
        shares=[0],
        stock_price=0,
        local=[300_000],
        travel=[44_000],
        tax=[0],
        flight_hours=260,
    )


@pytest.fixture
def equity_input() -> EngineInput:
    """Four-year offer with a front-loaded sign-on and even vesting."""
    return EngineInput(
        years=4,
        base=200_000,
        bonus_percent=15,
        sign_on=[50_000, 25_000, 0, 0],
        shares=[250, 250, 250, 250],
        stock_price=400,
        local=[220_000, 225_000, 230_000, 235_000],
        travel=[30_000, 31_200, 32_448, 33_746],
        tax=[5_000, 5_000, 5_000, 5_000],
        flight_hours=200,
    )
