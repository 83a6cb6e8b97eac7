"""Tests for Go/No-Go zone classification.

Boundary values are round numbers that real inputs hit, so each edge is
probed exactly.
"""

import math

import pytest

from src.engine.zones import (
    CAUTION_THRESHOLD,
    GO_THRESHOLD,
    STRONG_THRESHOLD,
    ZONE_DESCRIPTIONS,
    ZONE_TARGETS,
    classify_zone,
    describe_zone,
)
from src.models.common import Zone


class TestBoundaries:
    """Exact boundary inclusion."""

    @pytest.mark.parametrize(
        ("ratio", "expected"),
        [
            (1.30, Zone.GO),
            (1.3000001, Zone.STRONG),
            (1.15, Zone.GO),
            (1.1499999, Zone.CAUTION),
            (1.00, Zone.CAUTION),
            (0.9999, Zone.STOP),
        ],
    )
    def test_boundary(self, ratio: float, expected: Zone) -> None:
        assert classify_zone(ratio) == expected


class TestPartition:
    """Every ratio lands in exactly one zone, monotonically."""

    @pytest.mark.parametrize(
        ("ratio", "expected"),
        [
            (5.0, Zone.STRONG),
            (1.22, Zone.GO),
            (1.07, Zone.CAUTION),
            (0.5, Zone.STOP),
            (0.0, Zone.STOP),
            (-3.0, Zone.STOP),
        ],
    )
    def test_interior_points(self, ratio: float, expected: Zone) -> None:
        assert classify_zone(ratio) == expected

    def test_monotonic(self) -> None:
        order = [Zone.STOP, Zone.CAUTION, Zone.GO, Zone.STRONG]
        ratios = [i / 1000 for i in range(0, 2001)]
        ranks = [order.index(classify_zone(r)) for r in ratios]
        assert ranks == sorted(ranks)

    def test_nan_is_stop(self) -> None:
        assert classify_zone(math.nan) == Zone.STOP

    def test_infinity_is_strong(self) -> None:
        assert classify_zone(math.inf) == Zone.STRONG


class TestZoneMetadata:
    """Targets and descriptions are fixed."""

    def test_targets_best_first(self) -> None:
        assert ZONE_TARGETS == (
            (Zone.STRONG, STRONG_THRESHOLD),
            (Zone.GO, GO_THRESHOLD),
            (Zone.CAUTION, CAUTION_THRESHOLD),
        )

    def test_every_zone_described(self) -> None:
        assert set(ZONE_DESCRIPTIONS) == set(Zone)

    def test_description_is_descriptive(self) -> None:
        assert describe_zone(Zone.STOP) == "Financial comparison shows no margin or negative"

    def test_zone_tokens(self) -> None:
        assert [z.value for z in Zone] == ["Strong", "Go", "Caution", "Stop"]
