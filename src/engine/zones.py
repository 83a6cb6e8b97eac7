"""Zone classification for the Go/No-Go ratio.

Boundaries are fixed constants. Evaluated top-down so each boundary value
belongs to exactly one zone:

    ratio >  1.30          -> Strong
    1.15 <= ratio <= 1.30  -> Go
    1.00 <= ratio <  1.15  -> Caution
    ratio <  1.00          -> Stop

The 1.30 edge is exclusive on the Strong side while 1.15 and 1.00 are
inclusive on the higher zone's side. Keep it that way.
"""

from src.models.common import Zone

STRONG_THRESHOLD = 1.30
GO_THRESHOLD = 1.15
CAUTION_THRESHOLD = 1.00

# Target ratios used when inverting the ratio for stock price, best zone first.
ZONE_TARGETS: tuple[tuple[Zone, float], ...] = (
    (Zone.STRONG, STRONG_THRESHOLD),
    (Zone.GO, GO_THRESHOLD),
    (Zone.CAUTION, CAUTION_THRESHOLD),
)

# Descriptive, not directive.
ZONE_DESCRIPTIONS: dict[Zone, str] = {
    Zone.STRONG: "Financial comparison shows significant margin",
    Zone.GO: "Financial comparison shows positive margin",
    Zone.CAUTION: "Financial comparison shows narrow margin",
    Zone.STOP: "Financial comparison shows no margin or negative",
}


def classify_zone(ratio: float) -> Zone:
    """Map a Go/No-Go ratio to its zone.

    NaN compares false against every boundary and lands in Stop.
    """
    if ratio > STRONG_THRESHOLD:
        return Zone.STRONG
    if ratio >= GO_THRESHOLD:
        return Zone.GO
    if ratio >= CAUTION_THRESHOLD:
        return Zone.CAUTION
    return Zone.STOP


def describe_zone(zone: Zone) -> str:
    """Return the fixed description for a zone."""
    return ZONE_DESCRIPTIONS[zone]
