"""Advisory checks on a calculation result.

Inspects year-1 figures and breaking-point buffers and produces
annotations a caller can show next to, or instead of, the headline
numbers. The result itself is never altered.
"""

from src.models.calculation import Advisory, CalculationResult
from src.models.common import AdvisoryCode, AdvisorySeverity

_BUFFER_LABELS: tuple[tuple[str, str], ...] = (
    ("corridor_buffer", "Corridor pay is below the corridor floor"),
    ("local_buffer", "Local offer is above the local ceiling"),
    ("travel_buffer", "Travel spend is above the travel ceiling"),
)


def check_salary_gap(result: CalculationResult) -> list[Advisory]:
    """Flag a missing salary gap, or travel that swallows the whole gap.

    * salary_gap <= 0          -> NO_SALARY_GAP
    * travel > salary_gap > 0  -> TRAVEL_EXCEEDS_GAP
    """
    first_year = result.years[0]

    if first_year.salary_gap <= 0:
        return [
            Advisory(
                code=AdvisoryCode.NO_SALARY_GAP,
                severity=AdvisorySeverity.WARNING,
                message="No salary gap exists. The local alternative pays equal or more.",
            )
        ]
    if first_year.travel > first_year.salary_gap:
        return [
            Advisory(
                code=AdvisoryCode.TRAVEL_EXCEEDS_GAP,
                severity=AdvisorySeverity.WARNING,
                message="Travel costs exceed the salary gap. The corridor is not viable.",
            )
        ]
    return []


def check_breaking_points(result: CalculationResult) -> list[Advisory]:
    """One INFO advisory per negative breaking-point buffer."""
    advisories: list[Advisory] = []
    points = result.breaking_points

    for field_name, label in _BUFFER_LABELS:
        buffer = getattr(points, field_name)
        if buffer < 0:
            advisories.append(
                Advisory(
                    code=AdvisoryCode.BREAKING_POINT_CROSSED,
                    severity=AdvisorySeverity.INFO,
                    message=f"{label} by {-buffer:,.0f}",
                )
            )
    return advisories


def assess_advisories(result: CalculationResult) -> list[Advisory]:
    """All advisories for a result, salary-gap warnings first."""
    return check_salary_gap(result) + check_breaking_points(result)
