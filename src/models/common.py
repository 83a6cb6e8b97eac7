"""Shared types, enums, and base models used across the calculator domain models."""

from enum import StrEnum
from typing import Annotated

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


# --- Reusable annotated types ---

Money = Annotated[float, Field(description="Currency amount, single unit across all inputs.")]
Percent = Annotated[float, Field(description="Percentage value, 15 means 15%.")]


# --- Shared enums ---


class Zone(StrEnum):
    """Viability zone derived from the Go/No-Go ratio."""

    STRONG = "Strong"
    GO = "Go"
    CAUTION = "Caution"
    STOP = "Stop"


class ExitRoute(StrEnum):
    """Cheaper way out of a corridor arrangement."""

    LOCAL = "local"
    RELOCATE = "relocate"


class AdvisoryCode(StrEnum):
    """Conditions a caller may surface alongside a result."""

    NO_SALARY_GAP = "NO_SALARY_GAP"
    TRAVEL_EXCEEDS_GAP = "TRAVEL_EXCEEDS_GAP"
    BREAKING_POINT_CROSSED = "BREAKING_POINT_CROSSED"


class AdvisorySeverity(StrEnum):
    """Severity of an advisory attached to a calculation."""

    INFO = "INFO"
    WARNING = "WARNING"


# --- Base model ---


class PremiumBase(BaseModel):
    """Base model with common configuration for all calculator Pydantic models.

    Fields are snake_case in Python; the camelCase names of the browser
    record shape are accepted as aliases.
    """

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
        "protected_namespaces": (),
    }
