"""Schemas for eligibility calculation results and requests."""

from enum import Enum
from typing import Any

from pydantic import Field

from residency.schemas.common import CamelModel
from residency.constants import StatusCategory
from residency.schemas.profile import Profile, StatusEntry


class EligibilitySnapshot(CamelModel):
    """Eligibility of a holder of the qualifying status as of ``calculated_on``.

    Attributes:
        days_under_qualifying_status: Days in the rolling window since the
            qualifying status was obtained, before absences
        partial_credit: Capped credit from partial-countable periods
        total_absence_days: Full days absent within the rolling window
        total_eligible_days: Days plus credit minus absences (not clamped)
        days_remaining: Days still missing to reach the threshold
        earliest_eligibility_date: First date the threshold is met
        calculated_on: Reference date of the calculation
    """

    days_under_qualifying_status: int = Field(..., ge=0)
    partial_credit: int = Field(..., ge=0)
    total_absence_days: int = Field(..., ge=0)
    total_eligible_days: int
    days_remaining: int = Field(..., ge=0)
    earliest_eligibility_date: str
    calculated_on: str


class ProjectionResult(CamelModel):
    """What-if result for someone who does not hold the qualifying status."""

    total_countable_days: int = Field(..., ge=0)
    gross_days: int = Field(..., ge=0)
    absence_days_deducted: int = Field(..., ge=0)
    projected_credit: int = Field(..., ge=0)
    days_needed_as_qualifying_holder: int = Field(..., ge=0)
    projected_earliest_date: str
    calculated_on: str


class EligibilityProgress(CamelModel):
    """Progress derived from a stored snapshot at a later date."""

    total_eligible_days: int
    days_required: int
    days_remaining: int = Field(..., ge=0)
    is_eligible: bool
    progress: float = Field(..., ge=0, le=100)


class CalculationMode(str, Enum):
    """Which calculator produced an evaluation."""

    SNAPSHOT = "snapshot"
    PROJECTION = "projection"


class EligibilityEvaluation(CamelModel):
    """Result of the calculator chosen for a profile."""

    mode: CalculationMode
    snapshot: EligibilitySnapshot | None = None
    projection: ProjectionResult | None = None


class CalculationRequest(CamelModel):
    """Request body for snapshot, projection and evaluation endpoints."""

    profile: Profile
    reference_date: str | None = None


class ProgressRequest(CamelModel):
    snapshot: EligibilitySnapshot
    today: str | None = None


class RecalculationRequest(CamelModel):
    """Profile data before and after a write."""

    new_data: dict[str, Any]
    existing_data: dict[str, Any] = Field(default_factory=dict)
    is_new_record: bool = False


class RecalculationResponse(CamelModel):
    should_recalculate: bool


class DateRangeIn(CamelModel):
    from_: str = Field(alias="from")
    to: str


class OverlapRequest(CamelModel):
    """Candidate entry checked against existing entries before it is added."""

    range: DateRangeIn
    existing: list[DateRangeIn] = Field(default_factory=list)


class OverlapResponse(CamelModel):
    overlapping: list[DateRangeIn]
    is_exact_duplicate: bool


class TimelineSummary(CamelModel):
    """Where a profile stands on its status timeline as of ``reference_date``."""

    current_status: StatusCategory | None
    holds_qualifying_status: bool
    upcoming_trips: int = Field(..., ge=0)
    reference_date: str


class StatusAppendRequest(CamelModel):
    """New status period to add to an existing history."""

    status_history: list[StatusEntry] = Field(default_factory=list)
    entry: StatusEntry


class StatusHistoryResponse(CamelModel):
    status_history: list[StatusEntry]
