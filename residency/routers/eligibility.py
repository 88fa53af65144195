"""Eligibility API router - stateless calculations over a posted profile.

The caller owns the profile record; these endpoints compute results from
the request body and store nothing.
"""

import logging
from datetime import date

from fastapi import APIRouter, HTTPException, Request, status

from residency.rate_limiter import CALCULATION_LIMIT, limiter
from residency.schemas.eligibility import (
    CalculationRequest,
    DateRangeIn,
    EligibilityEvaluation,
    EligibilityProgress,
    EligibilitySnapshot,
    OverlapRequest,
    OverlapResponse,
    ProgressRequest,
    ProjectionResult,
    RecalculationRequest,
    RecalculationResponse,
    StatusAppendRequest,
    StatusHistoryResponse,
    TimelineSummary,
)
from residency.services.change_detection_service import should_recalculate
from residency.services.eligibility_service import (
    calculate_progress,
    calculate_snapshot,
    evaluate_profile,
)
from residency.services.eligibility_types import DateRange
from residency.services.profile_normalizer import parse_range
from residency.services.projection_service import calculate_projection
from residency.services.shared.date_range_service import (
    find_overlapping_ranges,
    is_exact_duplicate,
)
from residency.services.shared.date_utils import format_date, parse_date
from residency.services.status_history_service import (
    append_status,
    count_upcoming_trips,
    get_current_status,
    holds_qualifying_status,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/eligibility", tags=["eligibility"])


def _date_or_today(value: str | None, field: str) -> date:
    if value is None:
        return date.today()
    return parse_date(value, field)


@router.post("/snapshot", response_model=EligibilitySnapshot)
@limiter.limit(CALCULATION_LIMIT)
async def create_snapshot(request: Request, data: CalculationRequest) -> EligibilitySnapshot:
    """
    Calculate the eligibility snapshot for a holder of the qualifying status.

    Returns:
        Snapshot with the earliest eligibility date

    Raises:
        404 if the profile never held the qualifying status
    """
    reference_date = _date_or_today(data.reference_date, "referenceDate")
    snapshot = calculate_snapshot(data.profile, reference_date)
    if snapshot is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Profile has no qualifying status; use the projection endpoint",
        )

    logger.info(
        f"Snapshot calculated as of {reference_date}: "
        f"earliest={snapshot.earliest_eligibility_date}"
    )
    return snapshot


@router.post("/projection", response_model=ProjectionResult)
@limiter.limit(CALCULATION_LIMIT)
async def create_projection(request: Request, data: CalculationRequest) -> ProjectionResult:
    """
    Project partial credit and filing date as if the qualifying status were obtained today.
    """
    reference_date = _date_or_today(data.reference_date, "referenceDate")
    projection = calculate_projection(data.profile, reference_date)

    logger.info(
        f"Projection calculated as of {reference_date}: "
        f"earliest={projection.projected_earliest_date}"
    )
    return projection


@router.post("/evaluate", response_model=EligibilityEvaluation, response_model_exclude_none=True)
@limiter.limit(CALCULATION_LIMIT)
async def evaluate(request: Request, data: CalculationRequest) -> EligibilityEvaluation:
    """
    Run whichever calculator applies to the profile.
    """
    reference_date = _date_or_today(data.reference_date, "referenceDate")
    evaluation = evaluate_profile(data.profile, reference_date)
    logger.info(f"Profile evaluated as of {reference_date} using {evaluation.mode.value}")
    return evaluation


@router.post("/progress", response_model=EligibilityProgress)
async def get_progress(data: ProgressRequest) -> EligibilityProgress:
    """
    Progress of a stored snapshot as of today (or the given date).
    """
    today = _date_or_today(data.today, "today")
    return calculate_progress(data.snapshot, today)


@router.post("/should-recalculate", response_model=RecalculationResponse)
async def check_recalculation(data: RecalculationRequest) -> RecalculationResponse:
    """
    Whether a profile write changed any eligibility-relevant field.
    """
    return RecalculationResponse(
        should_recalculate=should_recalculate(
            data.new_data, data.existing_data, data.is_new_record
        )
    )


@router.post("/overlaps", response_model=OverlapResponse)
async def check_overlaps(data: OverlapRequest) -> OverlapResponse:
    """
    Existing entries that overlap a candidate entry.

    Overlaps are allowed (the calculators count shared days once); this lets
    the caller warn before saving.
    """
    candidate = parse_range(data.range.from_, data.range.to, "range")
    existing = [
        parse_range(r.from_, r.to, f"existing[{index}]")
        for index, r in enumerate(data.existing)
    ]

    overlapping = find_overlapping_ranges(candidate, existing)
    return OverlapResponse(
        overlapping=[_range_out(r) for r in overlapping],
        is_exact_duplicate=is_exact_duplicate(candidate, existing),
    )


@router.post("/timeline", response_model=TimelineSummary)
async def get_timeline(data: CalculationRequest) -> TimelineSummary:
    """
    Current status, qualifying-status flag and upcoming trip count for a profile.
    """
    reference_date = _date_or_today(data.reference_date, "referenceDate")
    return TimelineSummary(
        current_status=get_current_status(data.profile),
        holds_qualifying_status=holds_qualifying_status(data.profile, reference_date),
        upcoming_trips=count_upcoming_trips(data.profile.travel_absences, reference_date),
        reference_date=format_date(reference_date),
    )


@router.post("/status-history", response_model=StatusHistoryResponse)
async def add_status_period(data: StatusAppendRequest) -> StatusHistoryResponse:
    """
    Status history with a new period appended and the open period closed.

    The caller saves the returned history; nothing is stored here.
    """
    history = append_status(data.status_history, data.entry)
    logger.info(f"Appended {data.entry.status.value} period starting {data.entry.from_}")
    return StatusHistoryResponse(status_history=history)


def _range_out(date_range: DateRange) -> DateRangeIn:
    return DateRangeIn(from_=format_date(date_range.start), to=format_date(date_range.end))
