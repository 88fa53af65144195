"""Eligibility snapshot for holders of the qualifying status.

Key rules:
- Days under the qualifying status count fully within a rolling window
  (the later of the qualifying start date and ``lookback_years`` ago)
- Partial-countable days before the qualifying status add a capped credit,
  accrued once from the whole history rather than re-windowed
- Full days absent within the window are subtracted; departure and return
  days count as present
"""

import logging
from datetime import date

from residency.config import Settings, settings as default_settings
from residency.constants import is_partial_countable
from residency.schemas.eligibility import (
    CalculationMode,
    EligibilityEvaluation,
    EligibilityProgress,
    EligibilitySnapshot,
)
from residency.schemas.profile import Profile
from residency.services.absence_service import total_absence_days
from residency.services.partial_credit_service import calculate_partial_credit
from residency.services.profile_normalizer import normalize_profile
from residency.services.projection_service import calculate_projection
from residency.services.shared.date_utils import (
    add_days,
    days_between,
    format_date,
    parse_date,
    years_before,
)

logger = logging.getLogger(__name__)


def calculate_snapshot(
    profile: Profile,
    reference_date: date,
    settings: Settings = default_settings,
) -> EligibilitySnapshot | None:
    """Calculate eligibility for a holder of the qualifying status.

    Args:
        profile: Profile in either supported shape
        reference_date: Date to calculate from
        settings: Threshold, rate, cap and window length

    Returns:
        EligibilitySnapshot, or None if the profile never held the
        qualifying status (use :func:`calculate_projection` instead)
    """
    normalized = normalize_profile(profile, reference_date)
    if normalized.qualifying_since is None:
        logger.debug("No qualifying status on profile; snapshot not applicable")
        return None

    lookback_start = years_before(reference_date, settings.lookback_years)
    window_start = max(normalized.qualifying_since, lookback_start)

    days_under_status = max(0, days_between(window_start, reference_date))

    countable = [
        p.range for p in normalized.pre_qualifying_periods if is_partial_countable(p.status)
    ]
    partial_credit = calculate_partial_credit(countable, normalized.absences, settings).net_credit

    absence_days = total_absence_days(normalized.absences, window_start, reference_date)

    total_eligible_days = days_under_status + partial_credit - absence_days
    days_remaining = max(0, settings.days_required - total_eligible_days)

    # Assumes no further absences before the threshold is reached; a qualifying
    # start recorded after the reference date only counts from that start
    earliest = add_days(max(reference_date, normalized.qualifying_since), days_remaining)

    logger.debug(
        f"Snapshot as of {reference_date}: window_start={window_start}, "
        f"days={days_under_status}, credit={partial_credit}, absences={absence_days}, "
        f"remaining={days_remaining}"
    )

    return EligibilitySnapshot(
        days_under_qualifying_status=days_under_status,
        partial_credit=partial_credit,
        total_absence_days=absence_days,
        total_eligible_days=total_eligible_days,
        days_remaining=days_remaining,
        earliest_eligibility_date=format_date(earliest),
        calculated_on=format_date(reference_date),
    )


def calculate_progress(
    snapshot: EligibilitySnapshot,
    today: date,
    settings: Settings = default_settings,
) -> EligibilityProgress:
    """Progress of a stored snapshot as of a later date.

    Every day since the snapshot was calculated is counted as present,
    matching the assumption behind ``earliest_eligibility_date``. Days before
    a qualifying start recorded after ``calculated_on`` do not count.
    """
    calculated_on = parse_date(snapshot.calculated_on, "snapshot.calculatedOn")
    earliest = parse_date(snapshot.earliest_eligibility_date, "snapshot.earliestEligibilityDate")
    counting_from = max(calculated_on, add_days(earliest, -snapshot.days_remaining))
    elapsed = max(0, days_between(counting_from, today))

    total = snapshot.total_eligible_days + elapsed
    days_remaining = max(0, settings.days_required - total)
    progress = min(100.0, max(0, total) / settings.days_required * 100)

    return EligibilityProgress(
        total_eligible_days=total,
        days_required=settings.days_required,
        days_remaining=days_remaining,
        is_eligible=days_remaining == 0,
        progress=round(progress, 1),
    )


def evaluate_profile(
    profile: Profile,
    reference_date: date,
    settings: Settings = default_settings,
) -> EligibilityEvaluation:
    """Run the snapshot for qualifying-status holders, the projection otherwise.

    A profile with a qualifying start recorded after the reference date is
    evaluated as a snapshot: its days under the status are 0 and its
    earliest eligibility date counts from that start.
    """
    snapshot = calculate_snapshot(profile, reference_date, settings)
    if snapshot is not None:
        return EligibilityEvaluation(mode=CalculationMode.SNAPSHOT, snapshot=snapshot)

    projection = calculate_projection(profile, reference_date, settings)
    return EligibilityEvaluation(mode=CalculationMode.PROJECTION, projection=projection)
