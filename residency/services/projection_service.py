"""Projection for people who do not hold the qualifying status yet.

Answers "if the qualifying status were obtained on the reference date, how
much partial credit would carry over and when could the application be
filed?" The calculation has no side effects.
"""

import logging
from datetime import date

from residency.config import Settings, settings as default_settings
from residency.constants import is_partial_countable
from residency.schemas.eligibility import ProjectionResult
from residency.schemas.profile import Profile
from residency.services.eligibility_types import DateRange, NormalizedProfile
from residency.services.partial_credit_service import calculate_partial_credit
from residency.services.profile_normalizer import normalize_profile
from residency.services.shared.date_range_service import intersect
from residency.services.shared.date_utils import add_days, format_date, years_before

logger = logging.getLogger(__name__)


def _windowed_countable_ranges(
    normalized: NormalizedProfile, window: DateRange
) -> list[DateRange]:
    ranges = []
    for period in normalized.periods:
        if not is_partial_countable(period.status):
            continue
        clamped = intersect(period.range, window)
        if clamped is not None:
            ranges.append(clamped)
    return ranges


def calculate_projection(
    profile: Profile,
    reference_date: date,
    settings: Settings = default_settings,
) -> ProjectionResult:
    """Project partial credit and the earliest filing date for a non-holder.

    Partial-countable periods are clamped to the rolling window ending on
    the reference date. A profile without usable history gets zero credit
    and needs the full threshold.

    Args:
        profile: Profile in either supported shape
        reference_date: Hypothetical date the qualifying status is obtained
        settings: Threshold, rate, cap and window length

    Returns:
        ProjectionResult
    """
    normalized = normalize_profile(profile, reference_date)
    window = DateRange(years_before(reference_date, settings.lookback_years), reference_date)

    countable = _windowed_countable_ranges(normalized, window)
    credit = calculate_partial_credit(countable, normalized.absences, settings)

    days_needed = max(0, settings.days_required - credit.net_credit)

    logger.debug(
        f"Projection as of {reference_date}: {len(countable)} countable ranges, "
        f"credit={credit.net_credit}, days_needed={days_needed}"
    )

    return ProjectionResult(
        total_countable_days=credit.net_days,
        gross_days=credit.gross_days,
        absence_days_deducted=credit.absence_days_deducted,
        projected_credit=credit.net_credit,
        days_needed_as_qualifying_holder=days_needed,
        projected_earliest_date=format_date(add_days(reference_date, days_needed)),
        calculated_on=format_date(reference_date),
    )
