"""Partial credit for days held under partial-countable statuses.

Days before the qualifying status (study permit, work permit, protected
person) count at a reduced rate up to a cap. Absences taken during those
periods are deducted before the rate and the cap are applied.
"""

import logging
import math

from residency.config import Settings, settings as default_settings
from residency.services.absence_service import full_days_absent
from residency.services.eligibility_types import DateRange, PartialCreditResult
from residency.services.shared.date_range_service import intersect, merge_ranges
from residency.services.shared.date_utils import days_between

logger = logging.getLogger(__name__)


def credit_for_days(net_days: int, settings: Settings = default_settings) -> int:
    """Apply the partial rate and the cap to net countable days."""
    return min(math.floor(net_days * settings.partial_credit_rate), settings.max_partial_credit)


def calculate_partial_credit(
    countable_ranges: list[DateRange],
    absences: list[DateRange],
    settings: Settings = default_settings,
) -> PartialCreditResult:
    """Calculate net countable days and the capped partial credit.

    Args:
        countable_ranges: Periods held under partial-countable statuses
        absences: All absences; only the parts overlapping a countable
            range are deducted
        settings: Rate and cap to apply

    Returns:
        PartialCreditResult with gross days, deducted days, net days and credit
    """
    merged = merge_ranges(countable_ranges)

    # Both the first and last day of a status period are days held
    gross_days = sum(days_between(r.start, r.end) + 1 for r in merged)

    absence_days_deducted = 0
    for absence in merge_ranges(absences):
        for countable in merged:
            overlap = intersect(absence, countable)
            if overlap is not None:
                absence_days_deducted += full_days_absent(overlap)

    net_days = max(0, gross_days - absence_days_deducted)
    net_credit = credit_for_days(net_days, settings)

    logger.debug(
        f"Partial credit: {len(merged)} ranges, gross={gross_days}, "
        f"deducted={absence_days_deducted}, credit={net_credit}"
    )

    return PartialCreditResult(
        gross_days=gross_days,
        absence_days_deducted=absence_days_deducted,
        net_days=net_days,
        net_credit=net_credit,
    )
