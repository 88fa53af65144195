"""Absence accounting under the boundary-inclusive rule.

The day of departure and the day of return both count as days present, so
an absence of N calendar days deducts N - 2 days (never less than zero).
"""

from datetime import date

from residency.services.eligibility_types import DateRange
from residency.services.shared.date_range_service import intersect, merge_ranges
from residency.services.shared.date_utils import days_between


def full_days_absent(absence: DateRange) -> int:
    """Days absent within one range, excluding departure and return days."""
    return max(0, days_between(absence.start, absence.end) - 1)


def total_absence_days(absences: list[DateRange], window_start: date, window_end: date) -> int:
    """Total full days absent within ``[window_start, window_end]``.

    Absences are merged first so overlapping trips are counted once, then
    clamped to the window. Absences outside the window contribute nothing.
    """
    window = DateRange(window_start, window_end)
    relevant = [a for a in absences if a.end >= window_start and a.start <= window_end]

    total = 0
    for absence in merge_ranges(relevant):
        clamped = intersect(absence, window)
        if clamped is not None:
            total += full_days_absent(clamped)
    return total
