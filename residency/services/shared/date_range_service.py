"""Date range service for normalizing overlapping date ranges."""

from datetime import timedelta

from residency.services.eligibility_types import DateRange


def merge_ranges(ranges: list[DateRange]) -> list[DateRange]:
    """Merge adjacent or overlapping date ranges.

    Two ranges are considered adjacent if they are exactly one day apart
    (e.g., end=2024-03-31 and start=2024-04-01). The same calendar day
    reported by two entries is therefore counted once downstream.

    Args:
        ranges: Inclusive date ranges in any order

    Returns:
        Disjoint, non-adjacent ranges sorted by start date
    """
    if not ranges:
        return []

    # Sort by start date
    sorted_ranges = sorted(ranges, key=lambda r: (r.start, r.end))

    merged = [sorted_ranges[0]]

    for current in sorted_ranges[1:]:
        last = merged[-1]

        # Check if adjacent (next day) or overlapping
        if current.start <= last.end + timedelta(days=1):
            # Extend the last range
            if current.end > last.end:
                merged[-1] = DateRange(last.start, current.end)
        else:
            merged.append(current)

    return merged


def intersect(first: DateRange, second: DateRange) -> DateRange | None:
    """Return the days shared by two ranges, or None if they are disjoint."""
    start = max(first.start, second.start)
    end = min(first.end, second.end)
    if start > end:
        return None
    return DateRange(start, end)


def ranges_overlap(first: DateRange, second: DateRange) -> bool:
    return first.start <= second.end and second.start <= first.end


def find_overlapping_ranges(new_range: DateRange, existing: list[DateRange]) -> list[DateRange]:
    """Existing ranges sharing at least one day with ``new_range``.

    Used to warn before an entry is added; overlaps are still merged by
    the calculators, so this never blocks a calculation.
    """
    return [r for r in existing if ranges_overlap(new_range, r)]


def is_exact_duplicate(new_range: DateRange, existing: list[DateRange]) -> bool:
    return any(r.start == new_range.start and r.end == new_range.end for r in existing)
