"""Shared utilities for the services layer.

- date_utils: calendar date parsing and arithmetic
- date_range_service: merging and overlap checks for date ranges
"""

from .date_range_service import (
    find_overlapping_ranges,
    intersect,
    is_exact_duplicate,
    merge_ranges,
    ranges_overlap,
)
from .date_utils import add_days, days_between, format_date, parse_date, years_before

__all__ = [
    "add_days",
    "days_between",
    "find_overlapping_ranges",
    "format_date",
    "intersect",
    "is_exact_duplicate",
    "merge_ranges",
    "parse_date",
    "ranges_overlap",
    "years_before",
]
