"""Calendar date helpers shared by the eligibility calculators.

Dates travel as ``YYYY-MM-DD`` strings with no time-of-day or timezone, so
all arithmetic here works on :class:`datetime.date` and never on datetimes.
"""

import re
from datetime import date, datetime, timedelta

from residency.services.exceptions import ValidationError

_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date(value: str | date, field: str) -> date:
    """Parse an ISO calendar date.

    Args:
        value: ``YYYY-MM-DD`` string or a date instance
        field: Field path reported when the value is rejected

    Returns:
        The parsed date

    Raises:
        ValidationError: If the value is not a strict calendar date
    """
    if isinstance(value, datetime):
        raise ValidationError(field, "expected a calendar date without time", value)
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _ISO_DATE.match(value):
        raise ValidationError(field, "expected a date in YYYY-MM-DD format", value)
    try:
        return date.fromisoformat(value)
    except ValueError as e:
        raise ValidationError(field, f"invalid calendar date ({e})", value) from e


def format_date(value: date) -> str:
    return value.isoformat()


def days_between(start: date, end: date) -> int:
    """Whole days from start to end (end exclusive, negative if reversed)."""
    return (end - start).days


def add_days(value: date, days: int) -> date:
    return value + timedelta(days=days)


def years_before(value: date, years: int) -> date:
    """Same calendar day ``years`` earlier; Feb 29 rolls forward to Mar 1."""
    try:
        return value.replace(year=value.year - years)
    except ValueError:
        return date(value.year - years, 3, 1)
