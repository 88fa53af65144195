"""Decide whether a profile write warrants recalculating eligibility."""

from collections.abc import Mapping
from typing import Any

# Date-bearing profile fields, stored key first, snake_case alternative second
ELIGIBILITY_FIELDS: tuple[tuple[str, str], ...] = (
    ("statusHistory", "status_history"),
    ("prDate", "pr_date"),
    ("presenceInCanada", "presence_in_canada"),
    ("travelAbsences", "travel_absences"),
)

_MISSING = object()


def _lookup(data: Mapping[str, Any], keys: tuple[str, str]) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return _MISSING


def changed_fields(new_data: Mapping[str, Any], existing_data: Mapping[str, Any]) -> list[str]:
    """Eligibility fields in ``new_data`` whose value differs from ``existing_data``.

    Fields missing from ``new_data`` are left out: a partial update does not
    touch them. Values are compared structurally, so dicts with the same
    content in a different key order are equal.
    """
    changed = []
    for keys in ELIGIBILITY_FIELDS:
        new_value = _lookup(new_data, keys)
        if new_value is _MISSING:
            continue
        existing_value = _lookup(existing_data, keys)
        if existing_value is _MISSING or new_value != existing_value:
            changed.append(keys[0])
    return changed


def should_recalculate(
    new_data: Mapping[str, Any],
    existing_data: Mapping[str, Any] | None,
    is_new_record: bool,
) -> bool:
    """Whether the stored eligibility result may be stale after a write.

    Advisory only: recalculating on every write gives the same results.
    """
    if is_new_record:
        return True
    return bool(changed_fields(new_data, existing_data or {}))
