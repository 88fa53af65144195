"""Helpers for reading and extending a profile's status timeline."""

import logging
from datetime import date, timedelta

from residency.constants import StatusCategory
from residency.schemas.profile import AbsenceEntry, Profile, StatusEntry
from residency.services.exceptions import ValidationError
from residency.services.profile_normalizer import normalize_profile
from residency.services.shared.date_utils import format_date, parse_date

logger = logging.getLogger(__name__)

# Values of the legacy immigrationStatus field that differ from StatusCategory
LEGACY_IMMIGRATION_STATUS = {
    "student": StatusCategory.STUDY_PERMIT,
    "worker": StatusCategory.WORK_PERMIT,
}


def get_current_status(profile: Profile) -> StatusCategory | None:
    """Status the profile currently holds.

    The open period wins; otherwise the most recently started period;
    otherwise the legacy ``immigration_status`` field.
    """
    history = profile.status_history
    for entry in history:
        if entry.to is None:
            return entry.status

    if history:
        latest = max(
            enumerate(history),
            key=lambda item: parse_date(item[1].from_, f"statusHistory[{item[0]}].from"),
        )
        return latest[1].status

    legacy = profile.immigration_status
    if legacy is None:
        return None
    if legacy in LEGACY_IMMIGRATION_STATUS:
        return LEGACY_IMMIGRATION_STATUS[legacy]
    try:
        return StatusCategory(legacy)
    except ValueError:
        logger.warning(f"Unknown immigration status on profile: {legacy}")
        return None


def holds_qualifying_status(profile: Profile, reference_date: date) -> bool:
    """Whether the qualifying status was obtained on or before the reference date.

    Stricter than the snapshot dispatch in ``evaluate_profile``, which also
    takes a qualifying start recorded after the reference date.
    """
    qualifying_since = normalize_profile(profile, reference_date).qualifying_since
    return qualifying_since is not None and qualifying_since <= reference_date


def append_status(history: list[StatusEntry], new_entry: StatusEntry) -> list[StatusEntry]:
    """Add a status period, closing the currently open one.

    The open period ends the day before the new one starts, unless that
    would put its end before its own start; it then stays open, which is only
    allowed when ``new_entry`` is closed. The input list is not modified.

    Args:
        history: Existing status entries
        new_entry: Entry to append

    Returns:
        New list with the updated history followed by ``new_entry``

    Raises:
        ValidationError: If both the new entry and an open entry that starts
            on or after it would be left open
    """
    new_start = parse_date(new_entry.from_, "entry.from")
    previous_end = new_start - timedelta(days=1)

    updated = []
    for index, entry in enumerate(history):
        if entry.to is None:
            entry_start = parse_date(entry.from_, f"statusHistory[{index}].from")
            if previous_end >= entry_start:
                entry = entry.model_copy(update={"to": format_date(previous_end)})
            elif new_entry.to is None:
                raise ValidationError(
                    "entry.from",
                    f"open period must start after open statusHistory[{index}] ({entry.from_})",
                    new_entry.from_,
                )
        updated.append(entry)

    return [*updated, new_entry]


def count_upcoming_trips(absences: list[AbsenceEntry], reference_date: date) -> int:
    """Number of trips that start after the reference date."""
    return sum(
        1
        for index, absence in enumerate(absences)
        if parse_date(absence.from_, f"travelAbsences[{index}].from") > reference_date
    )
