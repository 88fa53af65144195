"""Normalize both profile shapes into parsed status periods and absences.

Profiles carry history either as a ``statusHistory`` list or through the
legacy ``prDate`` / ``presenceInCanada`` fields. Calculators only ever see
the :class:`NormalizedProfile` produced here.
"""

import logging
from datetime import date, timedelta

from residency.constants import is_partial_countable, is_qualifying
from residency.schemas.profile import Profile
from residency.services.eligibility_types import DateRange, NormalizedProfile, StatusPeriod
from residency.services.exceptions import ValidationError
from residency.services.shared.date_utils import parse_date

logger = logging.getLogger(__name__)


def parse_range(start_raw: str, end_raw: str, path: str) -> DateRange:
    start = parse_date(start_raw, f"{path}.from")
    end = parse_date(end_raw, f"{path}.to")
    if start > end:
        raise ValidationError(f"{path}.to", f"end date {end} is before start date {start}", end_raw)
    return DateRange(start, end)


def _status_periods(profile: Profile, reference_date: date) -> list[StatusPeriod]:
    periods = []
    open_path = None

    for index, entry in enumerate(profile.status_history):
        path = f"statusHistory[{index}]"
        if entry.to is None:
            if open_path is not None:
                raise ValidationError(
                    f"{path}.to", f"only one open status period is allowed ({open_path} is open)"
                )
            open_path = path
            start = parse_date(entry.from_, f"{path}.from")
            # A period starting after the reference date has not begun yet
            end = max(start, reference_date)
        else:
            date_range = parse_range(entry.from_, entry.to, path)
            start, end = date_range.start, date_range.end
        periods.append(StatusPeriod(entry.status, start, end))

    return periods


def _legacy_periods(profile: Profile) -> list[StatusPeriod]:
    periods = []
    for index, entry in enumerate(profile.presence_in_canada):
        date_range = parse_range(entry.from_, entry.to, f"presenceInCanada[{index}]")
        periods.append(StatusPeriod(entry.purpose, date_range.start, date_range.end))
    return periods


def _before(periods: list[StatusPeriod], cutoff: date | None) -> list[StatusPeriod]:
    """Clip periods to end the day before ``cutoff``; drop those starting after it."""
    if cutoff is None:
        return list(periods)

    last_day = cutoff - timedelta(days=1)
    clipped = []
    for period in periods:
        if period.start > last_day:
            continue
        clipped.append(StatusPeriod(period.status, period.start, min(period.end, last_day)))
    return clipped


def normalize_profile(profile: Profile, reference_date: date) -> NormalizedProfile:
    """Reduce a profile to parsed periods and absences.

    Args:
        profile: Profile in either supported shape
        reference_date: Date an open status period is treated as ending on

    Returns:
        NormalizedProfile with the qualifying start date, non-qualifying
        periods, the pre-qualifying subset and all absences

    Raises:
        ValidationError: On malformed dates, inverted ranges or more than
            one open status period
    """
    status_periods = _status_periods(profile, reference_date)
    legacy_periods = _legacy_periods(profile)

    qualifying_starts = [p.start for p in status_periods if is_qualifying(p.status)]
    if qualifying_starts:
        qualifying_since = min(qualifying_starts)
    elif profile.pr_date:
        qualifying_since = parse_date(profile.pr_date, "prDate")
    else:
        qualifying_since = None

    if profile.status_history:
        periods = [p for p in status_periods if not is_qualifying(p.status)]
    else:
        periods = [p for p in legacy_periods if not is_qualifying(p.status)]

    pre_qualifying = _before(periods, qualifying_since)
    if profile.status_history and not any(is_partial_countable(p.status) for p in pre_qualifying):
        legacy_pre_qualifying = _before(legacy_periods, qualifying_since)
        if legacy_pre_qualifying:
            logger.debug("No countable pre-qualifying history; using legacy presence entries")
            pre_qualifying = legacy_pre_qualifying

    absences = [
        parse_range(entry.from_, entry.to, f"travelAbsences[{index}]")
        for index, entry in enumerate(profile.travel_absences)
    ]

    return NormalizedProfile(
        qualifying_since=qualifying_since,
        periods=periods,
        pre_qualifying_periods=pre_qualifying,
        absences=absences,
    )
