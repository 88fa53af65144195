"""Schemas for the profile data the calculators read.

Dates are kept as the ``YYYY-MM-DD`` strings stored on the profile record.
They are parsed by the profile normalizer, which reports the offending
field when a value is malformed.
"""

from typing import Any

from pydantic import Field, field_validator

from residency.constants import StatusCategory
from residency.schemas.common import CamelModel


class StatusEntry(CamelModel):
    """Period held under one immigration status.

    ``to`` is omitted for the current, still open period.
    """

    id: str | None = None
    status: StatusCategory
    from_: str = Field(alias="from")
    to: str | None = None


class AbsenceEntry(CamelModel):
    """Trip outside the country."""

    id: str | None = None
    from_: str = Field(alias="from")
    to: str
    place: str | None = None


class PresenceEntry(CamelModel):
    """Legacy pre-residency presence entry."""

    id: str | None = None
    from_: str = Field(alias="from")
    to: str
    purpose: StatusCategory


class Profile(CamelModel):
    """Eligibility-relevant part of a user profile.

    History is supplied either as ``status_history`` or through the legacy
    ``pr_date`` and ``presence_in_canada`` fields.
    """

    status_history: list[StatusEntry] = Field(default_factory=list)
    travel_absences: list[AbsenceEntry] = Field(default_factory=list)
    pr_date: str | None = None
    presence_in_canada: list[PresenceEntry] = Field(default_factory=list)
    immigration_status: str | None = None

    @field_validator("status_history", "travel_absences", "presence_in_canada", mode="before")
    @classmethod
    def null_list_to_empty(cls, v: Any) -> Any:
        """Stored records may hold null instead of an empty list."""
        return [] if v is None else v
