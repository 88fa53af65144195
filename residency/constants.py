"""Application constants to avoid magic strings."""

from enum import Enum


class StatusCategory(str, Enum):
    """Immigration status held during a period of presence."""

    VISITOR = "visitor"
    STUDY_PERMIT = "study_permit"
    WORK_PERMIT = "work_permit"
    PROTECTED_PERSON = "protected_person"
    BUSINESS = "business"
    NO_LEGAL_STATUS = "no_legal_status"
    PERMANENT_RESIDENT = "permanent_resident"


class Accrual(Enum):
    """How days held under a status count toward the presence threshold."""

    FULL = "full"
    PARTIAL = "partial"
    NONE = "none"


QUALIFYING_STATUS = StatusCategory.PERMANENT_RESIDENT

_ACCRUAL_BY_STATUS: dict[StatusCategory, Accrual] = {
    StatusCategory.VISITOR: Accrual.NONE,
    StatusCategory.STUDY_PERMIT: Accrual.PARTIAL,
    StatusCategory.WORK_PERMIT: Accrual.PARTIAL,
    StatusCategory.PROTECTED_PERSON: Accrual.PARTIAL,
    StatusCategory.BUSINESS: Accrual.NONE,
    StatusCategory.NO_LEGAL_STATUS: Accrual.NONE,
    StatusCategory.PERMANENT_RESIDENT: Accrual.FULL,
}

_unclassified = set(StatusCategory) - set(_ACCRUAL_BY_STATUS)
if _unclassified:
    raise RuntimeError(f"Status categories without an accrual rule: {sorted(_unclassified)}")


def accrual_for(status: StatusCategory) -> Accrual:
    """Return the accrual rule for a status category."""
    return _ACCRUAL_BY_STATUS[StatusCategory(status)]


def is_partial_countable(status: StatusCategory) -> bool:
    return accrual_for(status) is Accrual.PARTIAL


def is_qualifying(status: StatusCategory) -> bool:
    return accrual_for(status) is Accrual.FULL
