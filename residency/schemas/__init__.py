"""Pydantic schemas for API validation."""

from residency.schemas.common import CamelModel, ErrorDetail, ErrorResponse
from residency.schemas.eligibility import (
    CalculationMode,
    CalculationRequest,
    EligibilityEvaluation,
    EligibilityProgress,
    EligibilitySnapshot,
    ProjectionResult,
)
from residency.schemas.profile import AbsenceEntry, PresenceEntry, Profile, StatusEntry

__all__ = [
    # Common schemas
    "CamelModel",
    "ErrorDetail",
    "ErrorResponse",
    # Profile schemas
    "AbsenceEntry",
    "PresenceEntry",
    "Profile",
    "StatusEntry",
    # Eligibility schemas
    "CalculationMode",
    "CalculationRequest",
    "EligibilityEvaluation",
    "EligibilityProgress",
    "EligibilitySnapshot",
    "ProjectionResult",
]
