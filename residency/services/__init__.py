"""Services layer - eligibility calculations.

Common imports for convenience:
    from residency.services import calculate_snapshot, calculate_projection
    from residency.services import should_recalculate, ValidationError
"""

from residency.services.change_detection_service import should_recalculate
from residency.services.eligibility_service import (
    calculate_progress,
    calculate_snapshot,
    evaluate_profile,
)
from residency.services.exceptions import EligibilityError, ValidationError
from residency.services.projection_service import calculate_projection

__all__ = [
    "EligibilityError",
    "ValidationError",
    "calculate_progress",
    "calculate_projection",
    "calculate_snapshot",
    "evaluate_profile",
    "should_recalculate",
]
