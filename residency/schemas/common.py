"""Common schemas used across the API."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema that reads and writes camelCase keys.

    Profile records are stored with camelCase keys; Python code uses the
    snake_case attribute names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ErrorDetail(BaseModel):
    """One offending input, addressed by its camelCase path (e.g. ``travelAbsences[0].to``)."""

    field: str | None = Field(None, description="Path of the offending input")
    message: str = Field(..., description="What is wrong with it")


class ErrorResponse(BaseModel):
    """Body returned when a posted profile cannot be calculated.

    Attributes:
        error: Error code (e.g., 'ValidationError')
        message: Human-readable summary
        details: One entry per offending input
        timestamp: When the error occurred
        path: Request path that caused the error
    """

    error: str = Field(..., description="Error code (e.g., 'ValidationError')")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] | None = Field(None, description="Offending inputs")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    path: str | None = Field(None, description="Request path that caused the error")
