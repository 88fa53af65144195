"""Eligibility engine exceptions.

These exceptions describe bad input reaching the calculation engine. A
calculation is a pure function, so none of them is worth retrying.
"""


class EligibilityError(Exception):
    """Base exception for eligibility calculations."""


class ValidationError(EligibilityError):
    """Profile data cannot be used for a calculation."""

    def __init__(self, field: str, message: str, value: object = None):
        self.field = field
        self.message = message
        self.value = value
        super().__init__(f"{field}: {message}")
