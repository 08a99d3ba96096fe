"""
Custom exceptions for Rewards360 analytics.

Each exception carries a machine-readable code so the API layer can map
it onto the standard error envelope without inspecting messages.
"""


class Rewards360Error(Exception):
    """Base exception for all Rewards360 errors."""

    def __init__(self, message: str, code: str = "REWARDS360_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(Rewards360Error):
    """Invalid input data."""

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"INVALID_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)


class DateParseError(ValidationError):
    """A report boundary is not an ISO calendar date (YYYY-MM-DD)."""

    def __init__(self, field: str, value):
        self.value = value
        message = f"Invalid {field} date '{value}', expected YYYY-MM-DD"
        super().__init__(message, field)
