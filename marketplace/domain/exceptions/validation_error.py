"""
Validation-related domain exceptions.
"""


class ValidationError(Exception):
    """Raised when input breaks a business rule before anything is stored."""

    pass
