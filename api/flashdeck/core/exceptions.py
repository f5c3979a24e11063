"""
Custom exceptions for the application.
"""


class FlashdeckException(Exception):
    """Base exception for all Flashdeck application exceptions."""
    pass


class ValidationError(FlashdeckException):
    """Raised when validation fails."""
    pass


class NotFoundError(FlashdeckException):
    """Raised when a requested resource is not found."""
    pass


class ConflictError(FlashdeckException):
    """Raised when an operation conflicts with the current state."""
    pass


class ExternalServiceError(FlashdeckException):
    """Raised when a third-party service (the AI provider) fails."""
    pass
