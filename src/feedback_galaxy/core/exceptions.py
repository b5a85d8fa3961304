"""Custom exception classes for Feedback Galaxy.

This module defines application-specific exceptions following Google Python
Style Guide. Every error carries an HTTP-like ``status_code`` and a short
``hint`` that the command line renders next to the message.
"""


class FeedbackGalaxyError(Exception):
    """Base exception for all Feedback Galaxy errors."""

    status_code: int = 500
    hint: str = "Please try again."

    def __init__(self, message: str):
        """Initialize the exception.

        Args:
            message: Human-readable description of the failure.
        """
        self.message = message
        super().__init__(message)


class ValidationError(FeedbackGalaxyError):
    """Raised when input is missing or malformed."""

    status_code = 400
    hint = "Please check your input and try again."


class UnauthorizedError(FeedbackGalaxyError):
    """Raised when nobody is logged in or the credentials are wrong."""

    status_code = 401
    hint = "Please check your username and password."


class ForbiddenError(FeedbackGalaxyError):
    """Raised when the logged-in user lacks the required role."""

    status_code = 403
    hint = "You don't have permission to perform this action."


class NotFoundError(FeedbackGalaxyError):
    """Raised when a referenced user or course does not exist."""

    status_code = 404
    hint = "The requested resource was not found."


class ConflictError(FeedbackGalaxyError):
    """Raised when creating an entity that already exists."""

    status_code = 409
    hint = "Choose a different name and try again."


class StorageError(FeedbackGalaxyError):
    """Raised when a data file cannot be read or written."""

    status_code = 500
    hint = "Please try again later or contact support."
