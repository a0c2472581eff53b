"""Exception hierarchy for Manglish Dialects.

This module defines the exceptions raised throughout the package.
All exceptions inherit from ManglishDialectsError, providing a consistent error handling interface.
"""


class ManglishDialectsError(Exception):
    """Base exception for all Manglish Dialects errors."""


class ValidationError(ManglishDialectsError):
    """Raised when a request payload or a model response does not match its schema.

    Attributes:
        errors: ``(field, message)`` pairs, one per violated constraint.
    """

    def __init__(self, message: str, errors: tuple[tuple[str, str], ...] = ()) -> None:
        super().__init__(message)
        self.errors = errors


class ModelInvocationError(ManglishDialectsError):
    """Raised when the model endpoint fails or returns an unusable payload."""


class UnexpectedError(ManglishDialectsError):
    """Raised by flow façades for internal faults that are not model failures."""


class PromptError(ManglishDialectsError):
    """Base exception for prompt specification errors."""


class PromptRenderError(PromptError):
    """Raised when a prompt specification cannot be rendered."""
