"""Exception types raised by the classification engine and the note store."""

from typing import Optional


class ClassificationError(Exception):
    """Base class for failures of the AI classification path."""


class ConfigurationError(ClassificationError, ValueError):
    """Raised when the AI classifier cannot run because it is not configured.

    Typically a missing API credential or an unknown provider name.
    """


class ServiceError(ClassificationError):
    """Raised when the language model service call fails."""

    def __init__(self, message: str, body: Optional[str] = None,
                 status_code: Optional[int] = None):
        super().__init__(message)
        self.body = body
        self.status_code = status_code


class ParseError(ClassificationError):
    """Raised when the service reply cannot be read as extracted items."""

    def __init__(self, message: str, raw: Optional[str] = None):
        super().__init__(message)
        self.raw = raw


class NoteValidationError(ValueError):
    """Raised when a note is rejected before it is persisted."""


class NoteNotFoundError(KeyError):
    """Raised when a note id does not exist in the store."""
