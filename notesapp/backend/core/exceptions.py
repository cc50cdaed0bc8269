"""
Custom Exceptions.

Application-specific exception classes. Note stores raise the most specific
class they can determine; the API layer only translates them to responses.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class NotFoundError(ApplicationError):
    """Raised when a resource cannot be found."""

    def __init__(self, message: str = "Resource not found") -> None:
        super().__init__(message, code="RES_NOT_FOUND")


class ValidationError(ApplicationError):
    """Raised when input fails validation, before any storage access."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class AuthenticationError(ApplicationError):
    """Raised when a session token is missing or invalid."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message, code="AUTH_UNAUTHORIZED")


class StorageError(ApplicationError):
    """
    Raised when the persistence backend fails unexpectedly.

    The message is what clients see, so it names the operation only.
    Backend details belong in the log record, not here.
    """

    def __init__(self, message: str = "Storage operation failed") -> None:
        super().__init__(message, code="SYS_STORAGE_ERROR")
