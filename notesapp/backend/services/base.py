"""
Base Service.

Base class for services. Services hold the business rules: they validate
input before any storage access and delegate persistence to a store or
repository.

Usage:
    from notesapp.backend.services.base import BaseService

    class NoteService(BaseService):
        def __init__(self, store: NoteStore) -> None:
            super().__init__()
            self.store = store
"""

from typing import Any

from notesapp.backend.core.exceptions import ValidationError
from notesapp.backend.core.logging import get_logger


class BaseService:
    """
    Base class for all services.

    Provides:
    - Logging context
    - Common validation patterns
    """

    def __init__(self) -> None:
        self._logger = get_logger(self.__class__.__module__)

    def _validate_required(
        self,
        fields: dict[str, Any],
        field_names: list[str] | tuple[str, ...],
    ) -> None:
        """
        Validate that required fields are present and not empty.

        Args:
            fields: Dictionary of field names to values
            field_names: Required field names

        Raises:
            ValidationError: If any required field is missing or empty
        """
        missing = []
        for name in field_names:
            value = fields.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)

        if missing:
            raise ValidationError(
                f"Missing required fields: {', '.join(missing)}",
                details={"missing_fields": missing},
            )

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """Log a service operation with context."""
        self._logger.info(
            operation,
            extra={"service": self.__class__.__name__, **context},
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """Log debug information."""
        self._logger.debug(
            message,
            extra={"service": self.__class__.__name__, **context},
        )
