"""Custom exceptions for fieldguard.

Schema definition mistakes raise. Bad input data is reported through a
``ValidationResult``; only the request adaptor turns a failed result into
``RecordRejectedError`` for FastAPI routes.
"""

from typing import Any, Dict, Optional


class FieldguardError(Exception):
    """Base exception for all fieldguard errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        """String representation of the error."""
        parts = [self.message]
        if self.error_code:
            parts.append(f"(code: {self.error_code})")
        return " ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class ConfigurationError(FieldguardError):
    """Raised when there's a configuration issue."""

    def __init__(self, message: str, config_key: Optional[str] = None) -> None:
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, "CONFIGURATION_ERROR", details)


class SchemaDefinitionError(FieldguardError):
    """Raised when a schema is defined incorrectly."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "SCHEMA_DEFINITION_ERROR", details)


class FieldNotFoundError(SchemaDefinitionError):
    """Raised when a validator is asked about a field it doesn't have."""

    def __init__(self, field: str) -> None:
        super().__init__(f"This validator doesn't have field '{field}'", field)
        self.error_code = "FIELD_NOT_FOUND"


class MissingValueError(SchemaDefinitionError):
    """Raised when a single-field validation is called without a value."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing 'value' for field '{field}'", field)
        self.error_code = "MISSING_VALUE"


class RecordRejectedError(FieldguardError):
    """Raised by the route dependency when a request body fails validation.

    Turned into a ``{"success": false, "errors": ...}`` response by the
    handler that ``install_error_handler`` registers.
    """

    def __init__(self, errors: str, status_code: int = 422) -> None:
        super().__init__("Request body failed validation", "RECORD_REJECTED", {"errors": errors})
        self.errors = errors
        self.status_code = status_code
