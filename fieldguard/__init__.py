"""
fieldguard - declarative schema validation for structured records.

This package provides:
- A rule library with one pure check per field type
- A schema registry (Validator) with dotted paths and nested schemas
- Aggregated, human-readable error reports
- FastAPI/Starlette adaptors: a per-route dependency and a path-scoped middleware
"""

__version__ = "0.1.0"

from .config.settings import Settings
from .core.exceptions import (
    ConfigurationError,
    FieldguardError,
    FieldNotFoundError,
    MissingValueError,
    RecordRejectedError,
    SchemaDefinitionError,
)
from .models import FieldDescriptor, FieldType, ValidationResult
from .rules import MISSING, SUCCESS, validate_array, validate_number, validate_string
from .schema import ValidationMiddleware, Validator, install_error_handler

__all__ = [
    "Settings",
    "ConfigurationError",
    "FieldguardError",
    "FieldNotFoundError",
    "MissingValueError",
    "RecordRejectedError",
    "SchemaDefinitionError",
    "FieldDescriptor",
    "FieldType",
    "ValidationResult",
    "MISSING",
    "SUCCESS",
    "validate_array",
    "validate_number",
    "validate_string",
    "ValidationMiddleware",
    "Validator",
    "install_error_handler",
]
