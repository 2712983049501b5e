"""Core exceptions."""

from .exceptions import (
    ConfigurationError,
    FieldguardError,
    FieldNotFoundError,
    MissingValueError,
    RecordRejectedError,
    SchemaDefinitionError,
)

__all__ = [
    "ConfigurationError",
    "FieldguardError",
    "FieldNotFoundError",
    "MissingValueError",
    "RecordRejectedError",
    "SchemaDefinitionError",
]
