"""Data models for fieldguard."""

from .base import FieldguardBaseModel
from .field import ERROR_DELIMITER, FieldDescriptor, ValidationResult
from .options import (
    ArrayOptions,
    CharacterSet,
    EmptyOptions,
    FieldType,
    NumberOptions,
    RuleOptions,
    StringOptions,
    coerce_options,
    describe_errors,
    options_model_for,
)

__all__ = [
    "FieldguardBaseModel",
    "ERROR_DELIMITER",
    "FieldDescriptor",
    "ValidationResult",
    "ArrayOptions",
    "CharacterSet",
    "EmptyOptions",
    "FieldType",
    "NumberOptions",
    "RuleOptions",
    "StringOptions",
    "coerce_options",
    "describe_errors",
    "options_model_for",
]
