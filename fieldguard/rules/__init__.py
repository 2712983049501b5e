"""Rule library.

One pure function per field type. Each takes a raw value and an options
bundle (model, mapping or None) and returns ``SUCCESS`` or an error message:
- strings: the String rule with its constraint checks
- numbers: the Number rule
- formats: Date, Boolean, Email, URL and Identifier rules
- arrays: the Array rule and the ``RULES`` dispatch table
"""

from .common import MISSING, SUCCESS, is_missing, is_success, stringify
from .strings import LOCALE_LETTERS, validate_string
from .numbers import validate_number
from .formats import (
    validate_boolean,
    validate_date,
    validate_email,
    validate_identifier,
    validate_url,
)
from .arrays import RECORDS_ERROR_MARKER, RULES, apply_rule, validate_array

__all__ = [
    "MISSING",
    "SUCCESS",
    "is_missing",
    "is_success",
    "stringify",
    "LOCALE_LETTERS",
    "validate_string",
    "validate_number",
    "validate_boolean",
    "validate_date",
    "validate_email",
    "validate_identifier",
    "validate_url",
    "RECORDS_ERROR_MARKER",
    "RULES",
    "apply_rule",
    "validate_array",
]
