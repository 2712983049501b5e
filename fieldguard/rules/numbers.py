"""Number rule."""

import math
import re
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

from ..models.options import NumberOptions, coerce_options
from .common import SUCCESS, is_missing

NUMBER_PATTERN = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def _parse_numeric_string(text: str) -> Optional[Union[int, Decimal]]:
    if INTEGER_PATTERN.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # past the interpreter's int/str digit limit
            return Decimal(text)
    if NUMBER_PATTERN.fullmatch(text):
        return Decimal(text)
    return None


def _to_number(value: Any) -> Optional[Union[int, float, Decimal]]:
    """Return the numeric value, or None when it isn't a number."""
    # bool is an int subclass but never a number here
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, str):
        return _parse_numeric_string(value.strip())
    return None


def validate_number(
    value: Any,
    options: Union[NumberOptions, Mapping[str, Any], None] = None,
) -> str:
    """Validate a number or numeric string.

    Falsy values (``0``, ``False``, ``""``) count as missing. Numeric
    strings are compared exactly: integers as ``int``, the rest as
    ``Decimal``. Raises SchemaDefinitionError when ``min`` is greater
    than ``max``.
    """
    opts = coerce_options(NumberOptions, options)

    if is_missing(value) or not value:
        return "Missing value!"

    number = _to_number(value)
    if number is None:
        return "is not valid number!"

    if opts.min is not None and number < opts.min:
        return f"must be min {opts.min}!"
    if opts.max is not None and number > opts.max:
        return f"must be max {opts.max}!"

    return SUCCESS
