"""Shared markers and helpers for the rule library."""

import json
from enum import Enum
from typing import Any, Final, List

from ..models.field import ERROR_DELIMITER

SUCCESS: Final = "success"


class Missing(Enum):
    """Sentinel type for a value that isn't there at all."""

    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Final = Missing.MISSING


def is_missing(value: Any) -> bool:
    """Absent and JSON null values are both treated as missing."""
    return value is MISSING or value is None


def is_success(outcome: str) -> bool:
    """Check a rule outcome against the success marker."""
    return outcome == SUCCESS


def stringify(value: Any) -> str:
    """Render an offending value for an error message."""
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return str(value)


def join_errors(errors: List[str]) -> str:
    """Collapse per-rule messages into one outcome."""
    return ERROR_DELIMITER.join(errors) if errors else SUCCESS
