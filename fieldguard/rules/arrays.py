"""Array rule and the type-to-rule dispatch table."""

from typing import Any, Callable, Dict, List, Mapping, Union

from ..models.field import ERROR_DELIMITER
from ..models.options import ArrayOptions, FieldType, coerce_options
from .common import SUCCESS, is_success, stringify
from .formats import (
    validate_boolean,
    validate_date,
    validate_email,
    validate_identifier,
    validate_url,
)
from .numbers import validate_number
from .strings import validate_string

Rule = Callable[[Any, Any], str]

RECORDS_ERROR_MARKER = "- invalid array records - "


def validate_array(
    value: Any,
    options: Union[ArrayOptions, Mapping[str, Any], None] = None,
) -> str:
    """Validate a list, its length and, optionally, every element.

    Length problems are reported on their own. Element problems are
    collected for every failing element, each prefixed with the element.
    Raises SchemaDefinitionError when ``minRecords`` is greater than
    ``maxRecords``.
    """
    opts = coerce_options(ArrayOptions, options)

    if not isinstance(value, list):
        return "must be Array!"

    if opts.min_records is not None and len(value) < opts.min_records:
        return f"must have min {opts.min_records} records!"
    if opts.max_records is not None and len(value) > opts.max_records:
        return f"must have max {opts.max_records} records!"

    if opts.array_values_type is None:
        return SUCCESS

    failures: List[str] = []
    for item in value:
        outcome = apply_rule(opts.array_values_type, item, opts.array_values_options)
        if not is_success(outcome):
            failures.append(f"'{stringify(item)}' {outcome}")

    if failures:
        return RECORDS_ERROR_MARKER + ERROR_DELIMITER.join(failures)
    return SUCCESS


RULES: Dict[FieldType, Rule] = {
    FieldType.STRING: validate_string,
    FieldType.NUMBER: validate_number,
    FieldType.DATE: validate_date,
    FieldType.BOOLEAN: validate_boolean,
    FieldType.EMAIL: validate_email,
    FieldType.URL: validate_url,
    FieldType.IDENTIFIER: validate_identifier,
    FieldType.ARRAY: validate_array,
}


def apply_rule(field_type: FieldType, value: Any, options: Any = None) -> str:
    """Run the rule registered for ``field_type``."""
    return RULES[FieldType(field_type)](value, options)
