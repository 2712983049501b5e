"""Format rules: dates, booleans, e-mails, URLs and identifiers.

Every string format first goes through the String rule with
``can_be_empty=False``, so missing, non-string and blank values get the same
messages everywhere.
"""

import re
from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Any, Mapping, Optional, Union

from email_validator import EmailNotValidError, validate_email as check_email_syntax
from pydantic import AnyUrl, TypeAdapter, ValidationError

from ..models.options import EmptyOptions, coerce_options
from .common import SUCCESS, is_success
from .strings import NON_EMPTY, validate_string

Options = Union[EmptyOptions, Mapping[str, Any], None]

IDENTIFIER_PATTERN = re.compile(r"[0-9a-fA-F]{24}")
URL_PROTOCOLS = frozenset({"http", "https", "ftp"})

_URL_ADAPTER = TypeAdapter(AnyUrl)


def _parse_date(text: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    # RFC 2822, e.g. "Tue, 15 Nov 1994 08:12:31 GMT"
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None


def validate_date(value: Any, options: Options = None) -> str:
    """Validate an ISO 8601 or RFC 2822 date string."""
    coerce_options(EmptyOptions, options)

    outcome = validate_string(value, NON_EMPTY)
    if not is_success(outcome):
        return outcome

    if _parse_date(value.strip()) is None:
        return "must be valid Date!"
    return SUCCESS


def validate_boolean(value: Any, options: Options = None) -> str:
    coerce_options(EmptyOptions, options)
    return SUCCESS if isinstance(value, bool) else "must be Boolean!"


def validate_email(value: Any, options: Options = None) -> str:
    """Validate e-mail address syntax. No DNS lookups are made."""
    coerce_options(EmptyOptions, options)

    outcome = validate_string(value, NON_EMPTY)
    if not is_success(outcome):
        return outcome

    try:
        check_email_syntax(value, check_deliverability=False)
    except EmailNotValidError:
        return "must be valid e-mail address!"
    return SUCCESS


def validate_url(value: Any, options: Options = None) -> str:
    """Validate an absolute http(s)/ftp URL whose host has a top-level domain.

    Whitespace anywhere in the value fails.
    """
    coerce_options(EmptyOptions, options)

    outcome = validate_string(value, NON_EMPTY)
    if not is_success(outcome):
        return outcome

    # the URL parser trims and percent-encodes whitespace
    if any(symbol.isspace() for symbol in value):
        return "must be valid URL address!"

    try:
        url = _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return "must be valid URL address!"

    host = (url.host or "").strip(".")
    if url.scheme not in URL_PROTOCOLS or "." not in host:
        return "must be valid URL address!"
    return SUCCESS


def validate_identifier(value: Any, options: Options = None) -> str:
    """Validate a 24 hex character object id."""
    coerce_options(EmptyOptions, options)

    outcome = validate_string(value, NON_EMPTY)
    if not is_success(outcome):
        return outcome

    if not IDENTIFIER_PATTERN.fullmatch(value):
        return "must be valid identifier!"
    return SUCCESS
