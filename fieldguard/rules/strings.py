"""String rule."""

import re
from typing import Any, Dict, List, Mapping, Optional, Pattern, Union

from ..models.options import CharacterSet, StringOptions, coerce_options
from .common import is_missing, join_errors, stringify

# Letter ranges per supported locale. A symbol passes a character-class
# check when it is valid in any of them.
LOCALE_LETTERS: Dict[str, str] = {
    "en-US": "A-Za-z",
    "bg-BG": "А-Яа-я",
}

DIGITS = frozenset("0123456789")

_LETTER_PATTERNS: Dict[str, Pattern[str]] = {
    locale: re.compile(f"[{ranges}]") for locale, ranges in LOCALE_LETTERS.items()
}
_ALPHANUMERIC_PATTERNS: Dict[str, Pattern[str]] = {
    locale: re.compile(f"[0-9{ranges}]") for locale, ranges in LOCALE_LETTERS.items()
}

NON_EMPTY = StringOptions(can_be_empty=False)


def _valid_in_any_locale(text: str, patterns: Mapping[str, Pattern[str]]) -> bool:
    return all(
        any(pattern.fullmatch(symbol) for pattern in patterns.values())
        for symbol in text
        if symbol != " "
    )


def _length_error(text: str, min_symbols: Optional[int], max_symbols: Optional[int]) -> Optional[str]:
    if min_symbols is None and max_symbols is None:
        return None

    too_short = min_symbols is not None and len(text) < min_symbols
    too_long = max_symbols is not None and len(text) > max_symbols
    if not (too_short or too_long):
        return None

    bounds = []
    if min_symbols is not None:
        bounds.append(f"must be min. {min_symbols} characters")
    if max_symbols is not None:
        bounds.append(f"must be max. {max_symbols} characters")
    return " and ".join(bounds) + "!"


def validate_string(
    value: Any,
    options: Union[StringOptions, Mapping[str, Any], None] = None,
) -> str:
    """Validate a string against the given constraints.

    Type and emptiness problems are reported on their own. Every other
    violated constraint adds one message, joined with the error delimiter.
    Constraints apply to the trimmed value.
    """
    opts = coerce_options(StringOptions, options)

    if is_missing(value):
        return "Missing value!"
    if not isinstance(value, str):
        return f"'{stringify(value)}' is not a 'string' type!"

    text = value.strip()
    if not opts.can_be_empty and not text:
        return "can't be empty!"

    errors: List[str] = []

    if opts.allow_spaces is False and " " in text:
        errors.append("can't include spaces!")

    length_error = _length_error(text, opts.min_symbols, opts.max_symbols)
    if length_error:
        errors.append(length_error)

    if opts.include is CharacterSet.LETTERS_ONLY:
        if not _valid_in_any_locale(text, _LETTER_PATTERNS):
            errors.append("must include only letters!")
    elif opts.include is CharacterSet.NUMBERS_ONLY:
        allowed = DIGITS | {" "} if opts.allow_spaces else DIGITS
        if any(symbol not in allowed for symbol in text):
            errors.append("must include only numbers!")
    elif opts.include is CharacterSet.LETTERS_AND_NUMBERS:
        if not _valid_in_any_locale(text, _ALPHANUMERIC_PATTERNS):
            errors.append("must include only numbers and letters!")

    if opts.black_list and any(item in text for item in opts.black_list):
        errors.append(f"can't include symbols [ {','.join(opts.black_list)} ]!")

    if opts.max_words is not None:
        words = [word for word in text.split(" ") if word]
        if len(words) > opts.max_words:
            errors.append(f"must be max {opts.max_words} words!")

    if opts.enum_values is not None and text not in opts.enum_values:
        errors.append(f"is invalid, must be {' or '.join(opts.enum_values)}!")

    return join_errors(errors)
