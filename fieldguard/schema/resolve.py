"""Dotted-path lookup into records."""

from typing import Any, Mapping, Sequence

from ..rules.common import MISSING


def resolve_field(record: Any, path: str) -> Any:
    """Return the value at ``path`` inside ``record``, or MISSING.

    Segments are separated by dots. A segment made of digits indexes into a
    list, so ``"items.0.name"`` reaches into the first item.
    """
    if not isinstance(record, Mapping):
        return MISSING
    if not isinstance(path, str) or not path.strip():
        return MISSING

    current: Any = record
    for segment in path.split("."):
        if isinstance(current, Mapping):
            if segment not in current:
                return MISSING
            current = current[segment]
        elif isinstance(current, Sequence) and not isinstance(current, (str, bytes)):
            if not (segment.isascii() and segment.isdigit()):
                return MISSING
            index = int(segment)
            if index >= len(current):
                return MISSING
            current = current[index]
        else:
            return MISSING
    return current
