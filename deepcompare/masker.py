"""Output masking: removes filtered keys from reported values."""

from __future__ import annotations

from typing import Any, Collection, Optional

from .classifier import classify_value
from .models import ValueKind


def filter_object_keys(value: Any, keys_to_filter: Optional[Collection[str]]) -> Any:
    """
    Remove filtered keys from a value, at every nesting level.

    Mappings are rebuilt as dicts and sequences as lists, so the input is
    never modified. Values that are not composites, or an empty filter,
    return the value as-is.

    Args:
        value: The value about to be reported
        keys_to_filter: Key names to hide from the output

    Returns:
        The masked value
    """
    if not keys_to_filter:
        return value

    kind = classify_value(value)

    if kind == ValueKind.MAPPING:
        return {
            key: filter_object_keys(member, keys_to_filter)
            for key, member in value.items()
            if key not in keys_to_filter
        }
    elif kind == ValueKind.SEQUENCE:
        return [filter_object_keys(item, keys_to_filter) for item in value]

    return value
