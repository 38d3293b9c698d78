"""Builds changelog entries."""

from __future__ import annotations

from typing import Any, Collection, Optional

from .exceptions import UnknownChangeTypeError
from .masker import filter_object_keys
from .models import MISSING, ChangeType, ChangelogEntry


def get_changelog(
    prior: Any,
    latest: Any,
    path: str,
    change_type: ChangeType,
    keys_to_filter: Optional[Collection[str]] = None
) -> ChangelogEntry:
    """
    Build one changelog entry with masked values.

    The reported value always comes first: for ADDED entries ``prior`` holds
    the newly added value and ``latest`` is ignored.

    Args:
        prior: The old value (the added value for ADDED)
        latest: The new value, used by UPDATED only
        path: Path of the change
        change_type: Kind of change
        keys_to_filter: Key names to hide from the reported values

    Returns:
        The changelog entry

    Raises:
        UnknownChangeTypeError: If change_type is not a ChangeType member
    """
    if change_type == ChangeType.DELETED:
        return ChangelogEntry(
            path=path,
            note=change_type,
            old_val=filter_object_keys(prior, keys_to_filter),
        )
    elif change_type == ChangeType.UPDATED:
        return ChangelogEntry(
            path=path,
            note=change_type,
            old_val=filter_object_keys(prior, keys_to_filter),
            new_val=filter_object_keys(latest, keys_to_filter),
        )
    elif change_type == ChangeType.ADDED:
        return ChangelogEntry(
            path=path,
            note=change_type,
            new_val=filter_object_keys(prior, keys_to_filter),
        )

    raise UnknownChangeTypeError(change_type)


def deleted(value: Any, path: str, keys_to_filter=None) -> ChangelogEntry:
    return get_changelog(value, MISSING, path, ChangeType.DELETED, keys_to_filter)


def added(value: Any, path: str, keys_to_filter=None) -> ChangelogEntry:
    return get_changelog(value, MISSING, path, ChangeType.ADDED, keys_to_filter)


def updated(old: Any, new: Any, path: str, keys_to_filter=None) -> ChangelogEntry:
    return get_changelog(old, new, path, ChangeType.UPDATED, keys_to_filter)
