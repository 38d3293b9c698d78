"""Content hashing used to skip unchanged subtrees."""

from __future__ import annotations

import hashlib
import json
from datetime import datetime, timezone
from typing import Any, Iterator

from .classifier import classify_value
from .models import ValueKind


class _Marker:
    """A token already encoded, queued between values on the walk stack."""
    __slots__ = ("token",)

    def __init__(self, token: str):
        self.token = token


_END = _Marker("end")


def _canonical_number(value: int | float) -> str:
    # 1 and 1.0 are the same number and must hash alike
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float):
        return repr(value)
    return str(value)


def _canonical_date(value) -> str:
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.utcoffset() is not None:
            value = value.astimezone(timezone.utc)
        return "datetime:" + value.isoformat()
    return "date:" + value.isoformat()


def _leaf_token(value: Any) -> str:
    """Encode a non-container value as one self-delimiting token."""
    kind = classify_value(value)

    if kind == ValueKind.DATE:
        tagged = ["date", _canonical_date(value)]
    elif kind == ValueKind.UNSUPPORTED:
        # Only the very same function object hashes equal to itself
        tagged = ["fn", id(value)]
    elif kind in (ValueKind.MAPPING, ValueKind.SEQUENCE):
        # Hashable containers only occur here as mapping keys (tuples)
        tagged = ["key", type(value).__qualname__, repr(value)]
    elif value is None:
        tagged = ["null"]
    elif isinstance(value, bool):
        tagged = ["bool", value]
    elif isinstance(value, (int, float)):
        tagged = ["num", _canonical_number(value)]
    elif isinstance(value, str):
        tagged = ["str", value]
    else:
        tagged = ["obj", type(value).__qualname__, repr(value)]

    return json.dumps(tagged, ensure_ascii=False, separators=(',', ':'))


def _tokens(value: Any) -> Iterator[str]:
    """
    Walk a value depth-first and yield its canonical tokens.

    Containers open with their kind and member count and close with an end
    marker, so nesting is carried by the token stream instead of the call
    stack and arbitrarily deep values can be encoded. Mapping members are
    ordered by the token of their key.
    """
    stack: list[Any] = [value]
    while stack:
        item = stack.pop()
        if isinstance(item, _Marker):
            yield item.token
            continue

        kind = classify_value(item)
        if kind == ValueKind.MAPPING:
            members = sorted(
                ((_leaf_token(key), member) for key, member in item.items()),
                key=lambda member: member[0]
            )
            yield f"map:{len(members)}"
            stack.append(_END)
            for key_token, member in reversed(members):
                stack.append(member)
                stack.append(_Marker(key_token))
        elif kind == ValueKind.SEQUENCE:
            yield f"seq:{len(item)}"
            stack.append(_END)
            stack.extend(reversed(item))
        else:
            yield _leaf_token(item)


def compute_hash(value: Any) -> str:
    """Compute the SHA-256 digest of a value's canonical serialization."""
    digest = hashlib.sha256()
    for token in _tokens(value):
        digest.update(token.encode('utf-8'))
        digest.update(b"\n")
    return digest.hexdigest()


def hash_compare(prior: Any, latest: Any) -> bool:
    """
    Compare two values by content digest.

    Returns:
        True if both values serialize identically, meaning no changes
    """
    return compute_hash(prior) == compute_hash(latest)
