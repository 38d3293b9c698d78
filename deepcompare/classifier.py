"""Value classification used to pick a comparison strategy."""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date
from typing import Any

from .exceptions import UnsupportedValueError
from .models import PairKind, ValueKind
from .utils import is_numeric


def classify_value(value: Any) -> ValueKind:
    """
    Classify a single value.

    Mappings and sequences are checked before callables so that a callable
    container type is still walked. Strings and bytes are scalars.
    """
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    if isinstance(value, date):
        return ValueKind.DATE
    if callable(value):
        return ValueKind.UNSUPPORTED
    return ValueKind.SCALAR


def classify_pair(prior: Any, latest: Any, path: str) -> PairKind:
    """
    Classify two co-located values.

    Args:
        prior: Value from the prior version
        latest: Value found at the same path in the latest version
        path: Path of both values, reported if either one is a function

    Returns:
        The pair kind

    Raises:
        UnsupportedValueError: If either value is a function
    """
    prior_kind = classify_value(prior)
    latest_kind = classify_value(latest)

    if ValueKind.UNSUPPORTED in (prior_kind, latest_kind):
        raise UnsupportedValueError(path)

    if prior_kind != latest_kind:
        return PairKind.HETEROGENEOUS
    if prior_kind == ValueKind.SEQUENCE:
        return PairKind.BOTH_SEQUENCES
    if prior_kind == ValueKind.MAPPING:
        return PairKind.BOTH_MAPPINGS
    if prior_kind == ValueKind.DATE:
        return PairKind.BOTH_DATES
    return PairKind.BOTH_SCALARS


def strict_equal(old: Any, new: Any) -> bool:
    """
    Check if two scalars are identical.

    Booleans never equal numbers and NaN never equals anything; ints and
    floats compare by value.
    """
    if isinstance(old, bool) or isinstance(new, bool):
        return type(old) is type(new) and old == new

    if is_numeric(old) and is_numeric(new):
        if isinstance(old, float) and math.isnan(old):
            return False
        return old == new

    if type(old) is not type(new):
        return False

    return old == new


def dates_equal(old: date, new: date) -> bool:
    """Check if two dates denote the same instant."""
    # date == datetime is always False, which keeps a date and a datetime apart
    return old == new
