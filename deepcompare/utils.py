"""Utility functions for the deep comparer."""

from __future__ import annotations

from typing import Any


def key_path(parent_path: str, key: Any) -> str:
    """Build the path of a mapping member, e.g. ``root.data``."""
    return f"{parent_path}.{key}"


def index_path(parent_path: str, index: int) -> str:
    """Build the path of a sequence element, e.g. ``root.data[2]``."""
    return f"{parent_path}[{index}]"


def is_numeric(value: Any) -> bool:
    """Check if a value is numeric (int or float)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def format_elapsed(elapsed_seconds: float) -> str:
    """Format a duration as whole seconds plus milliseconds, e.g. ``1s 2.5ms``."""
    seconds = int(elapsed_seconds)
    millis = (elapsed_seconds - seconds) * 1000
    return f"{seconds}s {millis:.3f}ms"
