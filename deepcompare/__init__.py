"""
deepcompare - structural changelog between two versions of JSON-like data

Walks two versions of nested mappings and sequences in lockstep and reports
every addition, deletion and update as a flat list of path-addressed entries.
"""

from .engine import DeepComparer, create_comparator
from .models import (
    ComparerConfig,
    ChangelogEntry,
    ChangeType,
    MISSING,
)
from .exceptions import (
    DeepCompareError,
    InvalidInputError,
    UnsupportedValueError,
    UnknownChangeTypeError,
    ConfigError,
)
from .hashing import compute_hash, hash_compare
from .masker import filter_object_keys
from .changelog import get_changelog
from .performance import (
    PerformanceLogger,
    NullPerformanceLogger,
    LoggingPerformanceLogger,
)
from .runner import (
    ChangelogRunner,
    ScenarioResult,
    GlobalReport,
    run_tests,
)

__version__ = "2.0.3"
__all__ = [
    # Engine
    "DeepComparer",
    "create_comparator",
    "ComparerConfig",
    # Changelog
    "ChangelogEntry",
    "ChangeType",
    "MISSING",
    "get_changelog",
    # Errors
    "DeepCompareError",
    "InvalidInputError",
    "UnsupportedValueError",
    "UnknownChangeTypeError",
    "ConfigError",
    # Helpers
    "compute_hash",
    "hash_compare",
    "filter_object_keys",
    # Diagnostics
    "PerformanceLogger",
    "NullPerformanceLogger",
    "LoggingPerformanceLogger",
    # Dataset Runner
    "ChangelogRunner",
    "ScenarioResult",
    "GlobalReport",
    "run_tests",
]
