"""Comparison entry point for the deep comparer."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Iterable, Optional

from .differ import Differ
from .exceptions import InvalidInputError
from .hashing import hash_compare
from .models import ChangelogEntry, ComparerConfig
from .performance import PerformanceLogger, get_performance_logger


logger = logging.getLogger(__name__)

PERFORMANCE_LABEL = "Execution Time"


class DeepComparer:
    """
    Compares two versions of an object or array and returns a changelog.

    The first version passed is the prior one. Configuration is bound once
    and shared by every call made through the same comparer.

    Usage:
        compare = create_comparator(keys_to_ignore=["updatedAt"])
        changelog = compare({"a": 1}, {"a": 2})
    """

    def __init__(
        self,
        config: Optional[ComparerConfig] = None,
        performance_logger: Optional[PerformanceLogger] = None
    ):
        """
        Initialize the comparer.

        Args:
            config: Comparer configuration (uses defaults if not provided)
            performance_logger: Receives the elapsed time of each comparison;
                defaults to a logging one when config.diagnostics is set,
                a no-op otherwise
        """
        self.config = config or ComparerConfig()
        self.performance_logger = (
            performance_logger or get_performance_logger(self.config.diagnostics)
        )
        self._differ = Differ(self.config.keys_to_ignore, self.config.keys_to_filter)

    @classmethod
    def from_config(cls, config: ComparerConfig) -> "DeepComparer":
        return cls(config)

    async def compare_async(
        self,
        prior: Any,
        latest: Any,
        root_label: Optional[str] = None
    ) -> list[ChangelogEntry]:
        """
        Compare two versions of a value.

        Args:
            prior: The original (older) version
            latest: The updated (newer) version
            root_label: Starting path reported in the changelog

        Returns:
            Changelog entries in traversal order

        Raises:
            InvalidInputError: If either version is None
            UnsupportedValueError: If a function is found while comparing
        """
        start_time = time.perf_counter()
        root = self.config.root_label if root_label is None else root_label

        self._validate_inputs(prior, latest)

        # Identical versions need no traversal
        if hash_compare(prior, latest):
            diffs = []
        else:
            diffs = await self._differ.diff(prior, latest, root)

        logger.debug("Compared versions at %s: %d change(s)", root, len(diffs))
        self.performance_logger.log(PERFORMANCE_LABEL, time.perf_counter() - start_time)

        return diffs

    def compare(
        self,
        prior: Any,
        latest: Any,
        root_label: Optional[str] = None
    ) -> list[ChangelogEntry]:
        """
        Blocking variant of compare_async.

        Must not be called from a running event loop; await compare_async
        there instead.
        """
        return asyncio.run(self.compare_async(prior, latest, root_label))

    __call__ = compare

    def _validate_inputs(self, prior: Any, latest: Any):
        """Validate input parameters."""
        if prior is None or latest is None:
            raise InvalidInputError(
                "Two non-null versions must be provided for the deep compare.",
                {
                    "prior": "missing" if prior is None else type(prior).__name__,
                    "latest": "missing" if latest is None else type(latest).__name__,
                }
            )


def create_comparator(
    keys_to_ignore: Optional[Iterable[str]] = None,
    keys_to_filter: Optional[Iterable[str]] = None,
    *,
    root_label: str = "root",
    diagnostics: bool = False,
    performance_logger: Optional[PerformanceLogger] = None
) -> DeepComparer:
    """
    Create a deep comparer bound to an ignore list and a filter list.

    Args:
        keys_to_ignore: Mapping keys left out of the comparison (a key newly
            added in the latest version is still reported)
        keys_to_filter: Keys hidden from the values reported in the changelog
        root_label: Default starting path of the changelog
        diagnostics: Log the execution time of each comparison
        performance_logger: Custom timing collaborator (overrides diagnostics)

    Returns:
        A callable comparer: ``compare(prior, latest, root_label="root")``

    Example:
        compare = create_comparator(["keyToIgnore"], ["keyToHide"])
        diffs = compare({"a": 1, "b": 2}, {"a": 1, "b": 3})
    """
    config = ComparerConfig(
        keys_to_ignore=keys_to_ignore,
        keys_to_filter=keys_to_filter,
        root_label=root_label,
        diagnostics=diagnostics,
    )
    return DeepComparer(config, performance_logger)
