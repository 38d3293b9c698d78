"""Recursive comparison of two versions of a value."""

from __future__ import annotations

import asyncio
from itertools import chain
from typing import Any, Collection, Mapping, Optional, Sequence

from .changelog import added, deleted, updated
from .classifier import classify_pair, classify_value, dates_equal, strict_equal
from .exceptions import UnsupportedValueError
from .hashing import hash_compare
from .models import ChangelogEntry, PairKind, ValueKind
from .utils import index_path, key_path


class Differ:
    """
    Walks a prior and a latest value in lockstep and collects changes.

    The prior version drives the traversal: every member of prior is compared
    with the member at the same key or index in latest, then members only
    present in latest are reported as added. Members of one level are
    compared concurrently and their results are gathered by position, so
    the output order is the traversal order whatever the completion order.

    Handles:
    - Mappings, compared key by key (ignored keys are skipped)
    - Sequences, compared index by index
    - Dates, compared by instant
    - Type changes (e.g. list to string), reported as one update
    """

    def __init__(
        self,
        keys_to_ignore: Optional[Collection[str]] = None,
        keys_to_filter: Optional[Collection[str]] = None
    ):
        self.keys_to_ignore = frozenset(keys_to_ignore or ())
        self.keys_to_filter = frozenset(keys_to_filter or ())

    async def diff(self, prior: Any, latest: Any, path: str) -> list[ChangelogEntry]:
        """
        Compare two values found at the same path.

        Args:
            prior: The prior (older) value
            latest: The latest (newer) value
            path: Path of both values

        Returns:
            Changelog entries in traversal order

        Raises:
            UnsupportedValueError: If a function is met at a compared position
        """
        return await self._diff_pair(prior, latest, path)

    @staticmethod
    async def _fan_out(coros) -> list[list[ChangelogEntry]]:
        """Run one level's comparisons as tasks; results keep input order."""
        tasks = [asyncio.ensure_future(coro) for coro in coros]
        try:
            return await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

    async def _diff_pair(self, prior: Any, latest: Any, path: str) -> list[ChangelogEntry]:
        pair_kind = classify_pair(prior, latest, path)

        if pair_kind == PairKind.BOTH_MAPPINGS:
            return await self._diff_mappings(prior, latest, path)
        elif pair_kind == PairKind.BOTH_SEQUENCES:
            return await self._diff_sequences(prior, latest, path)
        elif pair_kind == PairKind.BOTH_DATES:
            if dates_equal(prior, latest):
                return []
        elif pair_kind == PairKind.BOTH_SCALARS:
            if strict_equal(prior, latest):
                return []
        elif pair_kind != PairKind.HETEROGENEOUS:
            raise ValueError(f"Unhandled pair kind: {pair_kind}")

        return [updated(prior, latest, path, self.keys_to_filter)]

    async def _diff_mappings(
        self,
        prior: Mapping,
        latest: Mapping,
        path: str
    ) -> list[ChangelogEntry]:
        """Compare two mappings."""
        if hash_compare(prior, latest):
            return []

        nested = await self._fan_out(
            self._diff_member(value, latest, key, key_path(path, key))
            for key, value in prior.items()
            if key not in self.keys_to_ignore
        )
        diffs = list(chain.from_iterable(nested))

        # Added keys are reported even when ignored
        for key, value in latest.items():
            if key not in prior:
                member_path = key_path(path, key)
                self._check_supported(value, member_path)
                diffs.append(added(value, member_path, self.keys_to_filter))

        return diffs

    async def _diff_sequences(
        self,
        prior: Sequence,
        latest: Sequence,
        path: str
    ) -> list[ChangelogEntry]:
        """Compare two sequences index by index (order matters)."""
        if hash_compare(prior, latest):
            return []

        nested = await self._fan_out(
            self._diff_element(value, latest, i, index_path(path, i))
            for i, value in enumerate(prior)
        )
        diffs = list(chain.from_iterable(nested))

        for i in range(len(prior), len(latest)):
            element_path = index_path(path, i)
            self._check_supported(latest[i], element_path)
            diffs.append(added(latest[i], element_path, self.keys_to_filter))

        return diffs

    async def _diff_member(
        self,
        value: Any,
        latest: Mapping,
        key: Any,
        path: str
    ) -> list[ChangelogEntry]:
        """Compare one member of the prior mapping with its latest counterpart."""
        self._check_supported(value, path)

        if key not in latest:
            return [deleted(value, path, self.keys_to_filter)]

        return await self._diff_pair(value, latest[key], path)

    async def _diff_element(
        self,
        value: Any,
        latest: Sequence,
        index: int,
        path: str
    ) -> list[ChangelogEntry]:
        """Compare one element of the prior sequence with its latest counterpart."""
        self._check_supported(value, path)

        if index >= len(latest):
            return [deleted(value, path, self.keys_to_filter)]

        return await self._diff_pair(value, latest[index], path)

    @staticmethod
    def _check_supported(value: Any, path: str):
        if classify_value(value) == ValueKind.UNSUPPORTED:
            raise UnsupportedValueError(path)
