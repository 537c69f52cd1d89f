"""In-memory memoization for computed artifacts.

A ``ComputedCache`` is created by whoever drives an audit and
passed in through the audit context.  Collaborators that derive
data from artifacts (the resource summary, for one) store their
results here keyed by their hashable inputs, so repeated audits
over the same artifacts skip the recomputation.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from typing import Any, TypeVar

from resource_budget.utils import logger

log = logger.create_logger("ComputedCache")

T = TypeVar("T")


class ComputedCache:
    """Per-artifact-name memo tables."""

    def __init__(self) -> None:
        self._tables: dict[str, dict[Hashable, Any]] = {}

    def get_or_compute(self, name: str, key: Hashable, compute: Callable[[], T]) -> T:
        """Return the cached value for (*name*, *key*), computing it on a miss."""
        table = self._tables.setdefault(name, {})
        if key in table:
            log.debug("Cache hit", {"artifact": name})
            return table[key]
        value = compute()
        table[key] = value
        log.debug("Cache miss", {"artifact": name, "entries": len(table)})
        return value

    def clear(self) -> int:
        """Drop every cached entry.

        Returns the number of entries removed.
        """
        removed = sum(len(t) for t in self._tables.values())
        self._tables.clear()
        return removed

    def __len__(self) -> int:
        return sum(len(t) for t in self._tables.values())
