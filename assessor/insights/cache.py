from __future__ import annotations

import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable

from assessor.schemas.insights import AIInsights


@dataclass(frozen=True)
class CachedInsight:
    key: str
    data: AIInsights
    created_at: float


class InsightCache:
    """Bounded TTL map.

    A full cache first drops expired entries, then evicts the oldest insertion.
    """

    def __init__(
        self,
        max_entries: int = 100,
        ttl_seconds: float = 3600.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._max_entries = max_entries
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: OrderedDict[str, CachedInsight] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def _expired(self, entry: CachedInsight, now: float) -> bool:
        return now - entry.created_at >= self._ttl_seconds

    def get(self, key: str) -> AIInsights | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._expired(entry, self._clock()):
            del self._entries[key]
            return None
        return entry.data

    def set(self, key: str, data: AIInsights) -> None:
        # an overwrite counts as a fresh insertion
        self._entries.pop(key, None)
        if len(self._entries) >= self._max_entries:
            self.purge_expired()
        self._entries[key] = CachedInsight(key=key, data=data, created_at=self._clock())
        while len(self._entries) > self._max_entries:
            self._entries.popitem(last=False)

    def purge_expired(self) -> int:
        now = self._clock()
        stale = [key for key, entry in self._entries.items() if self._expired(entry, now)]
        for key in stale:
            del self._entries[key]
        return len(stale)

    def clear(self) -> None:
        self._entries.clear()
