"""Short-lived cache for board listings."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from .finder import BoardFileRef

logger = logging.getLogger(__name__)

DEFAULT_TTL_MS = 5000

# (search_dir, base_dir); base_dir is None for shallow listings
CacheKey = Tuple[Path, Optional[Path]]
Clock = Callable[[], float]


def _wall_clock_ms() -> float:
    return time.time() * 1000


@dataclass
class CacheEntry:
    results: List[BoardFileRef]
    timestamp: float


class BoardListingCache:
    """
    TTL cache of board listings keyed by (search_dir, base_dir).

    Entries are replaced on refresh and otherwise kept for the process
    lifetime; the key space is bounded by the directories a user visits.
    Loaders run outside the lock, so two concurrent misses on one key may
    both walk the filesystem.
    """

    def __init__(self, ttl_ms: float = DEFAULT_TTL_MS, clock: Optional[Clock] = None):
        self.ttl_ms = ttl_ms
        self._clock = clock or _wall_clock_ms
        self._entries: Dict[CacheKey, CacheEntry] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: CacheKey) -> Optional[List[BoardFileRef]]:
        """
        Return cached results for ``key`` if present and younger than the TTL.

        Args:
            key: (search_dir, base_dir) pair.

        Returns:
            The cached listing, or None when missing or stale.
        """
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None or now - entry.timestamp >= self.ttl_ms:
                return None
            return list(entry.results)

    def put(self, key: CacheKey, results: List[BoardFileRef]) -> None:
        """Store ``results`` under ``key`` with a fresh timestamp."""
        now = self._clock()
        with self._lock:
            self._entries[key] = CacheEntry(results=list(results), timestamp=now)

    def get_or_load(
        self,
        key: CacheKey,
        loader: Callable[[], List[BoardFileRef]],
        force: bool = False,
    ) -> List[BoardFileRef]:
        """
        Return the cached listing for ``key``, loading it on miss.

        Args:
            key: (search_dir, base_dir) pair.
            loader: Performs the uncached filesystem walk.
            force: Skip the lookup and overwrite the entry.
        """
        if not force:
            cached = self.get(key)
            if cached is not None:
                logger.debug("board listing cache hit key=%s", key)
                return cached

        logger.debug("board listing cache %s key=%s", "refresh" if force else "miss", key)
        results = loader()
        self.put(key, results)
        return results

    def invalidate(self, key: CacheKey) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
