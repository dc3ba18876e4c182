"""In-memory TTL cache for fact-check and search results."""
import asyncio
import time
from typing import Any, Callable, Dict, Optional

from config import logger, settings


class ResultCache:
    """
    Key -> {data, timestamp} store with a fixed time-to-live.

    Expiry is checked on every read; `sweep_expired` removes all stale
    entries and is driven by a periodic background task.
    """

    def __init__(self, ttl_seconds: Optional[float] = None, clock: Callable[[], float] = time.time):
        self.ttl_seconds = settings.CACHE_TTL_SECONDS if ttl_seconds is None else ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Dict[str, Any]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def _is_expired(self, entry: Dict[str, Any], now: float) -> bool:
        return now - entry["timestamp"] >= self.ttl_seconds

    def get(self, key: str) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self._is_expired(entry, self._clock()):
            logger.debug(f"Cache expired: {key[:80]}")
            del self._entries[key]
            return None

        logger.info(f"Cache hit: {key[:80]}")
        return entry["data"]

    def set(self, key: str, data: Any) -> None:
        self._entries[key] = {"data": data, "timestamp": self._clock()}

    def clear(self) -> int:
        count = len(self._entries)
        self._entries.clear()
        return count

    def sweep_expired(self) -> int:
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if self._is_expired(entry, now)]
        for key in expired:
            del self._entries[key]

        if expired:
            logger.info("Swept expired cache entries", extra={"entries_removed": len(expired)})
        return len(expired)


async def run_periodic_sweep(cache: ResultCache, interval_seconds: Optional[float] = None) -> None:
    """Sweep `cache` forever, once per interval. Stopped by task cancellation."""
    interval = settings.CACHE_SWEEP_INTERVAL_SECONDS if interval_seconds is None else interval_seconds
    while True:
        await asyncio.sleep(interval)
        cache.sweep_expired()
