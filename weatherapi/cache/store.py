"""Cache store capability and the default in-memory TTL backend."""

import logging
import time
from collections.abc import Callable
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class CacheStore(Protocol):
    async def get(self, key: str, default: Any = None) -> Any: ...

    async def set(self, key: str, value: Any, ttl: float) -> None: ...


class InMemoryCacheStore:
    """Process-local TTL cache.

    Expired entries are dropped when read. Once max_entries is reached the
    oldest-inserted entry is evicted to make room.
    """

    def __init__(
        self,
        max_entries: int = 1000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, tuple[Any, float]] = {}

    async def get(self, key: str, default: Any = None) -> Any:
        entry = self._entries.get(key)
        if entry is None:
            return default
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[key]
            return default
        return value

    async def set(self, key: str, value: Any, ttl: float) -> None:
        # Re-insert so an overwritten key counts as newest.
        self._entries.pop(key, None)
        while len(self._entries) >= self.max_entries:
            oldest = next(iter(self._entries))
            del self._entries[oldest]
            logger.debug("Evicted cache entry %s", oldest)
        self._entries[key] = (value, self._clock() + ttl)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
