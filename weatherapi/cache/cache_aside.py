"""Get-or-compute-and-store around a CacheStore."""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from weatherapi.cache.store import CacheStore
from weatherapi.models.common import Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


async def get_or_compute(
    store: CacheStore,
    key: str,
    ttl: float,
    compute: Callable[[], Awaitable[Result[T]]],
) -> Result[T]:
    """Return the cached value for key, or compute, store and return it.

    Any present value is a hit, falsy ones included. Err results are returned
    without touching the store. Concurrent misses each run compute.
    """
    cached = await store.get(key, _MISSING)
    if cached is not _MISSING:
        logger.debug("Cache hit: %s", key)
        return Ok(cached)

    logger.debug("Cache miss: %s", key)
    result = await compute()
    if isinstance(result, Ok):
        await store.set(key, result.value, ttl)
    return result
