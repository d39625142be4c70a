"""Cache backends for parsed configuration files.

The store talks to a backend through three calls (``fetch``, ``store`` and
``delete``), all keyed by the config file path. ``MemoryCache`` keeps entries in
a dictionary shared by the whole process; ``NullCache`` stands in when caching
is switched off at the backend level and silently ignores every call.
"""

import copy
from typing import Any, Protocol, runtime_checkable

from easyconfig.utils.logging import get_logger

logger = get_logger(__name__)

# Shared by every MemoryCache in the process
_PROCESS_CACHE: dict[str, Any] = {}


@runtime_checkable
class CacheBackend(Protocol):
    """Protocol for key/value caches of parsed config files."""

    @property
    def available(self) -> bool:
        """Whether the backend actually retains anything."""
        ...

    def fetch(self, key: str) -> Any | None:
        """Return the cached value for key, or None on a miss."""
        ...

    def store(self, key: str, value: Any) -> None:
        """Cache value under key, replacing any previous entry."""
        ...

    def delete(self, key: str) -> None:
        """Drop key from the cache. Missing keys are ignored."""
        ...


class MemoryCache:
    """Process-wide in-memory cache.

    All instances share one dictionary, so a file parsed through one store is
    visible to every other store in the same process. Values are deep-copied on
    the way in and out; mutating a fetched config never changes the cache.
    There is no locking and the last writer wins.
    """

    @property
    def available(self) -> bool:
        return True

    def fetch(self, key: str) -> Any | None:
        if key not in _PROCESS_CACHE:
            logger.debug(f"Cache miss: {key}")
            return None
        logger.debug(f"Cache hit: {key}")
        return copy.deepcopy(_PROCESS_CACHE[key])

    def store(self, key: str, value: Any) -> None:
        _PROCESS_CACHE[key] = copy.deepcopy(value)
        logger.debug(f"Cached: {key}")

    def delete(self, key: str) -> None:
        if _PROCESS_CACHE.pop(key, None) is not None:
            logger.debug(f"Evicted from cache: {key}")

    def clear(self) -> None:
        """Drop every entry in the process-wide cache."""
        _PROCESS_CACHE.clear()

    def __len__(self) -> int:
        return len(_PROCESS_CACHE)

    def __contains__(self, key: str) -> bool:
        return key in _PROCESS_CACHE


class NullCache:
    """Backend used when no cache is present. Every fetch misses."""

    @property
    def available(self) -> bool:
        return False

    def fetch(self, key: str) -> Any | None:
        return None

    def store(self, key: str, value: Any) -> None:
        pass

    def delete(self, key: str) -> None:
        pass


_BACKENDS = {
    "memory": MemoryCache,
    "none": NullCache,
}


def create_cache_backend(name: str) -> CacheBackend:
    """Create a cache backend by name.

    Args:
        name: Backend name, ``"memory"`` or ``"none"``

    Returns:
        New backend instance

    Raises:
        ValueError: If the backend name is unknown
    """
    try:
        backend_cls = _BACKENDS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown cache backend: {name} (expected one of {', '.join(sorted(_BACKENDS))})"
        ) from None
    return backend_cls()


__all__ = ["CacheBackend", "MemoryCache", "NullCache", "create_cache_backend"]
