"""Process-wide caches for parsed config files."""

from .backends import CacheBackend, MemoryCache, NullCache, create_cache_backend

__all__ = ["CacheBackend", "MemoryCache", "NullCache", "create_cache_backend"]
