"""Tests for cache backends."""

import pytest

from easyconfig.cache import CacheBackend, MemoryCache, NullCache, create_cache_backend


@pytest.mark.unit
class TestMemoryCache:
    """Test MemoryCache."""

    def test_store_and_fetch(self):
        """Test a stored value can be fetched back."""
        cache = MemoryCache()

        cache.store("config.yaml", {"a": 1})

        assert cache.fetch("config.yaml") == {"a": 1}

    def test_fetch_missing_key(self):
        """Test a miss returns None."""
        assert MemoryCache().fetch("nonexistent") is None

    def test_shared_across_instances(self):
        """Test entries are visible to every instance in the process."""
        MemoryCache().store("shared.yaml", {"x": True})

        assert MemoryCache().fetch("shared.yaml") == {"x": True}

    def test_delete(self):
        """Test deleting removes the entry and ignores missing keys."""
        cache = MemoryCache()
        cache.store("config.yaml", {"a": 1})

        cache.delete("config.yaml")
        cache.delete("never-stored.yaml")

        assert cache.fetch("config.yaml") is None
        assert "config.yaml" not in cache

    def test_last_writer_wins(self):
        """Test storing twice keeps the second value."""
        cache = MemoryCache()

        cache.store("config.yaml", {"v": 1})
        cache.store("config.yaml", {"v": 2})

        assert cache.fetch("config.yaml") == {"v": 2}

    def test_values_are_copied(self):
        """Test neither the stored nor the fetched object aliases the cache."""
        cache = MemoryCache()
        original = {"nested": {"a": 1}}

        cache.store("config.yaml", original)
        original["nested"]["a"] = 2
        fetched = cache.fetch("config.yaml")
        fetched["nested"]["a"] = 3

        assert cache.fetch("config.yaml") == {"nested": {"a": 1}}

    def test_clear(self):
        """Test clear() empties the process-wide cache."""
        cache = MemoryCache()
        cache.store("a.yaml", {"a": 1})
        cache.store("b.yaml", {"b": 2})
        assert len(cache) == 2

        cache.clear()

        assert len(cache) == 0

    def test_is_available(self):
        """Test the memory backend reports itself available."""
        assert MemoryCache().available is True


@pytest.mark.unit
class TestNullCache:
    """Test NullCache."""

    def test_every_call_is_a_noop(self):
        """Test stores are dropped and fetches miss."""
        cache = NullCache()

        cache.store("config.yaml", {"a": 1})
        cache.delete("config.yaml")

        assert cache.fetch("config.yaml") is None
        assert cache.available is False

    def test_does_not_touch_memory_cache(self):
        """Test the null backend never writes to the process-wide cache."""
        NullCache().store("config.yaml", {"a": 1})

        assert "config.yaml" not in MemoryCache()


@pytest.mark.unit
class TestCreateCacheBackend:
    """Test the backend factory."""

    @pytest.mark.parametrize(
        "name,expected",
        [("memory", MemoryCache), ("none", NullCache), ("Memory", MemoryCache)],
    )
    def test_known_backends(self, name, expected):
        """Test names map to backend classes."""
        backend = create_cache_backend(name)

        assert isinstance(backend, expected)
        assert isinstance(backend, CacheBackend)

    def test_unknown_backend(self):
        """Test an unknown name raises ValueError."""
        with pytest.raises(ValueError, match="Unknown cache backend: apcu"):
            create_cache_backend("apcu")
