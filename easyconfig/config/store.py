"""Configuration store merging YAML files into one mapping."""

import copy
import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from easyconfig.cache.backends import CacheBackend, MemoryCache, create_cache_backend
from easyconfig.config.parser import ConfigParser, YamlParser
from easyconfig.config.settings import StoreSettings
from easyconfig.exceptions import (
    ConfigFileNotFoundError,
    ConfigParseError,
    InvalidConfigFileError,
    KeyNotFoundError,
)
from easyconfig.utils.logging import get_logger

logger = get_logger(__name__)

PathLike = str | os.PathLike


class ConfigStore:
    """Load YAML config files and look values up by key chain.

    Files are merged shallowly in the order given: a top-level key in a later
    file replaces the same key from an earlier file wholesale. Parsed files can
    be kept in a process-wide cache keyed by path, so loading the same file again,
    from this store or any other in the process, skips the parse.

    Stores are plain objects. Build one per use and pass it around, or use
    ``ConfigStore.get_instance()`` for the shared one. A store is not safe to
    use from several threads at once.
    """

    _instance: "ConfigStore | None" = None

    def __init__(
        self,
        parser: ConfigParser | None = None,
        cache: CacheBackend | None = None,
        use_cache: bool = True,
    ):
        """Initialize an empty store.

        Args:
            parser: Parser for file contents. Defaults to a new YamlParser.
            cache: Cache backend. Defaults to the process-wide MemoryCache.
            use_cache: Initial value of the cache flag
        """
        self.parser = parser if parser is not None else YamlParser()
        self.cache = cache if cache is not None else MemoryCache()
        self._use_cache = use_cache
        self._config_files: list[str] = []
        self._config: dict[str, Any] = {}

    @classmethod
    def get_instance(cls) -> "ConfigStore":
        """Return the shared store, creating it on first call.

        The first call reads ``StoreSettings`` from the environment to pick the
        cache backend and the initial cache flag.
        """
        if cls._instance is None:
            settings = StoreSettings.from_env()
            cls._instance = cls(
                parser=YamlParser(),
                cache=create_cache_backend(settings.cache_backend),
                use_cache=settings.use_cache,
            )
            logger.debug(
                f"Shared config store created (cache={settings.cache_backend}, "
                f"use_cache={settings.use_cache})"
            )
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared store so the next get_instance() builds a new one."""
        cls._instance = None

    @property
    def use_cache(self) -> bool:
        return self._use_cache

    @property
    def source_paths(self) -> list[str]:
        """Paths passed to the most recent load_config() call."""
        return list(self._config_files)

    def set_use_cache(self, use_cache: bool) -> None:
        """Turn caching on or off for subsequent loads and flushes."""
        self._use_cache = bool(use_cache)

    def load_config(self, config_files: PathLike | Sequence[PathLike]) -> None:
        """Merge the content of one or more config files into the store.

        The given paths replace the remembered path list used by
        reload_config() and flush(). The merged mapping itself is not reset:
        loading twice without a flush in between merges the second set of
        files on top of the first.

        Args:
            config_files: A single path or a sequence of paths

        Raises:
            ConfigFileNotFoundError: If a file is missing or unreadable
            InvalidConfigFileError: If a file is not a valid YAML mapping
        """
        if isinstance(config_files, (str, os.PathLike)):
            config_files = [config_files]

        self._config_files = [os.fspath(path) for path in config_files]

        for config_file in self._config_files:
            self._config.update(self._load_config_file(config_file))

        logger.debug(f"Loaded {len(self._config_files)} config file(s): {self._config_files}")

    def fetch(self, *keys: Any) -> Any:
        """Fetch a value from a key chain of any depth.

        With no keys the whole merged mapping is returned. Integer keys also
        index into lists.

        Args:
            *keys: Keys to follow, outermost first

        Returns:
            The value at the end of the chain. Mappings and lists are
            returned as copies.

        Raises:
            KeyNotFoundError: If a key does not exist at its depth
        """
        config: Any = self._config
        for key in keys:
            if isinstance(config, Mapping) and key in config:
                config = config[key]
            elif _is_list_index(config, key):
                config = config[key]
            else:
                raise KeyNotFoundError(key)

        if isinstance(config, (Mapping, list)):
            return copy.deepcopy(config)
        return config

    def reload_config(self) -> None:
        """Flush the cache (if used) and load the remembered files again."""
        logger.debug("Reloading config")
        self.flush()
        self.load_config(self._config_files)

    def flush(self) -> None:
        """Evict the remembered files from the cache (if used) and empty the store."""
        if self._use_cache:
            for config_file in self._config_files:
                self.cache.delete(config_file)
        self._config = {}
        logger.debug("Config flushed")

    def _load_config_file(self, config_file: str) -> dict[str, Any]:
        """Parse one config file, going through the cache when it is used.

        Raises:
            ConfigFileNotFoundError: If the file is missing or unreadable
            InvalidConfigFileError: If the file is not a valid YAML mapping
        """
        if self._use_cache:
            cached = self.cache.fetch(config_file)
            if cached:
                return cached

        path = Path(config_file)
        if not path.is_file() or not os.access(path, os.R_OK):
            raise ConfigFileNotFoundError(config_file)

        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise InvalidConfigFileError(config_file, reason=f"not valid UTF-8 ({e.reason})") from e

        try:
            config = self.parser.parse(text)
        except ConfigParseError as e:
            raise InvalidConfigFileError(config_file, line=e.line) from e

        if config is None:
            config = {}
        elif not isinstance(config, Mapping):
            raise InvalidConfigFileError(
                config_file, reason=f"expected a mapping at the root, got {type(config).__name__}"
            )

        if self._use_cache:
            self.cache.store(config_file, config)

        return dict(config)


def _is_list_index(node: Any, key: Any) -> bool:
    if isinstance(node, (str, bytes)) or not isinstance(node, Sequence):
        return False
    if isinstance(key, bool) or not isinstance(key, int):
        return False
    return -len(node) <= key < len(node)


__all__ = ["ConfigStore"]
