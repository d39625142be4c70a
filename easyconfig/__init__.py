"""easyconfig: merge YAML config files and fetch values by key chain."""

from loguru import logger

from easyconfig.cache import MemoryCache, NullCache
from easyconfig.config import ConfigStore, StoreSettings, YamlParser
from easyconfig.exceptions import (
    ConfigFileNotFoundError,
    ConfigParseError,
    EasyConfigError,
    InvalidConfigFileError,
    KeyNotFoundError,
)
from easyconfig.utils.logging import setup_logging

__version__ = "1.0.0"

logger.disable("easyconfig")

__all__ = [
    "ConfigStore",
    "StoreSettings",
    "YamlParser",
    "MemoryCache",
    "NullCache",
    "EasyConfigError",
    "ConfigFileNotFoundError",
    "ConfigParseError",
    "InvalidConfigFileError",
    "KeyNotFoundError",
    "setup_logging",
]
