"""Configuration loading and lookup."""

from .parser import YamlParser
from .settings import StoreSettings
from .store import ConfigStore

__all__ = ["ConfigStore", "StoreSettings", "YamlParser"]
