"""YAML parsing for config files."""

from typing import Any, Protocol

import yaml

from easyconfig.exceptions import ConfigParseError


class ConfigParser(Protocol):
    """Anything that turns config file text into Python data."""

    def parse(self, text: str) -> Any:
        ...


class YamlParser:
    """Parse YAML text with PyYAML's safe loader."""

    def parse(self, text: str) -> Any:
        """Parse YAML text.

        Args:
            text: Full YAML document

        Returns:
            Parsed data, None for an empty document

        Raises:
            ConfigParseError: If the text is not valid YAML
        """
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigParseError(str(e), line=_error_line(e)) from e


def _error_line(error: yaml.YAMLError) -> int | None:
    """Return the 1-based line a YAML error points at, if it has one."""
    mark = getattr(error, "problem_mark", None) or getattr(error, "context_mark", None)
    if mark is None:
        return None
    return mark.line + 1


__all__ = ["ConfigParser", "YamlParser"]
