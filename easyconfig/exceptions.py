"""Exceptions raised by the configuration store."""


class EasyConfigError(Exception):
    """Base exception for all easyconfig errors."""

    pass


class ConfigFileNotFoundError(EasyConfigError, FileNotFoundError):
    """Raised when a config file is missing or unreadable."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File {path} could not be found.")


class InvalidConfigFileError(EasyConfigError, ValueError):
    """Raised when a config file does not hold a valid YAML mapping."""

    def __init__(self, path: str, line: int | None = None, reason: str | None = None):
        self.path = path
        self.line = line
        message = f"File {path} does not have a valid format"
        if line is not None:
            message += f" (line {line})"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class KeyNotFoundError(EasyConfigError, KeyError):
    """Raised when a key chain leaves the loaded configuration."""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Key {key} not found.")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class ConfigParseError(EasyConfigError):
    """Raised by a parser when text cannot be parsed."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        super().__init__(message)


__all__ = [
    "EasyConfigError",
    "ConfigFileNotFoundError",
    "InvalidConfigFileError",
    "KeyNotFoundError",
    "ConfigParseError",
]
