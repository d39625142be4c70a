"""Logging setup built on loguru.

The package disables its own log records on import, as loguru recommends for
libraries. Applications that want to see them call ``setup_logging``.
"""

import sys
from pathlib import Path

from loguru import logger

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[logger_name]}</cyan> - <level>{message}</level>"
)


def setup_logging(
    level: str = "INFO",
    log_file: str | Path | None = None,
    rotation: str = "10 MB",
    retention: int = 5,
) -> list[int]:
    """Enable easyconfig log output.

    Removes loguru's default handler and installs a stderr sink, plus a
    rotating file sink when ``log_file`` is given.

    Args:
        level: Minimum level to emit
        log_file: Optional path of a log file
        rotation: Size at which the log file is rotated
        retention: Number of rotated files to keep

    Returns:
        IDs of the handlers that were added
    """
    logger.remove()
    logger.configure(extra={"logger_name": "easyconfig"})
    logger.enable("easyconfig")

    handler_ids = [logger.add(sys.stderr, level=level.upper(), format=DEFAULT_FORMAT)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(
            logger.add(
                log_path,
                level=level.upper(),
                format=DEFAULT_FORMAT,
                rotation=rotation,
                retention=retention,
                encoding="utf-8",
            )
        )

    logger.bind(logger_name=__name__).debug(f"Logging initialized (level={level}, file={log_file})")
    return handler_ids


def get_logger(name: str):
    """Get a loguru logger bound to a module name.

    Args:
        name: Usually the caller's ``__name__``

    Returns:
        Bound loguru logger
    """
    return logger.bind(logger_name=name)


__all__ = ["setup_logging", "get_logger"]
