"""Logging setup for the relauncher.

Logs to a file when configured, otherwise falls back to a simple stderr handler.
"""

import logging
import sys

_configured = False


def setup_logging(level: int | str = logging.INFO, log_file: str | None = None) -> None:
    """Configure logging for the relauncher.

    Args:
        level: Logging level or level name such as ``"debug"``
            (default: INFO).
        log_file: Path to a log file. If given, logs go to the file.
            If None, logs go to stderr with a simple format.
    """
    global _configured
    if _configured:
        return

    level = parse_level(level)
    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))

    root_logger = logging.getLogger("relauncher")
    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the relauncher namespace.

    Args:
        name: Module name (e.g., "platform.psutil_controller").

    Returns:
        Configured logger instance.
    """
    return logging.getLogger(f"relauncher.{name}")


def parse_level(name: str | int) -> int:
    """Translate a level name such as ``"debug"`` into a logging level.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    if isinstance(name, bool):
        raise ValueError(f"Unknown log level: {name}")
    if isinstance(name, int):
        return name
    level = logging.getLevelName(str(name).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level
