"""Logging configuration utilities."""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


def _check_level(level: str) -> str:
    """Normalize a level name and make sure loguru knows it."""
    name = level.upper()
    try:
        logger.level(name)
    except ValueError:
        raise ValueError(f"unknown log level: {level!r}") from None
    return name


def setup_logging(
    level: str = "INFO",
    log_file: str | Path | None = None,
    file_level: str | None = None,
    rotation: str = "10 MB",
    retention: str = "1 week",
) -> None:
    """Configure loguru sinks for the CLI and library users.

    The console gets a compact format without timestamps, since searches are
    interactive. The optional file sink keeps full records and can use a lower
    level than the console, e.g. to keep per-search DEBUG traces on disk while
    the terminal only shows warnings.

    Args:
        level: Minimum console level (case-insensitive).
        log_file: Optional path to a log file.
        file_level: Minimum level for the file sink. Defaults to ``level``.
        rotation: When to rotate the log file.
        retention: How long to keep old log files.

    Raises:
        ValueError: If a level name is unknown.
    """
    console_level = _check_level(level)
    file_level = _check_level(file_level) if file_level is not None else console_level

    logger.remove()
    logger.add(sys.stderr, level=console_level, format=CONSOLE_FORMAT, colorize=True)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            level=file_level,
            format=FILE_FORMAT,
            rotation=rotation,
            retention=retention,
        )

    logger.debug(f"Logging configured: console={console_level}, file={file_level if log_file else None}")
