"""Logging configuration using Loguru.

Console output always; in production, a rotating relay log plus an
error-only log. Utterance text is only ever logged through
``preview_text`` at DEBUG level.
"""

import sys
from pathlib import Path
from typing import NamedTuple

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} | {message}"


class FileSink(NamedTuple):
    """A rotating log file."""

    stem: str
    min_level: str | None  # None follows the configured level
    rotation: str
    retention: str


FILE_SINKS = (
    FileSink("relay", None, "100 MB", "30 days"),
    # Errors are kept longer for call post-mortems
    FileSink("errors", "ERROR", "50 MB", "90 days"),
)


def setup_logging(
    level: str = "INFO",
    log_dir: str = "logs",
    enable_file: bool = True,
) -> None:
    """Configure application logging.

    Replaces any previously installed sinks, so it is safe to call once per
    app startup.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        log_dir: Directory for log files
        enable_file: Whether to write rotating log files
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=level,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    if enable_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        for sink in FILE_SINKS:
            logger.add(
                log_path / f"{sink.stem}_{{time:YYYY-MM-DD}}.log",
                format=FILE_FORMAT,
                level=sink.min_level or level,
                rotation=sink.rotation,
                retention=sink.retention,
                compression="gz",
                backtrace=True,
                diagnose=False,
            )

    logger.info(
        f"Logging initialized at {level} level"
        f"{f', files in {log_dir}/' if enable_file else ''}"
    )


def get_logger(name: str) -> "logger":
    """Get a logger bound to a module name.

    Usage:
        logger = get_logger(__name__)
    """
    return logger.bind(name=name)


def preview_text(text: str | None, limit: int = 80) -> str:
    """Shorten an utterance for DEBUG logging.

    CRITICAL: Never log a full transcript. Use this at DEBUG level only.
    """
    if not text:
        return ""
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... ({len(text)} chars)"
