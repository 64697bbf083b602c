"""
Logging setup using Loguru.

The library itself only emits records through ``loguru.logger``; sinks are
configured by applications (the ``kbd-list`` CLI) via ``setup_loguru``.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_loguru(
    log_file: Optional[Path],
    level: str = "INFO",
    max_file_size_mb: int = 10,
    backup_count: int = 5,
) -> None:
    """
    Configure loguru for file-only logging (the terminal UI owns the screen).

    Args:
        log_file: Path to log file, or None to log to stderr instead
        level: Minimum level (DEBUG, INFO, WARNING, ERROR)
        max_file_size_mb: Rotate the file after this size
        backup_count: Number of rotated files to keep
    """
    # Remove default handler
    logger.remove()

    if log_file is None:
        logger.add(sys.stderr, level=level)
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        rotation=f"{max_file_size_mb} MB",
        retention=backup_count,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,  # Synchronous writes
    )

    logger.info(f"Loguru initialized: {log_file} (level={level})")
