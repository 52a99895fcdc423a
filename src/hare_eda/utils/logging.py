"""
Logging setup utilities.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.INFO,
    log_file: str | Path | None = None,
    format_string: str | None = None,
) -> None:
    """
    Setup logging configuration.

    Args:
        level: Logging level
        log_file: Optional file to write logs to
        format_string: Optional custom format string
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format=format_string or DEFAULT_FORMAT,
        handlers=handlers,
        force=True,
    )
    # matplotlib is chatty about font lookups at DEBUG
    logging.getLogger("matplotlib").setLevel(max(level, logging.WARNING))
