"""Rich logging utilities."""

from __future__ import annotations

import logging
from typing import Optional

from rich.logging import RichHandler


def setup_logging(level: str | int = "INFO") -> None:
    """Configure root logger with Rich handler."""

    if isinstance(level, str):
        numeric_level = logging.getLevelName(level.upper())
    else:
        numeric_level = level
    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=False)],
    )
    # basicConfig is a no-op once handlers exist; the level still has to follow the config
    logging.getLogger().setLevel(numeric_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a named logger; handlers are installed by setup_logging."""

    return logging.getLogger(name)


__all__ = ["setup_logging", "get_logger"]
