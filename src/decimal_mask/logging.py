"""structlog setup for the masking core and the demo app."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import structlog


def configure_logging(level: str = "WARNING", log_file: Path | None = None) -> None:
    """Route structlog through stdlib logging as key=value lines.

    Args:
        level: Minimum level name, e.g. ``"DEBUG"``.
        log_file: Where to write log lines.  A running TUI owns the terminal,
            so without a file only stderr is available.
    """
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper(), logging.WARNING),
        filename=str(log_file) if log_file else None,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=False),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(
                key_order=["timestamp", "level", "logger", "event"]
            ),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> Any:
    return structlog.get_logger(name)
