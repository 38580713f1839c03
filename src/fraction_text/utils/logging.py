"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Truncation of oversized input values echoed into log events
- Context binding support
- Dual output (stdout + optional file logging)

Configuration is loaded from fraction_text.config.settings:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- LOG_TO_FILE: Enable file logging (1, true, yes). Default: disabled
- LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from fraction_text.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("fraction.parse_failed", text="1/", reason="InvalidFraction")
"""

import logging
import os
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, MutableMapping

import structlog
from pydantic import ValidationError
from structlog.types import EventDict, Processor

from fraction_text.config import get_settings

# Input text can be arbitrarily long; keep log lines bounded
MAX_LOGGED_VALUE_LENGTH = 200
TRUNCATION_MARKER = "..."


def truncate_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Shorten string values longer than ``MAX_LOGGED_VALUE_LENGTH``.

    Args:
        data: Dictionary of log fields

    Returns:
        New dictionary with long strings cut and suffixed with ``...``

    Example:
        >>> truncate_for_logging({"text": "1" * 500})["text"][-3:]
        '...'
    """
    truncated: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, str) and len(value) > MAX_LOGGED_VALUE_LENGTH:
            truncated[key] = value[:MAX_LOGGED_VALUE_LENGTH] + TRUNCATION_MARKER
        elif isinstance(value, dict):
            truncated[key] = truncate_for_logging(value)
        else:
            truncated[key] = value
    return truncated


def truncation_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor applying ``truncate_for_logging`` to every event."""
    return truncate_for_logging(dict(event_dict))


def _get_log_level() -> int:
    """Get log level from settings, falling back to the LOG_LEVEL variable."""
    try:
        level_name = get_settings().LOG_LEVEL.upper()
    except ValidationError:
        # Invalid FRACTEXT_* values must not prevent logging from starting
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _should_log_to_file() -> bool:
    """Check if file logging is enabled via environment."""
    log_to_file = os.getenv("LOG_TO_FILE", "").lower()
    return log_to_file in ("1", "true", "yes")


def _get_log_file_path() -> Path:
    """Get the log file path with date-based naming."""
    log_dir = Path(os.getenv("LOG_FILE_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: fraction-text-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"fraction-text-{date_str}.log"


def _configure_structlog() -> None:
    """Configure structlog with JSON rendering over stdlib logging.

    Sets up:
    - ISO-8601 timestamps
    - Logger name
    - Log level
    - Truncation processor
    - JSON renderer
    - Dual output (stdout + optional file)
    """
    level = _get_log_level()
    logging.basicConfig(format="%(message)s", level=level, handlers=[])

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(level)
    logging.root.addHandler(stdout_handler)

    if _should_log_to_file():
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path()),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        logging.root.addHandler(file_handler)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        truncation_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(ensure_ascii=False),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog on module import
_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger configured with JSON rendering
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(locale="de_DE", style="built_up")
        >>> logger.info("fraction.batch_formatted", count=12)
    """
    return structlog.get_logger().bind(**kwargs)


__all__ = ["bind_context", "get_logger", "truncate_for_logging"]
