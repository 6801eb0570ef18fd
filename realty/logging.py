"""Structured logging configuration for realty."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from realty.config import RealtyConfig
    from realty.models import Property

PACKAGE_LOGGER = "realty"


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    package_level: str | None = None,
) -> None:
    """Configure logging for realty.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    package_level : str | None
        Separate level for the ``realty`` loggers, e.g. DEBUG to trace
        registry activity while third-party output stays at ``level``.
        Defaults to ``level``.
    """
    log_level = _resolve_level(level)
    realty_level = _resolve_level(package_level) if package_level else log_level

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(min(log_level, realty_level))
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logging.getLogger(PACKAGE_LOGGER).setLevel(realty_level)

    # Faker logs locale lookups at DEBUG
    logging.getLogger("faker").setLevel(logging.WARNING)


def setup_logging_from_config(config: RealtyConfig, level: str | None = None) -> None:
    """Configure logging from a ``RealtyConfig``.

    ``level`` overrides ``config.log_level`` (the CLI passes ``--log-level``).
    """
    setup_logging(
        level=level or config.log_level,
        format_type=config.log_format,
        package_level=config.package_log_level,
    )


def _resolve_level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def listing_context(prop: Property) -> dict[str, Any]:
    """Build the ``extra`` argument for a log call about one listing.

    ``JsonFormatter`` merges these keys into the JSON line, so log
    aggregators can filter by listing id and kind.
    """
    return {"extra": {"listing_id": prop.id, "listing_kind": prop.kind}}


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra"):
            log_data.update(record.extra)

        return json.dumps(log_data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Parameters
    ----------
    name : str
        Logger name (usually __name__).

    Returns
    -------
    logging.Logger
        Configured logger.
    """
    return logging.getLogger(name)
