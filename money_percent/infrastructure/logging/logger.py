"""Structured logger for observability."""

import logging
from typing import Any

from money_percent.infrastructure.config.settings import settings

_logger = logging.getLogger("money_percent")
_logger.setLevel(settings.log_level)

if not _logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(
    request_id: str,
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log structured event for a request.

    Args:
        request_id: Request identifier (UUID string)
        component: Component name (e.g., 'http', 'apply_percent')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {
        "request_id": request_id,
        "component": component,
    }
    fields.update(kwargs)

    # key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    _logger.log(level, " | ".join(log_parts))


def log_adjustment(
    request_id: str,
    percent: str,
    currency: str,
    **kwargs: Any,
) -> None:
    """
    Log percentage adjustment event.

    Args:
        request_id: Request identifier
        percent: Requested percentage
        currency: Currency of the adjusted amount
        **kwargs: Additional fields
    """
    log_event(
        request_id=request_id,
        component="http",
        operation="adjust",
        percent=percent,
        currency=currency,
        **kwargs,
    )


def log_format(request_id: str, percent: str, **kwargs: Any) -> None:
    """Log percentage formatting event."""
    log_event(
        request_id=request_id,
        component="http",
        operation="format",
        percent=percent,
        **kwargs,
    )


logger = _logger
