"""Dependency injection factory functions."""

from decimal import Context
from typing import Optional

from money_percent.application.use_cases.apply_percent import ApplyPercent
from money_percent.application.use_cases.format_percent import FormatPercent
from money_percent.infrastructure.config.settings import settings
from money_percent.infrastructure.logging.logger import log_event


def create_math_context() -> Context:
    """
    Factory function to create the decimal context for percent rates.

    Returns:
        Context with the configured precision and rounding
    """
    return Context(prec=settings.percent_precision, rounding=settings.percent_rounding)


def _configured_locale() -> Optional[str]:
    return settings.default_locale or None


def create_apply_percent_use_case() -> ApplyPercent:
    """
    Factory function to create ApplyPercent with dependencies.

    Returns:
        ApplyPercent instance
    """
    return ApplyPercent(
        context=create_math_context(),
        default_locale=_configured_locale(),
        logger=log_event,
    )


def create_format_percent_use_case() -> FormatPercent:
    """
    Factory function to create FormatPercent with dependencies.

    Returns:
        FormatPercent instance
    """
    return FormatPercent(
        context=create_math_context(),
        default_locale=_configured_locale(),
        logger=log_event,
    )
