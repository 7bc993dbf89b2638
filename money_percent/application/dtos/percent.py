"""Percent DTOs."""

from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict

from money_percent.application.dtos.base import DTO


class AdjustmentRequest(DTO):
    """Request to take a percentage of an amount."""

    percent: Decimal  # e.g. 10 for 10%
    amount: Decimal
    currency: str
    locale: Optional[str] = None  # Used to format the rate in the result

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "percent": "10",
                "amount": "2.35",
                "currency": "EUR",
                "locale": "en_US",
            }
        },
    )


class AdjustmentResult(DTO):
    """Result of a percentage adjustment."""

    amount: Decimal
    currency: str
    rate: Decimal
    formatted_rate: str
    request_id: Optional[str] = None

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "amount": "0.235",
                "currency": "EUR",
                "rate": "0.1",
                "formatted_rate": "10%",
            }
        },
    )


class PercentFormatRequest(DTO):
    """Request to render a percentage."""

    percent: Decimal
    locale: Optional[str] = None


class FormattedPercent(DTO):
    """Rendered percentage."""

    rate: Decimal
    locale: str
    formatted: str
    request_id: Optional[str] = None
