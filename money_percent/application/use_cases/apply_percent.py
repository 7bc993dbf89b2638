"""Apply percent use case."""

from decimal import Context
from typing import Any, Callable, Optional

from money_percent.application.dtos.percent import AdjustmentRequest, AdjustmentResult
from money_percent.domain.value_objects.money import Money
from money_percent.domain.value_objects.percent import Percent


class ApplyPercent:
    """Use case for taking a percentage of a monetary amount."""

    def __init__(
        self,
        context: Optional[Context] = None,
        default_locale: Optional[str] = None,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize apply percent use case.

        Args:
            context: Decimal context for percent rates (domain default if None)
            default_locale: Locale for the formatted rate when the request has none
            logger: Optional logger function (request_id, component, **kwargs)
        """
        self._context = context
        self._default_locale = default_locale
        self._logger = logger

    def _log(self, request_id: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger(request_id, "apply_percent", **kwargs)

    def execute(self, request: AdjustmentRequest, request_id: Optional[str] = None) -> AdjustmentResult:
        """
        Take the requested percentage of the amount.

        Args:
            request: Adjustment request DTO
            request_id: Optional request identifier for logging

        Returns:
            Adjustment result DTO

        Raises:
            ValueError: If the currency is unknown
            ArithmeticError: If decimal arithmetic fails
        """
        request_id = request_id or "unknown"

        amount = Money(request.amount, request.currency)
        adjuster = Percent(request.percent, self._context)
        adjusted = adjuster.adjust(amount)

        locale = request.locale or self._default_locale
        formatted_rate = adjuster.format(locale)

        self._log(
            request_id,
            percent=str(adjuster.value),
            rate=str(adjuster.rate),
            currency=adjusted.currency,
            amount_in=str(amount.amount),
            amount_out=str(adjusted.amount),
        )

        return AdjustmentResult(
            amount=adjusted.amount,
            currency=adjusted.currency,
            rate=adjuster.rate,
            formatted_rate=formatted_rate,
        )
