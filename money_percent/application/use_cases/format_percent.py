"""Format percent use case."""

from decimal import Context
from typing import Any, Callable, Optional

from money_percent.application.dtos.percent import FormattedPercent, PercentFormatRequest
from money_percent.domain.value_objects.percent import Percent, resolve_default_locale


class FormatPercent:
    """Use case for rendering a percentage in a locale."""

    def __init__(
        self,
        context: Optional[Context] = None,
        default_locale: Optional[str] = None,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        self._context = context
        self._default_locale = default_locale
        self._logger = logger

    def _log(self, request_id: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger(request_id, "format_percent", **kwargs)

    def execute(
        self, request: PercentFormatRequest, request_id: Optional[str] = None
    ) -> FormattedPercent:
        """
        Render the requested percentage.

        The locale is taken from the request, then the configured default,
        then the process default locale.

        Args:
            request: Format request DTO
            request_id: Optional request identifier for logging

        Returns:
            Formatted percent DTO

        Raises:
            babel.UnknownLocaleError: If the locale is not known to Babel
        """
        request_id = request_id or "unknown"

        locale = request.locale or self._default_locale or resolve_default_locale()
        adjuster = Percent(request.percent, self._context)
        formatted = adjuster.format(locale)

        self._log(request_id, rate=str(adjuster.rate), locale=locale, formatted=formatted)

        return FormattedPercent(rate=adjuster.rate, locale=locale, formatted=formatted)
