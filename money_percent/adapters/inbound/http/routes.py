"""HTTP routes."""

from decimal import DecimalException
from uuid import uuid4

from babel import UnknownLocaleError
from fastapi import APIRouter, HTTPException, status

from money_percent.application.dtos.percent import (
    AdjustmentRequest,
    AdjustmentResult,
    FormattedPercent,
    PercentFormatRequest,
)
from money_percent.infrastructure.config.settings import settings
from money_percent.infrastructure.logging.logger import log_adjustment, log_format, logger
from money_percent.infrastructure.wiring.dependencies import (
    create_apply_percent_use_case,
    create_format_percent_use_case,
)

router = APIRouter()

# Create use case instances (wired with dependencies)
_apply_percent_use_case = create_apply_percent_use_case()
_format_percent_use_case = create_format_percent_use_case()

# Errors raised by the domain for bad input
_DOMAIN_ERRORS = (ValueError, ArithmeticError, UnknownLocaleError)


def _error_detail(err: Exception) -> str:
    # Decimal signals carry only the list of raised conditions
    if isinstance(err, DecimalException) or not str(err):
        return type(err).__name__
    return str(err)


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.post("/percent/adjust", status_code=status.HTTP_200_OK, response_model=AdjustmentResult)
async def adjust(request: AdjustmentRequest) -> AdjustmentResult:
    """
    Take a percentage of a monetary amount.

    Args:
        request: Percentage, amount, currency and optional locale

    Returns:
        Adjusted amount with the applied rate
    """
    request_id = str(uuid4())

    log_adjustment(request_id, percent=str(request.percent), currency=request.currency)

    try:
        result = _apply_percent_use_case.execute(request, request_id=request_id)
    except _DOMAIN_ERRORS as err:
        logger.warning("Adjustment rejected: request_id=%s error=%s", request_id, err)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=_error_detail(err),
        ) from err

    if settings.debug_mode:
        result = result.model_copy(update={"request_id": request_id})

    return result


@router.post("/percent/format", status_code=status.HTTP_200_OK, response_model=FormattedPercent)
async def format_rate(request: PercentFormatRequest) -> FormattedPercent:
    """
    Render a percentage in a locale.

    Args:
        request: Percentage and optional locale

    Returns:
        Formatted percentage
    """
    request_id = str(uuid4())

    log_format(request_id, percent=str(request.percent), locale=request.locale)

    try:
        result = _format_percent_use_case.execute(request, request_id=request_id)
    except _DOMAIN_ERRORS as err:
        logger.warning("Format rejected: request_id=%s error=%s", request_id, err)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=_error_detail(err),
        ) from err

    if settings.debug_mode:
        result = result.model_copy(update={"request_id": request_id})

    return result
