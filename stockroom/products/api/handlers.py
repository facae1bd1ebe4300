import logging

from rest_framework import status
from rest_framework.views import exception_handler, set_rollback

from stockroom.core.api import error_response
from stockroom.products.constants import Messages
from stockroom.products.exceptions import (
    InsufficientStockError,
    InvalidProductDataError,
    ProductNotFoundError,
    ProductServiceError,
    ProductStoreError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = (
    (InvalidProductDataError, status.HTTP_400_BAD_REQUEST),
    (InsufficientStockError, status.HTTP_400_BAD_REQUEST),
    (ProductNotFoundError, status.HTTP_404_NOT_FOUND),
    (ProductStoreError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def api_exception_handler(exc, context):
    """
    Project-wide DRF exception handler.

    Product errors map onto their HTTP status; DRF's own errors keep their
    status with the body reshaped to ``{"error": ...}``; anything else is
    logged and reported as a bare 500.
    """
    if isinstance(exc, ProductServiceError):
        set_rollback()
        return error_response(exc.message, _status_for(exc))

    response = exception_handler(exc, context)
    if response is not None:
        response.data = {"error": _detail_message(response.data)}
        return response

    set_rollback()
    view = context.get("view")
    logger.error("Unhandled API exception",
                 extra={"view": view.__class__.__name__ if view else None},
                 exc_info=exc)
    return error_response(Messages.INTERNAL_ERROR, status.HTTP_500_INTERNAL_SERVER_ERROR)


def _status_for(exc: ProductServiceError) -> int:
    for error_class, status_code in ERROR_STATUS:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _detail_message(data) -> str:
    if isinstance(data, dict) and "detail" in data:
        return str(data["detail"])
    return str(data)
