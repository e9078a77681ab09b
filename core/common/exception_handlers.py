"""
Custom exception handler for Palaver application.

Ensures every error leaving the REST layer has the same shape:
``{"error": <code>, "message": <text>, "details": <optional>}``.
"""

import logging
import traceback
from typing import Any, Optional, Union

from django.conf import settings
from django.core.exceptions import PermissionDenied, ValidationError as DjangoValidationError
from django.db.utils import DatabaseError, InterfaceError, OperationalError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import (
    AuthenticationFailed,
    MethodNotAllowed,
    NotAuthenticated,
    NotFound,
    ParseError,
    PermissionDenied as DRFPermissionDenied,
    Throttled,
    ValidationError as DRFValidationError,
)
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.common.error_codes import CommonAPIErrorCodes
from core.common.responses import error_response, validation_error_response

logger = logging.getLogger("palaver")


def custom_exception_handler(exc: Exception, context: dict[str, Any]) -> Optional[Response]:
    """
    Custom exception handler for REST framework that formats the response consistently.

    1. Let REST framework handle its own exceptions (including all Palaver exceptions)
    2. Translate Django exceptions that DRF leaves alone
    3. Log unhandled exceptions with full traceback

    Args:
        exc: The exception that was raised
        context: The context of the exception

    Returns:
        A formatted Response object
    """
    request = context.get("request")
    request_info = ""
    if request:
        request_info = f"{request.method} {request.path}"

    response = exception_handler(exc, context)

    if response is not None:
        error_code = _get_error_code(exc)
        _log_exception(exc, error_code, request_info)

        formatted = error_response(
            error_code,
            _get_error_message(exc, response.data),
            _get_error_details(response.data),
            response.status_code,
        )
        response.data = formatted.data
        return response

    if isinstance(exc, DjangoValidationError):
        logger.info(f"Validation error: {request_info}")
        return validation_error_response(
            exc.message_dict if hasattr(exc, "message_dict") else exc.messages
        )

    if isinstance(exc, (OperationalError, InterfaceError)):
        logger.error(f"Database unavailable: {request_info}", exc_info=exc)
        return error_response(
            CommonAPIErrorCodes.SERVICE_UNAVAILABLE,
            "Service is temporarily unavailable.",
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    if isinstance(exc, DatabaseError):
        logger.error(f"Database error: {request_info}", exc_info=exc)
        return error_response(
            CommonAPIErrorCodes.DATABASE_ERROR,
            "A database error occurred.",
            str(exc) if settings.DEBUG else "Please contact support.",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    logger.error(
        f"Unhandled exception in {request_info}: {exc.__class__.__name__}",
        exc_info=exc,
    )

    # In production, don't expose internal error details
    error_details = "Please contact support."
    if settings.DEBUG:
        error_details = {
            "exception": str(exc),
            "traceback": traceback.format_exc().split("\n"),
        }

    return error_response(
        CommonAPIErrorCodes.INTERNAL_SERVER_ERROR,
        "An unexpected error occurred.",
        error_details,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _get_error_code(exc: Exception) -> str:
    if isinstance(exc, (AuthenticationFailed, NotAuthenticated)):
        return CommonAPIErrorCodes.AUTHENTICATION_ERROR
    elif isinstance(exc, DRFPermissionDenied):
        return CommonAPIErrorCodes.AUTHORIZATION_ERROR
    elif isinstance(exc, PermissionDenied):
        return CommonAPIErrorCodes.PERMISSION_DENIED
    elif isinstance(exc, (NotFound, Http404)):
        return CommonAPIErrorCodes.RESOURCE_NOT_FOUND
    elif isinstance(exc, (ParseError, DRFValidationError)):
        return CommonAPIErrorCodes.VALIDATION_ERROR
    elif isinstance(exc, MethodNotAllowed):
        return CommonAPIErrorCodes.OPERATION_NOT_ALLOWED
    elif isinstance(exc, Throttled):
        return CommonAPIErrorCodes.RATE_LIMIT_EXCEEDED
    elif getattr(exc, "default_code", None):
        return exc.default_code
    return CommonAPIErrorCodes.INTERNAL_SERVER_ERROR


def _get_error_message(exc: Exception, data: Any) -> str:
    if hasattr(exc, "detail") and isinstance(exc.detail, str):
        return str(exc.detail)
    elif isinstance(data, dict) and isinstance(data.get("detail"), str):
        return data["detail"]
    elif isinstance(exc, DRFValidationError):
        return "Validation failed."
    return str(exc)


def _get_error_details(data: Any) -> Union[dict[str, Any], None]:
    if isinstance(data, dict):
        # A lone string detail is already the message
        if isinstance(data.get("detail"), str):
            data_copy = {k: v for k, v in data.items() if k != "detail"}
            return data_copy or None
        return data
    elif isinstance(data, list):
        return {"errors": data}
    return None


def _log_exception(exc: Exception, error_code: str, request_info: str) -> None:
    """
    Log an exception with a severity chosen from its error code.
    """
    if error_code in [
        CommonAPIErrorCodes.INTERNAL_SERVER_ERROR,
        CommonAPIErrorCodes.DATABASE_ERROR,
        CommonAPIErrorCodes.SERVICE_UNAVAILABLE,
    ]:
        logger.error(f"{error_code} in {request_info}: {exc.__class__.__name__}", exc_info=exc)
    elif error_code in [
        CommonAPIErrorCodes.AUTHENTICATION_ERROR,
        CommonAPIErrorCodes.AUTHORIZATION_ERROR,
        CommonAPIErrorCodes.PERMISSION_DENIED,
    ]:
        logger.warning(f"{error_code} in {request_info}: {exc}")
    else:
        logger.info(f"{error_code} in {request_info}: {exc}")
