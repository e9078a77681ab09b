"""
Response helpers for Palaver.

Every error body is ``{"error": <code>, "message": <text>, "details": <optional>}``;
the exception handler builds them through ``error_response``.
"""

from typing import Any, Optional

from rest_framework import status
from rest_framework.response import Response

from core.common.error_codes import CommonAPIErrorCodes


def error_response(
    error_code: str,
    message: str,
    details: Optional[Any] = None,
    status_code: int = status.HTTP_400_BAD_REQUEST,
) -> Response:
    data = {"error": error_code, "message": message}
    if details is not None:
        data["details"] = details
    return Response(data, status=status_code)


def validation_error_response(details: Any, message: str = "Validation failed.") -> Response:
    return error_response(CommonAPIErrorCodes.VALIDATION_ERROR, message, details)


def created_response(data: dict[str, Any]) -> Response:
    return Response(data, status=status.HTTP_201_CREATED)
