"""Map exceptions to the API error body: status, reason, message, timestamp."""

import logging
from http import HTTPStatus

from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from compilations.domain.errors import DomainError, ErrorCode

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_STATUS_BY_CODE = {
    ErrorCode.COMPILATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_COMPILATION_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PAGINATION: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PINNED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_TITLE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNKNOWN_EVENTS: status.HTTP_409_CONFLICT,
}

_REASONS = {
    status.HTTP_400_BAD_REQUEST: "Incorrectly made request.",
    status.HTTP_404_NOT_FOUND: "The required object was not found.",
    status.HTTP_409_CONFLICT: "Integrity constraint has been violated.",
}


def api_error(http_status: int, message: str) -> dict:
    return {
        "status": HTTPStatus(http_status).name,
        "reason": _REASONS.get(http_status, HTTPStatus(http_status).phrase),
        "message": message,
        "timestamp": timezone.localtime().strftime(TIMESTAMP_FORMAT),
    }


def _describe(detail) -> str:
    if isinstance(detail, dict) and set(detail) == {"detail"}:
        return str(detail["detail"])
    if isinstance(detail, dict):
        return "; ".join(
            f"Field: {field}. Error: {_describe(errors)}" for field, errors in detail.items()
        )
    if isinstance(detail, list):
        return " ".join(_describe(item) for item in detail)
    return str(detail)


def api_exception_handler(exc, context):
    """DRF exception handler that never exposes internal error details."""
    if isinstance(exc, DomainError):
        http_status = _STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST)
        logger.info("Request failed with %s: %s", exc.code.value, exc.message)
        return Response(api_error(http_status, exc.message), status=http_status)

    response = exception_handler(exc, context)
    if response is not None:
        response.data = api_error(response.status_code, _describe(response.data))
    return response
