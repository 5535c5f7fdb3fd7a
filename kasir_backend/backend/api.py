# backend/api.py
"""
PATH: backend/api.py

API RESPONSE ENVELOPE

Every endpoint answers with the same JSON shape:

    {"status": "success" | "failed" | "error", "message": "...", "data": ...}

`data` is omitted when there is nothing to return.

The DRF exception handler below renders framework-level errors (bad JSON,
serializer validation, 404, 405) in that envelope too, so clients never
have to handle two error formats.
"""

from __future__ import annotations

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

STATUS_SUCCESS = "success"
STATUS_FAILED = "failed"
STATUS_ERROR = "error"


def api_response(*, message: str, data=None, status_text: str = STATUS_SUCCESS, http_status: int = status.HTTP_200_OK):
    body = {"status": status_text, "message": message}
    if data is not None:
        body["data"] = data
    return Response(body, status=http_status)


def failed_response(*, message: str, http_status: int):
    return api_response(message=message, status_text=STATUS_FAILED, http_status=http_status)


def exception_handler(exc, context):
    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, (exceptions.ParseError, exceptions.ValidationError)):
        logger.info("Rejected request body", extra={"errors": response.data})
        return api_response(
            message="Invalid request body",
            data={"errors": response.data},
            status_text=STATUS_FAILED,
            http_status=status.HTTP_400_BAD_REQUEST,
        )

    detail = getattr(exc, "detail", None) or str(exc)
    response.data = {"status": STATUS_FAILED, "message": str(detail)}
    return response
