# incoming/views.py

from __future__ import annotations

import logging

from django.apps import apps
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from backend.api import STATUS_ERROR, api_response
from incoming.serializers import DepositCallbackSerializer, WebhookAckSerializer
from incoming.services.exceptions import InvalidSignatureError, WebhookError

logger = logging.getLogger(__name__)


class DepositCallbackView(APIView):
    """
    POST /incoming/deposit_callback

    The raw body is what the provider signed, so it is read untouched from
    request.body; request.data is never used here.
    """

    permission_classes = [AllowAny]
    authentication_classes = []

    def get_processor(self):
        return apps.get_app_config("incoming").processor

    @extend_schema(
        tags=["Incoming"],
        request=DepositCallbackSerializer,
        parameters=[
            OpenApiParameter(
                name="X-Webhook-Signature",
                type=str,
                location=OpenApiParameter.HEADER,
                required=True,
                description='hex HMAC-SHA256 of "<timestamp>.<body>", optional "sha256=" prefix',
            ),
            OpenApiParameter(
                name="X-Webhook-Timestamp",
                type=str,
                location=OpenApiParameter.HEADER,
                required=True,
                description="Unix seconds",
            ),
        ],
        responses={
            200: WebhookAckSerializer,
            401: OpenApiResponse(description="invalid signature"),
            500: OpenApiResponse(description="Malformed payload or relay failure"),
        },
        description="Tspay deposit callback: verify, then relay to the merchant API.",
    )
    def post(self, request, *args, **kwargs):
        raw_body = request.body or b""
        signature = request.headers.get("X-Webhook-Signature", "")
        timestamp = request.headers.get("X-Webhook-Timestamp", "")

        logger.info(
            "Deposit callback received",
            extra={"timestamp": timestamp, "body_size": len(raw_body)},
        )

        try:
            self.get_processor().process_deposit_callback(raw_body, signature, timestamp)
        except InvalidSignatureError as exc:
            logger.warning("Deposit callback rejected: invalid signature")
            return api_response(
                message=str(exc),
                status_text=STATUS_ERROR,
                http_status=status.HTTP_401_UNAUTHORIZED,
            )
        except WebhookError as exc:
            logger.error("Deposit callback failed", extra={"error": str(exc)})
            return api_response(
                message=str(exc),
                status_text=STATUS_ERROR,
                http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return api_response(message="Deposit Callback received")
