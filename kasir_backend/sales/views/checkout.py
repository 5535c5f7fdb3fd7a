# sales/views/checkout.py

import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.views import APIView

from backend.api import api_response, failed_response
from sales.serializers import CheckoutRequestSerializer, TransactionSerializer
from sales.services.checkout_engine import checkout
from sales.services.exceptions import CheckoutError, StockError

logger = logging.getLogger(__name__)


class CheckoutView(APIView):
    """
    CASHIER CHECKOUT ENDPOINT

    POST /api/checkout/
        {"items": [{"product_id": 1, "quantity": 2}]}

    GUARANTEES:
    - Atomic checkout (stock + transaction + details, or nothing)
    - Stock never goes negative
    - Immutable Transaction & TransactionDetail rows
    """

    @extend_schema(
        tags=["Transaction"],
        request=CheckoutRequestSerializer,
        responses={
            200: TransactionSerializer,
            400: OpenApiResponse(description="Invalid request body"),
            500: OpenApiResponse(description="Product not found, insufficient stock or database failure"),
        },
        description="Create a new transaction by processing checkout items.",
    )
    def post(self, request):
        serializer = CheckoutRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            txn = checkout(items=serializer.validated_data["items"])
        except (CheckoutError, StockError) as exc:
            logger.warning("Checkout rejected", extra={"error": str(exc)})
            return failed_response(
                message=f"Failed to process checkout: {exc}",
                http_status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return api_response(
            message="Transaction created successfully",
            data=TransactionSerializer(txn).data,
        )
