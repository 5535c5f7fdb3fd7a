# products/views/product.py

"""
PRODUCT VIEWSET

Purpose:
- Cashier product management endpoints (CRUD).
- Soft-deleted products are hidden everywhere and cannot be sold.

Stock here is a plain column; the checkout engine is the only writer that
decrements it.
"""

from drf_spectacular.utils import OpenApiParameter, extend_schema, extend_schema_view

from products.filters import ProductFilter
from products.models import Product
from products.serializers.product import ProductSerializer
from products.views.base import EnvelopeModelViewSet


@extend_schema_view(
    list=extend_schema(
        tags=["Product"],
        summary="List products",
        parameters=[
            OpenApiParameter(
                name="name",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Case-insensitive name search.",
            ),
        ],
    ),
    create=extend_schema(tags=["Product"], summary="Create product"),
    retrieve=extend_schema(tags=["Product"], summary="Get product"),
    update=extend_schema(tags=["Product"], summary="Update product (only sent fields)"),
    destroy=extend_schema(tags=["Product"], summary="Soft delete product"),
)
class ProductViewSet(EnvelopeModelViewSet):
    label = "Product"
    label_plural = "Products"

    serializer_class = ProductSerializer
    filterset_class = ProductFilter

    def get_queryset(self):
        return Product.objects.active().select_related("category")
