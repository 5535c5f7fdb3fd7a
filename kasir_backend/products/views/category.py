# products/views/category.py

from drf_spectacular.utils import extend_schema, extend_schema_view

from products.models import Category
from products.serializers.category import CategorySerializer
from products.views.base import EnvelopeModelViewSet


@extend_schema_view(
    list=extend_schema(tags=["Category"], summary="List categories"),
    create=extend_schema(tags=["Category"], summary="Create category"),
    retrieve=extend_schema(tags=["Category"], summary="Get category"),
    update=extend_schema(tags=["Category"], summary="Update category (only sent fields)"),
    destroy=extend_schema(tags=["Category"], summary="Soft delete category"),
)
class CategoryViewSet(EnvelopeModelViewSet):
    """
    Category API

    - GET    /api/category/
    - POST   /api/category/
    - GET    /api/category/<id>/
    - PUT    /api/category/<id>/
    - DELETE /api/category/<id>/   (sets deleted_at)
    """

    label = "Category"
    label_plural = "Categories"

    queryset = Category.objects.active()
    serializer_class = CategorySerializer
