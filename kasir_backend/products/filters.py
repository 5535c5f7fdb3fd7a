# products/filters.py

import django_filters

from products.models import Product


class ProductFilter(django_filters.FilterSet):
    """
    GET /api/product/?name=<text>   (case-insensitive contains)
    """

    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    category_id = django_filters.NumberFilter(field_name="category_id")

    class Meta:
        model = Product
        fields = ["name", "category_id"]
