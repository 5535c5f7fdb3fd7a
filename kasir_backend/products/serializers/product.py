# products/serializers/product.py

"""
PRODUCT SERIALIZER

Purpose:
- Read/write shape for the cashier product endpoints.
- category is written as category_id and must point at a live category.
- price and stock are whole numbers (minor currency unit / units on hand).
"""

from rest_framework import serializers

from products.models import Category, Product


class ProductSerializer(serializers.ModelSerializer):
    category_id = serializers.PrimaryKeyRelatedField(
        source="category",
        queryset=Category.objects.active(),
        required=False,
        allow_null=True,
    )
    category_name = serializers.CharField(source="category.name", read_only=True, allow_null=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "stock",
            "category_id",
            "category_name",
            "deleted_at",
        ]
        read_only_fields = ["id", "category_name", "deleted_at"]

    def validate_name(self, value):
        value = (value or "").strip()
        if not value:
            raise serializers.ValidationError("name is required")
        return value

    def validate_price(self, value):
        if value is None or value < 0:
            raise serializers.ValidationError("price must be non-negative")
        return value

    def validate_stock(self, value):
        if value is None or value < 0:
            raise serializers.ValidationError("stock must be non-negative")
        return value
