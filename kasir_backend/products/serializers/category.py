# products/serializers/category.py

from rest_framework import serializers

from products.models import Category


class CategorySerializer(serializers.ModelSerializer):
    """
    Category serializer.

    Rules:
    - name is required and trimmed
    - id + deleted_at are read-only (deletion goes through DELETE only)
    """

    name = serializers.CharField(required=True, allow_blank=False, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True, default="")

    class Meta:
        model = Category
        fields = ["id", "name", "description", "deleted_at"]
        read_only_fields = ["id", "deleted_at"]

    def validate_name(self, value: str):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("name cannot be blank")
        return v
