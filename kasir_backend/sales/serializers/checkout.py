# sales/serializers/checkout.py

from rest_framework import serializers


class CheckoutItemSerializer(serializers.Serializer):
    product_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=1, help_text="Whole units, at least 1")


class CheckoutRequestSerializer(serializers.Serializer):
    """
    Explicit checkout input serializer.

    Documents ONLY what the client is allowed to send:

        {"items": [{"product_id": 1, "quantity": 2}, ...]}

    Prices and totals are never accepted from the client.
    """

    items = CheckoutItemSerializer(many=True, allow_empty=False)
