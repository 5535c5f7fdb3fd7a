# sales/serializers/transaction.py

from rest_framework import serializers

from sales.models import Transaction, TransactionDetail

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class TransactionDetailSerializer(serializers.ModelSerializer):
    """
    Sold line (read-only). product_name / subtotal are checkout-time snapshots.
    """

    class Meta:
        model = TransactionDetail
        fields = [
            "id",
            "transaction_id",
            "product_id",
            "product_name",
            "quantity",
            "subtotal",
        ]
        read_only_fields = fields


class TransactionSerializer(serializers.ModelSerializer):
    """
    Receipt shape returned by POST /api/checkout/.
    Timestamps are rendered in the configured TIME_ZONE.
    """

    created_at = serializers.DateTimeField(format=TIMESTAMP_FORMAT, read_only=True)
    deleted_at = serializers.DateTimeField(format=TIMESTAMP_FORMAT, read_only=True, allow_null=True)
    details = TransactionDetailSerializer(many=True, read_only=True)

    class Meta:
        model = Transaction
        fields = [
            "id",
            "total_amount",
            "created_at",
            "deleted_at",
            "details",
        ]
        read_only_fields = fields
