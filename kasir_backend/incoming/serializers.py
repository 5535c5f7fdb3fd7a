# incoming/serializers.py

from rest_framework import serializers


class StrictTextField(serializers.CharField):
    """JSON string or null only; numbers and booleans are not coerced."""

    default_error_messages = {"invalid": "Expected a string."}

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class StrictAmountField(serializers.FloatField):
    """JSON number or null only; numeric strings and booleans are rejected."""

    default_error_messages = {"invalid": "Expected a number."}

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (int, float)):
            self.fail("invalid")
        return super().to_internal_value(data)


def _text():
    return StrictTextField(
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
        default="",
    )


def _amount():
    return StrictAmountField(required=False, allow_null=True, default=0.0)


class DepositCallbackSerializer(serializers.Serializer):
    """
    Tspay deposit callback body. Every field is optional; missing ones
    decode to their zero value. Unknown keys are ignored. Present fields
    must carry their JSON type: text fields are strings, amounts are numbers.
    """

    type = _text()
    transaction_id = _text()
    reference = _text()
    amount = _amount()
    fee = _amount()
    net_amount = _amount()
    currency = _text()
    chain = serializers.JSONField(required=False, allow_null=True, default=None)
    status = _text()
    wallet_address = serializers.JSONField(required=False, allow_null=True, default=None)
    kind = _text()
    method = _text()


class WebhookAckSerializer(serializers.Serializer):
    status = serializers.CharField()
    message = serializers.CharField()
