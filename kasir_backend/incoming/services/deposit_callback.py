# incoming/services/deposit_callback.py

"""
DEPOSIT CALLBACK PROCESSOR

1. verify the signature (deposit secret)      -> InvalidSignatureError
2. decode the JSON object into DepositCallback -> MalformedPayloadError
3. log transaction_id, hand the relay to the forwarder, return at once

Callbacks are not stored; the merchant relay is best-effort.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from typing import Any

from incoming.serializers import DepositCallbackSerializer
from incoming.services.config import WebhookConfig
from incoming.services.exceptions import InvalidSignatureError, MalformedPayloadError
from incoming.services.merchant import MerchantForwarder
from incoming.services.signature import SignatureVerifier

logger = logging.getLogger(__name__)


@dataclass
class DepositCallback:
    type: str = ""
    transaction_id: str = ""
    reference: str = ""
    amount: float = 0.0
    fee: float = 0.0
    net_amount: float = 0.0
    currency: str = ""
    chain: Any = None
    status: str = ""
    wallet_address: Any = None
    kind: str = ""
    method: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


_TEXT_FIELDS = ("type", "transaction_id", "reference", "currency", "status", "kind", "method")
_AMOUNT_FIELDS = ("amount", "fee", "net_amount")


def decode_deposit_callback(body) -> DepositCallback:
    if isinstance(body, (bytes, bytearray)):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedPayloadError(f"failed to decode body: {exc}") from exc

    try:
        raw = json.loads(body or "")
    except ValueError as exc:
        raise MalformedPayloadError(f"failed to unmarshal JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise MalformedPayloadError("failed to unmarshal JSON: expected an object")

    serializer = DepositCallbackSerializer(data=raw)
    if not serializer.is_valid():
        raise MalformedPayloadError(f"failed to unmarshal JSON: {dict(serializer.errors)}")

    data = dict(serializer.validated_data)
    for name in _TEXT_FIELDS:
        data[name] = data.get(name) or ""
    for name in _AMOUNT_FIELDS:
        data[name] = float(data.get(name) or 0.0)

    return DepositCallback(**data)


class DepositCallbackProcessor:
    def __init__(
        self,
        config: WebhookConfig,
        *,
        verifier: SignatureVerifier | None = None,
        forwarder: MerchantForwarder | None = None,
    ):
        self.config = config
        self.verifier = verifier or SignatureVerifier(config)
        self.forwarder = forwarder or MerchantForwarder(config)

    def process_deposit_callback(self, body: bytes, signature: str, timestamp: str) -> DepositCallback:
        if not self.verifier.verify(body, signature, timestamp, is_deposit=True):
            raise InvalidSignatureError()

        callback = decode_deposit_callback(body)

        logger.info(
            "Processing deposit callback",
            extra={"transaction_id": callback.transaction_id},
        )
        self.forwarder.forward(callback.to_dict())
        return callback
