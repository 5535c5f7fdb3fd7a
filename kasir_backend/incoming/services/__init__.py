from .config import WebhookConfig
from .deposit_callback import DepositCallback, DepositCallbackProcessor
from .exceptions import (
    ForwardError,
    InvalidSignatureError,
    MalformedPayloadError,
    WebhookError,
)
from .merchant import MerchantForwarder, call_merchant
from .signature import SignatureVerifier, compute_signature

__all__ = [
    "WebhookConfig",
    "DepositCallback",
    "DepositCallbackProcessor",
    "SignatureVerifier",
    "compute_signature",
    "MerchantForwarder",
    "call_merchant",
    "WebhookError",
    "InvalidSignatureError",
    "MalformedPayloadError",
    "ForwardError",
]
