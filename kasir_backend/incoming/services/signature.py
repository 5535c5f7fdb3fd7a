# incoming/services/signature.py

"""
TSPAY WEBHOOK SIGNATURE VERIFIER

    signature = hex(HMAC-SHA256(secret, f"{timestamp}.{raw_body}"))

Headers:
- X-Webhook-Signature: hex digest, optionally prefixed with "sha256="
- X-Webhook-Timestamp: unix seconds

Rules:
- |now - timestamp| > tolerance  -> reject (exactly `tolerance` is accepted)
- a timestamp that is not an integer skips the freshness check (logged);
  it is still part of the signed message
- comparison is constant-time
- the secret is never logged

verify() never raises; any failure is a False verdict.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import time
from typing import NamedTuple

from incoming.services.config import WebhookConfig

logger = logging.getLogger(__name__)

SIGNATURE_PREFIX = "sha256="


class VerificationContext(NamedTuple):
    signature: str
    timestamp: str
    payload: bytes
    secret: str
    tolerance_seconds: int


def _as_bytes(payload) -> bytes:
    if payload is None:
        return b""
    if isinstance(payload, str):
        return payload.encode("utf-8")
    return bytes(payload)


def compute_signature(secret: str, timestamp: str, payload) -> str:
    message = f"{timestamp}.".encode("utf-8") + _as_bytes(payload)
    return hmac.new((secret or "").encode("utf-8"), message, hashlib.sha256).hexdigest()


class SignatureVerifier:
    def __init__(self, config: WebhookConfig):
        self.config = config

    def _is_fresh(self, ctx: VerificationContext, now: int) -> bool:
        try:
            webhook_time = int(ctx.timestamp.strip())
        except (TypeError, ValueError):
            logger.warning(
                "Could not parse webhook timestamp as a number; skipping tolerance check",
                extra={"timestamp": ctx.timestamp},
            )
            return True

        if abs(now - webhook_time) > ctx.tolerance_seconds:
            logger.warning(
                "Webhook timestamp outside tolerance window",
                extra={"current": now, "webhook": webhook_time, "tolerance": ctx.tolerance_seconds},
            )
            return False
        return True

    def verify(self, payload, signature, timestamp, *, is_deposit: bool = True, now: int | None = None) -> bool:
        ctx = VerificationContext(
            signature=str(signature or ""),
            timestamp=str(timestamp or ""),
            payload=_as_bytes(payload),
            secret=self.config.secret_for(is_deposit=is_deposit),
            tolerance_seconds=self.config.tolerance_seconds,
        )

        current = int(time.time()) if now is None else int(now)
        if not self._is_fresh(ctx, current):
            return False

        provided = ctx.signature.strip()
        if provided.startswith(SIGNATURE_PREFIX):
            provided = provided[len(SIGNATURE_PREFIX):]

        if not provided:
            logger.warning("Webhook signature header missing")
            return False

        expected = compute_signature(ctx.secret, ctx.timestamp, ctx.payload)
        verified = hmac.compare_digest(expected.encode("ascii"), provided.encode("utf-8"))

        logger.info(
            "Webhook signature checked",
            extra={"verified": verified, "timestamp": ctx.timestamp, "is_deposit": is_deposit},
        )
        return verified
