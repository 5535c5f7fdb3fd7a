# incoming/services/config.py

"""
WEBHOOK CONFIG

Immutable settings snapshot for the Tspay webhook flow. Built once at app
start (IncomingConfig.ready) from settings.TSPAY / settings.MERCHANT and
passed explicitly to the verifier, processor and forwarder.

Secrets are excluded from repr() so the object is safe to log.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_TOLERANCE_SECONDS = 300
DEFAULT_MERCHANT_DEPOSIT_CALLBACK_URL = "https://api.allpayhub.com/incoming/tspay_deposit_callback"
DEFAULT_FORWARD_TIMEOUT = 25
DEFAULT_FORWARD_WORKERS = 4


@dataclass(frozen=True)
class WebhookConfig:
    secret_deposit: str = field(default="", repr=False)
    secret_payout: str = field(default="", repr=False)
    tolerance_seconds: int = DEFAULT_TOLERANCE_SECONDS
    merchant_deposit_url: str = DEFAULT_MERCHANT_DEPOSIT_CALLBACK_URL
    forward_timeout: int = DEFAULT_FORWARD_TIMEOUT
    forward_workers: int = DEFAULT_FORWARD_WORKERS

    @classmethod
    def from_settings(cls, settings) -> "WebhookConfig":
        tspay = getattr(settings, "TSPAY", {}) or {}
        merchant = getattr(settings, "MERCHANT", {}) or {}

        # zero / missing tolerance falls back to the 5 minute default
        tolerance = int(tspay.get("WEBHOOK_TOLERANCE") or 0) or DEFAULT_TOLERANCE_SECONDS

        return cls(
            secret_deposit=(tspay.get("WEBHOOK_SECRET_DEPOSIT") or "").strip(),
            secret_payout=(tspay.get("WEBHOOK_SECRET_PAYOUT") or "").strip(),
            tolerance_seconds=tolerance,
            merchant_deposit_url=(
                (merchant.get("DEPOSIT_CALLBACK_URL") or "").strip()
                or DEFAULT_MERCHANT_DEPOSIT_CALLBACK_URL
            ),
            forward_timeout=int(merchant.get("FORWARD_TIMEOUT") or DEFAULT_FORWARD_TIMEOUT),
            forward_workers=max(1, int(merchant.get("FORWARD_WORKERS") or DEFAULT_FORWARD_WORKERS)),
        )

    def secret_for(self, *, is_deposit: bool) -> str:
        return self.secret_deposit if is_deposit else self.secret_payout
