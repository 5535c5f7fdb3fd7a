# incoming/apps.py

"""
INCOMING APP CONFIG

Provider webhooks (Tspay):
- POST /incoming/deposit_callback   verify -> decode -> relay to merchant

The webhook configuration is read from settings exactly once, here, and
handed to the processor. Nothing under incoming.services reads settings.
"""

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class IncomingConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "incoming"
    verbose_name = "Incoming Provider Webhooks"

    webhook_config = None
    processor = None

    def ready(self):
        from django.conf import settings

        from incoming.services.config import WebhookConfig
        from incoming.services.deposit_callback import DepositCallbackProcessor

        self.webhook_config = WebhookConfig.from_settings(settings)
        self.processor = DepositCallbackProcessor(self.webhook_config)

        if not self.webhook_config.secret_deposit:
            logger.warning("TSPAY_WEBHOOK_SECRET_DEPOSIT is empty; deposit callbacks are signed with an empty key")
