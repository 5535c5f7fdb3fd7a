# incoming/tests/test_views.py

import json
import time
from unittest import mock

from django.apps import apps
from django.test import TestCase
from rest_framework.test import APIClient

from incoming.services.config import WebhookConfig
from incoming.services.deposit_callback import DepositCallbackProcessor
from incoming.services.merchant import MerchantForwarder
from incoming.services.signature import compute_signature

SECRET = "whsec_view_test"


class DepositCallbackViewTests(TestCase):
    """
    POST /incoming/deposit_callback

    GUARANTEES:
    - 200 {"status": "success", "message": "Deposit Callback received"} on a valid callback
    - 401 {"status": "error", "message": "invalid signature"} otherwise
    - 500 with the error message for a signed but malformed body
    - the merchant relay is scheduled, never awaited
    """

    def setUp(self):
        self.client = APIClient()
        self.config = WebhookConfig(secret_deposit=SECRET, tolerance_seconds=300)
        self.executor = mock.Mock()
        processor = DepositCallbackProcessor(
            self.config,
            forwarder=MerchantForwarder(self.config, executor=self.executor),
        )
        patcher = mock.patch.object(apps.get_app_config("incoming"), "processor", processor)
        patcher.start()
        self.addCleanup(patcher.stop)

    def _post(self, body: bytes, *, signature=None, timestamp=None, path="/incoming/deposit_callback"):
        ts = str(int(time.time())) if timestamp is None else timestamp
        sig = compute_signature(SECRET, ts, body) if signature is None else signature
        return self.client.generic(
            "POST",
            path,
            data=body,
            content_type="application/json",
            HTTP_X_WEBHOOK_SIGNATURE=sig,
            HTTP_X_WEBHOOK_TIMESTAMP=ts,
        )

    def test_valid_callback(self):
        body = json.dumps({"transaction_id": "TX-100", "amount": 25000}).encode()

        res = self._post(body)

        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json(), {"status": "success", "message": "Deposit Callback received"})
        self.executor.submit.assert_called_once()
        payload = self.executor.submit.call_args.args[2]
        self.assertEqual(payload["transaction_id"], "TX-100")

    def test_trailing_slash_is_accepted(self):
        body = b'{"transaction_id": "TX-101"}'

        res = self._post(body, path="/incoming/deposit_callback/")

        self.assertEqual(res.status_code, 200)

    def test_signature_over_exact_raw_bytes(self):
        # whitespace differences matter: the provider signs the bytes it sent
        body = b'{ "transaction_id" : "TX-102" }'

        res = self._post(body)

        self.assertEqual(res.status_code, 200)

    def test_invalid_signature(self):
        res = self._post(b'{"transaction_id": "TX-103"}', signature="sha256=" + "0" * 64)

        self.assertEqual(res.status_code, 401)
        self.assertEqual(res.json(), {"status": "error", "message": "invalid signature"})
        self.executor.submit.assert_not_called()

    def test_missing_headers(self):
        res = self.client.post(
            "/incoming/deposit_callback",
            data=b'{"transaction_id": "TX-104"}',
            content_type="application/json",
        )

        self.assertEqual(res.status_code, 401)

    def test_stale_timestamp(self):
        ts = str(int(time.time()) - 3600)

        res = self._post(b'{"transaction_id": "TX-105"}', timestamp=ts)

        self.assertEqual(res.status_code, 401)
        self.executor.submit.assert_not_called()

    def test_signed_malformed_body(self):
        res = self._post(b"not json at all")

        self.assertEqual(res.status_code, 500)
        self.assertEqual(res.json()["status"], "error")
        self.assertIn("failed to unmarshal JSON", res.json()["message"])
        self.executor.submit.assert_not_called()

    def test_config_is_built_once_from_settings(self):
        app_config = apps.get_app_config("incoming")

        self.assertIsInstance(app_config.webhook_config, WebhookConfig)
        self.assertEqual(app_config.webhook_config.tolerance_seconds, 300)
